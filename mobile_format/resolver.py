"""Template-name fallback for the mobile format.

Templates are named after the format they produce: ``blog/post.html``
for the full site, ``blog/post.mobile`` for handhelds. When a request is
answered as mobile, every requested template name expands into the
mobile candidate followed by the fallback format, and Django's
``select_template`` picks the first one that exists.
"""
import posixpath

from mobile_format.conf import (
    DEFAULT_FORMAT,
    MOBILE_FORMAT,
    MobileConfig,
    clean_fall_back,
)


def split_format(template_name):
    """Split ``"blog/post.html"`` into ``("blog/post", "html")``.

    Only the last path segment is inspected, so dotted directories are
    left alone. Names without an extension come back with ``None``.
    """
    head, tail = posixpath.split(template_name)
    stem, dot, ext = tail.rpartition(".")
    if not dot or not stem:
        return template_name, None
    return posixpath.join(head, stem) if head else stem, ext


class FallbackResolver:
    def __init__(self, fall_back=DEFAULT_FORMAT):
        self.fall_back = None
        self.use_fallback(fall_back)

    def use_fallback(self, fall_back):
        self.fall_back = clean_fall_back(fall_back)

    def formats_for(self, request_format):
        if request_format != MOBILE_FORMAT:
            return [request_format]
        if self.fall_back is None:
            return [MOBILE_FORMAT]
        return [MOBILE_FORMAT, self.fall_back]

    def template_names(self, template_name, request_format):
        if isinstance(template_name, str):
            template_name = [template_name]
        if request_format != MOBILE_FORMAT:
            return list(template_name)

        candidates = []
        for name in template_name:
            stem, _ = split_format(name)
            for fmt in self.formats_for(request_format):
                candidate = f"{stem}.{fmt}"
                if candidate not in candidates:
                    candidates.append(candidate)
        return candidates


def template_names_for(request, template_name):
    """Candidates for ``template_name`` given the request's negotiated format."""
    config = getattr(request, "mobile_config", None) or MobileConfig.from_settings()
    resolver = FallbackResolver(config.fall_back)
    return resolver.template_names(
        template_name, getattr(request, "format", DEFAULT_FORMAT)
    )
