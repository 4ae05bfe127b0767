"""Decides whether a request is answered with the mobile format.

The decision is layered on three signals: the ``User-Agent`` header, the
``format`` query parameter and a session override. Two impediments win
over all of them except the ``ignore_mobile`` session override, which
switches the whole thing off:

* ajax requests, when the view's config skips them
* an explicit ``?skip_mobile=true`` parameter
"""
import logging

from mobile_format.conf import (
    DEFAULT_FORMAT,
    MOBILE_FORMAT,
    MobileConfig,
    get_setting,
    user_agent_pattern,
)

logger = logging.getLogger(__name__)

FORCE_MOBILE = "force_mobile"
IGNORE_MOBILE = "ignore_mobile"


def _session_override(request):
    session = getattr(request, "session", None)
    if session is None:
        return None
    return session.get(get_setting("SESSION_KEY"))


def requested_format(request):
    return request.GET.get(get_setting("FORMAT_PARAMETER")) or DEFAULT_FORMAT


def is_mobile_request(request):
    user_agent = str(request.headers.get("User-Agent", "")).lower()
    return user_agent_pattern().search(user_agent) is not None


def is_mobile_view(request):
    # Once handle_mobile has decided, request.format is authoritative.
    if hasattr(request, "format"):
        return request.format == MOBILE_FORMAT
    return request.GET.get(get_setting("FORMAT_PARAMETER")) == MOBILE_FORMAT


def is_xhr(request):
    return (
        request.headers.get("X-Requested-With") == "XMLHttpRequest"
        or "Hx-Request" in request.headers
    )


def force_mobile_by_session(request):
    return _session_override(request) == FORCE_MOBILE


def ignore_mobile_by_session(request):
    return _session_override(request) == IGNORE_MOBILE


def stop_processing_because_xhr(request, config):
    return config.skip_xhr_requests and is_xhr(request)


def stop_processing_because_param(request):
    return request.GET.get(get_setting("SKIP_PARAMETER")) == "true"


def respond_as_mobile(request, config):
    impediments = stop_processing_because_xhr(
        request, config
    ) or stop_processing_because_param(request)
    if impediments:
        return False
    return (
        force_mobile_by_session(request)
        or is_mobile_request(request)
        or request.GET.get(get_setting("FORMAT_PARAMETER")) == MOBILE_FORMAT
    )


def handle_mobile(request, config=None):
    """Switch ``request.format`` to mobile when the request qualifies.

    Returns True when the request will be rendered with the mobile format.
    A request that does not qualify never keeps the mobile format, even
    when it asked for it with ``?format=mobile``.
    """
    if config is None:
        config = MobileConfig.from_settings()
    request.mobile_config = config
    request.is_mobile = is_mobile_request(request)
    if not hasattr(request, "format"):
        request.format = requested_format(request)

    if ignore_mobile_by_session(request):
        logger.debug("Mobile handling ignored by session for %s", request.path)
    elif respond_as_mobile(request, config):
        request.format = MOBILE_FORMAT
        logger.debug("Responding to %s with the mobile format", request.path)
        return True

    if request.format == MOBILE_FORMAT:
        request.format = DEFAULT_FORMAT
    return False


def _set_override(request, value):
    key = get_setting("SESSION_KEY")
    if value is None:
        request.session.pop(key, None)
    else:
        request.session[key] = value


def force_mobile(request):
    _set_override(request, FORCE_MOBILE)


def ignore_mobile(request):
    _set_override(request, IGNORE_MOBILE)


def reset_mobile(request):
    _set_override(request, None)
