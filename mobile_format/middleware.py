from django.utils.cache import patch_vary_headers

from mobile_format.conf import DEFAULT_FORMAT, MOBILE_FORMAT
from mobile_format.decorators import view_mobile_config
from mobile_format.detection import handle_mobile, is_mobile_request, requested_format
from mobile_format.resolver import template_names_for


class MobileFormatMiddleware:
    """
    Render mobile requests with ``.mobile`` templates.

    Must come after ``SessionMiddleware`` so session overrides are seen.
    Views returning a ``TemplateResponse`` (every generic class-based view)
    are handled transparently; function views calling ``render`` directly
    should use ``mobile_format.shortcuts.render``.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request.format = requested_format(request)
        request.is_mobile = is_mobile_request(request)

        response = self.get_response(request)

        patch_vary_headers(response, ["User-Agent"])
        return response

    def process_view(self, request, view_func, view_args, view_kwargs):
        if getattr(view_func, "mobile_exempt", False):
            request.mobile_config = None
            if request.format == MOBILE_FORMAT:
                request.format = DEFAULT_FORMAT
            return None
        handle_mobile(request, view_mobile_config(view_func))
        return None

    def process_template_response(self, request, response):
        if getattr(request, "format", None) != MOBILE_FORMAT:
            return response
        # Leave already compiled Template objects alone.
        if isinstance(response.template_name, (str, list, tuple)):
            response.template_name = template_names_for(
                request, response.template_name
            )
        return response
