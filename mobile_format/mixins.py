from mobile_format.conf import DEFAULT_FORMAT, MobileConfig
from mobile_format.detection import handle_mobile
from mobile_format.resolver import template_names_for


class RespondToMobileMixin:
    """
    Answer mobile requests of a class-based view with ``.mobile`` templates.

    The options are plain class attributes, so a project-wide base view
    can set them once and subclasses inherit or override them:

        class BaseView(RespondToMobileMixin, TemplateView):
            mobile_fall_back = "html"
            mobile_skip_xhr_requests = False

    Set ``mobile_fall_back = None`` to render nothing but ``.mobile``
    templates for mobile requests.
    """

    mobile_fall_back = DEFAULT_FORMAT
    mobile_skip_xhr_requests = True

    @classmethod
    def get_mobile_config(cls):
        return MobileConfig(
            fall_back=cls.mobile_fall_back,
            skip_xhr_requests=cls.mobile_skip_xhr_requests,
        )

    def dispatch(self, request, *args, **kwargs):
        # MobileFormatMiddleware already decided in process_view.
        if not hasattr(request, "mobile_config"):
            handle_mobile(request, self.get_mobile_config())
        return super().dispatch(request, *args, **kwargs)

    def get_template_names(self):
        return template_names_for(self.request, super().get_template_names())

    def get_context_data(self, **kwargs):
        context = super().get_context_data(**kwargs)
        context.setdefault(
            "is_mobile_request", getattr(self.request, "is_mobile", False)
        )
        return context
