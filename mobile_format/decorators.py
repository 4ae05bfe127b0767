import functools

from mobile_format.conf import MobileConfig, clean_fall_back


def respond_to_mobile(fall_back=None, skip_xhr_requests=None):
    """
    Attach mobile options to a function view.

    @respond_to_mobile(fall_back="html", skip_xhr_requests=False)
    def timeline(request):
        ...

    Options left out keep the values from the ``MOBILE_FORMAT`` setting.
    Pass ``fall_back=False`` to disable the fallback for this view.
    """
    if fall_back is not None:
        clean_fall_back(fall_back)

    def decorator(view_func):
        @functools.wraps(view_func)
        def wrapper(request, *args, **kwargs):
            return view_func(request, *args, **kwargs)

        wrapper.mobile_options = {
            key: value
            for key, value in (
                ("fall_back", fall_back),
                ("skip_xhr_requests", skip_xhr_requests),
            )
            if value is not None
        }
        return wrapper

    return decorator


def mobile_exempt(view_func):
    """Never render this view with the mobile format."""

    @functools.wraps(view_func)
    def wrapper(request, *args, **kwargs):
        return view_func(request, *args, **kwargs)

    wrapper.mobile_exempt = True
    return wrapper


def view_mobile_config(view_func):
    """The ``MobileConfig`` governing ``view_func``, or None for settings defaults."""
    options = getattr(view_func, "mobile_options", None)
    if options is not None:
        return MobileConfig.from_settings().replace(**options)
    view_class = getattr(view_func, "view_class", None)
    if view_class is not None and hasattr(view_class, "get_mobile_config"):
        return view_class.get_mobile_config()
    return None
