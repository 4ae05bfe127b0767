from django import template
from django.urls import reverse
from django.utils.http import urlencode

from mobile_format import detection

register = template.Library()


@register.simple_tag(takes_context=True)
def mobile_override_url(context, mode):
    """Link that applies a session override and comes back to this page.

    <a href="{% mobile_override_url "ignore" %}">Full site</a>
    """
    url = reverse("mobile_format:override", kwargs={"mode": mode})
    request = context.get("request")
    if request is None:
        return url
    return f"{url}?{urlencode({'next': request.get_full_path()})}"


@register.filter(name="is_mobile_view")
def is_mobile_view(request):
    if not hasattr(request, "GET"):
        return False
    return detection.is_mobile_view(request)


@register.filter(name="is_mobile_request")
def is_mobile_request(request):
    if not hasattr(request, "headers"):
        return False
    return detection.is_mobile_request(request)
