from django.http import Http404
from django.shortcuts import redirect
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_http_methods

from mobile_format.decorators import mobile_exempt
from mobile_format.detection import force_mobile, ignore_mobile, reset_mobile

OVERRIDES = {
    "force": force_mobile,
    "ignore": ignore_mobile,
    "reset": reset_mobile,
}


def get_next_url(request):
    next_url = request.POST.get("next") or request.GET.get("next")
    if next_url and url_has_allowed_host_and_scheme(
        next_url,
        allowed_hosts={request.get_host()},
        require_https=request.is_secure(),
    ):
        return next_url
    return "/"


@mobile_exempt
@require_http_methods(["GET", "POST"])
def override(request, mode):
    """Apply a session override and go back to ``next``.

    The override is a display preference, not account state, so plain GET
    links such as the ones built by ``{% mobile_override_url %}`` are
    accepted. Forms should POST, where the CSRF middleware applies.
    """
    if mode not in OVERRIDES:
        raise Http404
    OVERRIDES[mode](request)
    return redirect(get_next_url(request))
