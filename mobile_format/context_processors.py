from mobile_format.detection import is_mobile_request, is_mobile_view


def mobile(request):
    if hasattr(request, "is_mobile"):
        mobile_request = request.is_mobile
    else:
        mobile_request = is_mobile_request(request)
    return {
        "is_mobile_request": mobile_request,
        "is_mobile_view": is_mobile_view(request),
    }
