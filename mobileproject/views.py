from django.shortcuts import render as django_render
from django.views.generic import TemplateView

from mobile_format.decorators import mobile_exempt, respond_to_mobile
from mobile_format.mixins import RespondToMobileMixin
from mobile_format.shortcuts import render, render_block


class HomeView(TemplateView):
    template_name = "pages/home.html"


class AboutView(TemplateView):
    template_name = "pages/about.html"


class StrictView(RespondToMobileMixin, TemplateView):
    template_name = "pages/about.html"
    mobile_fall_back = None


class AjaxMobileView(RespondToMobileMixin, TemplateView):
    template_name = "pages/home.html"
    mobile_skip_xhr_requests = False


def timeline(request):
    return render(request, "pages/timeline.html", {"entries": ["first", "second"]})


@respond_to_mobile(skip_xhr_requests=False)
def timeline_feed(request):
    return render_block(
        request, "pages/timeline.html", "entries", {"entries": ["first", "second"]}
    )


def plain(request):
    return django_render(request, "pages/home.html")


@mobile_exempt
def desktop_only(request):
    return render(request, "pages/home.html")
