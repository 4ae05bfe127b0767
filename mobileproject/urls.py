"""mobileproject URL Configuration
"""
from django.urls import include, path

from mobileproject import views

urlpatterns = [
    path("", views.HomeView.as_view(), name="home"),
    path("about/", views.AboutView.as_view(), name="about"),
    path("strict/", views.StrictView.as_view(), name="strict"),
    path("jquery-mobile/", views.AjaxMobileView.as_view(), name="ajax_mobile"),
    path("timeline/", views.timeline, name="timeline"),
    path("timeline/feed/", views.timeline_feed, name="timeline_feed"),
    path("plain/", views.plain, name="plain"),
    path("desktop-only/", views.desktop_only, name="desktop_only"),
    path("mobile/", include("mobile_format.urls")),
]
