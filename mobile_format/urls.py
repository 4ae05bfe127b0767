from django.urls import path

from mobile_format import views

app_name = "mobile_format"

urlpatterns = [
    path("<slug:mode>/", views.override, name="override"),
]
