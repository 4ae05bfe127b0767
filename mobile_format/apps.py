from django.apps import AppConfig


class MobileFormatConfig(AppConfig):
    name = "mobile_format"
    verbose_name = "Mobile format"
