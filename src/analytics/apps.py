from django.apps import AppConfig


class AnalyticsConfig(AppConfig):
    name = "src.analytics"
    label = "analytics"
