from django.apps import AppConfig


class ReviewsConfig(AppConfig):
    name = "src.reviews"
    label = "reviews"
