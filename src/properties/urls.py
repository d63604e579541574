from django.urls import path
from rest_framework.routers import SimpleRouter

from src.reviews.views import PropertyReviewsView
from .views import PropertyViewSet

router = SimpleRouter()
router.register('', PropertyViewSet, basename='property')

urlpatterns = [
    path('<int:pk>/reviews/', PropertyReviewsView.as_view(), name='property_reviews'),
]

urlpatterns += router.urls
