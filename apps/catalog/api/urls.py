from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .views import (
    OptionTypeViewSet,
    VariantViewSet,
)

router = DefaultRouter()
router.register(r'option-types', OptionTypeViewSet, basename='option-type')
router.register(r'variants', VariantViewSet, basename='variant')

urlpatterns = [
    path('', include(router.urls)),
]
