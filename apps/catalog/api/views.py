from rest_framework import viewsets, filters, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend

from apps.catalog.models import OptionType, Variant
from .serializers import (
    OptionTypeSerializer,
    VariantSerializer,
    PriceSerializer,
)
from .filters import VariantFilter


class OptionTypeViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for option types (Color, Size, etc).
    """
    queryset = OptionType.objects.prefetch_related('option_values')
    serializer_class = OptionTypeSerializer
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'presentation']
    ordering = ['position', 'name']


class VariantViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for variants.

    Supports filtering by product, option value and listing currency.
    """
    queryset = Variant.objects.select_related(
        'product', 'tax_category'
    ).prefetch_related('option_values__option_type')
    serializer_class = VariantSerializer
    filterset_class = VariantFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['sku', 'product__name']
    ordering_fields = ['sku', 'position', 'created_at']
    ordering = ['product', 'position']

    @action(detail=True, methods=['get'])
    def price(self, request, pk=None):
        """
        Price of the variant for an address.

        Query params:
        - address: Required, address id
        """
        variant = self.get_object()
        address_id = request.query_params.get('address', '')

        if not address_id.isdigit():
            return Response(
                {'error': 'address is required'},
                status=status.HTTP_400_BAD_REQUEST
            )

        price = variant.get_price(int(address_id))
        if price is None or price.amount is None:
            return Response(
                {'detail': 'No price available for this address'},
                status=status.HTTP_404_NOT_FOUND
            )

        return Response(PriceSerializer(price).data)
