from django_filters import rest_framework as filters
from apps.catalog.models import Variant


class VariantFilter(filters.FilterSet):
    """Filter for variants with support for option values."""

    product = filters.CharFilter(field_name='product__slug')
    product_id = filters.NumberFilter(field_name='product__id')

    # Listable in a currency
    currency = filters.CharFilter(method='filter_currency')

    # Option filters
    option = filters.CharFilter(method='filter_by_option')

    class Meta:
        model = Variant
        fields = ['product', 'product_id', 'sku', 'is_master', 'track_inventory']

    def filter_currency(self, queryset, name, value):
        return queryset.active(value.upper())

    def filter_by_option(self, queryset, name, value):
        """
        Filter by option in format: option_type_name:option_value_name
        Example: ?option=color:red
        """
        if ':' not in value:
            return queryset

        type_name, value_name = value.split(':', 1)
        return queryset.filter(
            option_values__option_type__name=type_name,
            option_values__name=value_name
        )
