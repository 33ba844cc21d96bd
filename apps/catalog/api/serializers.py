from rest_framework import serializers
from apps.catalog.models import (
    OptionType,
    OptionValue,
    Variant,
    Price,
)


# =============================================================================
# Option Serializers
# =============================================================================

class OptionValueSerializer(serializers.ModelSerializer):
    option_type_name = serializers.CharField(
        source='option_type.name', read_only=True
    )
    option_type_presentation = serializers.CharField(
        source='option_type.presentation', read_only=True
    )

    class Meta:
        model = OptionValue
        fields = [
            'id', 'option_type', 'option_type_name', 'option_type_presentation',
            'name', 'presentation', 'position'
        ]


class OptionTypeSerializer(serializers.ModelSerializer):
    option_values = OptionValueSerializer(many=True, read_only=True)

    class Meta:
        model = OptionType
        fields = ['id', 'name', 'presentation', 'position', 'option_values']


# =============================================================================
# Variant Serializers
# =============================================================================

class VariantSerializer(serializers.ModelSerializer):
    """Attribute set of a variant as exposed to API consumers."""
    product_name = serializers.CharField(source='product.name', read_only=True)
    tax_category = serializers.SerializerMethodField()
    options_text = serializers.CharField(read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)
    option_values = OptionValueSerializer(many=True, read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'product', 'product_name', 'sku', 'is_master',
            'cost_price', 'cost_currency', 'position', 'tax_category',
            'track_inventory', 'options_text', 'is_in_stock', 'option_values'
        ]

    def get_tax_category(self, obj):
        tax_category = obj.get_tax_category()
        return tax_category.pk if tax_category else None


# =============================================================================
# Price Serializer
# =============================================================================

class PriceSerializer(serializers.ModelSerializer):
    variant_sku = serializers.CharField(source='variant.sku', read_only=True)
    display_price = serializers.SerializerMethodField()

    class Meta:
        model = Price
        fields = [
            'id', 'variant', 'variant_sku', 'amount', 'currency',
            'market_pricelist', 'display_price'
        ]

    def get_display_price(self, obj):
        money = obj.display_price
        return str(money) if money else None
