from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableAdminBase, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .forms import VariantAdminForm
from .models import (
    Product,
    OptionType,
    OptionValue,
    Variant,
    VariantImage,
    Price,
    MarketPricelist,
    MarketPricelistAddress,
    StockLocation,
    StockItem,
    TaxCategory,
)


# =============================================================================
# Import/Export Resources
# =============================================================================

class VariantResource(resources.ModelResource):
    """Resource for importing/exporting variants."""

    product_name = fields.Field(
        column_name='product_name',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'name')
    )

    class Meta:
        model = Variant
        import_id_fields = ['sku']
        fields = (
            'sku', 'product_name', 'cost_price', 'cost_currency',
            'track_inventory', 'position'
        )
        export_order = fields

    def get_queryset(self):
        return Variant.objects.filter(is_master=False).select_related('product')


# =============================================================================
# Inlines
# =============================================================================

class OptionValueInline(SortableInlineAdminMixin, admin.TabularInline):
    model = OptionValue
    extra = 1
    fields = ['name', 'presentation', 'position']


class VariantImageInline(SortableInlineAdminMixin, admin.TabularInline):
    model = VariantImage
    extra = 1
    fields = ['image', 'alt_text', 'position', 'image_preview']
    readonly_fields = ['image_preview']

    def image_preview(self, obj):
        if obj.image:
            return format_html(
                '<img src="{}" style="max-height: 50px; max-width: 100px;" />',
                obj.thumbnail.url if obj.thumbnail else obj.image.url
            )
        return '-'
    image_preview.short_description = 'Preview'


class PriceInline(admin.TabularInline):
    model = Price
    extra = 0
    fields = ['amount', 'currency', 'market_pricelist']


class StockItemInline(admin.TabularInline):
    model = StockItem
    extra = 0
    fields = ['stock_location', 'count_on_hand', 'backorderable']


class VariantInline(admin.TabularInline):
    model = Variant
    fk_name = 'product'
    extra = 0
    fields = ['sku', 'position', 'cost_price', 'track_inventory', 'is_master']
    readonly_fields = ['position', 'is_master']
    show_change_link = True
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


class MarketPricelistAddressInline(admin.TabularInline):
    model = MarketPricelistAddress
    extra = 1


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Product)
class ProductAdmin(SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'variant_count', 'tax_category', 'available_on', 'deleted_at']
    list_filter = ['tax_category', 'created_at']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    readonly_fields = ['variant_count', 'created_at', 'updated_at']
    inlines = [VariantInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'slug', 'description', 'available_on', 'tax_category')
        }),
        ('Informações', {
            'fields': ('variant_count', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(OptionType)
class OptionTypeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'presentation', 'option_count', 'position']
    search_fields = ['name', 'presentation']
    inlines = [OptionValueInline]

    def option_count(self, obj):
        return obj.option_values.count()
    option_count.short_description = 'Valores'


@admin.register(OptionValue)
class OptionValueAdmin(admin.ModelAdmin):
    list_display = ['name', 'presentation', 'option_type', 'position']
    list_filter = ['option_type']
    search_fields = ['name', 'presentation', 'option_type__name']


@admin.register(Variant)
class VariantAdmin(SortableAdminBase, ImportExportModelAdmin, SimpleHistoryAdmin):
    form = VariantAdminForm
    resource_class = VariantResource
    list_display = [
        'sku', 'product', 'options_text', 'cost_price', 'cost_currency',
        'stock_status', 'position', 'deleted_at'
    ]
    list_filter = ['product', 'track_inventory', 'is_master']
    search_fields = ['sku', 'product__name']
    autocomplete_fields = ['product']
    filter_horizontal = ['option_values']
    readonly_fields = ['position', 'created_at', 'updated_at', 'options_text', 'total_on_hand']
    inlines = [PriceInline, StockItemInline, VariantImageInline]
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('product', 'sku', 'is_master', 'position', 'option_values')
        }),
        ('Preços', {
            'fields': ('cost_price', 'cost_currency', 'tax_category')
        }),
        ('Estoque', {
            'fields': ('track_inventory', 'total_on_hand')
        }),
        ('Informações', {
            'fields': ('options_text', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    def stock_status(self, obj):
        if not obj.should_track_inventory:
            color, label = 'blue', 'Não rastreado'
        elif obj.is_in_stock:
            color, label = 'green', 'Em estoque'
        elif obj.can_supply():
            color, label = 'orange', 'Sob encomenda'
        else:
            color, label = 'red', 'Sem estoque'
        return format_html('<span style="color: {};">{}</span>', color, label)
    stock_status.short_description = 'Status Estoque'


@admin.register(MarketPricelist)
class MarketPricelistAdmin(admin.ModelAdmin):
    list_display = ['name']
    search_fields = ['name']
    inlines = [MarketPricelistAddressInline]


@admin.register(StockLocation)
class StockLocationAdmin(admin.ModelAdmin):
    list_display = ['name', 'active', 'propagate_all_variants', 'backorderable_default']
    list_filter = ['active', 'propagate_all_variants']


@admin.register(TaxCategory)
class TaxCategoryAdmin(admin.ModelAdmin):
    list_display = ['name', 'is_default']
