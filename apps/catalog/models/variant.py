import logging

from django.db import models, transaction
from django.db.models import Max
from django.core.validators import MinValueValidator
from django.utils import timezone
from decimal import Decimal
from simple_history.models import HistoricalRecords
from imagekit.models import ProcessedImageField, ImageSpecField
from imagekit.processors import ResizeToFill, ResizeToFit

from apps.catalog.conf import get_catalog_settings
from .base import SoftDeleteModel
from .fields import PriceField

logger = logging.getLogger(__name__)


class VariantQuerySet(models.QuerySet):

    def deleted(self):
        return self.filter(deleted_at__isnull=False)

    def active(self, currency=None):
        """Non-deleted variants priced (non-null amount) in ``currency``."""
        currency = currency or get_catalog_settings().currency
        return self.filter(
            deleted_at__isnull=True,
            prices__currency=currency,
            prices__amount__isnull=False,
        ).distinct()


class ActiveVariantManager(models.Manager.from_queryset(VariantQuerySet)):
    def get_queryset(self):
        return super().get_queryset().filter(deleted_at__isnull=True)


class Variant(SoftDeleteModel):
    """
    A purchasable SKU of a product, e.g. "Red, size M".
    Owns its option values, prices, stock items and images.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='variants_including_master',
        verbose_name='Produto'
    )
    sku = models.CharField(
        max_length=255,
        blank=True,
        default='',
        verbose_name='SKU'
    )
    is_master = models.BooleanField(
        default=False,
        verbose_name='Variante principal'
    )

    # Pricing
    cost_price = PriceField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Preço de custo'
    )
    cost_currency = models.CharField(
        max_length=3,
        blank=True,
        verbose_name='Moeda do custo'
    )
    tax_category = models.ForeignKey(
        'catalog.TaxCategory',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='variants',
        verbose_name='Categoria Fiscal'
    )

    # Inventory
    track_inventory = models.BooleanField(
        default=True,
        verbose_name='Rastrear estoque'
    )

    position = models.IntegerField(
        null=True,
        blank=True,
        verbose_name='Posição'
    )

    option_values = models.ManyToManyField(
        'catalog.OptionValue',
        blank=True,
        related_name='variants',
        verbose_name='Valores de opções'
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    objects = ActiveVariantManager()
    all_objects = models.Manager.from_queryset(VariantQuerySet)()

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['product', 'position']
        verbose_name = 'Variante'
        verbose_name_plural = 'Variantes'

    def __str__(self):
        return self.name_and_sku

    def save(self, *args, **kwargs):
        self._set_cost_currency()
        self.full_clean(validate_unique=False)

        with transaction.atomic():
            if self._state.adding:
                self.position = self._next_position()
            super().save(*args, **kwargs)

    def clean(self):
        self._set_cost_currency()

    def _set_cost_currency(self):
        if not self.cost_currency:
            self.cost_currency = get_catalog_settings().currency

    def _next_position(self):
        last = Variant.objects.filter(
            product_id=self.product_id, is_master=False
        ).aggregate(last=Max('position'))['last']
        return (last or 0) + 1

    def touch(self):
        """
        Bump ``updated_at`` on the variant and its product and drop the
        cached in-stock flag.
        """
        from apps.catalog.services import VariantAvailabilityCache
        from .product import Product

        now = timezone.now()
        Variant.all_objects.filter(pk=self.pk).update(updated_at=now)
        Product.all_objects.filter(pk=self.product_id).update(updated_at=now)
        self.updated_at = now
        VariantAvailabilityCache().invalidate(self)
        logger.debug(f"Variant {self.pk} touched, availability cache cleared")

    def soft_delete(self):
        super().soft_delete()
        logger.info(f"Variant soft-deleted: {self.pk} ({self.sku or 'no sku'})")

    # Product accessors

    @property
    def name(self):
        return self.product.name

    @property
    def description(self):
        return self.product.description

    @property
    def slug(self):
        return self.product.slug

    @property
    def available_on(self):
        return self.product.available_on

    def get_tax_category(self):
        """Own tax category if set, otherwise the product's."""
        if self.tax_category_id is None:
            return self.product.get_tax_category()
        return self.tax_category

    # Pricing

    def get_price(self, address):
        """Price scoped to ``address`` through a market pricelist, or None."""
        from apps.catalog.services import PriceResolver
        return PriceResolver().resolve(self, address)

    def display_price(self, address):
        from apps.catalog.services import PriceResolver
        return PriceResolver().display_price(self, address)

    # Stock

    @property
    def should_track_inventory(self):
        """Both the variant flag and the store-wide setting must be on."""
        return self.track_inventory and get_catalog_settings().track_inventory_levels

    @property
    def total_on_hand(self):
        from apps.catalog.services import StockQuantifier
        return StockQuantifier(self).total_on_hand()

    @property
    def on_backorder(self):
        """Number of units of this variant currently backordered."""
        from apps.catalog.services import StockQuantifier
        return StockQuantifier(self).on_backorder()

    def can_supply(self, quantity=1):
        from apps.catalog.services import StockQuantifier
        return StockQuantifier(self).can_supply(quantity)

    @property
    def is_in_stock(self):
        from apps.catalog.services import VariantAvailabilityCache
        return VariantAvailabilityCache().in_stock(self)

    # Options

    def set_option_value(self, option_type_name, option_value_name):
        from apps.catalog.services import OptionAssigner
        OptionAssigner(self).set_option_value(option_type_name, option_value_name)

    def set_options(self, options):
        """Apply ``{option type name: option value name}`` pairs in order."""
        from apps.catalog.services import OptionAssigner
        OptionAssigner(self).set_options(options)

    def get_option_value(self, option_type_name):
        from apps.catalog.services import OptionAssigner
        return OptionAssigner(self).option_value(option_type_name)

    @property
    def options_text(self):
        from apps.catalog.services import OptionAssigner
        return OptionAssigner(self).options_text()

    @property
    def name_and_sku(self):
        return f"{self.name} - {self.sku}"

    @property
    def sku_and_options_text(self):
        return f"{self.sku} {self.options_text}".strip()


class VariantImage(models.Model):
    """Images for each variant with automatic thumbnail generation."""
    variant = models.ForeignKey(
        Variant,
        on_delete=models.CASCADE,
        related_name='images',
        verbose_name='Variante'
    )
    image = ProcessedImageField(
        upload_to='variants/%Y/%m/',
        processors=[ResizeToFit(1200, 1200)],
        format='JPEG',
        options={'quality': 85},
        verbose_name='Imagem'
    )
    thumbnail = ImageSpecField(
        source='image',
        processors=[ResizeToFill(300, 300)],
        format='JPEG',
        options={'quality': 70}
    )
    alt_text = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Texto alternativo'
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['position']
        verbose_name = 'Imagem da Variante'
        verbose_name_plural = 'Imagens das Variantes'

    def __str__(self):
        return f"{self.variant.sku} - Imagem {self.position}"

    def save(self, *args, **kwargs):
        # Auto-generate alt text if empty
        if not self.alt_text:
            self.alt_text = str(self.variant)
        super().save(*args, **kwargs)
