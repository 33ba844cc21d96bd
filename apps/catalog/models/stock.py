import logging

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator
from django.db import models
from django.db.models import F

from .base import SoftDeleteModel

logger = logging.getLogger(__name__)


class StockLocation(models.Model):
    name = models.CharField(
        max_length=255,
        unique=True,
        verbose_name='Nome'
    )
    active = models.BooleanField(
        default=True,
        verbose_name='Ativo'
    )
    propagate_all_variants = models.BooleanField(
        default=True,
        verbose_name='Propagar todas as variantes',
        help_text='Cria um item de estoque aqui para cada nova variante'
    )
    backorderable_default = models.BooleanField(
        default=False,
        verbose_name='Permitir compra sem estoque (padrão)'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Local de Estoque'
        verbose_name_plural = 'Locais de Estoque'

    def __str__(self):
        return self.name

    def propagate_variant(self, variant):
        """Create (or fetch) the stock item for ``variant`` at this location."""
        stock_item, created = StockItem.all_objects.get_or_create(
            variant=variant,
            stock_location=self,
            defaults={'backorderable': self.backorderable_default},
        )
        if created:
            logger.info(f"Stock item created for variant {variant.pk} at {self.name}")
        return stock_item


class StockItem(SoftDeleteModel):
    """On-hand count of one variant at one stock location."""
    variant = models.ForeignKey(
        'catalog.Variant',
        on_delete=models.CASCADE,
        related_name='stock_items',
        verbose_name='Variante'
    )
    stock_location = models.ForeignKey(
        StockLocation,
        on_delete=models.CASCADE,
        related_name='stock_items',
        verbose_name='Local de Estoque'
    )
    count_on_hand = models.IntegerField(
        default=0,
        validators=[MinValueValidator(0)],
        verbose_name='Quantidade em estoque'
    )
    backorderable = models.BooleanField(
        default=False,
        verbose_name='Permitir compra sem estoque'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    class Meta:
        unique_together = ['variant', 'stock_location']
        verbose_name = 'Item de Estoque'
        verbose_name_plural = 'Itens de Estoque'

    def __str__(self):
        return f"{self.variant.sku} @ {self.stock_location.name}: {self.count_on_hand}"

    def save(self, *args, **kwargs):
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    def adjust_count_on_hand(self, value):
        """
        Add ``value`` (negative to remove) to the on-hand count in a single
        UPDATE so concurrent adjustments do not overwrite each other.
        """
        queryset = StockItem.all_objects.filter(pk=self.pk)
        if value < 0:
            queryset = queryset.filter(count_on_hand__gte=-value)

        updated = queryset.update(count_on_hand=F('count_on_hand') + value)
        if not updated:
            raise ValidationError({
                'count_on_hand': f'Cannot remove {-value} units from {self.count_on_hand} on hand.'
            })

        self.refresh_from_db(fields=['count_on_hand'])
        self.variant.touch()
        return self.count_on_hand


class InventoryUnit(models.Model):
    STATE_CHOICES = [
        ('on_hand', 'Em estoque'),
        ('backordered', 'Sob encomenda'),
        ('shipped', 'Enviado'),
        ('returned', 'Devolvido'),
    ]

    variant = models.ForeignKey(
        'catalog.Variant',
        on_delete=models.CASCADE,
        related_name='inventory_units',
        verbose_name='Variante'
    )
    state = models.CharField(
        max_length=20,
        choices=STATE_CHOICES,
        default='on_hand',
        verbose_name='Estado'
    )
    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )

    class Meta:
        ordering = ['created_at']
        verbose_name = 'Unidade de Inventário'
        verbose_name_plural = 'Unidades de Inventário'

    def __str__(self):
        return f"{self.variant.sku} - {self.get_state_display()}"
