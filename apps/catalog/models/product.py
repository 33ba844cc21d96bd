from django.db import models
from django.db.models import Max
from django.utils import timezone
from django.utils.text import slugify
from simple_history.models import HistoricalRecords

from .base import SoftDeleteModel


class Product(SoftDeleteModel):
    """
    Sellable item. Example: "Basic T-Shirt" sold in several colors and sizes.
    Every product owns one master variant; the purchasable combinations are
    the non-master variants.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    available_on = models.DateTimeField(
        null=True,
        blank=True,
        verbose_name='Disponível em'
    )
    tax_category = models.ForeignKey(
        'catalog.TaxCategory',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Categoria Fiscal'
    )
    option_types = models.ManyToManyField(
        'catalog.OptionType',
        through='catalog.ProductOptionType',
        blank=True,
        related_name='products',
        verbose_name='Tipos de Opções'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Criado em'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Atualizado em'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['name']
        verbose_name = 'Produto'
        verbose_name_plural = 'Produtos'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    @property
    def master(self):
        return self.variants_including_master.filter(is_master=True).first()

    @property
    def variants(self):
        """Purchasable variants, master excluded."""
        return self.variants_including_master.filter(is_master=False)

    @property
    def variant_count(self):
        return self.variants.count()

    def get_tax_category(self):
        """Own tax category, or the store default when none is set."""
        if self.tax_category_id is not None:
            return self.tax_category
        from .tax_category import TaxCategory
        return TaxCategory.get_default()

    def get_option_types(self):
        """Option types in registration order."""
        return self.option_types.order_by('productoptiontype__position')

    def register_option_type(self, option_type):
        """
        Append ``option_type`` to this product's option types.
        Returns True when it was added, False when already registered.
        """
        from .option import ProductOptionType

        if ProductOptionType.objects.filter(product=self, option_type=option_type).exists():
            return False

        last = ProductOptionType.objects.filter(product=self).aggregate(
            last=Max('position')
        )['last']
        ProductOptionType.objects.create(
            product=self,
            option_type=option_type,
            position=(last or 0) + 1,
        )
        return True

    def touch(self):
        """Bump ``updated_at`` and drop the cached availability of every variant."""
        from apps.catalog.services import VariantAvailabilityCache

        now = timezone.now()
        Product.all_objects.filter(pk=self.pk).update(updated_at=now)
        self.updated_at = now
        VariantAvailabilityCache().invalidate_many(self.variants_including_master.all())

    def soft_delete(self):
        for variant in self.variants_including_master.all():
            variant.soft_delete()
        super().soft_delete()
