from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal

from apps.catalog.money import Money


class Address(models.Model):
    """Postal address a market pricelist can be scoped to."""
    firstname = models.CharField(max_length=100, blank=True, verbose_name='Nome')
    lastname = models.CharField(max_length=100, blank=True, verbose_name='Sobrenome')
    address1 = models.CharField(max_length=255, verbose_name='Endereço')
    city = models.CharField(max_length=100, verbose_name='Cidade')
    zipcode = models.CharField(max_length=20, blank=True, verbose_name='CEP')
    country = models.CharField(
        max_length=2,
        verbose_name='País',
        help_text='Código ISO 3166-1 alpha-2'
    )

    class Meta:
        verbose_name = 'Endereço'
        verbose_name_plural = 'Endereços'

    def __str__(self):
        return f"{self.address1}, {self.city} ({self.country})"


class MarketPricelist(models.Model):
    """
    A named price list for one market.
    The addresses it serves are listed in MarketPricelistAddress.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Nome'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Lista de Preços'
        verbose_name_plural = 'Listas de Preços'

    def __str__(self):
        return self.name


class MarketPricelistAddress(models.Model):
    market_pricelist = models.ForeignKey(
        MarketPricelist,
        on_delete=models.CASCADE,
        related_name='addresses',
        verbose_name='Lista de Preços'
    )
    address = models.ForeignKey(
        Address,
        on_delete=models.CASCADE,
        related_name='pricelist_entries',
        verbose_name='Endereço'
    )

    class Meta:
        unique_together = ['market_pricelist', 'address']
        verbose_name = 'Endereço da Lista de Preços'
        verbose_name_plural = 'Endereços da Lista de Preços'

    def __str__(self):
        return f"{self.market_pricelist.name} - {self.address}"


class Price(models.Model):
    variant = models.ForeignKey(
        'catalog.Variant',
        on_delete=models.CASCADE,
        related_name='prices',
        verbose_name='Variante'
    )
    amount = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Valor'
    )
    currency = models.CharField(
        max_length=3,
        verbose_name='Moeda'
    )
    market_pricelist = models.ForeignKey(
        MarketPricelist,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='prices',
        verbose_name='Lista de Preços'
    )

    class Meta:
        unique_together = ['variant', 'currency', 'market_pricelist']
        verbose_name = 'Preço'
        verbose_name_plural = 'Preços'

    def __str__(self):
        return f"{self.variant.sku} - {self.display_price or '-'}"

    def save(self, *args, **kwargs):
        self.full_clean(validate_unique=False)
        super().save(*args, **kwargs)

    @property
    def display_price(self):
        if self.amount is None:
            return None
        return Money(self.amount, self.currency)
