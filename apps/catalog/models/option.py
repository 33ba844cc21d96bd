from django.db import models


class OptionType(models.Model):
    """
    A named axis a product varies along.
    Examples: Color, Size, Material.
    """
    name = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Nome'
    )
    presentation = models.CharField(
        max_length=100,
        verbose_name='Apresentação'
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['position', 'name']
        verbose_name = 'Tipo de Opção'
        verbose_name_plural = 'Tipos de Opções'

    def __str__(self):
        return self.presentation or self.name

    def save(self, *args, **kwargs):
        if not self.presentation:
            self.presentation = self.name
        super().save(*args, **kwargs)


class OptionValue(models.Model):
    """
    One selectable value on an option type.

    Examples:
        - OptionType "Color" -> "Red", "Blue"
        - OptionType "Size" -> "S", "M", "L"
    """
    option_type = models.ForeignKey(
        OptionType,
        on_delete=models.CASCADE,
        related_name='option_values',
        verbose_name='Tipo de Opção'
    )
    name = models.CharField(
        max_length=100,
        verbose_name='Nome'
    )
    presentation = models.CharField(
        max_length=100,
        verbose_name='Apresentação'
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['position', 'name']
        unique_together = ['option_type', 'name']
        verbose_name = 'Valor de Opção'
        verbose_name_plural = 'Valores de Opções'

    def __str__(self):
        return f"{self.option_type.presentation}: {self.presentation}"

    def save(self, *args, **kwargs):
        if not self.presentation:
            self.presentation = self.name
        super().save(*args, **kwargs)


class ProductOptionType(models.Model):
    """Option types registered on a product, kept in the order they were added."""
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        verbose_name='Produto'
    )
    option_type = models.ForeignKey(
        OptionType,
        on_delete=models.CASCADE,
        verbose_name='Tipo de Opção'
    )
    position = models.PositiveIntegerField(
        default=0,
        verbose_name='Ordem de exibição'
    )

    class Meta:
        ordering = ['position']
        unique_together = ['product', 'option_type']
        verbose_name = 'Tipo de Opção do Produto'
        verbose_name_plural = 'Tipos de Opções do Produto'

    def __str__(self):
        return f"{self.product.name} - {self.option_type.name}"
