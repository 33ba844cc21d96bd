from django.db import models


class TaxCategory(models.Model):
    name = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='Nome'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Descrição'
    )
    is_default = models.BooleanField(
        default=False,
        verbose_name='Padrão'
    )

    class Meta:
        ordering = ['name']
        verbose_name = 'Categoria Fiscal'
        verbose_name_plural = 'Categorias Fiscais'

    def __str__(self):
        return self.name

    @classmethod
    def get_default(cls):
        return cls.objects.filter(is_default=True).first()
