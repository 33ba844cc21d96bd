"""
Django signals for the catalog app.
Creates master variants and stock items, and touches variants when the
records their availability depends on change.
"""

import logging

from django.core.exceptions import ValidationError
from django.db.models.signals import m2m_changed, post_delete, post_save
from django.dispatch import receiver

from .models import OptionValue, Price, Product, StockItem, StockLocation, Variant

logger = logging.getLogger(__name__)


@receiver(post_save, sender=Product)
def product_post_save(sender, instance, created, **kwargs):
    """
    Give new products their master variant, and touch the variants of
    changed ones.
    """
    if created:
        Variant.objects.create(product=instance, is_master=True)
        logger.info(f"Product created: {instance.pk} - {instance.name}")
    instance.touch()


@receiver(post_save, sender=Variant)
def variant_post_save(sender, instance, created, **kwargs):
    if created:
        for stock_location in StockLocation.objects.filter(propagate_all_variants=True):
            stock_location.propagate_variant(instance)
        logger.info(
            f"Variant created: {instance.pk} (product {instance.product_id}, "
            f"position {instance.position}, master={instance.is_master})"
        )
    instance.touch()


@receiver(post_save, sender=StockItem)
@receiver(post_delete, sender=StockItem)
@receiver(post_save, sender=Price)
@receiver(post_delete, sender=Price)
def touch_variant(sender, instance, **kwargs):
    variant = Variant.all_objects.filter(pk=instance.variant_id).first()
    if variant is not None:
        variant.touch()


@receiver(m2m_changed, sender=Variant.option_values.through)
def variant_option_values_changed(sender, instance, action, reverse, pk_set, **kwargs):
    """
    Keeps master variants free of option values and registers the option
    types of newly added values on the product.

    The refusal is raised inside the relation manager's atomic block, so a
    caller that catches it must have wrapped the add in its own
    ``transaction.atomic()`` to keep using the surrounding transaction.
    """
    if action == 'pre_add':
        if reverse:
            has_master = Variant.all_objects.filter(pk__in=pk_set, is_master=True).exists()
        else:
            has_master = instance.is_master
        if has_master:
            raise ValidationError('Master variants cannot have option values.')
        return

    if action not in ('post_add', 'post_remove', 'post_clear'):
        return

    if reverse:
        variants = list(Variant.all_objects.filter(pk__in=pk_set or []).select_related('product'))
    else:
        variants = [instance]

    if action == 'post_add' and pk_set:
        if reverse:
            option_types = [instance.option_type]
        else:
            option_types = [
                value.option_type
                for value in OptionValue.objects.filter(pk__in=pk_set).select_related('option_type')
            ]
        for variant in variants:
            for option_type in option_types:
                if variant.product.register_option_type(option_type):
                    logger.info(f"Option type {option_type.name} registered on product {variant.product_id}")

    for variant in variants:
        variant.touch()
