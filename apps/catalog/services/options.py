"""
Option values of a variant.

Keeps the product's option types in step with the values its variants carry:
giving a variant a value of a new option type registers that type on the
product.
"""

import logging
from typing import Dict, Optional

from django.db import transaction

from apps.catalog.models import OptionType, OptionValue

logger = logging.getLogger(__name__)


class OptionAssigner:

    def __init__(self, variant):
        self.variant = variant

    @transaction.atomic
    def set_option_value(self, option_type_name: str, option_value_name: str) -> None:
        """
        Give the variant ``option_value_name`` on ``option_type_name``,
        replacing its previous value on that type. Types and values that
        don't exist yet are created with their name as presentation.

        The master variant never carries option values; the call does nothing.
        """
        variant = self.variant
        if variant.is_master:
            logger.debug(f"Ignoring option {option_type_name}={option_value_name} on master variant {variant.pk}")
            return

        option_type, created = OptionType.objects.get_or_create(
            name=option_type_name,
            defaults={'presentation': option_type_name},
        )
        if created:
            logger.info(f"Option type created: {option_type_name}")

        current_value = variant.option_values.filter(option_type=option_type).first()

        if current_value is not None:
            if current_value.name == option_value_name:
                return
            variant.option_values.remove(current_value)
        else:
            variant.product.register_option_type(option_type)

        option_value, _ = OptionValue.objects.get_or_create(
            option_type=option_type,
            name=option_value_name,
            defaults={'presentation': option_value_name},
        )

        variant.option_values.add(option_value)
        variant.save()

    def set_options(self, options: Dict[str, str]) -> None:
        for option_type_name, option_value_name in options.items():
            self.set_option_value(option_type_name, option_value_name)

    def ordered_option_values(self):
        if self.variant.pk is None:
            return OptionValue.objects.none()
        return self.variant.option_values.select_related('option_type').order_by(
            'option_type__position', 'option_type__id'
        )

    def options_text(self) -> str:
        """
        "Color: Red, Size: M" style summary, ordered by option type position.
        """
        return ', '.join(
            f"{value.option_type.presentation}: {value.presentation}"
            for value in self.ordered_option_values()
        )

    def option_value(self, option_type_name: str) -> Optional[str]:
        """Presentation of the variant's value for ``option_type_name``, or None."""
        value = self.ordered_option_values().filter(
            option_type__name=option_type_name
        ).first()
        return value.presentation if value else None
