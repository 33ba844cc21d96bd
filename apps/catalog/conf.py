"""
Catalog configuration.

Values come from the ``CATALOG`` dict in Django settings and are handed to the
services explicitly, so tests and callers can pass their own instance.
"""

from dataclasses import dataclass

from django.conf import settings


DEFAULTS = {
    'CURRENCY': 'USD',
    'TRACK_INVENTORY_LEVELS': True,
    'ALLOW_BACKORDERS': False,
}


@dataclass(frozen=True)
class CatalogSettings:
    currency: str = DEFAULTS['CURRENCY']
    track_inventory_levels: bool = DEFAULTS['TRACK_INVENTORY_LEVELS']
    allow_backorders: bool = DEFAULTS['ALLOW_BACKORDERS']

    @classmethod
    def from_django(cls):
        """Build settings from ``settings.CATALOG``, falling back to defaults."""
        values = {**DEFAULTS, **getattr(settings, 'CATALOG', {})}
        return cls(
            currency=values['CURRENCY'],
            track_inventory_levels=bool(values['TRACK_INVENTORY_LEVELS']),
            allow_backorders=bool(values['ALLOW_BACKORDERS']),
        )


def get_catalog_settings():
    return CatalogSettings.from_django()
