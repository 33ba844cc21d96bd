from typing import Optional

from apps.catalog.conf import get_catalog_settings
from apps.catalog.models import Price, Variant
from apps.catalog.money import Money


class PriceResolver:
    """
    Finds the price a variant sells for at a given address.

    A price applies to an address when its market pricelist lists that
    address. A missing price is a normal outcome: callers get None and
    decide how to show the variant (usually as unavailable).
    """

    def __init__(self, config=None):
        self.config = config or get_catalog_settings()

    def resolve(self, variant: Variant, address) -> Optional[Price]:
        """
        Return some price of ``variant`` scoped to ``address`` (instance or id).
        When several match, which one wins is not defined.
        """
        if variant.pk is None or address is None:
            return None
        return Price.objects.filter(
            variant=variant,
            market_pricelist__addresses__address=address,
        ).first()

    def display_price(self, variant: Variant, address) -> Optional[Money]:
        price = self.resolve(variant, address)
        if price is None:
            return None
        return price.display_price

    def active_variants(self, currency: Optional[str] = None):
        """Variants listable in ``currency`` (defaults to the store currency)."""
        return Variant.objects.active(currency or self.config.currency)
