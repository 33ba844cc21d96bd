"""
Stock answers for a single variant, computed from its stock items.
Nothing here is cached; see VariantAvailabilityCache for the in-stock flag.
"""

from django.db.models import Sum

from apps.catalog.conf import get_catalog_settings
from apps.catalog.models import InventoryUnit, StockItem


class StockQuantifier:

    def __init__(self, variant, config=None):
        self.variant = variant
        self.config = config or get_catalog_settings()

    @property
    def stock_items(self):
        """Non-deleted stock items of the variant across every location."""
        if self.variant.pk is None:
            return StockItem.objects.none()
        return StockItem.objects.filter(variant=self.variant)

    @property
    def should_track_inventory(self):
        return self.variant.track_inventory and self.config.track_inventory_levels

    def total_on_hand(self) -> int:
        total = self.stock_items.aggregate(total=Sum('count_on_hand'))['total']
        return total or 0

    def backorderable(self) -> bool:
        if self.config.allow_backorders:
            return True
        return self.stock_items.filter(backorderable=True).exists()

    def can_supply(self, quantity=1) -> bool:
        """
        True when ``quantity`` units can be sold now.

        Variants that don't track inventory have unlimited supply. Otherwise
        the on-hand total must cover the quantity, unless backorders are
        allowed store-wide or by one of the variant's stock items.
        """
        if not self.should_track_inventory:
            return True
        if self.total_on_hand() >= quantity:
            return True
        return self.backorderable()

    def on_backorder(self) -> int:
        if self.variant.pk is None:
            return 0
        return InventoryUnit.objects.filter(
            variant=self.variant, state='backordered'
        ).count()
