import logging

from django.core.cache import cache as default_cache

from .stock import StockQuantifier

logger = logging.getLogger(__name__)


class VariantAvailabilityCache:
    """
    Read-through cache of the "in stock" flag of each variant.

    One key per variant, no expiry. Entries are dropped when the variant is
    touched; a stock write that skips the touch leaves the old flag in place
    until the next one.
    """

    def __init__(self, cache=None, config=None):
        self.cache = cache if cache is not None else default_cache
        self.config = config

    @staticmethod
    def cache_key(variant):
        return f"variant-{variant.pk}-in_stock"

    def in_stock(self, variant) -> bool:
        if variant.pk is None:
            return False
        key = self.cache_key(variant)
        value = self.cache.get(key)
        if value is None:
            value = StockQuantifier(variant, self.config).total_on_hand() > 0
            self.cache.set(key, value, None)
        return value

    def invalidate(self, variant):
        self.cache.delete(self.cache_key(variant))

    def invalidate_many(self, variants):
        count = 0
        for variant in variants:
            self.invalidate(variant)
            count += 1
        logger.debug(f"Cleared in-stock cache for {count} variants")
