from .stock import StockQuantifier
from .pricing import PriceResolver
from .availability import VariantAvailabilityCache
from .options import OptionAssigner

__all__ = [
    'StockQuantifier',
    'PriceResolver',
    'VariantAvailabilityCache',
    'OptionAssigner',
]
