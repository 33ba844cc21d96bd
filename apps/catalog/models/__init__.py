"""
Catalog models for product variants, pricing and stock.

Model Hierarchy:
- Product: Sellable item with one master variant
- OptionType: Axis a product varies along (Color, Size)
- OptionValue: Values for each option type (Red, M)
- Variant: Individual SKU with prices, stock items and images
- Price: Amount per currency, optionally scoped to a market pricelist
- StockItem: On-hand count of a variant at a stock location
"""

from .tax_category import TaxCategory
from .option import OptionType, OptionValue, ProductOptionType
from .product import Product
from .variant import Variant, VariantImage
from .price import Address, MarketPricelist, MarketPricelistAddress, Price
from .stock import StockLocation, StockItem, InventoryUnit

__all__ = [
    'TaxCategory',
    'OptionType',
    'OptionValue',
    'ProductOptionType',
    'Product',
    'Variant',
    'VariantImage',
    'Address',
    'MarketPricelist',
    'MarketPricelistAddress',
    'Price',
    'StockLocation',
    'StockItem',
    'InventoryUnit',
]
