# tests/conftest.py
from decimal import Decimal

import pytest
from django.core.cache import cache

from apps.catalog.models import (
    Address,
    MarketPricelist,
    MarketPricelistAddress,
    OptionType,
    Product,
    StockLocation,
    Variant,
)


class DictCache:
    """In-memory stand-in for the Django cache (get/set/delete by key)."""

    def __init__(self):
        self.data = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, timeout=None):
        self.data[key] = value

    def delete(self, key):
        self.data.pop(key, None)


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def dict_cache():
    return DictCache()


@pytest.fixture
def product(db):
    return Product.objects.create(name='Basic T-Shirt', description='Cotton t-shirt')


@pytest.fixture
def variant(product):
    return Variant.objects.create(product=product, sku='TSH-001', cost_price=Decimal('12.50'))


@pytest.fixture
def warehouse(db):
    return StockLocation.objects.create(name='Warehouse', propagate_all_variants=True)


@pytest.fixture
def store(db):
    return StockLocation.objects.create(name='Store', propagate_all_variants=True)


@pytest.fixture
def color_and_size(db):
    color = OptionType.objects.create(name='Color', presentation='Color', position=1)
    size = OptionType.objects.create(name='Size', presentation='Size', position=2)
    return color, size


@pytest.fixture
def address(db):
    return Address.objects.create(address1='1 Market Street', city='San Francisco', country='US')


@pytest.fixture
def pricelist(address):
    pricelist = MarketPricelist.objects.create(name='US Retail')
    MarketPricelistAddress.objects.create(market_pricelist=pricelist, address=address)
    return pricelist
