import pytest

from apps.catalog.models import StockItem, Variant
from apps.catalog.services import VariantAvailabilityCache

pytestmark = pytest.mark.django_db


@pytest.fixture
def stocked_variant(warehouse, product):
    return Variant.objects.create(product=product, sku='TSH-AV')


def _stock_item(variant):
    return StockItem.objects.get(variant=variant)


def test_cache_key_format(variant):
    assert VariantAvailabilityCache.cache_key(variant) == f"variant-{variant.pk}-in_stock"


def test_in_stock_is_computed_once_and_stored(stocked_variant, dict_cache):
    availability = VariantAvailabilityCache(cache=dict_cache)

    assert availability.in_stock(stocked_variant) is False
    assert dict_cache.data == {f"variant-{stocked_variant.pk}-in_stock": False}


def test_stale_until_invalidated(stocked_variant):
    assert stocked_variant.is_in_stock is False

    # Raw write: no touch, so the cached flag survives
    StockItem.objects.filter(variant=stocked_variant).update(count_on_hand=5)
    assert stocked_variant.is_in_stock is False

    stocked_variant.touch()
    assert stocked_variant.is_in_stock is True


def test_saving_stock_item_invalidates(stocked_variant):
    assert stocked_variant.is_in_stock is False

    stock_item = _stock_item(stocked_variant)
    stock_item.count_on_hand = 2
    stock_item.save()

    assert stocked_variant.is_in_stock is True


def test_adjusting_stock_invalidates(stocked_variant):
    stock_item = _stock_item(stocked_variant)
    stock_item.adjust_count_on_hand(1)
    assert stocked_variant.is_in_stock is True

    stock_item.adjust_count_on_hand(-1)
    assert stocked_variant.is_in_stock is False


def test_saving_product_invalidates_its_variants(stocked_variant, product):
    assert stocked_variant.is_in_stock is False
    StockItem.objects.filter(variant=stocked_variant).update(count_on_hand=3)

    product.description = 'Now in organic cotton'
    product.save()

    assert stocked_variant.is_in_stock is True


def test_invalidate_with_injected_cache(stocked_variant, dict_cache):
    availability = VariantAvailabilityCache(cache=dict_cache)
    availability.in_stock(stocked_variant)

    availability.invalidate(stocked_variant)

    assert dict_cache.data == {}


def test_unsaved_variant_is_not_cached(product, dict_cache):
    availability = VariantAvailabilityCache(cache=dict_cache)

    assert availability.in_stock(Variant(product=product, sku='DRAFT')) is False
    assert dict_cache.data == {}
