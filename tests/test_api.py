from decimal import Decimal

import pytest
from rest_framework.test import APIClient

from apps.catalog.models import Price, TaxCategory, Variant

pytestmark = pytest.mark.django_db


@pytest.fixture
def client():
    return APIClient()


@pytest.fixture
def listed_variant(product, color_and_size):
    variant = Variant.objects.create(product=product, sku='TSH-RED-M', cost_price=Decimal('12.50'))
    variant.set_options({'Color': 'Red', 'Size': 'M'})
    Price.objects.create(variant=variant, amount=Decimal('19.90'), currency='USD')
    return variant


def test_variant_detail_exposes_attribute_set(client, listed_variant, product):
    product.tax_category = TaxCategory.objects.create(name='Clothing')
    product.save()

    response = client.get(f'/api/variants/{listed_variant.pk}/')

    assert response.status_code == 200
    data = response.json()
    assert data['sku'] == 'TSH-RED-M'
    assert data['cost_price'] == '12.50'
    assert data['cost_currency'] == 'USD'
    assert data['position'] == 1
    assert data['track_inventory'] is True
    assert data['tax_category'] == product.tax_category.pk
    assert data['options_text'] == 'Color: Red, Size: M'
    assert data['is_in_stock'] is False


def test_currency_filter_lists_active_variants(client, listed_variant):
    Variant.objects.create(product=listed_variant.product, sku='TSH-UNPRICED')

    response = client.get('/api/variants/', {'currency': 'usd'})

    assert response.status_code == 200
    skus = [row['sku'] for row in response.json()['results']]
    assert skus == ['TSH-RED-M']


def test_option_filter(client, listed_variant):
    other = Variant.objects.create(product=listed_variant.product, sku='TSH-BLUE-M')
    other.set_options({'Color': 'Blue', 'Size': 'M'})

    response = client.get('/api/variants/', {'option': 'Color:Blue'})

    skus = [row['sku'] for row in response.json()['results']]
    assert skus == ['TSH-BLUE-M']


def test_deleted_variants_are_not_served(client, listed_variant):
    listed_variant.soft_delete()

    response = client.get(f'/api/variants/{listed_variant.pk}/')

    assert response.status_code == 404


class TestPriceEndpoint:

    def test_price_for_address(self, client, listed_variant, address, pricelist):
        Price.objects.create(
            variant=listed_variant, amount=Decimal('24.90'), currency='EUR', market_pricelist=pricelist
        )

        response = client.get(f'/api/variants/{listed_variant.pk}/price/', {'address': address.pk})

        assert response.status_code == 200
        data = response.json()
        assert data['amount'] == '24.90'
        assert data['currency'] == 'EUR'
        assert data['display_price'] == '24.90 EUR'

    def test_missing_price_is_not_found(self, client, listed_variant, address):
        response = client.get(f'/api/variants/{listed_variant.pk}/price/', {'address': address.pk})

        assert response.status_code == 404

    def test_address_is_required(self, client, listed_variant):
        response = client.get(f'/api/variants/{listed_variant.pk}/price/')

        assert response.status_code == 400
