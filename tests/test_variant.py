from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError
from django.test import override_settings
from django.utils import translation

from apps.catalog.models import Price, Product, StockItem, TaxCategory, Variant
from apps.catalog.models.fields import parse_price

pytestmark = pytest.mark.django_db


class TestParsePrice:

    def test_strips_currency_symbol_and_thousands_separator(self):
        assert parse_price('$1,234.56', separator='.') == Decimal('1234.56')

    def test_converts_locale_separator(self):
        assert parse_price('1.234,56', separator=',') == Decimal('1234.56')

    def test_keeps_minus_sign(self):
        assert parse_price('-12.00', separator='.') == Decimal('-12.00')

    def test_numbers_pass_through(self):
        assert parse_price(Decimal('3.50')) == Decimal('3.50')
        assert parse_price(7) == 7

    def test_unparseable_string_comes_back_unchanged(self):
        assert parse_price('free', separator='.') == 'free'


class TestCostPrice:

    def test_string_assignment_uses_active_locale(self, variant):
        with translation.override('de'):
            variant.cost_price = '1.234,56 €'

        assert variant.cost_price == Decimal('1234.56')

    def test_string_assignment_in_english(self, variant):
        with translation.override('en'):
            variant.cost_price = '$1,234.56'
        variant.save()
        variant.refresh_from_db()

        assert variant.cost_price == Decimal('1234.56')

    def test_blank_string_keeps_previous_value(self, variant):
        variant.cost_price = '  '

        assert variant.cost_price == Decimal('12.50')

    def test_none_keeps_previous_value(self, variant):
        variant.cost_price = None
        variant.save()
        variant.refresh_from_db()

        assert variant.cost_price == Decimal('12.50')

    def test_new_variant_without_cost(self, product):
        variant = Variant.objects.create(product=product, sku='TSH-NOCOST')

        assert variant.cost_price is None

    def test_unparseable_input_is_rejected(self, variant):
        variant.cost_price = 'n/a'

        with pytest.raises(ValidationError) as exc:
            variant.save()

        assert 'cost_price' in exc.value.message_dict

    def test_negative_cost_is_rejected(self, variant):
        variant.cost_price = '-5'

        with pytest.raises(ValidationError) as exc:
            variant.save()

        assert 'cost_price' in exc.value.message_dict

    def test_cost_currency_defaults_to_store_currency(self, product):
        variant = Variant.objects.create(product=product, sku='TSH-CUR')

        assert variant.cost_currency == 'USD'

    @override_settings(CATALOG={'CURRENCY': 'EUR'})
    def test_cost_currency_follows_settings(self, product):
        variant = Variant(product=product, sku='TSH-EUR')
        variant.full_clean()

        assert variant.cost_currency == 'EUR'

    def test_explicit_cost_currency_is_kept(self, product):
        variant = Variant.objects.create(product=product, sku='TSH-BRL', cost_currency='BRL')

        assert variant.cost_currency == 'BRL'


class TestPosition:

    def test_assigned_after_siblings(self, product):
        first = Variant.objects.create(product=product, sku='A')
        second = Variant.objects.create(product=product, sku='B')

        assert product.master.position == 1
        assert (first.position, second.position) == (1, 2)

    def test_not_reassigned_on_update(self, product):
        first = Variant.objects.create(product=product, sku='A')
        Variant.objects.create(product=product, sku='B')

        first.sku = 'A-RENAMED'
        first.position = 99
        first.save()
        first.refresh_from_db()

        assert first.position == 99

    def test_caller_position_ignored_on_create(self, product):
        variant = Variant.objects.create(product=product, sku='A', position=50)

        assert variant.position == 1


class TestMasterVariant:

    def test_created_with_product(self, product):
        master = product.master

        assert master.is_master is True
        assert product.variants.count() == 0
        assert product.variants_including_master.count() == 1

    def test_excluded_from_product_variants(self, product, variant):
        assert list(product.variants) == [variant]


class TestTaxCategory:

    def test_falls_back_to_product(self, product, variant):
        clothing = TaxCategory.objects.create(name='Clothing')
        product.tax_category = clothing
        product.save()
        variant.refresh_from_db()

        assert variant.get_tax_category() == clothing
        assert variant.tax_category_id is None

    def test_falls_back_to_default_category(self, variant):
        default = TaxCategory.objects.create(name='Standard', is_default=True)

        assert variant.get_tax_category() == default

    def test_own_category_wins(self, product, variant):
        product.tax_category = TaxCategory.objects.create(name='Clothing')
        product.save()
        reduced = TaxCategory.objects.create(name='Reduced')
        variant.tax_category = reduced
        variant.save()

        assert variant.get_tax_category() == reduced

    def test_none_anywhere(self, variant):
        assert variant.get_tax_category() is None


class TestSoftDelete:

    def test_hidden_from_default_queries(self, product, variant):
        variant.delete()

        assert variant.is_deleted is True
        assert not Variant.objects.filter(pk=variant.pk).exists()
        assert Variant.all_objects.get(pk=variant.pk).deleted_at is not None
        assert list(product.variants) == []

    def test_prices_and_stock_items_are_kept(self, warehouse, product):
        variant = Variant.objects.create(product=product, sku='TSH-KEEP')
        Price.objects.create(variant=variant, amount=Decimal('9.99'), currency='USD')

        variant.soft_delete()

        assert Price.objects.filter(variant_id=variant.pk).count() == 1
        assert StockItem.objects.filter(variant_id=variant.pk).count() == 1

    def test_restore(self, variant):
        variant.soft_delete()
        variant.restore()

        assert Variant.objects.filter(pk=variant.pk).exists()

    def test_deleting_product_deletes_its_variants(self, product, variant):
        product.delete()

        assert not Product.objects.filter(pk=product.pk).exists()
        assert not Variant.objects.filter(product_id=product.pk).exists()
        assert Variant.all_objects.filter(product_id=product.pk).count() == 2

    def test_variant_of_deleted_product_still_reaches_product(self, product, variant):
        product.delete()
        variant = Variant.all_objects.get(pk=variant.pk)

        assert variant.name == 'Basic T-Shirt'


class TestProductAccessors:

    def test_name_and_description_come_from_product(self, variant):
        assert variant.name == 'Basic T-Shirt'
        assert variant.description == 'Cotton t-shirt'
        assert variant.slug == 'basic-t-shirt'

    def test_name_and_sku(self, variant):
        assert variant.name_and_sku == 'Basic T-Shirt - TSH-001'
        assert str(variant) == 'Basic T-Shirt - TSH-001'


def test_changes_are_recorded_in_history(variant):
    variant.cost_price = Decimal('14.00')
    variant.save()

    assert variant.history.count() == 2
    assert variant.history.first().cost_price == Decimal('14.00')
