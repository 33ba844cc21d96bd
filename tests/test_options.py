import pytest
from django.core.exceptions import ValidationError
from django.db import transaction

from apps.catalog.models import OptionType, OptionValue, ProductOptionType, Variant

pytestmark = pytest.mark.django_db


class TestSetOptionValue:

    def test_creates_type_and_value_with_name_as_presentation(self, variant):
        variant.set_option_value('material', 'cotton')

        option_type = OptionType.objects.get(name='material')
        option_value = OptionValue.objects.get(option_type=option_type, name='cotton')
        assert option_type.presentation == 'material'
        assert option_value.presentation == 'cotton'
        assert list(variant.option_values.all()) == [option_value]

    def test_registers_option_type_on_product(self, variant, product):
        variant.set_option_value('color', 'red')

        assert list(product.get_option_types().values_list('name', flat=True)) == ['color']

    def test_is_idempotent(self, variant, product):
        variant.set_option_value('color', 'red')
        variant.set_option_value('color', 'red')

        assert variant.option_values.filter(option_type__name='color').count() == 1
        assert ProductOptionType.objects.filter(product=product).count() == 1

    def test_replaces_value_on_same_type(self, variant, product):
        variant.set_option_value('color', 'red')
        variant.set_option_value('color', 'blue')

        values = list(variant.option_values.values_list('name', flat=True))
        assert values == ['blue']
        assert ProductOptionType.objects.filter(product=product).count() == 1
        assert OptionValue.objects.filter(option_type__name='color').count() == 2

    def test_reuses_existing_values(self, product, variant):
        other = Variant.objects.create(product=product, sku='TSH-002')
        variant.set_option_value('color', 'red')
        other.set_option_value('color', 'red')

        assert OptionValue.objects.filter(name='red').count() == 1

    def test_master_is_left_untouched(self, product):
        master = product.master

        master.set_option_value('color', 'red')
        master.set_options({'size': 'M'})

        assert master.option_values.count() == 0
        assert not OptionType.objects.exists()

    def test_master_rejects_option_values_added_directly(self, product):
        option_type = OptionType.objects.create(name='color')
        red = OptionValue.objects.create(option_type=option_type, name='red')
        master = product.master

        with pytest.raises(ValidationError):
            with transaction.atomic():
                master.option_values.add(red)

        with pytest.raises(ValidationError):
            with transaction.atomic():
                red.variants.add(master)

        assert master.option_values.count() == 0
        assert not product.get_option_types().exists()

    def test_failed_save_rolls_back_the_whole_change(self, variant):
        variant.cost_price = 'not a price'

        with pytest.raises(ValidationError):
            variant.set_option_value('color', 'red')

        assert not OptionType.objects.filter(name='color').exists()
        assert variant.option_values.count() == 0


class TestSetOptions:

    def test_applies_pairs_in_input_order(self, variant, product):
        variant.set_options({'size': 'M', 'color': 'red'})

        registered = list(product.get_option_types().values_list('name', flat=True))
        assert registered == ['size', 'color']
        assert variant.get_option_value('size') == 'M'
        assert variant.get_option_value('color') == 'red'


class TestOptionsText:

    def test_ordered_by_option_type_position(self, variant, color_and_size):
        variant.set_option_value('Size', 'M')
        variant.set_option_value('Color', 'Red')

        assert variant.options_text == 'Color: Red, Size: M'

    def test_uses_presentations(self, variant, color_and_size):
        color, _ = color_and_size
        color.presentation = 'Colour'
        color.save()
        variant.set_option_value('Color', 'red')
        OptionValue.objects.filter(name='red').update(presentation='Ruby Red')

        assert variant.options_text == 'Colour: Ruby Red'

    def test_empty_without_options(self, variant):
        assert variant.options_text == ''
        assert variant.sku_and_options_text == 'TSH-001'

    def test_sku_and_options_text(self, variant, color_and_size):
        variant.set_options({'Color': 'Red', 'Size': 'M'})

        assert variant.sku_and_options_text == 'TSH-001 Color: Red, Size: M'

    def test_missing_option_value_is_none(self, variant):
        assert variant.get_option_value('color') is None


class TestDirectRelation:

    @pytest.fixture
    def red(self):
        color = OptionType.objects.create(name='color')
        return OptionValue.objects.create(option_type=color, name='red')

    def test_adding_value_registers_its_type(self, product, variant, red):
        variant.option_values.add(red)

        assert list(product.get_option_types()) == [red.option_type]

    def test_adding_variant_to_value_registers_its_type(self, product, variant, red):
        red.variants.add(variant)

        assert list(product.get_option_types()) == [red.option_type]

    def test_registered_once_per_type(self, product, variant, red):
        blue = OptionValue.objects.create(option_type=red.option_type, name='blue')
        other = Variant.objects.create(product=product, sku='TSH-002')

        variant.option_values.add(red)
        other.option_values.add(blue)

        assert ProductOptionType.objects.filter(product=product).count() == 1
