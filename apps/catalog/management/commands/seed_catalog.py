"""
Create sample catalog data for local development.
Run with: python -m django seed_catalog --settings=config.settings
(after python -m django migrate --settings=config.settings on a fresh database)
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import (
    Address,
    MarketPricelist,
    MarketPricelistAddress,
    OptionType,
    Price,
    Product,
    StockItem,
    StockLocation,
    TaxCategory,
    Variant,
)


class Command(BaseCommand):
    help = 'Create sample products, variants, prices and stock'

    def add_arguments(self, parser):
        parser.add_argument(
            '--currency',
            default='USD',
            help='Currency of the sample prices',
        )

    def handle(self, *args, **options):
        currency = options['currency'].upper()

        with transaction.atomic():
            self.stdout.write('Creating tax categories and stock locations...')
            clothing, _ = TaxCategory.objects.get_or_create(
                name='Clothing',
                defaults={'is_default': True}
            )
            warehouse, _ = StockLocation.objects.get_or_create(
                name='Main Warehouse',
                defaults={'propagate_all_variants': True}
            )

            self.stdout.write('Creating option types...')
            OptionType.objects.get_or_create(
                name='color', defaults={'presentation': 'Color', 'position': 1}
            )
            OptionType.objects.get_or_create(
                name='size', defaults={'presentation': 'Size', 'position': 2}
            )

            self.stdout.write('Creating pricelist...')
            address, _ = Address.objects.get_or_create(
                address1='1 Market Street',
                city='San Francisco',
                defaults={'country': 'US', 'zipcode': '94105'}
            )
            pricelist, _ = MarketPricelist.objects.get_or_create(name=f'Retail {currency}')
            MarketPricelistAddress.objects.get_or_create(
                market_pricelist=pricelist,
                address=address
            )

            self.stdout.write('Creating products and variants...')
            product, created = Product.objects.get_or_create(
                slug='basic-t-shirt',
                defaults={
                    'name': 'Basic T-Shirt',
                    'description': 'Comfortable cotton t-shirt',
                    'tax_category': clothing,
                }
            )

            variant_count = 0
            if created:
                for color in ['Black', 'White', 'Blue']:
                    for size in ['S', 'M', 'L']:
                        variant = Variant.objects.create(
                            product=product,
                            sku=f'TSH-{color[:3].upper()}-{size}',
                            cost_price=Decimal('35.00'),
                        )
                        variant.set_options({'color': color, 'size': size})
                        Price.objects.create(
                            variant=variant,
                            amount=Decimal('79.90'),
                            currency=currency,
                            market_pricelist=pricelist
                        )
                        StockItem.all_objects.filter(
                            variant=variant,
                            stock_location=warehouse
                        ).update(count_on_hand=10)
                        variant.touch()
                        variant_count += 1

        self.stdout.write(self.style.SUCCESS(
            f"Sample data ready: {Product.objects.count()} products, "
            f"{variant_count} new variants, {warehouse.name} stocked"
        ))
