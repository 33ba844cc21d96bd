# Generated manually

from decimal import Decimal

from django.conf import settings
import django.core.validators
from django.db import migrations, models
import django.db.models.deletion
import imagekit.models.fields
import simple_history.models

import apps.catalog.models.fields


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Address',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('firstname', models.CharField(blank=True, max_length=100, verbose_name='Nome')),
                ('lastname', models.CharField(blank=True, max_length=100, verbose_name='Sobrenome')),
                ('address1', models.CharField(max_length=255, verbose_name='Endereço')),
                ('city', models.CharField(max_length=100, verbose_name='Cidade')),
                ('zipcode', models.CharField(blank=True, max_length=20, verbose_name='CEP')),
                ('country', models.CharField(help_text='Código ISO 3166-1 alpha-2', max_length=2, verbose_name='País')),
            ],
            options={
                'verbose_name': 'Endereço',
                'verbose_name_plural': 'Endereços',
            },
        ),
        migrations.CreateModel(
            name='MarketPricelist',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
            ],
            options={
                'verbose_name': 'Lista de Preços',
                'verbose_name_plural': 'Listas de Preços',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='OptionType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Nome')),
                ('presentation', models.CharField(max_length=100, verbose_name='Apresentação')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
            ],
            options={
                'verbose_name': 'Tipo de Opção',
                'verbose_name_plural': 'Tipos de Opções',
                'ordering': ['position', 'name'],
            },
        ),
        migrations.CreateModel(
            name='StockLocation',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, unique=True, verbose_name='Nome')),
                ('active', models.BooleanField(default=True, verbose_name='Ativo')),
                ('propagate_all_variants', models.BooleanField(default=True, help_text='Cria um item de estoque aqui para cada nova variante', verbose_name='Propagar todas as variantes')),
                ('backorderable_default', models.BooleanField(default=False, verbose_name='Permitir compra sem estoque (padrão)')),
            ],
            options={
                'verbose_name': 'Local de Estoque',
                'verbose_name_plural': 'Locais de Estoque',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='TaxCategory',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True, verbose_name='Nome')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('is_default', models.BooleanField(default=False, verbose_name='Padrão')),
            ],
            options={
                'verbose_name': 'Categoria Fiscal',
                'verbose_name_plural': 'Categorias Fiscais',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='OptionValue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Nome')),
                ('presentation', models.CharField(max_length=100, verbose_name='Apresentação')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('option_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='option_values', to='catalog.optiontype', verbose_name='Tipo de Opção')),
            ],
            options={
                'verbose_name': 'Valor de Opção',
                'verbose_name_plural': 'Valores de Opções',
                'ordering': ['position', 'name'],
                'unique_together': {('option_type', 'name')},
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True, verbose_name='Excluído em')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('available_on', models.DateTimeField(blank=True, null=True, verbose_name='Disponível em')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('tax_category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='catalog.taxcategory', verbose_name='Categoria Fiscal')),
            ],
            options={
                'verbose_name': 'Produto',
                'verbose_name_plural': 'Produtos',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductOptionType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('option_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='catalog.optiontype', verbose_name='Tipo de Opção')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, to='catalog.product', verbose_name='Produto')),
            ],
            options={
                'verbose_name': 'Tipo de Opção do Produto',
                'verbose_name_plural': 'Tipos de Opções do Produto',
                'ordering': ['position'],
                'unique_together': {('product', 'option_type')},
            },
        ),
        migrations.AddField(
            model_name='product',
            name='option_types',
            field=models.ManyToManyField(blank=True, related_name='products', through='catalog.ProductOptionType', to='catalog.optiontype', verbose_name='Tipos de Opções'),
        ),
        migrations.CreateModel(
            name='Variant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True, verbose_name='Excluído em')),
                ('sku', models.CharField(blank=True, default='', max_length=255, verbose_name='SKU')),
                ('is_master', models.BooleanField(default=False, verbose_name='Variante principal')),
                ('cost_price', apps.catalog.models.fields.PriceField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço de custo')),
                ('cost_currency', models.CharField(blank=True, max_length=3, verbose_name='Moeda do custo')),
                ('track_inventory', models.BooleanField(default=True, verbose_name='Rastrear estoque')),
                ('position', models.IntegerField(blank=True, null=True, verbose_name='Posição')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('option_values', models.ManyToManyField(blank=True, related_name='variants', to='catalog.optionvalue', verbose_name='Valores de opções')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='variants_including_master', to='catalog.product', verbose_name='Produto')),
                ('tax_category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='variants', to='catalog.taxcategory', verbose_name='Categoria Fiscal')),
            ],
            options={
                'verbose_name': 'Variante',
                'verbose_name_plural': 'Variantes',
                'ordering': ['product', 'position'],
            },
        ),
        migrations.CreateModel(
            name='VariantImage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('image', imagekit.models.fields.ProcessedImageField(upload_to='variants/%Y/%m/', verbose_name='Imagem')),
                ('alt_text', models.CharField(blank=True, max_length=255, verbose_name='Texto alternativo')),
                ('position', models.PositiveIntegerField(default=0, verbose_name='Ordem de exibição')),
                ('variant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='images', to='catalog.variant', verbose_name='Variante')),
            ],
            options={
                'verbose_name': 'Imagem da Variante',
                'verbose_name_plural': 'Imagens das Variantes',
                'ordering': ['position'],
            },
        ),
        migrations.CreateModel(
            name='Price',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('amount', models.DecimalField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Valor')),
                ('currency', models.CharField(max_length=3, verbose_name='Moeda')),
                ('market_pricelist', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='prices', to='catalog.marketpricelist', verbose_name='Lista de Preços')),
                ('variant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='prices', to='catalog.variant', verbose_name='Variante')),
            ],
            options={
                'verbose_name': 'Preço',
                'verbose_name_plural': 'Preços',
                'unique_together': {('variant', 'currency', 'market_pricelist')},
            },
        ),
        migrations.CreateModel(
            name='MarketPricelistAddress',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('address', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pricelist_entries', to='catalog.address', verbose_name='Endereço')),
                ('market_pricelist', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='addresses', to='catalog.marketpricelist', verbose_name='Lista de Preços')),
            ],
            options={
                'verbose_name': 'Endereço da Lista de Preços',
                'verbose_name_plural': 'Endereços da Lista de Preços',
                'unique_together': {('market_pricelist', 'address')},
            },
        ),
        migrations.CreateModel(
            name='StockItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True, verbose_name='Excluído em')),
                ('count_on_hand', models.IntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)], verbose_name='Quantidade em estoque')),
                ('backorderable', models.BooleanField(default=False, verbose_name='Permitir compra sem estoque')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Atualizado em')),
                ('stock_location', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stock_items', to='catalog.stocklocation', verbose_name='Local de Estoque')),
                ('variant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='stock_items', to='catalog.variant', verbose_name='Variante')),
            ],
            options={
                'verbose_name': 'Item de Estoque',
                'verbose_name_plural': 'Itens de Estoque',
                'unique_together': {('variant', 'stock_location')},
            },
        ),
        migrations.CreateModel(
            name='InventoryUnit',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('state', models.CharField(choices=[('on_hand', 'Em estoque'), ('backordered', 'Sob encomenda'), ('shipped', 'Enviado'), ('returned', 'Devolvido')], default='on_hand', max_length=20, verbose_name='Estado')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Criado em')),
                ('variant', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='inventory_units', to='catalog.variant', verbose_name='Variante')),
            ],
            options={
                'verbose_name': 'Unidade de Inventário',
                'verbose_name_plural': 'Unidades de Inventário',
                'ordering': ['created_at'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalProduct',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True, verbose_name='Excluído em')),
                ('name', models.CharField(max_length=255, verbose_name='Nome')),
                ('slug', models.SlugField(max_length=255, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Descrição')),
                ('available_on', models.DateTimeField(blank=True, null=True, verbose_name='Disponível em')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Atualizado em')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('tax_category', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.taxcategory', verbose_name='Categoria Fiscal')),
            ],
            options={
                'verbose_name': 'historical Produto',
                'verbose_name_plural': 'historical Produtos',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalVariant',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('deleted_at', models.DateTimeField(blank=True, db_index=True, null=True, verbose_name='Excluído em')),
                ('sku', models.CharField(blank=True, default='', max_length=255, verbose_name='SKU')),
                ('is_master', models.BooleanField(default=False, verbose_name='Variante principal')),
                ('cost_price', apps.catalog.models.fields.PriceField(blank=True, decimal_places=2, max_digits=10, null=True, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))], verbose_name='Preço de custo')),
                ('cost_currency', models.CharField(blank=True, max_length=3, verbose_name='Moeda do custo')),
                ('track_inventory', models.BooleanField(default=True, verbose_name='Rastrear estoque')),
                ('position', models.IntegerField(blank=True, null=True, verbose_name='Posição')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Criado em')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Atualizado em')),
                ('history_id', models.AutoField(primary_key=True, serialize=False)),
                ('history_date', models.DateTimeField(db_index=True)),
                ('history_change_reason', models.CharField(max_length=100, null=True)),
                ('history_type', models.CharField(choices=[('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')], max_length=1)),
                ('history_user', models.ForeignKey(null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='+', to=settings.AUTH_USER_MODEL)),
                ('product', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.product', verbose_name='Produto')),
                ('tax_category', models.ForeignKey(blank=True, db_constraint=False, null=True, on_delete=django.db.models.deletion.DO_NOTHING, related_name='+', to='catalog.taxcategory', verbose_name='Categoria Fiscal')),
            ],
            options={
                'verbose_name': 'historical Variante',
                'verbose_name_plural': 'historical Variantes',
                'ordering': ('-history_date', '-history_id'),
                'get_latest_by': ('history_date', 'history_id'),
            },
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
