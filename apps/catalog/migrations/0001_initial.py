from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import imagekit.models.fields
import simple_history.models
from django.conf import settings
from django.db import migrations, models


HISTORY_TYPE_CHOICES = [('+', 'Created'), ('~', 'Changed'), ('-', 'Deleted')]


def history_fields():
    return [
        ('history_id', models.AutoField(primary_key=True, serialize=False)),
        ('history_date', models.DateTimeField(db_index=True)),
        ('history_change_reason', models.CharField(max_length=100, null=True)),
        ('history_type', models.CharField(choices=HISTORY_TYPE_CHOICES, max_length=1)),
        ('history_user', models.ForeignKey(
            null=True,
            on_delete=django.db.models.deletion.SET_NULL,
            related_name='+',
            to=settings.AUTH_USER_MODEL,
        )),
    ]


def history_options(name):
    return {
        'verbose_name': f'historical {name}',
        'verbose_name_plural': f'historical {name}s',
        'ordering': ('-history_date', '-history_id'),
        'get_latest_by': ('history_date', 'history_id'),
    }


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Brand',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=200, unique=True, verbose_name='Slug')),
            ],
            options={
                'verbose_name': 'Brand',
                'verbose_name_plural': 'Brands',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Category',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=200, verbose_name='Name')),
                ('slug', models.SlugField(max_length=200, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('parent', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='children',
                    to='catalog.category',
                    verbose_name='Parent category',
                )),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Attribute',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, verbose_name='Name')),
                ('slug', models.SlugField(max_length=100, unique=True, verbose_name='Slug')),
                ('datatype', models.CharField(
                    choices=[('text', 'Text'), ('number', 'Number'), ('decimal', 'Decimal'), ('color', 'Color (Hex)')],
                    default='text',
                    max_length=20,
                    verbose_name='Data type',
                )),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
            ],
            options={
                'verbose_name': 'Attribute',
                'verbose_name_plural': 'Attributes',
                'ordering': ['display_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='AttributeValue',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('value', models.CharField(max_length=100, verbose_name='Value')),
                ('display_value', models.CharField(
                    blank=True,
                    help_text='Alternative label shown to shoppers (optional)',
                    max_length=100,
                    verbose_name='Display value',
                )),
                ('color_hex', models.CharField(
                    blank=True,
                    help_text='For color swatches (#RRGGBB)',
                    max_length=7,
                    validators=[django.core.validators.RegexValidator(
                        message='Color must be in hexadecimal format (#RRGGBB)',
                        regex='^#[0-9A-Fa-f]{6}$',
                    )],
                    verbose_name='Color hex',
                )),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('attribute', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='values',
                    to='catalog.attribute',
                    verbose_name='Attribute',
                )),
            ],
            options={
                'verbose_name': 'Attribute value',
                'verbose_name_plural': 'Attribute values',
                'ordering': ['display_order', 'value'],
                'unique_together': {('attribute', 'value')},
            },
        ),
        migrations.CreateModel(
            name='Product',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('slug', models.SlugField(max_length=255, unique=True, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('brand', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='products',
                    to='catalog.brand',
                    verbose_name='Brand',
                )),
                ('category', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.SET_NULL,
                    related_name='products',
                    to='catalog.category',
                    verbose_name='Category',
                )),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='ProductImage',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('image_url', models.URLField(blank=True, max_length=500, verbose_name='Image URL')),
                ('image', imagekit.models.fields.ProcessedImageField(
                    blank=True,
                    upload_to='products/%Y/%m/',
                    verbose_name='Image',
                )),
                ('alt_text', models.CharField(blank=True, max_length=255, verbose_name='Alt text')),
                ('is_featured', models.BooleanField(default=False, verbose_name='Featured')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('product', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='images',
                    to='catalog.product',
                    verbose_name='Product',
                )),
            ],
            options={
                'verbose_name': 'Product image',
                'verbose_name_plural': 'Product images',
                'ordering': ['display_order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='Variant',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('sku', models.CharField(max_length=100, unique=True, verbose_name='SKU')),
                ('price', models.DecimalField(
                    decimal_places=2,
                    max_digits=10,
                    validators=[django.core.validators.MinValueValidator(Decimal('0.00'))],
                    verbose_name='Price',
                )),
                ('stock_quantity', models.IntegerField(default=0, verbose_name='Stock quantity')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated at')),
                ('attribute_values', models.ManyToManyField(
                    blank=True,
                    related_name='variants',
                    to='catalog.attributevalue',
                    verbose_name='Attribute values',
                )),
                ('product', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='variants',
                    to='catalog.product',
                    verbose_name='Product',
                )),
            ],
            options={
                'verbose_name': 'Variant',
                'verbose_name_plural': 'Variants',
                'ordering': ['product', 'display_order', 'id'],
            },
        ),
        migrations.CreateModel(
            name='HistoricalAttributeValue',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('value', models.CharField(max_length=100, verbose_name='Value')),
                ('display_value', models.CharField(
                    blank=True,
                    help_text='Alternative label shown to shoppers (optional)',
                    max_length=100,
                    verbose_name='Display value',
                )),
                ('color_hex', models.CharField(
                    blank=True,
                    help_text='For color swatches (#RRGGBB)',
                    max_length=7,
                    validators=[django.core.validators.RegexValidator(
                        message='Color must be in hexadecimal format (#RRGGBB)',
                        regex='^#[0-9A-Fa-f]{6}$',
                    )],
                    verbose_name='Color hex',
                )),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('attribute', models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name='+',
                    to='catalog.attribute',
                    verbose_name='Attribute',
                )),
            ] + history_fields(),
            options=history_options('Attribute value'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalProduct',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('slug', models.SlugField(max_length=255, verbose_name='Slug')),
                ('description', models.TextField(blank=True, verbose_name='Description')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('brand', models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name='+',
                    to='catalog.brand',
                    verbose_name='Brand',
                )),
                ('category', models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name='+',
                    to='catalog.category',
                    verbose_name='Category',
                )),
            ] + history_fields(),
            options=history_options('Product'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
        migrations.CreateModel(
            name='HistoricalVariant',
            fields=[
                ('id', models.BigIntegerField(auto_created=True, blank=True, db_index=True, verbose_name='ID')),
                ('sku', models.CharField(db_index=True, max_length=100, verbose_name='SKU')),
                ('price', models.DecimalField(
                    decimal_places=2,
                    max_digits=10,
                    validators=[django.core.validators.MinValueValidator(Decimal('0.00'))],
                    verbose_name='Price',
                )),
                ('stock_quantity', models.IntegerField(default=0, verbose_name='Stock quantity')),
                ('is_active', models.BooleanField(default=True, verbose_name='Active')),
                ('display_order', models.PositiveIntegerField(default=0, verbose_name='Display order')),
                ('created_at', models.DateTimeField(blank=True, editable=False, verbose_name='Created at')),
                ('updated_at', models.DateTimeField(blank=True, editable=False, verbose_name='Updated at')),
                ('product', models.ForeignKey(
                    blank=True,
                    db_constraint=False,
                    null=True,
                    on_delete=django.db.models.deletion.DO_NOTHING,
                    related_name='+',
                    to='catalog.product',
                    verbose_name='Product',
                )),
            ] + history_fields(),
            options=history_options('Variant'),
            bases=(simple_history.models.HistoricalChanges, models.Model),
        ),
    ]
