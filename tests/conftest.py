import pytest
from decimal import Decimal
from rest_framework.test import APIClient

from apps.catalog.models import (
    Brand,
    Category,
    Product,
    ProductImage,
    Attribute,
    AttributeValue,
    Variant,
)


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def category(db):
    footwear = Category.objects.create(name='Footwear', slug='footwear')
    return Category.objects.create(name='Running', slug='running', parent=footwear)


@pytest.fixture
def brand(db):
    return Brand.objects.create(name='Stride', slug='stride')


@pytest.fixture
def product(db, brand, category):
    return Product.objects.create(
        name='Trail Runner', slug='trail-runner',
        description='Lightweight trail shoe', brand=brand, category=category,
    )


@pytest.fixture
def variants(product):
    return [
        Variant.objects.create(product=product, sku='TR-42', price=Decimal('100.00'), stock_quantity=5, display_order=0),
        Variant.objects.create(product=product, sku='TR-43', price=Decimal('150.00'), stock_quantity=0, display_order=1),
    ]


@pytest.fixture
def images(product):
    return [
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/side.jpg', display_order=0),
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/front.jpg', display_order=1, is_featured=True),
    ]


@pytest.fixture
def empty_product(db):
    return Product.objects.create(name='Coming Soon', slug='coming-soon')


@pytest.fixture
def color(db):
    return Attribute.objects.create(name='Color', slug='color', datatype='color')


@pytest.fixture
def black(color):
    return AttributeValue.objects.create(attribute=color, value='black', display_value='Black', color_hex='#000000')
