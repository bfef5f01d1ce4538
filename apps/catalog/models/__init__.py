"""
Catalog models for the storefront.

Model Hierarchy:
- Product: Base product, optionally linked to a Brand and a Category
- ProductImage: Ordered images of a product, one of them may be featured
- Variant: Individual SKU with price and stock
- Attribute: Attribute types (Color, Size, Material)
- AttributeValue: Values for each attribute (Black, 42, Leather)
"""

from .category import Category, Brand
from .product import Product, ProductImage
from .attribute import Attribute, AttributeValue
from .variant import Variant

__all__ = [
    'Brand',
    'Category',
    'Product',
    'ProductImage',
    'Attribute',
    'AttributeValue',
    'Variant',
]
