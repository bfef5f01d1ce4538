from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    ProductImageSerializer,
    VariantSerializer,
    AttributeSerializer,
    AttributeValueSerializer,
    AddToCartSerializer,
)

__all__ = [
    'ProductListSerializer',
    'ProductDetailSerializer',
    'ProductImageSerializer',
    'VariantSerializer',
    'AttributeSerializer',
    'AttributeValueSerializer',
    'AddToCartSerializer',
]
