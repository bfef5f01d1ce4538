from rest_framework import serializers

from apps.catalog.conf import get_setting
from apps.catalog.models import (
    Product,
    ProductImage,
    Attribute,
    AttributeValue,
    Variant,
)
from apps.catalog.services import pricing


# =============================================================================
# Attribute Serializers
# =============================================================================

class AttributeValueSerializer(serializers.ModelSerializer):
    attribute_name = serializers.CharField(
        source='attribute.name', read_only=True
    )
    attribute_slug = serializers.CharField(
        source='attribute.slug', read_only=True
    )

    class Meta:
        model = AttributeValue
        fields = [
            'id', 'attribute', 'attribute_name', 'attribute_slug',
            'value', 'display_value', 'color_hex', 'display_order'
        ]


class AttributeSerializer(serializers.ModelSerializer):
    values = AttributeValueSerializer(many=True, read_only=True)

    class Meta:
        model = Attribute
        fields = ['id', 'name', 'slug', 'datatype', 'display_order', 'values']


# =============================================================================
# Product Serializers
# =============================================================================

class ProductImageSerializer(serializers.ModelSerializer):
    url = serializers.CharField(read_only=True)
    thumbnail_url = serializers.CharField(read_only=True)

    class Meta:
        model = ProductImage
        fields = ['id', 'url', 'thumbnail_url', 'alt_text', 'is_featured', 'display_order']


class VariantSerializer(serializers.ModelSerializer):
    display_price = serializers.SerializerMethodField()
    options = serializers.CharField(source='get_options_label', read_only=True)
    is_in_stock = serializers.BooleanField(read_only=True)

    class Meta:
        model = Variant
        fields = [
            'id', 'sku', 'price', 'display_price', 'stock_quantity',
            'is_in_stock', 'options'
        ]

    def get_display_price(self, obj):
        return pricing.format_price(obj.price)


class ProductListSerializer(serializers.ModelSerializer):
    """Product list with cover image and starting price."""
    cover_image = serializers.SerializerMethodField()
    min_price = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = ['id', 'name', 'slug', 'cover_image', 'min_price']

    def get_cover_image(self, obj):
        return obj.get_cover_url(get_setting('PLACEHOLDER_IMAGE_URL'))

    def get_min_price(self, obj):
        variants = [v for v in obj.variants.all() if v.is_active]
        if not variants:
            return None
        return pricing.min_price(variants)


class ProductDetailSerializer(serializers.ModelSerializer):
    """Product detail as the product page sees it."""
    brand = serializers.CharField(source='brand.name', read_only=True, default=None)
    category = serializers.CharField(source='category.full_path', read_only=True, default=None)
    images = ProductImageSerializer(many=True, read_only=True)
    cover_image = serializers.SerializerMethodField()
    variants = serializers.SerializerMethodField()
    min_price = serializers.SerializerMethodField()

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'slug', 'description', 'brand', 'category',
            'cover_image', 'images', 'variants', 'min_price'
        ]

    def _active_variants(self, obj):
        return [v for v in obj.variants.all() if v.is_active]

    def get_cover_image(self, obj):
        return obj.get_cover_url(get_setting('PLACEHOLDER_IMAGE_URL'))

    def get_variants(self, obj):
        return VariantSerializer(self._active_variants(obj), many=True).data

    def get_min_price(self, obj):
        variants = self._active_variants(obj)
        if not variants:
            return None
        return pricing.min_price(variants)


# =============================================================================
# Cart Serializers
# =============================================================================

class AddToCartSerializer(serializers.Serializer):
    variant = serializers.CharField(required=False, allow_blank=True)
    quantity = serializers.IntegerField(min_value=1, default=1)
