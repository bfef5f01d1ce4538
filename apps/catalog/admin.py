from django.contrib import admin
from django.utils.html import format_html
from import_export import resources, fields
from import_export.admin import ImportExportModelAdmin
from import_export.widgets import ForeignKeyWidget
from adminsortable2.admin import SortableAdminMixin, SortableAdminBase, SortableInlineAdminMixin
from simple_history.admin import SimpleHistoryAdmin

from .models import (
    Brand,
    Category,
    Product,
    ProductImage,
    Attribute,
    AttributeValue,
    Variant,
)
from .services import format_price


# =============================================================================
# Import/Export Resources
# =============================================================================

class AttributeValueResource(resources.ModelResource):
    """Resource for importing/exporting attribute values."""

    attribute_name = fields.Field(
        column_name='attribute',
        attribute='attribute',
        widget=ForeignKeyWidget(Attribute, 'name')
    )

    class Meta:
        model = AttributeValue
        import_id_fields = ['attribute_name', 'value']
        fields = (
            'attribute_name', 'value', 'display_value',
            'color_hex', 'display_order'
        )


class VariantResource(resources.ModelResource):
    """Resource for importing/exporting variants."""

    product_name = fields.Field(
        column_name='product_name',
        attribute='product',
        widget=ForeignKeyWidget(Product, 'name')
    )

    class Meta:
        model = Variant
        import_id_fields = ['sku']
        fields = ('sku', 'product_name', 'price', 'stock_quantity', 'is_active')
        export_order = fields


# =============================================================================
# Inlines
# =============================================================================

class AttributeValueInline(SortableInlineAdminMixin, admin.TabularInline):
    model = AttributeValue
    extra = 1
    fields = ['value', 'display_value', 'color_hex', 'display_order']


class ProductImageInline(SortableInlineAdminMixin, admin.TabularInline):
    model = ProductImage
    extra = 1
    fields = ['image_url', 'image', 'alt_text', 'is_featured', 'display_order', 'image_preview']
    readonly_fields = ['image_preview']

    def image_preview(self, obj):
        if obj.url:
            return format_html(
                '<img src="{}" style="max-height: 50px; max-width: 100px;" />',
                obj.thumbnail_url
            )
        return '-'
    image_preview.short_description = 'Preview'


class VariantInline(admin.TabularInline):
    model = Variant
    extra = 0
    fields = ['sku', 'price', 'stock_quantity', 'is_active']
    show_change_link = True


# =============================================================================
# Model Admins
# =============================================================================

@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    list_display = ['name', 'slug']
    search_fields = ['name']
    prepopulated_fields = {'slug': ('name',)}


@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ['full_path', 'slug', 'display_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['parent']


@admin.register(Product)
class ProductAdmin(SortableAdminBase, SimpleHistoryAdmin):
    list_display = ['name', 'slug', 'brand', 'category', 'variant_count', 'is_active', 'created_at']
    list_filter = ['is_active', 'brand', 'created_at']
    search_fields = ['name', 'slug', 'description']
    prepopulated_fields = {'slug': ('name',)}
    autocomplete_fields = ['brand', 'category']
    readonly_fields = ['variant_count', 'created_at', 'updated_at']
    inlines = [ProductImageInline, VariantInline]

    fieldsets = (
        (None, {
            'fields': ('name', 'slug', 'description', 'brand', 'category', 'is_active')
        }),
        ('Info', {
            'fields': ('variant_count', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(Attribute)
class AttributeAdmin(SortableAdminMixin, admin.ModelAdmin):
    list_display = ['name', 'slug', 'datatype', 'value_count', 'display_order']
    search_fields = ['name', 'slug']
    prepopulated_fields = {'slug': ('name',)}
    inlines = [AttributeValueInline]

    def value_count(self, obj):
        return obj.values.count()
    value_count.short_description = 'Values'


@admin.register(AttributeValue)
class AttributeValueAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = AttributeValueResource
    list_display = ['value', 'display_value', 'attribute', 'color_swatch', 'display_order']
    list_filter = ['attribute']
    list_editable = ['display_order']
    search_fields = ['value', 'display_value', 'attribute__name']
    autocomplete_fields = ['attribute']

    def color_swatch(self, obj):
        if obj.color_hex:
            return format_html(
                '<div style="width: 20px; height: 20px; background-color: {}; '
                'border: 1px solid #ccc; border-radius: 3px;"></div>',
                obj.color_hex
            )
        return '-'
    color_swatch.short_description = 'Color'


@admin.register(Variant)
class VariantAdmin(ImportExportModelAdmin, SimpleHistoryAdmin):
    resource_class = VariantResource
    list_display = ['sku', 'product', 'display_price', 'stock_quantity', 'stock_status', 'is_active']
    list_filter = ['product', 'is_active']
    list_editable = ['stock_quantity', 'is_active']
    search_fields = ['sku', 'product__name']
    autocomplete_fields = ['product', 'attribute_values']
    readonly_fields = ['created_at', 'updated_at']
    list_per_page = 50

    fieldsets = (
        (None, {
            'fields': ('product', 'sku', 'is_active', 'display_order')
        }),
        ('Price & stock', {
            'fields': ('price', 'stock_quantity')
        }),
        ('Attributes', {
            'fields': ('attribute_values',)
        }),
        ('Info', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )

    actions = ['activate_variants', 'deactivate_variants']

    def display_price(self, obj):
        return format_price(obj.price)
    display_price.short_description = 'Price'

    def stock_status(self, obj):
        if obj.is_in_stock:
            return format_html('<span style="color: green;">In stock</span>')
        return format_html('<span style="color: red;">Out of stock</span>')
    stock_status.short_description = 'Stock'

    @admin.action(description='Activate selected variants')
    def activate_variants(self, request, queryset):
        count = queryset.update(is_active=True)
        self.message_user(request, f'{count} variants activated.')

    @admin.action(description='Deactivate selected variants')
    def deactivate_variants(self, request, queryset):
        count = queryset.update(is_active=False)
        self.message_user(request, f'{count} variants deactivated.')


# =============================================================================
# Admin Site Configuration
# =============================================================================

admin.site.site_header = 'Storefront Admin'
admin.site.site_title = 'Storefront'
admin.site.index_title = 'Administration'
