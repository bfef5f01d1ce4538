from django_filters import rest_framework as filters
from apps.catalog.models import Product


class ProductFilter(filters.FilterSet):
    """Filter for storefront products."""

    brand = filters.CharFilter(field_name='brand__slug')
    category = filters.CharFilter(field_name='category__slug')

    # Price filters (on any active variant)
    min_price = filters.NumberFilter(method='filter_min_price')
    max_price = filters.NumberFilter(method='filter_max_price')

    # Attribute filters
    attribute = filters.CharFilter(method='filter_by_attribute')

    class Meta:
        model = Product
        fields = ['brand', 'category']

    def filter_min_price(self, queryset, name, value):
        return queryset.filter(
            variants__is_active=True, variants__price__gte=value
        ).distinct()

    def filter_max_price(self, queryset, name, value):
        return queryset.filter(
            variants__is_active=True, variants__price__lte=value
        ).distinct()

    def filter_by_attribute(self, queryset, name, value):
        """
        Filter by attribute in format: attribute_slug:value
        Example: ?attribute=color:black
        """
        if ':' not in value:
            return queryset

        attr_slug, attr_value = value.split(':', 1)
        return queryset.filter(
            variants__attribute_values__attribute__slug=attr_slug,
            variants__attribute_values__value=attr_value
        ).distinct()
