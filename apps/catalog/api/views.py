import logging

from rest_framework import viewsets, filters, status
from rest_framework.decorators import action
from rest_framework.response import Response
from django_filters.rest_framework import DjangoFilterBackend
from django.db.models import Prefetch

from apps.catalog.exceptions import NoVariantSelected, VariantNotFound
from apps.catalog.models import (
    Product,
    Attribute,
    AttributeValue,
    Variant,
)
from apps.catalog.services import (
    AttributeValueService,
    VariantSelection,
    get_cart_store,
)
from .serializers import (
    ProductListSerializer,
    ProductDetailSerializer,
    AttributeSerializer,
    AttributeValueSerializer,
    AddToCartSerializer,
)
from .filters import ProductFilter

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ReadOnlyModelViewSet):
    """
    API endpoint for storefront products.

    list: List active products
    retrieve: Get product detail with images and variants
    add_to_cart: Add the selected (or default) variant to the cart
    """
    queryset = Product.objects.filter(is_active=True).select_related(
        'brand', 'category'
    ).prefetch_related(
        'images',
        Prefetch(
            'variants',
            queryset=Variant.objects.filter(is_active=True).prefetch_related(
                'attribute_values__attribute'
            )
        ),
    )
    lookup_field = 'slug'
    filterset_class = ProductFilter
    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name', 'description']
    ordering_fields = ['name', 'created_at']
    ordering = ['name']

    def get_serializer_class(self):
        if self.action == 'list':
            return ProductListSerializer
        return ProductDetailSerializer

    @action(detail=True, methods=['post'], url_path='add-to-cart')
    def add_to_cart(self, request, slug=None):
        """
        Add a variant of this product to the cart.

        Expected payload:
        {
            "variant": 12,
            "quantity": 1
        }
        Without "variant" the product's default (first) variant is used.
        """
        product = self.get_object()
        payload = AddToCartSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        selection = VariantSelection(product, variants=product.variants.all())
        variant_id = payload.validated_data.get('variant')
        if variant_id:
            try:
                selection.select_variant_by_id(variant_id)
            except VariantNotFound as e:
                return Response({'error': str(e)}, status=status.HTTP_404_NOT_FOUND)

        try:
            item = selection.build_cart_item(payload.validated_data['quantity'])
        except NoVariantSelected:
            return Response(
                {'error': selection.action_notice},
                status=status.HTTP_400_BAD_REQUEST
            )

        cart = get_cart_store(request)
        cart.add_to_cart(item)
        return Response(
            {'item': item.to_dict(), 'cart': cart.items()},
            status=status.HTTP_201_CREATED
        )


class AttributeViewSet(viewsets.ModelViewSet):
    """
    API endpoint for attributes (Color, Size, Material, etc).
    """
    queryset = Attribute.objects.prefetch_related('values')
    serializer_class = AttributeSerializer
    lookup_field = 'slug'
    filter_backends = [filters.SearchFilter, filters.OrderingFilter]
    search_fields = ['name']
    ordering = ['display_order', 'name']


class AttributeValueViewSet(viewsets.ViewSet):
    """
    API endpoint for attribute values, backed by AttributeValueService.

    list: List all values (?attribute=<slug> narrows to one attribute)
    retrieve: Get one value
    create: Create a value
    update / partial_update: Change a value
    destroy: Delete a value
    """
    lookup_value_regex = r'\d+'

    def _get_or_404(self, pk):
        instance = AttributeValueService.get_by_id(pk)
        if instance is None:
            return None, Response(
                {'error': 'Attribute value not found'},
                status=status.HTTP_404_NOT_FOUND
            )
        return instance, None

    def list(self, request):
        values = AttributeValueService.get_all()
        attribute_slug = request.query_params.get('attribute')
        if attribute_slug:
            values = [v for v in values if v.attribute.slug == attribute_slug]
        return Response(AttributeValueSerializer(values, many=True).data)

    def retrieve(self, request, pk=None):
        instance, error = self._get_or_404(pk)
        if error:
            return error
        return Response(AttributeValueSerializer(instance).data)

    def create(self, request):
        serializer = AttributeValueSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        instance = AttributeValueService.create(serializer.validated_data)
        logger.info("Created attribute value %s", instance.pk)
        return Response(
            AttributeValueSerializer(instance).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, pk=None, partial=False):
        instance, error = self._get_or_404(pk)
        if error:
            return error
        serializer = AttributeValueSerializer(instance, data=request.data, partial=partial)
        serializer.is_valid(raise_exception=True)
        instance = AttributeValueService.update(pk, serializer.validated_data)
        return Response(AttributeValueSerializer(instance).data)

    def partial_update(self, request, pk=None):
        return self.update(request, pk=pk, partial=True)

    def destroy(self, request, pk=None):
        try:
            AttributeValueService.delete(pk)
        except AttributeValue.DoesNotExist:
            return Response(
                {'error': 'Attribute value not found'},
                status=status.HTTP_404_NOT_FOUND
            )
        logger.info("Deleted attribute value %s", pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
