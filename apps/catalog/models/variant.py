from django.db import models
from django.core.validators import MinValueValidator
from decimal import Decimal
from simple_history.models import HistoricalRecords


class Variant(models.Model):
    """
    Purchasable configuration of a product: one SKU with its own price and stock.
    """
    product = models.ForeignKey(
        'catalog.Product',
        on_delete=models.CASCADE,
        related_name='variants',
        verbose_name='Product'
    )
    sku = models.CharField(
        max_length=100,
        unique=True,
        verbose_name='SKU'
    )
    price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        verbose_name='Price'
    )
    stock_quantity = models.IntegerField(
        default=0,
        verbose_name='Stock quantity'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Display order'
    )
    attribute_values = models.ManyToManyField(
        'catalog.AttributeValue',
        blank=True,
        related_name='variants',
        verbose_name='Attribute values'
    )

    created_at = models.DateTimeField(
        auto_now_add=True,
        verbose_name='Created at'
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        verbose_name='Updated at'
    )

    # History tracking
    history = HistoricalRecords()

    class Meta:
        ordering = ['product', 'display_order', 'id']
        verbose_name = 'Variant'
        verbose_name_plural = 'Variants'

    def __str__(self):
        return self.sku

    @property
    def is_in_stock(self):
        return self.stock_quantity > 0

    def get_options_label(self):
        """Attribute values joined for display, e.g. "Black / 42"."""
        values = sorted(
            self.attribute_values.all(),
            key=lambda value: value.attribute.display_order
        )
        return ' / '.join(value.get_display_value() for value in values)
