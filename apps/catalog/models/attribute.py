from django.db import models
from django.core.validators import RegexValidator
from simple_history.models import HistoricalRecords


class Attribute(models.Model):
    """
    Catalog attribute that variants can be described by.
    Examples: Color, Size, Material.
    """
    DATATYPE_CHOICES = [
        ('text', 'Text'),
        ('number', 'Number'),
        ('decimal', 'Decimal'),
        ('color', 'Color (Hex)'),
    ]

    name = models.CharField(
        max_length=100,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=100,
        unique=True,
        verbose_name='Slug'
    )
    datatype = models.CharField(
        max_length=20,
        choices=DATATYPE_CHOICES,
        default='text',
        verbose_name='Data type'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Display order'
    )

    class Meta:
        ordering = ['display_order', 'name']
        verbose_name = 'Attribute'
        verbose_name_plural = 'Attributes'

    def __str__(self):
        return self.name


class AttributeValue(models.Model):
    """
    A concrete value of an attribute.

    Examples:
        - Attribute "Color" -> values "Black", "White"
        - Attribute "Size" -> values "S", "M", "L"
    """
    hex_color_validator = RegexValidator(
        regex=r'^#[0-9A-Fa-f]{6}$',
        message='Color must be in hexadecimal format (#RRGGBB)'
    )

    attribute = models.ForeignKey(
        Attribute,
        on_delete=models.CASCADE,
        related_name='values',
        verbose_name='Attribute'
    )
    value = models.CharField(
        max_length=100,
        verbose_name='Value'
    )
    display_value = models.CharField(
        max_length=100,
        blank=True,
        verbose_name='Display value',
        help_text='Alternative label shown to shoppers (optional)'
    )
    color_hex = models.CharField(
        max_length=7,
        blank=True,
        validators=[hex_color_validator],
        verbose_name='Color hex',
        help_text='For color swatches (#RRGGBB)'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Display order'
    )

    history = HistoricalRecords()

    class Meta:
        ordering = ['display_order', 'value']
        unique_together = ['attribute', 'value']
        verbose_name = 'Attribute value'
        verbose_name_plural = 'Attribute values'

    def __str__(self):
        return f"{self.attribute.name}: {self.get_display_value()}"

    def get_display_value(self):
        return self.display_value or self.value
