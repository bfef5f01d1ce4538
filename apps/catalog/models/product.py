from django.db import models
from django.utils.text import slugify
from simple_history.models import HistoricalRecords
from imagekit.models import ProcessedImageField, ImageSpecField
from imagekit.processors import ResizeToFill, ResizeToFit


class Product(models.Model):
    """
    Base product model.
    Example: "Trail Runner 2" which is sold in several variants (sizes, colors).
    The price lives on the variants; the product itself has none.
    """
    name = models.CharField(
        max_length=255,
        verbose_name='Name'
    )
    slug = models.SlugField(
        max_length=255,
        unique=True,
        verbose_name='Slug'
    )
    description = models.TextField(
        blank=True,
        verbose_name='Description'
    )
    brand = models.ForeignKey(
        'catalog.Brand',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Brand'
    )
    category = models.ForeignKey(
        'catalog.Category',
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='products',
        verbose_name='Category'
    )
    is_active = models.BooleanField(
        default=True,
        verbose_name='Active'
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
        ordering = ['name']
        verbose_name = 'Product'
        verbose_name_plural = 'Products'

    def __str__(self):
        return self.name

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = slugify(self.name)
        super().save(*args, **kwargs)

    @property
    def variant_count(self):
        return self.variants.count()

    @property
    def featured_image(self):
        """First featured image, else the first image, else None."""
        images = list(self.images.all())
        for image in images:
            if image.is_featured:
                return image
        return images[0] if images else None

    def get_cover_url(self, placeholder):
        """URL of the cover image, falling back to ``placeholder``."""
        image = self.featured_image
        if image and image.url:
            return image.url
        return placeholder


class ProductImage(models.Model):
    """
    Product image, either hosted elsewhere (``image_url``) or uploaded.
    Uploaded images are resized and get a generated thumbnail.
    """
    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='images',
        verbose_name='Product'
    )
    image_url = models.URLField(
        max_length=500,
        blank=True,
        verbose_name='Image URL'
    )
    image = ProcessedImageField(
        upload_to='products/%Y/%m/',
        processors=[ResizeToFit(1200, 1200)],
        format='JPEG',
        options={'quality': 85},
        blank=True,
        verbose_name='Image'
    )
    thumbnail = ImageSpecField(
        source='image',
        processors=[ResizeToFill(160, 160)],
        format='JPEG',
        options={'quality': 70}
    )
    alt_text = models.CharField(
        max_length=255,
        blank=True,
        verbose_name='Alt text'
    )
    is_featured = models.BooleanField(
        default=False,
        verbose_name='Featured'
    )
    display_order = models.PositiveIntegerField(
        default=0,
        verbose_name='Display order'
    )

    class Meta:
        ordering = ['display_order', 'id']
        verbose_name = 'Product image'
        verbose_name_plural = 'Product images'

    def __str__(self):
        return f"{self.product.name} - Image {self.display_order}"

    @property
    def url(self):
        if self.image:
            return self.image.url
        return self.image_url

    @property
    def thumbnail_url(self):
        if self.image:
            return self.thumbnail.url
        return self.image_url

    def save(self, *args, **kwargs):
        # Auto-generate alt text if empty
        if not self.alt_text:
            self.alt_text = self.product.name
        super().save(*args, **kwargs)
