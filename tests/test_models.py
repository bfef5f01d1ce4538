import pytest

from apps.catalog.models import Category, Product, ProductImage, Variant


@pytest.mark.django_db
class TestProductImages:

    def test_first_featured_image_wins(self, product):
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/a.jpg', display_order=0)
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/b.jpg', display_order=1, is_featured=True)
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/c.jpg', display_order=2, is_featured=True)
        assert product.get_cover_url('/placeholder.svg') == 'https://cdn.example.com/b.jpg'

    def test_first_image_without_featured(self, product):
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/b.jpg', display_order=1)
        ProductImage.objects.create(product=product, image_url='https://cdn.example.com/a.jpg', display_order=0)
        assert product.get_cover_url('/placeholder.svg') == 'https://cdn.example.com/a.jpg'

    def test_placeholder_without_images(self, product):
        assert product.get_cover_url('/placeholder.svg') == '/placeholder.svg'

    def test_alt_text_defaults_to_product_name(self, product):
        image = ProductImage.objects.create(product=product, image_url='https://cdn.example.com/a.jpg')
        assert image.alt_text == 'Trail Runner'
        assert image.thumbnail_url == image.url == 'https://cdn.example.com/a.jpg'


@pytest.mark.django_db
def test_slug_generated_from_name():
    assert Product.objects.create(name='Road Racer').slug == 'road-racer'


@pytest.mark.django_db
def test_category_full_path_and_unique_slug(category):
    twin = Category.objects.create(name='Running', parent=category.parent)
    assert category.full_path == 'Footwear > Running'
    assert twin.slug == 'running-1'


@pytest.mark.django_db
def test_variant_options_label(variants, black):
    size = black.attribute.__class__.objects.create(name='Size', slug='size', display_order=1)
    forty_two = size.values.create(value='42')
    variants[0].attribute_values.add(forty_two, black)
    assert variants[0].get_options_label() == 'Black / 42'


@pytest.mark.django_db
def test_variant_options_label_uses_prefetched_values(variants, black, django_assert_num_queries):
    size = black.attribute.__class__.objects.create(name='Size', slug='size', display_order=1)
    variants[0].attribute_values.add(size.values.create(value='42'), black)
    variant = Variant.objects.prefetch_related('attribute_values__attribute').get(pk=variants[0].pk)
    with django_assert_num_queries(0):
        assert variant.get_options_label() == 'Black / 42'
