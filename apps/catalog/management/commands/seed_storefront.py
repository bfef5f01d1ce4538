"""
Create demo catalog data for the storefront.
Run with: python manage.py seed_storefront
"""
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from apps.catalog.models import (
    Brand,
    Category,
    Product,
    ProductImage,
    Attribute,
    AttributeValue,
    Variant,
)


class Command(BaseCommand):
    help = 'Create demo brands, categories, products and variants'

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write("Creating attributes...")

        color, _ = Attribute.objects.get_or_create(
            slug='color',
            defaults={'name': 'Color', 'datatype': 'color', 'display_order': 1}
        )
        size, _ = Attribute.objects.get_or_create(
            slug='size',
            defaults={'name': 'Size', 'datatype': 'number', 'display_order': 2}
        )

        colors = [('Black', '#000000'), ('White', '#FFFFFF'), ('Blue', '#0000FF')]
        for i, (name, hex_value) in enumerate(colors):
            AttributeValue.objects.get_or_create(
                attribute=color,
                value=name.lower(),
                defaults={'display_value': name, 'color_hex': hex_value, 'display_order': i}
            )

        for i, s in enumerate(['40', '41', '42', '43']):
            AttributeValue.objects.get_or_create(
                attribute=size,
                value=s,
                defaults={'display_order': i}
            )

        self.stdout.write("Creating brands and categories...")

        brand, _ = Brand.objects.get_or_create(slug='stride', defaults={'name': 'Stride'})
        footwear, _ = Category.objects.get_or_create(slug='footwear', defaults={'name': 'Footwear'})
        running, _ = Category.objects.get_or_create(
            slug='running',
            defaults={'name': 'Running', 'parent': footwear}
        )

        self.stdout.write("Creating products...")

        runner, _ = Product.objects.get_or_create(
            slug='trail-runner',
            defaults={
                'name': 'Trail Runner',
                'description': 'Lightweight trail running shoe',
                'brand': brand,
                'category': running,
            }
        )
        Product.objects.get_or_create(
            slug='road-racer',
            defaults={
                'name': 'Road Racer',
                'description': 'Coming soon',
                'brand': brand,
                'category': running,
            }
        )

        if not runner.images.exists():
            ProductImage.objects.create(
                product=runner,
                image_url='https://picsum.photos/seed/trail-runner/800/800',
                is_featured=True,
            )
            ProductImage.objects.create(
                product=runner,
                image_url='https://picsum.photos/seed/trail-runner-side/800/800',
                display_order=1,
            )

        self.stdout.write("Creating variants...")

        order = 0
        for color_value in color.values.all()[:2]:
            for size_value in size.values.all():
                sku = f'TR-{color_value.value[:3].upper()}-{size_value.value}'
                variant, created = Variant.objects.get_or_create(
                    sku=sku,
                    defaults={
                        'product': runner,
                        'price': Decimal('129.90'),
                        'stock_quantity': 10,
                        'display_order': order,
                    }
                )
                if created:
                    variant.attribute_values.add(color_value, size_value)
                order += 1

        self.stdout.write(self.style.SUCCESS(
            f"Sample data created: {Product.objects.count()} products, "
            f"{Variant.objects.count()} variants, "
            f"{AttributeValue.objects.count()} attribute values"
        ))
