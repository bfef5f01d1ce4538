import logging

from django.contrib import messages
from django.db.models import Prefetch
from django.shortcuts import render, redirect, get_object_or_404
from django.urls import reverse
from django.views.decorators.http import require_http_methods

from .conf import get_setting
from .exceptions import NoVariantSelected, VariantNotFound
from .models import Product, Variant
from .services import VariantSelection, get_cart_store
from .services.pricing import cheapest_variant, format_price
from .services import showcase

logger = logging.getLogger(__name__)


def _get_product(slug):
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
    return get_object_or_404(queryset, slug=slug)


def _build_selection(product, variant_id):
    selection = VariantSelection(product, variants=product.variants.all())
    if variant_id:
        try:
            selection.select_variant_by_id(variant_id)
        except VariantNotFound:
            logger.info("Unknown variant %s requested for %s", variant_id, product.slug)
            selection.clear_selection()
    return selection


def product_list(request):
    """Home page: active products with their starting price."""
    products = Product.objects.filter(is_active=True).prefetch_related(
        'images',
        Prefetch('variants', queryset=Variant.objects.filter(is_active=True)),
    )
    placeholder = get_setting('PLACEHOLDER_IMAGE_URL')
    entries = []
    for product in products:
        cheapest = cheapest_variant(product.variants.all())
        entries.append({
            'product': product,
            'cover_url': product.get_cover_url(placeholder),
            'from_price': format_price(cheapest.price) if cheapest else None,
        })
    return render(request, 'catalog/product_list.html', {
        'entries': entries,
        'currency': get_setting('CURRENCY_SYMBOL'),
    })


@require_http_methods(["GET", "POST"])
def product_detail(request, slug):
    """
    Product page.

    GET ?variant=<id> selects a variant, ?image=<id> picks the main image.
    POST with ``action`` (add_to_cart, buy_now, wishlist) and ``variant``
    performs the action and redirects back to the page.
    """
    product = _get_product(slug)

    if request.method == 'POST':
        selection = _build_selection(product, request.POST.get('variant'))
        return _handle_action(request, product, selection, request.POST.get('action'))

    selection = _build_selection(product, request.GET.get('variant'))

    placeholder = get_setting('PLACEHOLDER_IMAGE_URL')
    cover_url = product.get_cover_url(placeholder)
    images = list(product.images.all())
    main_image_url = cover_url
    image_id = request.GET.get('image')
    if image_id:
        for image in images:
            if str(image.id) == image_id and image.url:
                main_image_url = image.url

    reviews = showcase.get_reviews()
    avg_rating = showcase.average_rating(reviews)

    context = {
        'product': product,
        'ancestors': product.category.get_ancestors() if product.category else [],
        'images': images,
        'main_image_url': main_image_url,
        'selection': selection,
        'selected': selection.selected,
        'current_price': selection.current_price(),
        'can_transact': selection.can_transact(),
        'notice': selection.notice,
        'currency': get_setting('CURRENCY_SYMBOL'),
        'reviews': reviews,
        'avg_rating': avg_rating,
        'avg_stars': showcase.star_bar(avg_rating),
        'recommended': showcase.get_recommendations(cover_url),
    }
    return render(request, 'catalog/product_detail.html', context)


def _handle_action(request, product, selection, action):
    url = reverse('catalog:product_detail', kwargs={'slug': product.slug})
    if selection.selected is not None:
        url = f"{url}?variant={selection.selected.id}"

    if action == 'wishlist':
        messages.info(request, f"Toggled wishlist for {product.name}")
        return redirect(url)

    if action not in ('add_to_cart', 'buy_now'):
        messages.error(request, 'Unknown action.')
        return redirect(url)

    try:
        item = selection.build_cart_item()
    except NoVariantSelected:
        messages.warning(request, selection.action_notice)
        return redirect(url)

    if action == 'add_to_cart':
        get_cart_store(request).add_to_cart(item)
        messages.success(request, f"Added {product.name} ({item.sku}) to your cart.")
    else:
        logger.info("Checkout requested for %s (%s)", product.slug, item.sku)
        messages.info(request, f"Proceeding to checkout for {product.name} ({item.sku}).")
    return redirect(url)
