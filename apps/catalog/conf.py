"""
Storefront settings, read from ``settings.STOREFRONT`` with defaults.
"""

from django.conf import settings

DEFAULTS = {
    'CART_STORE': 'apps.catalog.services.cart.SessionCartStore',
    'PLACEHOLDER_IMAGE_URL': '/static/catalog/placeholder.svg',
    'CURRENCY_SYMBOL': '$',
}


def get_setting(name):
    user_settings = getattr(settings, 'STOREFRONT', {})
    if name in user_settings:
        return user_settings[name]
    return DEFAULTS[name]
