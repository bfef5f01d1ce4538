"""
Cart stores the storefront can hand cart items to.

The product page never reaches for a global cart: it asks
``get_cart_store(request)`` for the store configured in
``STOREFRONT['CART_STORE']`` and calls ``add_to_cart`` on it.
"""

import logging
from typing import Dict, List

from django.utils.module_loading import import_string

from apps.catalog.conf import get_setting

logger = logging.getLogger(__name__)


class CartStore:
    """Interface of a cart the storefront can add items to."""

    def __init__(self, request):
        self.request = request

    def add_to_cart(self, item):
        raise NotImplementedError

    def items(self) -> List[Dict]:
        raise NotImplementedError


class SessionCartStore(CartStore):
    """Cart kept in the Django session, keyed by variant id."""
    session_key = 'cart'

    def _cart(self) -> Dict[str, Dict]:
        return self.request.session.setdefault(self.session_key, {})

    def add_to_cart(self, item):
        cart = self._cart()
        key = str(item.id)
        if key in cart:
            cart[key]['quantity'] += item.quantity
        else:
            cart[key] = item.to_dict()
        self.request.session.modified = True
        logger.info("Added %s x%s to cart", key, item.quantity)
        return cart[key]

    def items(self) -> List[Dict]:
        return list(self.request.session.get(self.session_key, {}).values())


def get_cart_store(request) -> CartStore:
    store_class = import_string(get_setting('CART_STORE'))
    return store_class(request)
