"""
Variant selection state for the product detail page.

The selection is derived UI state: it is rebuilt on every request from the
product's variants and the variant id the shopper picked.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional

from apps.catalog.exceptions import NoVariantSelected, VariantNotFound
from .pricing import format_price, price_as_number, min_price

logger = logging.getLogger(__name__)

UNAVAILABLE_NOTICE = 'This product is currently unavailable (no variants).'
SELECT_VARIANT_NOTICE = 'Please select a variant to proceed.'
SELECT_VARIANT_ACTION_NOTICE = 'Please select a variant.'


@dataclass
class CartItem:
    """Normalized record handed to the cart store."""
    id: Any
    name: str
    price: float
    quantity: int = 1
    sku: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class VariantSelection:
    """
    Tracks which variant of a product is selected and what can be done with it.

    Defaults to the first variant. Cart and checkout actions are only allowed
    while the product has variants and one of them is selected.
    """

    def __init__(self, product, variants: Optional[List] = None):
        self.product = product
        if variants is None:
            variants = list(product.variants.filter(is_active=True))
        self.variants = list(variants)
        self.selected = self.variants[0] if self.variants else None

    def select_variant(self, variant):
        """Select ``variant`` as given; membership is not checked."""
        self.selected = variant
        return variant

    def select_variant_by_id(self, variant_id):
        """
        Select the variant whose id matches ``variant_id``.

        Raises VariantNotFound when no variant of this product has that id;
        the previous selection is kept in that case.
        """
        for variant in self.variants:
            if str(variant.id) == str(variant_id):
                self.selected = variant
                return variant
        raise VariantNotFound(variant_id)

    def clear_selection(self):
        self.selected = None

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    def current_price(self) -> Optional[str]:
        if self.selected is None:
            return None
        return format_price(self.selected.price)

    def can_transact(self) -> bool:
        return self.has_variants and self.selected is not None

    def build_cart_item(self, quantity: int = 1) -> CartItem:
        if not self.can_transact():
            raise NoVariantSelected()
        variant = self.selected
        return CartItem(
            id=variant.id,
            name=self.product.name,
            price=price_as_number(variant.price),
            quantity=quantity,
            sku=getattr(variant, 'sku', None),
        )

    @property
    def notice(self) -> Optional[str]:
        """Availability notice to show next to the call-to-action buttons."""
        if not self.has_variants:
            return UNAVAILABLE_NOTICE
        if self.selected is None:
            return SELECT_VARIANT_NOTICE
        return None

    @property
    def action_notice(self) -> str:
        """Message for a cart/checkout action attempted without a selection."""
        if not self.has_variants:
            return UNAVAILABLE_NOTICE
        return SELECT_VARIANT_ACTION_NOTICE

    def min_price(self) -> float:
        return min_price(self.variants)
