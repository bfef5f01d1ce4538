from .attribute_value import AttributeValueService
from .cart import CartStore, SessionCartStore, get_cart_store
from .pricing import format_price, price_as_number, min_price
from .variant_selection import CartItem, VariantSelection

__all__ = [
    'AttributeValueService',
    'CartStore',
    'SessionCartStore',
    'get_cart_store',
    'format_price',
    'price_as_number',
    'min_price',
    'CartItem',
    'VariantSelection',
]
