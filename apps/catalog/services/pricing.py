"""
Price normalization helpers.

Prices reach the storefront in several shapes: ``Decimal`` from the ORM,
strings from JSON payloads or query strings, ints/floats from computed
values, and occasionally arbitrary objects that only know how to turn
themselves into text. Each representation gets its own rule below.

None of these helpers raise: a price that cannot be read degrades to ``0``
(numeric) or ``""`` (display).
"""

import logging
import math
import re
from decimal import Decimal
from functools import singledispatch
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

# Leading numeric prefix, so "19.99 USD" reads as 19.99
NUMBER_PREFIX_RE = re.compile(r'^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)')


def _parse_text(text: str) -> Optional[float]:
    match = NUMBER_PREFIX_RE.match(text)
    if not match:
        return None
    return _finite(float(match.group(1)))


def _finite(value: float) -> Optional[float]:
    return value if math.isfinite(value) else None


@singledispatch
def parse_price(raw) -> Optional[float]:
    """
    Read ``raw`` as a float, or return None when it is not a number.

    Objects without a dedicated rule are read through their string form.
    """
    if raw is None:
        return None
    try:
        text = str(raw)
    except Exception:
        logger.debug("Price %r has no usable string form", type(raw))
        return None
    return _parse_text(text)


@parse_price.register(str)
def _parse_str(raw):
    return _parse_text(raw)


@parse_price.register(bool)
def _parse_bool(raw):
    return None


@parse_price.register(int)
@parse_price.register(float)
def _parse_native_number(raw):
    try:
        return _finite(float(raw))
    except OverflowError:
        return None


@parse_price.register(Decimal)
def _parse_decimal(raw):
    try:
        return _finite(float(raw))
    except (ValueError, OverflowError):
        return None


def price_as_number(raw) -> float:
    """
    Best-effort conversion of a price to a float.

    >>> price_as_number("19.99")
    19.99
    >>> price_as_number(None)
    0
    """
    value = parse_price(raw)
    if value is None:
        return 0
    return value


@singledispatch
def format_price(raw) -> str:
    """
    Display string for a price. ``None`` and failing conversions give "".
    """
    if raw is None:
        return ''
    try:
        return str(raw)
    except Exception:
        logger.debug("Price %r has no usable string form", type(raw))
        return ''


@format_price.register(str)
def _format_str(raw):
    return raw


@format_price.register(bool)
def _format_bool(raw):
    return ''


@format_price.register(float)
def _format_float(raw):
    if math.isfinite(raw) and raw.is_integer():
        return str(int(raw))
    return repr(raw)


def cheapest_variant(variants: Iterable):
    """Variant with the lowest readable price, None when none has one."""
    best, best_value = None, None
    for variant in variants:
        value = parse_price(getattr(variant, 'price', None))
        if value is not None and (best_value is None or value < best_value):
            best, best_value = variant, value
    return best


def min_price(variants: Iterable) -> float:
    """Lowest readable price among ``variants``, 0 when none has one."""
    variant = cheapest_variant(variants)
    if variant is None:
        return 0
    return price_as_number(variant.price)
