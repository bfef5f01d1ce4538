from decimal import Decimal
from types import SimpleNamespace

import pytest

from apps.catalog.services.pricing import (
    cheapest_variant, format_price, min_price, parse_price, price_as_number,
)


class PriceText:
    def __init__(self, text):
        self.text = text

    def __str__(self):
        return self.text


class Unprintable:
    def __str__(self):
        raise RuntimeError('no string form')


class TestPriceAsNumber:

    @pytest.mark.parametrize('raw, expected', [
        (None, 0),
        ('19.99', 19.99),
        (42, 42),
        (7.25, 7.25),
        (Decimal('12.50'), 12.5),
        (PriceText('7.5'), 7.5),
    ])
    def test_known_representations(self, raw, expected):
        assert price_as_number(raw) == expected

    def test_string_uses_leading_number(self):
        assert price_as_number('19.99 USD') == 19.99
        assert price_as_number('  5') == 5

    @pytest.mark.parametrize('raw', ['', 'abc', 'USD 5', Unprintable(), PriceText('n/a'), True])
    def test_unreadable_values_degrade_to_zero(self, raw):
        assert price_as_number(raw) == 0

    def test_non_finite_values_degrade_to_zero(self):
        assert price_as_number(float('nan')) == 0
        assert price_as_number(float('inf')) == 0
        assert price_as_number(Decimal('NaN')) == 0
        assert price_as_number(Decimal('sNaN')) == 0
        assert price_as_number('1e999') == 0

    def test_huge_int_does_not_raise(self):
        assert price_as_number(10 ** 400) == 0

    def test_parse_price_distinguishes_missing_from_zero(self):
        assert parse_price('0') == 0
        assert parse_price('abc') is None
        assert parse_price(None) is None


class TestFormatPrice:

    def test_none_is_empty(self):
        assert format_price(None) == ''

    def test_string_is_returned_as_is(self):
        assert format_price('9.99') == '9.99'
        assert format_price('abc') == 'abc'

    def test_numbers(self):
        assert format_price(42) == '42'
        assert format_price(42.0) == '42'
        assert format_price(19.99) == '19.99'

    def test_decimal_keeps_its_places(self):
        assert format_price(Decimal('100.00')) == '100.00'

    def test_object_uses_string_form(self):
        assert format_price(PriceText('7.5')) == '7.5'

    def test_failing_conversion_is_empty(self):
        assert format_price(Unprintable()) == ''

    def test_nan_float_does_not_raise(self):
        assert format_price(float('nan')) == 'nan'

    def test_booleans_are_not_prices(self):
        assert format_price(True) == ''
        assert format_price(False) == ''


class TestMinPrice:

    def test_lowest_readable_price(self):
        variants = [
            SimpleNamespace(price='150'),
            SimpleNamespace(price=Decimal('99.90')),
            SimpleNamespace(price='n/a'),
        ]
        assert min_price(variants) == 99.9

    def test_no_prices(self):
        assert min_price([]) == 0
        assert min_price([SimpleNamespace(price=None)]) == 0

    def test_cheapest_variant_keeps_the_original_price(self):
        cheap = SimpleNamespace(price=Decimal('129.90'))
        variants = [SimpleNamespace(price=Decimal('149.00')), cheap, SimpleNamespace(price='n/a')]
        assert cheapest_variant(variants) is cheap
        assert format_price(cheapest_variant(variants).price) == '129.90'

    def test_cheapest_variant_without_prices(self):
        assert cheapest_variant([]) is None
        assert cheapest_variant([SimpleNamespace(price=None)]) is None
