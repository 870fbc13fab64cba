"""
Unit tests for the generic Basket.
"""

from decimal import Decimal
from types import SimpleNamespace

import pytest

from core.domain.basket import Basket
from core.domain.errors import (
    InvalidPriceError,
    ItemTypeMismatchError,
    NotPricedItemError,
    ShopError,
)
from core.domain.models import Juice, Smoothie


class TestBasketAppend:
    """Test Basket.append."""

    def test_append_preserves_order_and_grows_by_one(self, cheap_smoothies):
        basket = Basket(Smoothie)

        for expected_len, smoothie in enumerate(cheap_smoothies, start=1):
            before = basket.items
            basket.append(smoothie)
            assert len(basket) == expected_len
            assert basket.items[:-1] == before
            assert basket.items[-1] is smoothie

    def test_duplicates_allowed(self, menu):
        basket = Basket(Smoothie)
        basket.append(menu[0])
        basket.append(menu[0])

        assert len(basket) == 2

    def test_rejects_non_priced_value(self):
        basket = Basket()

        with pytest.raises(NotPricedItemError):
            basket.append("Berry Bliss")
        assert len(basket) == 0

    def test_not_priced_error_is_type_error(self):
        with pytest.raises(TypeError):
            Basket().append(42)

    def test_rejects_other_item_type(self, menu, orange_juice):
        basket = Basket(Smoothie)
        basket.append(menu[0])

        with pytest.raises(ItemTypeMismatchError) as exc_info:
            basket.append(orange_juice)

        assert isinstance(exc_info.value, ShopError)
        assert exc_info.value.expected is Smoothie
        assert len(basket) == 1

    def test_first_item_fixes_type_when_unspecified(self, menu, orange_juice):
        basket = Basket()
        basket.append(orange_juice)

        assert basket.item_type is Juice
        with pytest.raises(ItemTypeMismatchError):
            basket.append(menu[0])

    def test_accepts_any_structural_priced_item(self):
        basket = Basket()
        basket.append(SimpleNamespace(name="Gift Card", price=Decimal("10.00")))

        assert basket.total_price() == Decimal("10.00")


class TestBasketQueries:
    """Test Basket aggregates and listing."""

    def test_total_empty_is_zero(self):
        basket = Basket(Smoothie)

        assert basket.total_price() == 0
        assert not basket

    def test_total_of_cheap_smoothies(self, cheap_smoothies):
        basket = Basket(Smoothie)
        for smoothie in cheap_smoothies:
            basket.append(smoothie)

        assert basket.total_price() == Decimal("5.75")

    def test_total_matches_sum_of_prices(self, menu):
        basket = Basket(Smoothie)
        for smoothie in menu:
            basket.append(smoothie)

        assert basket.total_price() == sum((s.price for s in menu), Decimal("0"))

    def test_total_is_not_rounded(self):
        basket = Basket()
        basket.append(SimpleNamespace(name="Sip", price=Decimal("0.125")))
        basket.append(SimpleNamespace(name="Sip", price=Decimal("0.125")))

        assert basket.total_price() == Decimal("0.250")

    def test_printable_lines_in_insertion_order(self, cheap_smoothies):
        basket = Basket(Smoothie)
        for smoothie in cheap_smoothies:
            basket.append(smoothie)

        assert basket.printable_lines() == [
            "Mini Mango: 1.50",
            "Kiwi Kick: 2.00",
            "Honey Oat: 2.25",
        ]

    def test_printable_lines_do_not_mutate(self, cheap_smoothies):
        basket = Basket(Smoothie)
        basket.append(cheap_smoothies[0])

        basket.printable_lines()
        basket.printable_lines()

        assert len(basket) == 1

    def test_items_snapshot_is_immutable(self, menu):
        basket = Basket(Smoothie)
        basket.append(menu[0])

        snapshot = basket.items
        basket.append(menu[1])

        assert isinstance(snapshot, tuple)
        assert len(snapshot) == 1
        assert list(basket) == menu[:2]


class TestBasketStructuralPrices:
    """Structural items with plain-number prices."""

    def test_float_prices_total_exactly(self):
        basket = Basket()
        for price in (1.50, 2.00, 2.25):
            basket.append(SimpleNamespace(name="Cup", price=price))

        assert basket.total_price() == Decimal("5.75")
        assert basket.printable_lines() == ["Cup: 1.50", "Cup: 2.00", "Cup: 2.25"]

    def test_int_prices(self):
        basket = Basket()
        basket.append(SimpleNamespace(name="Refill", price=2))
        basket.append(SimpleNamespace(name="Refill", price=3))

        assert basket.total_price() == Decimal("5")

    def test_negative_price_rejected(self):
        basket = Basket()

        with pytest.raises(InvalidPriceError) as exc_info:
            basket.append(SimpleNamespace(name="Refund", price=Decimal("-3")))

        assert isinstance(exc_info.value, ShopError)
        assert isinstance(exc_info.value, ValueError)
        assert len(basket) == 0
        assert basket.total_price() == 0

    def test_non_finite_price_rejected(self):
        with pytest.raises(InvalidPriceError):
            Basket().append(SimpleNamespace(name="Odd", price=float("nan")))
        with pytest.raises(InvalidPriceError):
            Basket().append(SimpleNamespace(name="Odd", price=Decimal("Infinity")))

    def test_non_numeric_price_rejected(self):
        basket = Basket()

        with pytest.raises(NotPricedItemError):
            basket.append(SimpleNamespace(name="Text", price="4.25"))
        with pytest.raises(NotPricedItemError):
            basket.append(SimpleNamespace(name="Flag", price=True))
        assert len(basket) == 0

    def test_rejected_item_does_not_fix_type(self, menu):
        basket = Basket()

        with pytest.raises(InvalidPriceError):
            basket.append(SimpleNamespace(name="Refund", price=-1))
        basket.append(menu[0])

        assert basket.item_type is Smoothie
