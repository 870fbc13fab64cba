"""
Pytest configuration and shared fixtures.
"""

import os
from decimal import Decimal

import pytest

from core.domain.catalog import default_menu
from core.domain.models import Juice, Smoothie


@pytest.fixture
def menu():
    """The default five-smoothie menu."""
    return default_menu()


@pytest.fixture
def cheap_smoothies():
    """Three smoothies priced 1.50, 2.00 and 2.25."""
    return [
        Smoothie(name="Mini Mango", price=Decimal("1.50"), is_vegan=True, ingredients=("mango",)),
        Smoothie(name="Kiwi Kick", price=Decimal("2.00"), is_vegan=True),
        Smoothie(name="Honey Oat", price=Decimal("2.25"), ingredients=("oats", "honey", "milk")),
    ]


@pytest.fixture
def orange_juice():
    return Juice(name="Orange Juice", price=Decimal("2.50"), size_ml=500)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SMOOTHIE_SHOP_* variables from leaking into tests."""
    for key in list(os.environ):
        if key.upper().startswith("SMOOTHIE_SHOP_"):
            monkeypatch.delenv(key, raising=False)
