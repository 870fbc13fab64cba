"""
Unit tests for the default catalog.
"""

import pytest

from core.domain.catalog import default_menu, find_item
from core.domain.errors import UnknownItemError


class TestCatalog:
    """Test default_menu and find_item."""

    def test_default_menu_has_five_smoothies(self, menu):
        assert len(menu) == 5
        assert menu[0].name == "Tropical Twist"

    def test_default_menu_returns_fresh_list(self):
        first = default_menu()
        first.clear()

        assert len(default_menu()) == 5

    def test_find_item_ignores_case_and_spaces(self, menu):
        assert find_item(menu, "  berry bliss ").name == "Berry Bliss"

    def test_find_item_unknown(self, menu):
        with pytest.raises(UnknownItemError, match="Mud Shake") as exc_info:
            find_item(menu, "Mud Shake")

        assert isinstance(exc_info.value, LookupError)
