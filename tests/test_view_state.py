# tests/test_view_state.py

"""Tests for the pure view-state transitions."""

import unittest
from decimal import Decimal

from src.models.product import Product
from src.ui.view_state import (
    CartCloseTrigger,
    ViewState,
    close_cart,
    dismiss_detail,
    open_cart,
    select_product,
    update_search,
)


class TestViewState(unittest.TestCase):
    """Transitions return new states and never mutate the input."""

    def setUp(self) -> None:
        self.product = Product(name="Sunglasses", price=Decimal("349.95"))

    def test_defaults(self) -> None:
        state = ViewState()
        self.assertIsNone(state.selected_product)
        self.assertFalse(state.detail_open)
        self.assertFalse(state.cart_visible)
        self.assertEqual(state.search_query, "")

    def test_select_opens_detail(self) -> None:
        state = select_product(ViewState(), self.product)
        self.assertTrue(state.detail_open)
        self.assertIs(state.selected_product, self.product)

    def test_dismiss_clears_selection(self) -> None:
        state = dismiss_detail(select_product(ViewState(), self.product))
        self.assertFalse(state.detail_open)
        self.assertIsNone(state.selected_product)

    def test_transitions_do_not_mutate(self) -> None:
        original = ViewState()
        select_product(original, self.product)
        open_cart(original)
        update_search(original, "shoes")
        self.assertEqual(original, ViewState())

    def test_open_and_close_cart(self) -> None:
        state = open_cart(ViewState())
        self.assertTrue(state.cart_visible)
        for trigger in CartCloseTrigger:
            with self.subTest(trigger=trigger):
                self.assertFalse(close_cart(state, trigger).cart_visible)

    def test_close_cart_when_already_closed(self) -> None:
        state = close_cart(ViewState(), CartCloseTrigger.BACKDROP)
        self.assertFalse(state.cart_visible)

    def test_fields_are_independent(self) -> None:
        """Changing one flag leaves the others untouched."""
        state = update_search(ViewState(), "watch")
        state = select_product(state, self.product)
        state = open_cart(state)
        state = dismiss_detail(state)
        self.assertEqual(state.search_query, "watch")
        self.assertTrue(state.cart_visible)
        self.assertFalse(state.detail_open)

    def test_update_search_replaces_text(self) -> None:
        state = update_search(update_search(ViewState(), "sh"), "shoe")
        self.assertEqual(state.search_query, "shoe")


if __name__ == "__main__":
    unittest.main()
