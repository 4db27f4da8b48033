# src/ui/view_state.py

"""Transient view flags of the storefront screen as an immutable value.

Every transition is a pure function taking the current state and
returning a new one, so the screen logic can be unit-tested without a
running terminal.
"""

from dataclasses import dataclass, replace
from enum import Enum, auto

from src.models.product import Product


class CartCloseTrigger(Enum):
    """User gestures that close the cart popup."""

    BACKDROP = auto()
    CLOSE_BUTTON = auto()
    HEADER_ICON = auto()
    ESCAPE = auto()


@dataclass(frozen=True)
class ViewState:
    """Which overlay is showing, what is selected and what is searched.

    The detail sheet has no flag of its own: it is open exactly when a
    product is selected.
    """

    selected_product: Product | None = None
    cart_visible: bool = False
    search_query: str = ""

    @property
    def detail_open(self) -> bool:
        return self.selected_product is not None


def select_product(state: ViewState, product: Product) -> ViewState:
    """Open the detail sheet for *product*."""
    return replace(state, selected_product=product)


def dismiss_detail(state: ViewState) -> ViewState:
    """Close the detail sheet and forget the selection."""
    return replace(state, selected_product=None)


def open_cart(state: ViewState) -> ViewState:
    return replace(state, cart_visible=True)


def close_cart(state: ViewState, trigger: CartCloseTrigger) -> ViewState:
    """Hide the cart popup; every *trigger* has the same effect."""
    return replace(state, cart_visible=False)


def update_search(state: ViewState, text: str) -> ViewState:
    return replace(state, search_query=text)
