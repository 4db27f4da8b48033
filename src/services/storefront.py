# src/services/storefront.py

"""Session coordinator tying catalog, search, cart and view state together."""

import logging
from collections.abc import Sequence

from src.filters.product_filter import ProductFilter
from src.models.catalog import Catalog
from src.models.product import Product
from src.storage.cart import Cart
from src.ui import view_state as vs
from src.ui.view_state import CartCloseTrigger, ViewState

logger = logging.getLogger("storefront.session")


class Storefront:
    """State of one shopping session.

    Owns the cart and the current :class:`ViewState`; the catalog is
    shared by reference.  The UI forwards user events here and re-reads
    :meth:`visible_products` and the view flags to render.
    """

    def __init__(self, catalog: Catalog, cart: Cart | None = None) -> None:
        self.catalog = catalog
        self.cart = cart if cart is not None else Cart(catalog)
        self.state = ViewState()

    # --- Derived data ---

    def visible_products(self) -> Sequence[Product]:
        """Catalog products matching the current search query."""
        return ProductFilter.filter_by_query(
            self.catalog.list_products(), self.state.search_query
        )

    def cart_count(self) -> int:
        return self.cart.count()

    # --- Transitions ---

    def select_product(self, product: Product) -> None:
        self.state = vs.select_product(self.state, product)
        logger.debug("Selected '%s'", product.name)

    def dismiss_detail(self) -> None:
        self.state = vs.dismiss_detail(self.state)
        logger.debug("Detail sheet dismissed")

    def open_cart(self) -> None:
        self.state = vs.open_cart(self.state)
        logger.debug("Cart popup opened (%d items)", self.cart.count())

    def close_cart(self, trigger: CartCloseTrigger) -> None:
        self.state = vs.close_cart(self.state, trigger)
        logger.debug("Cart popup closed via %s", trigger.name.lower())

    def update_search(self, text: str) -> None:
        self.state = vs.update_search(self.state, text)

    def add_to_cart(self, product: Product) -> None:
        self.cart.add(product)

    def reset(self) -> None:
        """Start a fresh session: default view flags and an empty cart.

        The cart object is emptied in place so its observers, such as the
        header badge, keep tracking it.
        """
        self.cart.empty()
        self.state = ViewState()
        logger.info("Session reset")
