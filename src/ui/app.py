# src/ui/app.py

"""Terminal UI for the storefront: product grid, search, detail and cart."""

import logging

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Grid, Horizontal, VerticalScroll
from textual.widgets import Button, Footer, Header, Input, Static

from src.config.settings import Settings
from src.models.catalog import Catalog, build_sample_catalog
from src.models.errors import CartError
from src.models.product import Product
from src.services.image_loader import ImageLoader
from src.services.storefront import Storefront
from src.storage.cart import Cart
from src.ui.screens import CartPopupScreen, ProductDetailScreen
from src.ui.view_state import CartCloseTrigger
from src.ui.widgets import CartButton, ProductCard

logger = logging.getLogger("storefront.ui")


class StorefrontApp(App[None]):
    """Single-screen shop with a searchable product grid and a cart."""

    CSS_PATH = "styles.css"
    TITLE = Settings.APP_TITLE

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("c", "open_cart", "Cart"),
        Binding("slash", "focus_search", "Search"),
    ]

    def __init__(
        self,
        catalog: Catalog | None = None,
        image_loader: ImageLoader | None = None,
        initial_query: str = "",
    ) -> None:
        super().__init__()
        self.settings = Settings()
        self.catalog = catalog if catalog is not None else build_sample_catalog()
        self.image_loader = (
            image_loader if image_loader is not None else ImageLoader()
        )
        self.storefront = Storefront(self.catalog)
        self.storefront.update_search(initial_query)
        self._cart_button = CartButton(
            self.storefront.cart_count(), id="cart_btn"
        )

    def compose(self) -> ComposeResult:
        """Build the widget tree for the storefront."""
        yield Header()
        with Horizontal(id="top_bar"):
            yield Input(
                value=self.storefront.state.search_query,
                placeholder=self.settings.SEARCH_PLACEHOLDER,
                id="search_input",
            )
            yield self._cart_button
        yield Static("", id="status")
        with VerticalScroll(id="product_scroll"):
            yield Grid(
                *(
                    ProductCard(product, self.image_loader)
                    for product in self.catalog
                ),
                id="product_grid",
            )
            yield Static("", id="empty_state")
        yield Footer()

    def on_mount(self) -> None:
        self.storefront.cart.subscribe(self._on_cart_changed)
        self.apply_filter()

    # --- Search ---

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search_input":
            self.storefront.update_search(event.value)
            self.apply_filter()

    def apply_filter(self) -> None:
        """Show the cards matching the current query and hide the rest."""
        visible = {p.id for p in self.storefront.visible_products()}
        for card in self.query(ProductCard):
            card.display = card.product.id in visible

        query = self.storefront.state.search_query.strip()
        empty_state = self.query_one("#empty_state", Static)
        empty_state.display = not visible
        empty_state.update(
            f"No products match '{query}'" if not visible else ""
        )
        self.query_one("#status", Static).update(
            f"Showing {len(visible)} of {len(self.catalog)} products"
        )

    def action_focus_search(self) -> None:
        self.query_one("#search_input", Input).focus()

    # --- Cart ---

    def on_product_card_add_requested(
        self, event: ProductCard.AddRequested
    ) -> None:
        try:
            self.storefront.add_to_cart(event.product)
        except CartError as exc:
            logger.error("Add to cart failed: %s", exc, exc_info=True)
            self.notify(exc.message, severity="error")

    def _on_cart_changed(self, cart: Cart) -> None:
        self._cart_button.update_count(cart.count())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "cart_btn":
            self.action_open_cart()

    def action_open_cart(self) -> None:
        """Show the cart popup unless an overlay is already open."""
        state = self.storefront.state
        if state.cart_visible or state.detail_open:
            return
        self.storefront.open_cart()
        self.push_screen(
            CartPopupScreen(self.storefront.cart, self.image_loader),
            callback=self._on_cart_closed,
        )

    def _on_cart_closed(self, trigger: CartCloseTrigger | None) -> None:
        self.storefront.close_cart(trigger or CartCloseTrigger.ESCAPE)

    # --- Detail sheet ---

    def on_product_card_selected(self, event: ProductCard.Selected) -> None:
        self.show_product(event.product)

    def show_product(self, product: Product) -> None:
        """Open the detail sheet for *product*."""
        state = self.storefront.state
        if state.detail_open or state.cart_visible:
            return
        self.storefront.select_product(product)
        self.push_screen(
            ProductDetailScreen(product, self.image_loader),
            callback=self._on_detail_closed,
        )

    def _on_detail_closed(self, _result: None) -> None:
        self.storefront.dismiss_detail()
