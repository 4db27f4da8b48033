# src/ui/screens.py

"""Overlay screens: the product detail sheet and the cart popup."""

import logging

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widget import Widget
from textual.widgets import Button, Label, Static

from src.config.settings import Settings
from src.models.errors import CartError
from src.models.product import Product
from src.services.image_loader import ImageLoader
from src.storage.cart import Cart
from src.ui.view_state import CartCloseTrigger
from src.ui.widgets import CartButton, ImageView

logger = logging.getLogger("storefront.ui")


class ProductDetailScreen(ModalScreen[None]):
    """Sheet with the full description of one product."""

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, product: Product, loader: ImageLoader) -> None:
        super().__init__()
        self.product = product
        self.loader = loader

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="detail_sheet"):
            yield ImageView(
                self.product.image_url, self.loader, classes="detail-image"
            )
            yield Label(self.product.name, id="detail_name")
            yield Label(self.product.formatted_price, id="detail_price")
            yield Label(self.product.formatted_rating, id="detail_rating")
            yield Static(self.product.description, id="detail_description")
            with Horizontal(id="detail_actions"):
                yield Button("Buy Now", variant="success", id="buy_btn")
                yield Button("Close", id="detail_close_btn")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "buy_btn":
            # No checkout exists; the purchase is only acknowledged
            logger.info("Buy Now pressed for '%s'", self.product.name)
            self.notify(f"Thanks! '{self.product.name}' is on its way (demo)")
        elif event.button.id == "detail_close_btn":
            self.dismiss(None)

    def action_close(self) -> None:
        self.dismiss(None)


class CartPanel(Vertical):
    """The popup body; clicks inside it must not reach the backdrop."""

    def on_click(self, event: events.Click) -> None:
        event.stop()


class CartPopupScreen(ModalScreen[CartCloseTrigger]):
    """Cart contents shown over a dimmed backdrop.

    Dismisses with the :class:`CartCloseTrigger` that closed it: a click
    on the backdrop, the header cart icon, the Close button or Escape.
    """

    BINDINGS = [Binding("escape", "close", "Close")]

    def __init__(self, cart: Cart, loader: ImageLoader) -> None:
        super().__init__()
        self.cart = cart
        self.loader = loader

    def compose(self) -> ComposeResult:
        with CartPanel(id="cart_panel"):
            with Horizontal(id="cart_header"):
                yield CartButton(self.cart.count(), id="popup_cart_icon")
                yield Label("Your Cart", id="cart_title")
            with VerticalScroll(id="cart_items"):
                yield from self._build_rows()
            yield Label(self._total_text(), id="cart_total")
            yield Button("Close", variant="primary", id="cart_close_btn")

    def _build_rows(self) -> list[Widget]:
        items = self.cart.items()
        if not items:
            return [Static("Your cart is empty", classes="cart-empty")]
        rows: list[Widget] = []
        for index, product in enumerate(items):
            rows.append(
                Horizontal(
                    ImageView(
                        product.image_url, self.loader, classes="row-image"
                    ),
                    Vertical(
                        Label(product.name, classes="row-name"),
                        Label(product.formatted_price, classes="row-price"),
                        Label(product.formatted_rating, classes="row-rating"),
                        classes="row-text",
                    ),
                    Button("Remove", classes="remove-btn", name=str(index)),
                    classes="cart-row",
                )
            )
        return rows

    def _total_text(self) -> str:
        return (
            f"{self.cart.count()} item(s) · Total "
            f"{Settings.CURRENCY_SYMBOL}{self.cart.total():.2f}"
        )

    async def refresh_items(self) -> None:
        """Rebuild the rows, badge and total from the cart."""
        container = self.query_one("#cart_items", VerticalScroll)
        await container.remove_children()
        await container.mount_all(self._build_rows())
        self.query_one("#popup_cart_icon", CartButton).update_count(
            self.cart.count()
        )
        self.query_one("#cart_total", Label).update(self._total_text())

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.id == "popup_cart_icon":
            self.dismiss(CartCloseTrigger.HEADER_ICON)
        elif event.button.id == "cart_close_btn":
            self.dismiss(CartCloseTrigger.CLOSE_BUTTON)
        elif event.button.has_class("remove-btn"):
            await self._remove_entry(int(event.button.name or "-1"))

    async def _remove_entry(self, index: int) -> None:
        try:
            removed = self.cart.remove(index)
        except CartError as exc:
            logger.error("Cart removal failed: %s", exc, exc_info=True)
            self.notify(exc.message, severity="error")
            return
        self.notify(f"Removed '{removed.name}'")
        await self.refresh_items()

    def on_click(self, event: events.Click) -> None:
        # Only clicks outside CartPanel get here
        self.dismiss(CartCloseTrigger.BACKDROP)

    def action_close(self) -> None:
        self.dismiss(CartCloseTrigger.ESCAPE)
