# src/ui/widgets.py

"""Reusable widgets: image placeholder, product card and cart button."""

import logging

from rich.text import Text
from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, Horizontal, Vertical
from textual.message import Message
from textual.widgets import Button, Label, LoadingIndicator, Static

from src.config.settings import Settings
from src.models.product import Product
from src.services.image_loader import ImageLoader, ImageResult, ImageStatus
from src.ui.transient import TransientFlag

logger = logging.getLogger("storefront.ui")


class ImageView(Container):
    """Show a product image as one of: loading, loaded or failed.

    Terminals cannot draw the picture itself, so a loaded image is
    summarised by its type and size.  A failed image turns the box red.
    """

    def __init__(
        self,
        url: str,
        loader: ImageLoader,
        *,
        classes: str | None = None,
    ) -> None:
        super().__init__(classes=classes)
        self.url = url
        self.loader = loader
        self.result = ImageResult(url=url, status=ImageStatus.PENDING)
        self._spinner = LoadingIndicator()
        self._caption = Static("", classes="image-caption")

    def compose(self) -> ComposeResult:
        yield self._spinner
        yield self._caption

    def on_mount(self) -> None:
        cached = self.loader.cached(self.url)
        if cached is not None:
            self.show_result(cached)
        else:
            self._caption.display = False
            self.run_worker(self._fetch(), exclusive=True, group="image")

    async def _fetch(self) -> None:
        self.show_result(await self.loader.load(self.url))

    def show_result(self, result: ImageResult) -> None:
        """Switch the view to the state described by *result*."""
        self.result = result
        loaded = result.status is ImageStatus.LOADED
        failed = result.status is ImageStatus.FAILED
        self._spinner.display = not (loaded or failed)
        self._caption.display = loaded or failed
        self.set_class(loaded, "-loaded")
        self.set_class(failed, "-failed")
        if failed:
            self._caption.update(
                Text(f"✕ {result.describe()}", style="bold white on red")
            )
        else:
            self._caption.update(f"🖼  {result.describe()}")


class CartButton(Button):
    """Toolbar button showing a cart icon and an item-count badge."""

    def __init__(self, count: int = 0, *, id: str | None = None) -> None:
        super().__init__(self._label_for(count), id=id, classes="cart-button")
        self.count = count

    @staticmethod
    def _label_for(count: int) -> str:
        # The badge is hidden while the cart is empty
        return f"🛒 {count}" if count > 0 else "🛒"

    def update_count(self, count: int) -> None:
        self.count = count
        self.label = self._label_for(count)


class ProductCard(Vertical, can_focus=True):
    """Grid card with image, price, rating, like toggle and add button."""

    BINDINGS = [
        Binding("enter", "select", "Details"),
        Binding("a", "add", "Add to Cart"),
    ]

    class Selected(Message):
        """The user asked to see the product's details."""

        def __init__(self, product: Product) -> None:
            super().__init__()
            self.product = product

    class AddRequested(Message):
        """The user pressed "Add to Cart"."""

        def __init__(self, product: Product) -> None:
            super().__init__()
            self.product = product

    def __init__(self, product: Product, loader: ImageLoader) -> None:
        super().__init__(
            id=f"card_{product.id.hex}", classes="product-card"
        )
        self.product = product
        self.loader = loader
        self.liked = False
        self._like_button = Button("♡", classes="like-btn")
        self._added_label = Label("Added!", classes="added-flash")
        self._pulse = TransientFlag(
            self.set_timer,
            Settings.LIKE_PULSE_DELAY,
            lambda on: self._like_button.set_class(on, "-pulse"),
        )
        self._flash = TransientFlag(
            self.set_timer,
            Settings.ADDED_FLASH_DELAY,
            lambda on: self._added_label.set_class(on, "-visible"),
        )

    def compose(self) -> ComposeResult:
        with Horizontal(classes="card-top"):
            yield ImageView(
                self.product.image_url, self.loader, classes="card-image"
            )
            yield self._like_button
        yield Label(self.product.name, classes="card-name")
        yield Label(self.product.formatted_price, classes="card-price")
        yield Label(self.product.formatted_rating, classes="card-rating")
        with Horizontal(classes="card-actions"):
            yield Button("Add to Cart", variant="primary", classes="add-btn")
            yield self._added_label

    def on_click(self, event: events.Click) -> None:
        self.action_select()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if event.button.has_class("like-btn"):
            self.toggle_like()
        elif event.button.has_class("add-btn"):
            self.action_add()

    def on_unmount(self) -> None:
        self._pulse.cancel()
        self._flash.cancel()

    def action_select(self) -> None:
        self.post_message(self.Selected(self.product))

    def action_add(self) -> None:
        self.post_message(self.AddRequested(self.product))
        self._flash.trigger()

    def toggle_like(self) -> None:
        self.liked = not self.liked
        self._like_button.label = "♥" if self.liked else "♡"
        self._like_button.set_class(self.liked, "-liked")
        self._pulse.trigger()
        logger.debug(
            "%s '%s'", "Liked" if self.liked else "Unliked", self.product.name
        )
