# src/storage/cart.py

"""In-memory shopping cart for a single storefront session."""

import logging
from collections.abc import Callable
from decimal import Decimal

from src.models.catalog import Catalog
from src.models.errors import CartIndexError, UnknownProductError
from src.models.product import Product

logger = logging.getLogger("storefront.cart")

CartObserver = Callable[["Cart"], None]


class Cart:
    """Ordered, duplicate-permitting list of products the user picked.

    Quantity is expressed by repetition: adding the same product twice
    yields two entries.  Observers are called synchronously after every
    change, so anything showing ``count()`` is never out of date once a
    mutating call has returned.
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
        self._entries: list[Product] = []
        self._observers: list[CartObserver] = []

    def add(self, product: Product) -> None:
        """Append *product* to the end of the cart."""
        if product not in self._catalog:
            raise UnknownProductError(
                f"'{product.name}' is not in the catalog",
                product_id=str(product.id),
            )
        self._entries.append(product)
        logger.info(
            "Added '%s' to cart (%d items)",
            product.name,
            len(self._entries),
        )
        self._notify()

    def remove(self, index: int) -> Product:
        """Remove and return the entry at *index*.

        Raises:
            CartIndexError: if *index* is not within ``[0, count())``.
        """
        if not 0 <= index < len(self._entries):
            raise CartIndexError(
                f"Cart index {index} out of range "
                f"(cart has {len(self._entries)} items)",
                index=index,
                count=len(self._entries),
            )
        product = self._entries.pop(index)
        logger.info(
            "Removed '%s' from cart (%d items)",
            product.name,
            len(self._entries),
        )
        self._notify()
        return product

    def empty(self) -> None:
        """Drop every entry, keeping the registered observers."""
        self._entries.clear()
        logger.info("Cart emptied")
        self._notify()

    def count(self) -> int:
        return len(self._entries)

    def items(self) -> tuple[Product, ...]:
        """Return the entries in insertion order."""
        return tuple(self._entries)

    def total(self) -> Decimal:
        """Sum of the prices of every entry."""
        return sum((p.price for p in self._entries), Decimal("0"))

    def subscribe(self, observer: CartObserver) -> None:
        """Register *observer* to be called after every change."""
        self._observers.append(observer)

    def unsubscribe(self, observer: CartObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    def __len__(self) -> int:
        return len(self._entries)
