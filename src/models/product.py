# src/models/product.py

"""Product data model shared by the catalog, cart and UI."""

from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID, uuid4

from src.config.settings import Settings


@dataclass(frozen=True)
class Product:
    """A single purchasable item in the storefront catalog.

    Equality and hashing only look at ``id``: two products built from
    identical data are still distinct items.
    """

    name: str = field(compare=False)
    price: Decimal = field(compare=False)
    image_url: str = field(default="", compare=False)
    description: str = field(default="", compare=False)
    rating: float = field(default=0.0, compare=False)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValueError("Product name must not be blank")
        if not isinstance(self.price, Decimal):
            # Frozen dataclass: bypass __setattr__ to coerce floats/strings
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(
                f"Product price must be non-negative, got {self.price}"
            )

    @property
    def formatted_price(self) -> str:
        """Price with currency symbol and two decimals, e.g. ``$599.99``."""
        return f"{Settings.CURRENCY_SYMBOL}{self.price:.2f}"

    @property
    def formatted_rating(self) -> str:
        return f"Rating: {self.rating:.1f} ⭐"
