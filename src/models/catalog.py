# src/models/catalog.py

"""Immutable product catalog and the built-in sample data."""

from collections.abc import Iterable, Iterator
from decimal import Decimal
from uuid import UUID

from src.models.product import Product

# Picsum URLs are seeded so every run shows the same pictures.
_SAMPLE_PRODUCTS: tuple[dict[str, str | float], ...] = (
    {
        "name": "Designer Handbag",
        "price": "599.99",
        "image_url": "https://picsum.photos/seed/handbag/300/200",
        "description": (
            "Elegant designer handbag made from premium leather. "
            "Perfect for any occasion."
        ),
        "rating": 4.5,
    },
    {
        "name": "Sports Shoes",
        "price": "899.50",
        "image_url": "https://picsum.photos/seed/sportsshoes/300/200",
        "description": (
            "High-performance sports shoes that are both "
            "comfortable and durable."
        ),
        "rating": 4.2,
    },
    {
        "name": "Wireless Headphones",
        "price": "1299.00",
        "image_url": "https://picsum.photos/seed/headphones/300/200",
        "description": (
            "Experience crystal clear sound with these "
            "noise-cancelling wireless headphones."
        ),
        "rating": 4.7,
    },
    {
        "name": "Sunglasses",
        "price": "349.95",
        "image_url": "https://picsum.photos/seed/sunglasses/300/200",
        "description": (
            "Stylish sunglasses offering full UV protection "
            "with a trendy design."
        ),
        "rating": 4.3,
    },
    {
        "name": "Smart Watch",
        "price": "1599.00",
        "image_url": "https://picsum.photos/seed/smartwatch/300/200",
        "description": (
            "Modern smart watch with advanced health tracking features."
        ),
        "rating": 4.6,
    },
    {
        "name": "Leather Wallet",
        "price": "249.99",
        "image_url": "https://picsum.photos/seed/wallet/300/200",
        "description": (
            "Compact and stylish leather wallet with multiple "
            "compartments."
        ),
        "rating": 4.1,
    },
)


class Catalog:
    """Fixed, ordered collection of every purchasable product.

    Built once per application context and handed to whoever needs it;
    there is no way to add, remove or reorder products afterwards.
    """

    def __init__(self, products: Iterable[Product]) -> None:
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[UUID, Product] = {
            p.id: p for p in self._products
        }

    def list_products(self) -> tuple[Product, ...]:
        """Return all products in their catalog order."""
        return self._products

    def get(self, product_id: UUID) -> Product | None:
        """Look up a product by its identifier."""
        return self._by_id.get(product_id)

    def __contains__(self, product: object) -> bool:
        return isinstance(product, Product) and product.id in self._by_id

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)


def build_sample_catalog() -> Catalog:
    """Create the catalog of six built-in sample products."""
    return Catalog(
        Product(
            name=str(entry["name"]),
            price=Decimal(str(entry["price"])),
            image_url=str(entry["image_url"]),
            description=str(entry["description"]),
            rating=float(entry["rating"]),
        )
        for entry in _SAMPLE_PRODUCTS
    )
