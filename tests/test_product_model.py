# tests/test_product_model.py

"""Tests for the Product dataclass."""

import dataclasses
import unittest
from decimal import Decimal

from src.models.product import Product


class TestProductModel(unittest.TestCase):
    """Product dataclass unit tests."""

    def test_init_with_all_fields(self) -> None:
        """All fields are stored correctly."""
        product = Product(
            name="Designer Handbag",
            price=Decimal("599.99"),
            image_url="https://example.com/img.jpg",
            description="Premium leather.",
            rating=4.5,
        )
        self.assertEqual(product.name, "Designer Handbag")
        self.assertEqual(product.price, Decimal("599.99"))
        self.assertEqual(product.image_url, "https://example.com/img.jpg")
        self.assertEqual(product.description, "Premium leather.")
        self.assertEqual(product.rating, 4.5)

    def test_defaults(self) -> None:
        """Optional fields default to empty values."""
        product = Product(name="X", price=Decimal("1"))
        self.assertEqual(product.image_url, "")
        self.assertEqual(product.description, "")
        self.assertEqual(product.rating, 0.0)

    def test_ids_are_unique(self) -> None:
        """Each construction generates a fresh identifier."""
        a = Product(name="A", price=Decimal("10"))
        b = Product(name="A", price=Decimal("10"))
        self.assertNotEqual(a.id, b.id)

    def test_equality_is_identity_based(self) -> None:
        """Identical attributes do not make two products equal."""
        a = Product(name="A", price=Decimal("10"))
        b = Product(name="A", price=Decimal("10"))
        self.assertNotEqual(a, b)
        self.assertEqual(a, a)

    def test_same_id_is_equal(self) -> None:
        """Products sharing an id compare equal and hash alike."""
        a = Product(name="A", price=Decimal("10"))
        b = Product(name="Renamed", price=Decimal("20"), id=a.id)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))

    def test_is_immutable(self) -> None:
        """Assigning to a field raises FrozenInstanceError."""
        product = Product(name="A", price=Decimal("10"))
        with self.assertRaises(dataclasses.FrozenInstanceError):
            product.name = "B"  # type: ignore[misc]

    def test_float_price_coerced_to_decimal(self) -> None:
        """A float price is stored as the matching Decimal."""
        product = Product(name="A", price=899.5)  # type: ignore[arg-type]
        self.assertIsInstance(product.price, Decimal)
        self.assertEqual(product.price, Decimal("899.5"))

    def test_empty_name_rejected(self) -> None:
        """Products must have a name."""
        with self.assertRaises(ValueError):
            Product(name="", price=Decimal("1"))

    def test_whitespace_name_rejected(self) -> None:
        for blank in (" ", "\t", "  \n "):
            with self.subTest(name=blank), self.assertRaises(ValueError):
                Product(name=blank, price=Decimal("1"))

    def test_negative_price_rejected(self) -> None:
        """Prices cannot be negative."""
        with self.assertRaises(ValueError):
            Product(name="X", price=Decimal("-5"))

    def test_zero_price_allowed(self) -> None:
        """Zero is a valid (free) price."""
        product = Product(name="Freebie", price=Decimal("0"))
        self.assertEqual(product.formatted_price, "$0.00")

    def test_formatted_price_two_decimals(self) -> None:
        """Prices always show two decimal places."""
        product = Product(name="Shoes", price=Decimal("899.5"))
        self.assertEqual(product.formatted_price, "$899.50")

    def test_formatted_rating_one_decimal(self) -> None:
        """Ratings show one decimal place."""
        product = Product(name="Watch", price=Decimal("1"), rating=4.65)
        self.assertTrue(product.formatted_rating.startswith("Rating: 4."))
        product = Product(name="Watch", price=Decimal("1"), rating=4.0)
        self.assertEqual(product.formatted_rating, "Rating: 4.0 ⭐")


if __name__ == "__main__":
    unittest.main()
