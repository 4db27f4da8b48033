# src/models/errors.py

"""Error types raised by the storefront's cart and catalog layer."""

from typing import Any


class StorefrontError(Exception):
    """Base class for all storefront errors.

    Carries a human-readable message plus any context values that help
    a log line or a UI notification explain what went wrong.
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(message)


class CartError(StorefrontError):
    """A cart operation could not be applied."""


class UnknownProductError(CartError, ValueError):
    """The product is not part of the session's catalog."""


class CartIndexError(CartError, IndexError):
    """A cart position is outside ``[0, count())``."""
