# src/filters/product_filter.py

"""Search-as-you-type filtering of the product grid."""

import logging
import unicodedata
from collections.abc import Sequence

from src.models.product import Product

logger = logging.getLogger("storefront.filters")


def _fold(text: str) -> str:
    """Normalise text for case-insensitive, locale-independent matching."""
    return unicodedata.normalize("NFC", text).casefold()


class ProductFilter:
    """Filter catalog products by a free-text search query."""

    @staticmethod
    def filter_by_query(
        products: Sequence[Product],
        query: str,
    ) -> Sequence[Product]:
        """Keep products whose name or description contains *query*.

        Matching is a case-insensitive substring test using Unicode case
        folding, so ``"SHOES"`` finds ``"Sports Shoes"`` and ``"STRASSE"``
        finds ``"Straße"``.  Relative order is preserved.  A blank query
        (empty or whitespace only) returns *products* unchanged; any other
        query is matched as typed, surrounding spaces included.
        """
        if not query.strip():
            return products

        folded = _fold(query)
        matched = [
            p
            for p in products
            if folded in _fold(p.name) or folded in _fold(p.description)
        ]

        logger.debug(
            "Query %r matched %d of %d products",
            query,
            len(matched),
            len(products),
        )
        return matched
