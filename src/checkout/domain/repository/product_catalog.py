"""Abstract read-only catalog of sellable products.

Defined in the domain layer so the domain never depends on
infrastructure. The catalog is loaded once at startup and only read
afterwards, so implementations must be safe to share between requests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.product import Product


class ProductCatalog(ABC):

    @abstractmethod
    def get_by_sku(self, sku: str) -> Product | None:
        """Return the product with exactly this SKU, or None."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""
