"""Domain service: Catalog resolution.

Turns the SKUs a client asked for into priced order items.  Resolution
is all-or-nothing: the whole request is looked up first, and if any SKU
is unknown nothing is built and every unknown SKU is reported at once.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from checkout.domain.exceptions import UnavailableProducts
from checkout.domain.model.order import OrderItem
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Quantity
from checkout.domain.repository.product_catalog import ProductCatalog


@dataclass(frozen=True)
class RequestedItem:
    """What the customer asked for: a SKU and how many of it."""

    sku: str
    quantity: Quantity


class CatalogResolver:

    def __init__(self, catalog: ProductCatalog) -> None:
        self._catalog = catalog

    def resolve(self, requested: Iterable[RequestedItem]) -> list[OrderItem]:
        """Resolve every requested line, preserving request order.

        Lines asking for the same SKU are resolved independently.

        Raises UnavailableProducts listing each unknown SKU once, in the
        order it was first requested.
        """
        # Phase 1: look everything up
        found: list[tuple[Product, Quantity]] = []
        missing: list[str] = []

        for line in requested:
            product = self._catalog.get_by_sku(line.sku)
            if product is None:
                if line.sku not in missing:
                    missing.append(line.sku)
                continue
            found.append((product, line.quantity))

        if missing:
            raise UnavailableProducts(missing)

        # Phase 2: snapshot the products into order items
        return [OrderItem.from_product(product, qty) for product, qty in found]
