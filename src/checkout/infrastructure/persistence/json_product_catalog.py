"""Product catalog implementations.

The catalog is read once and then only queried, so both implementations
keep their products in a read-only mapping keyed by SKU.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from types import MappingProxyType

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money, Vat
from checkout.domain.repository.product_catalog import ProductCatalog


class InMemoryProductCatalog(ProductCatalog):

    def __init__(self, products: Iterable[Product]) -> None:
        store: dict[str, Product] = {}
        for product in products:
            if product.sku in store:
                raise ValidationError(f"Duplicate SKU in catalog: '{product.sku}'")
            store[product.sku] = product
        self._store = MappingProxyType(store)

    # --- ProductCatalog interface ---------------------------------------------

    def get_by_sku(self, sku: str) -> Product | None:
        return self._store.get(sku)

    def list_all(self) -> list[Product]:
        return list(self._store.values())


class JsonProductCatalog(InMemoryProductCatalog):
    """Catalog loaded from a JSON array of products.

    Each entry looks like::

        {"sku": "0", "name": "product-0", "gtin": "0400939035768",
         "brand": "acme", "category": "clothes",
         "netUnitPriceInEur": "9.99", "vat": 22}
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        super().__init__(self._to_domain(raw) for raw in self._load_raw())

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        try:
            return Product(
                sku=raw["sku"],
                name=raw["name"],
                gtin=raw["gtin"],
                brand=raw["brand"],
                category=raw["category"],
                net_unit_price=Money.of(raw["netUnitPriceInEur"]),
                vat=Vat.of(raw["vat"]),
            )
        except KeyError as exc:
            raise ValidationError(
                f"Catalog entry {raw.get('sku', '?')!r} is missing {exc.args[0]!r}"
            ) from exc

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))
