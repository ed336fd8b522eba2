"""Product: an entry of the sellable catalog.

Products are owned by the catalog, which is loaded once and never
mutated afterwards, so a Product is a frozen value keyed by its SKU.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.value_objects import Money, Vat


@dataclass(frozen=True)
class Product:
    """A product in the catalog, priced net of VAT."""

    sku: str
    name: str
    gtin: str
    brand: str
    category: str
    net_unit_price: Money
    vat: Vat

    def __post_init__(self) -> None:
        if not self.sku or not self.sku.strip():
            raise ValidationError("Product SKU is required")
