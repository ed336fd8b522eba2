"""Order aggregate and the value objects it is built from.

An Order is assembled once per checkout request from the client's
contact data, the catalog snapshot of each requested product and the
shipping cost quoted for it.  It is immutable from then on and is the
only input of both pricing and the payment-gateway mapping.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.exceptions import ValidationError
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money, Quantity, Vat


@dataclass(frozen=True)
class Address:
    country_code: str
    city: str
    post_code: str
    address_line: str

    def __post_init__(self) -> None:
        for field_name in ("country_code", "city", "post_code", "address_line"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"Address {field_name} is required")


@dataclass(frozen=True)
class ShippingInfo:
    """Who and where the order ships to."""

    name: str
    address: Address
    phone_number: str | None = None


@dataclass(frozen=True)
class BillingInfo:
    """Billing contact; every part of it is optional."""

    name: str | None = None
    address: Address | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class User:
    first_name: str
    last_name: str
    email: str | None = None
    phone_number: str | None = None


@dataclass(frozen=True)
class ShippingCost:
    """Net shipping price and its VAT rate, quoted per order."""

    net_price: Money
    vat: Vat


@dataclass(frozen=True)
class Shipping:
    to: ShippingInfo
    net_price: Money
    vat: Vat


@dataclass(frozen=True)
class OrderItem:
    """Captures the catalog data of a product at order-creation time."""

    sku: str
    name: str
    gtin: str
    brand: str
    category: str
    net_unit_price: Money
    vat: Vat
    quantity: Quantity

    @staticmethod
    def from_product(product: Product, quantity: Quantity) -> OrderItem:
        return OrderItem(
            sku=product.sku,
            name=product.name,
            gtin=product.gtin,
            brand=product.brand,
            category=product.category,
            net_unit_price=product.net_unit_price,  # <-- price snapshot
            vat=product.vat,
            quantity=quantity,
        )


@dataclass(frozen=True)
class Order:
    """Aggregate root for a checkout.

    Use the ``Order.create()`` factory; it enforces the invariants.
    """

    user: User
    shipping: Shipping
    items: tuple[OrderItem, ...]
    billing: BillingInfo | None = None

    @staticmethod
    def create(
        user: User,
        ship_to: ShippingInfo,
        shipping_cost: ShippingCost,
        items: list[OrderItem],
        billing: BillingInfo | None = None,
    ) -> Order:
        """Create a new order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")

        return Order(
            user=user,
            shipping=Shipping(
                to=ship_to,
                net_price=shipping_cost.net_price,
                vat=shipping_cost.vat,
            ),
            items=tuple(items),
            billing=billing,
        )
