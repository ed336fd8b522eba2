"""Data Transfer Objects: containers that cross layer boundaries.

Inbound DTOs are pydantic models: they describe the create-order request
as the client sends it (camelCase JSON) and reject malformed input before
any domain object is built.  Outbound DTOs are plain dataclasses.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from checkout.domain.exceptions import InvalidRequest
from checkout.domain.service.pricing import OrderAmount

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
PositiveInt = Annotated[StrictInt, Field(gt=0)]


class _RequestModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class AddressRequest(_RequestModel):
    country_code: NonEmptyStr
    city: NonEmptyStr
    post_code: NonEmptyStr
    address_line: NonEmptyStr


class ShippingRequest(_RequestModel):
    name: NonEmptyStr
    address: AddressRequest
    phone_number: StrictStr | None = None


class BillingRequest(_RequestModel):
    name: StrictStr | None = None
    address: AddressRequest | None = None
    phone_number: StrictStr | None = None


class UserRequest(_RequestModel):
    first_name: NonEmptyStr
    last_name: NonEmptyStr
    email: StrictStr | None = None
    phone_number: StrictStr | None = None


class OrderItemRequest(_RequestModel):
    """Input: what the customer asked for (SKU + quantity)."""

    sku: NonEmptyStr
    quantity: PositiveInt


class CreateOrderRequest(_RequestModel):
    user: UserRequest
    shipping: ShippingRequest
    billing: BillingRequest | None = None
    items: Annotated[list[OrderItemRequest], Field(min_length=1)]

    @staticmethod
    def parse(raw: Mapping[str, Any] | Any) -> CreateOrderRequest:
        """Validate a decoded JSON request, raising InvalidRequest."""
        try:
            return CreateOrderRequest.model_validate(raw)
        except PydanticValidationError as exc:
            raise InvalidRequest(
                [_describe(error) for error in exc.errors()]
            ) from exc


def _describe(error: Mapping[str, Any]) -> str:
    path = ".".join(str(part) for part in error["loc"]) or "request"
    return f"{path}: {error['msg']}"


@dataclass(frozen=True)
class OrderCreated:
    """Output: where to send the buyer to complete the payment."""

    checkout_url: str

    def to_dict(self) -> dict:
        return {"checkoutUrl": self.checkout_url}


@dataclass(frozen=True)
class OrderQuote:
    """Output: the full price breakdown of an order, as canonical strings."""

    items_net_subtotal: str
    items_vat_subtotal: str
    items_subtotal: str
    shipping_net_subtotal: str
    shipping_vat_subtotal: str
    shipping_subtotal: str
    order_net_subtotal: str
    order_vat_subtotal: str
    order_total: str

    @staticmethod
    def from_amount(amount: OrderAmount) -> OrderQuote:
        return OrderQuote(
            items_net_subtotal=str(amount.items_net_subtotal),
            items_vat_subtotal=str(amount.items_vat_subtotal),
            items_subtotal=str(amount.items_subtotal),
            shipping_net_subtotal=str(amount.shipping_net_subtotal),
            shipping_vat_subtotal=str(amount.shipping_vat_subtotal),
            shipping_subtotal=str(amount.shipping_subtotal),
            order_net_subtotal=str(amount.order_net_subtotal),
            order_vat_subtotal=str(amount.order_vat_subtotal),
            order_total=str(amount.order_total),
        )

    def to_dict(self) -> dict:
        return {
            "itemsNetSubtotal": self.items_net_subtotal,
            "itemsVatSubtotal": self.items_vat_subtotal,
            "itemsSubtotal": self.items_subtotal,
            "shippingNetSubtotal": self.shipping_net_subtotal,
            "shippingVatSubtotal": self.shipping_vat_subtotal,
            "shippingSubtotal": self.shipping_subtotal,
            "orderNetSubtotal": self.order_net_subtotal,
            "orderVatSubtotal": self.order_vat_subtotal,
            "orderTotal": self.order_total,
        }
