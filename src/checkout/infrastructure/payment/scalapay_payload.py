"""Scalapay wire format for ``POST /v2/orders``.

``build_checkout_payload`` projects an Order onto the request body and
``parse_checkout_response`` reads the answer back.

Optional fields are added key by key: when the source value is absent
the key is left out of the payload altogether, it is never sent as
``null`` or as an empty string.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from checkout.domain.exceptions import PaymentGatewayError
from checkout.domain.gateway.payment_gateway import CheckoutRedirect
from checkout.domain.model.order import (
    Address,
    BillingInfo,
    Order,
    OrderItem,
    ShippingInfo,
    User,
)
from checkout.domain.model.value_objects import CURRENCY, Money, vat_amount
from checkout.domain.service.pricing import compute_order_amount
from checkout.infrastructure.config import ScalapayConfig

log = logging.getLogger(__name__)


def build_checkout_payload(order: Order, config: ScalapayConfig) -> dict[str, Any]:
    amount = compute_order_amount(order)

    payload: dict[str, Any] = {
        "totalAmount": _money(amount.order_total),
        "taxAmount": _money(amount.order_vat_subtotal),
        "shippingAmount": _money(amount.shipping_subtotal),
        "consumer": _consumer(order.user),
    }
    if order.billing is not None:
        payload["billing"] = _billing(order.billing)
    payload["shipping"] = _shipping(order.shipping.to)
    payload["items"] = [_item(item) for item in order.items]
    payload["merchant"] = {
        "redirectCancelUrl": config.merchant_redirect_cancel_url,
        "redirectConfirmUrl": config.merchant_redirect_success_url,
    }
    payload["orderExpiryMilliseconds"] = config.order_expiry_ms
    return payload


def _money(amount: Money) -> dict[str, str]:
    return {"amount": amount.canonical(), "currency": CURRENCY}


def _consumer(user: User) -> dict[str, str]:
    consumer = {"givenNames": user.first_name, "surname": user.last_name}
    if user.email:
        consumer["email"] = user.email
    if user.phone_number:
        consumer["phoneNumber"] = user.phone_number
    return consumer


def _address(address: Address) -> dict[str, str]:
    return {
        "countryCode": address.country_code,
        "suburb": address.city,
        "postcode": address.post_code,
        "line1": address.address_line,
    }


def _billing(billing: BillingInfo) -> dict[str, str]:
    data: dict[str, str] = {}
    if billing.name:
        data["name"] = billing.name
    if billing.phone_number:
        data["phoneNumber"] = billing.phone_number
    # The address fields go together or not at all
    if billing.address is not None:
        data.update(_address(billing.address))
    return data


def _shipping(ship_to: ShippingInfo) -> dict[str, str]:
    data: dict[str, str] = {}
    if ship_to.phone_number:
        data["phoneNumber"] = ship_to.phone_number
    data["name"] = ship_to.name
    data.update(_address(ship_to.address))
    return data


def _item(item: OrderItem) -> dict[str, Any]:
    # Unit price including VAT; Scalapay multiplies by quantity itself
    gross_unit_price = item.net_unit_price + vat_amount(item.net_unit_price, item.vat)
    return {
        "sku": item.sku,
        "quantity": item.quantity.value,
        "name": item.name,
        "gtin": item.gtin,
        "category": item.category,
        "price": _money(gross_unit_price),
    }


class _CheckoutResponse(BaseModel):
    model_config = ConfigDict(strict=True)

    token: str
    checkout_url: str = Field(alias="checkoutUrl")


def parse_checkout_response(body: Any) -> CheckoutRedirect:
    """Read the redirect URL out of a decoded ``/v2/orders`` response.

    Raises PaymentGatewayError unless *body* is an object holding a string
    ``token`` and a string ``checkoutUrl``.
    """
    try:
        response = _CheckoutResponse.model_validate(body)
    except PydanticValidationError as exc:
        log.warning("Unexpected Scalapay checkout response %r: %s", body, exc)
        raise PaymentGatewayError() from exc
    return CheckoutRedirect(redirect_url=response.checkout_url)
