"""Composition root: builds the concrete adapters behind the domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from functools import lru_cache

from checkout.domain.gateway.payment_gateway import PaymentGateway
from checkout.domain.gateway.shipping_service import ShippingService
from checkout.domain.model.order import ShippingCost
from checkout.domain.model.value_objects import Money, Vat
from checkout.domain.repository.product_catalog import ProductCatalog
from checkout.infrastructure.config import get_settings
from checkout.infrastructure.payment.development_gateway import (
    DevelopmentPaymentGateway,
)
from checkout.infrastructure.payment.scalapay_gateway import ScalapayPaymentGateway
from checkout.infrastructure.persistence.json_product_catalog import (
    JsonProductCatalog,
)
from checkout.infrastructure.shipping.fixed_shipping_service import (
    FixedShippingService,
)


@lru_cache
def product_catalog() -> ProductCatalog:
    # Loaded once per process; read-only afterwards
    return JsonProductCatalog(get_settings().CATALOG_PATH)


def shipping_service() -> ShippingService:
    settings = get_settings()
    return FixedShippingService(
        ShippingCost(
            net_price=Money.of(settings.SHIPPING_NET_PRICE_EUR),
            vat=Vat.of(settings.SHIPPING_VAT),
        )
    )


def payment_gateway() -> PaymentGateway:
    settings = get_settings()
    if settings.PAYMENT_GATEWAY == "scalapay":
        return ScalapayPaymentGateway(settings.scalapay())
    if settings.PAYMENT_GATEWAY == "development":
        return DevelopmentPaymentGateway()
    raise ValueError(f"Unknown payment gateway: {settings.PAYMENT_GATEWAY!r}")
