"""Application service: Quote Order use case (query).

Prices a create-order request without starting a payment.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from checkout.application.dto import CreateOrderRequest, OrderQuote
from checkout.application.order_assembler import OrderAssembler
from checkout.domain.exceptions import CheckoutError
from checkout.domain.gateway.shipping_service import ShippingService
from checkout.domain.repository.product_catalog import ProductCatalog
from checkout.domain.service.pricing import compute_order_amount


class QuoteOrderHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        shipping_service: ShippingService,
    ) -> None:
        self._assembler = OrderAssembler(catalog, shipping_service)

    def handle(self, raw_request: Mapping[str, Any]) -> OrderQuote | CheckoutError:
        try:
            order = self._assembler.assemble(CreateOrderRequest.parse(raw_request))
        except CheckoutError as exc:
            return exc
        return OrderQuote.from_amount(compute_order_amount(order))
