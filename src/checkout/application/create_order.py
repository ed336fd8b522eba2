"""Application service: Create Order use case.

The single entry point the outer layer calls for a checkout.  Runs the
whole pipeline in order (validate, resolve, quote shipping, assemble,
start payment) and stops at the first failure.

Business failures come back as ``CheckoutError`` values; anything
unexpected (transport errors, a failing shipping service, bugs) is
raised for the outer layer to report.  No step is ever retried.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from checkout.application.dto import CreateOrderRequest, OrderCreated
from checkout.application.order_assembler import OrderAssembler
from checkout.domain.exceptions import CheckoutError
from checkout.domain.gateway.payment_gateway import PaymentGateway
from checkout.domain.gateway.shipping_service import ShippingService
from checkout.domain.repository.product_catalog import ProductCatalog

log = logging.getLogger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        catalog: ProductCatalog,
        shipping_service: ShippingService,
        payment_gateway: PaymentGateway,
    ) -> None:
        self._assembler = OrderAssembler(catalog, shipping_service)
        self._payment_gateway = payment_gateway

    def handle(self, raw_request: Mapping[str, Any]) -> OrderCreated | CheckoutError:
        """Create an order and start its payment.

        Returns OrderCreated with the gateway's checkout URL, or one of
        InvalidRequest, UnavailableProducts, PaymentGatewayError.
        """
        try:
            request = CreateOrderRequest.parse(raw_request)
            log.info("Create order request received (%d item lines)", len(request.items))

            order = self._assembler.assemble(request)
            redirect = self._payment_gateway.checkout(order)
        except CheckoutError as exc:
            log.info("Create order request failed: %s", exc.to_dict())
            return exc

        log.info("Order checkout started")
        return OrderCreated(checkout_url=redirect.redirect_url)
