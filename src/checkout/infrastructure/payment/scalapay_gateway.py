"""Scalapay implementation of PaymentGateway (REST API).

One ``POST /v2/orders`` per checkout, never retried.  Transport problems
(timeouts, connection errors, non-2xx answers) are left to propagate as
``httpx`` exceptions; only a successful answer of the wrong shape becomes
a PaymentGatewayError.
"""

from __future__ import annotations

import logging

import httpx

from checkout.domain.exceptions import PaymentGatewayError
from checkout.domain.gateway.payment_gateway import CheckoutRedirect, PaymentGateway
from checkout.domain.model.order import Order
from checkout.infrastructure.config import ScalapayConfig
from checkout.infrastructure.payment.scalapay_payload import (
    build_checkout_payload,
    parse_checkout_response,
)

log = logging.getLogger(__name__)


class ScalapayPaymentGateway(PaymentGateway):

    def __init__(
        self,
        config: ScalapayConfig,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.client_timeout_ms / 1000,
            headers={
                "Accept": "application/json",
                "Content-Type": "application/json",
                "Authorization": f"Bearer {config.auth_token}",
            },
            transport=transport,
        )

    def checkout(self, order: Order) -> CheckoutRedirect:
        payload = build_checkout_payload(order, self._config)
        log.info(
            "Creating Scalapay order (total %s %s, %d items)",
            payload["totalAmount"]["amount"],
            payload["totalAmount"]["currency"],
            len(payload["items"]),
        )

        try:
            response = self._client.post("/v2/orders", json=payload)
            response.raise_for_status()
        except httpx.TimeoutException:
            log.error("Scalapay did not answer within %d ms", self._config.client_timeout_ms)
            raise
        except httpx.HTTPStatusError as e:
            log.error("Scalapay answered HTTP %d: %s", e.response.status_code, e.response.text)
            raise

        try:
            body = response.json()
        except ValueError as exc:
            log.warning("Scalapay checkout response is not JSON: %r", response.text)
            raise PaymentGatewayError() from exc

        return parse_checkout_response(body)

    def close(self) -> None:
        self._client.close()
