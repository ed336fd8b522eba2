"""PaymentGateway for local development: no network, instant success.

The redirect URL is the ship-to name, which makes it easy to tell
orders apart when trying the pipeline by hand.
"""

from __future__ import annotations

import logging

from checkout.domain.gateway.payment_gateway import CheckoutRedirect, PaymentGateway
from checkout.domain.model.order import Order

log = logging.getLogger(__name__)


class DevelopmentPaymentGateway(PaymentGateway):

    def checkout(self, order: Order) -> CheckoutRedirect:
        log.info("Development checkout for %r", order.shipping.to.name)
        return CheckoutRedirect(redirect_url=order.shipping.to.name)
