"""ShippingService that quotes the same configured cost for every order."""

from __future__ import annotations

import logging

from checkout.domain.gateway.shipping_service import ShippingService
from checkout.domain.model.order import Address, OrderItem, ShippingCost

log = logging.getLogger(__name__)


class FixedShippingService(ShippingService):

    def __init__(self, shipping_cost: ShippingCost) -> None:
        self._shipping_cost = shipping_cost
        log.info(
            "Created fixed shipping service (%s EUR net, VAT %d%%)",
            shipping_cost.net_price,
            shipping_cost.vat,
        )

    def get_cost(self, items: list[OrderItem], destination: Address) -> ShippingCost:
        log.info(
            "Returning fixed shipping cost for %d items to %s",
            len(items),
            destination.country_code,
        )
        return self._shipping_cost
