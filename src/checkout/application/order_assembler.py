"""Application service: Order assembly.

Builds the immutable Order aggregate from a validated request: resolves
the requested SKUs against the catalog, asks the shipping service for a
quote and snapshots everything into an Order.  Shared by the use cases
that need a fully priced order.
"""

from __future__ import annotations

import logging

from checkout.application.dto import (
    AddressRequest,
    BillingRequest,
    CreateOrderRequest,
    ShippingRequest,
    UserRequest,
)
from checkout.domain.gateway.shipping_service import ShippingService
from checkout.domain.model.order import Address, BillingInfo, Order, ShippingInfo, User
from checkout.domain.model.value_objects import Quantity
from checkout.domain.repository.product_catalog import ProductCatalog
from checkout.domain.service.catalog_resolver import CatalogResolver, RequestedItem

log = logging.getLogger(__name__)


class OrderAssembler:

    def __init__(
        self,
        catalog: ProductCatalog,
        shipping_service: ShippingService,
    ) -> None:
        self._resolver = CatalogResolver(catalog)
        self._shipping_service = shipping_service

    def assemble(self, request: CreateOrderRequest) -> Order:
        """Assemble the order described by *request*.

        Steps:
        1. Resolve each SKU to an order item (UnavailableProducts if any
           is missing; nothing external is called in that case).
        2. Quote shipping for the resolved items and the ship-to address.
        3. Let the Order aggregate validate its invariants.
        """
        items = self._resolver.resolve(
            RequestedItem(sku=line.sku, quantity=Quantity(line.quantity))
            for line in request.items
        )

        ship_to = self._to_shipping_info(request.shipping)
        shipping_cost = self._shipping_service.get_cost(items, ship_to.address)
        log.debug(
            "Shipping quoted at %s EUR net (VAT %d%%)",
            shipping_cost.net_price,
            shipping_cost.vat,
        )

        return Order.create(
            user=self._to_user(request.user),
            ship_to=ship_to,
            shipping_cost=shipping_cost,
            items=items,
            billing=self._to_billing_info(request.billing),
        )

    # --- Mapping --------------------------------------------------------------

    @staticmethod
    def _to_address(data: AddressRequest) -> Address:
        return Address(
            country_code=data.country_code,
            city=data.city,
            post_code=data.post_code,
            address_line=data.address_line,
        )

    @classmethod
    def _to_shipping_info(cls, data: ShippingRequest) -> ShippingInfo:
        return ShippingInfo(
            name=data.name,
            address=cls._to_address(data.address),
            phone_number=data.phone_number,
        )

    @classmethod
    def _to_billing_info(cls, data: BillingRequest | None) -> BillingInfo | None:
        if data is None:
            return None
        return BillingInfo(
            name=data.name,
            address=cls._to_address(data.address) if data.address else None,
            phone_number=data.phone_number,
        )

    @staticmethod
    def _to_user(data: UserRequest) -> User:
        return User(
            first_name=data.first_name,
            last_name=data.last_name,
            email=data.email,
            phone_number=data.phone_number,
        )
