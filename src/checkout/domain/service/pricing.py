"""Domain service: Pricing.

Derives every net / VAT / gross subtotal of an order.  Nothing is rounded
here; amounts keep whatever precision the VAT fractions give them and
are only formatted when they leave the system.
"""

from __future__ import annotations

from dataclasses import dataclass

from checkout.domain.model.order import Order
from checkout.domain.model.value_objects import Money, vat_amount


@dataclass(frozen=True)
class OrderAmount:
    items_net_subtotal: Money
    items_vat_subtotal: Money
    items_subtotal: Money
    shipping_net_subtotal: Money
    shipping_vat_subtotal: Money
    shipping_subtotal: Money
    order_net_subtotal: Money
    order_vat_subtotal: Money
    order_total: Money


def compute_order_amount(order: Order) -> OrderAmount:
    """Price *order*.

    Item subtotals are a left fold over ``order.items`` in list order, so
    the same order always prices to the same Decimal representation.
    """
    items_net = Money.zero()
    items_vat = Money.zero()
    for item in order.items:
        item_net = item.net_unit_price * item.quantity.value
        items_net = items_net + item_net
        items_vat = items_vat + vat_amount(item_net, item.vat)

    shipping_net = order.shipping.net_price
    shipping_vat = vat_amount(shipping_net, order.shipping.vat)

    order_net = items_net + shipping_net
    order_vat = items_vat + shipping_vat

    return OrderAmount(
        items_net_subtotal=items_net,
        items_vat_subtotal=items_vat,
        items_subtotal=items_net + items_vat,
        shipping_net_subtotal=shipping_net,
        shipping_vat_subtotal=shipping_vat,
        shipping_subtotal=shipping_net + shipping_vat,
        order_net_subtotal=order_net,
        order_vat_subtotal=order_vat,
        order_total=order_net + order_vat,
    )
