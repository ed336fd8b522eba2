"""Abstract shipping-cost lookup.

The shipping service quotes the cost of delivering a set of order items
to a destination.  Its failures carry no business meaning here: whatever
an implementation raises propagates to the caller untouched.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from checkout.domain.model.order import Address, OrderItem, ShippingCost


class ShippingService(ABC):

    @abstractmethod
    def get_cost(self, items: list[OrderItem], destination: Address) -> ShippingCost:
        """Quote the shipping cost of *items* to *destination*."""
