"""Abstract payment gateway.

A gateway starts the payment of an assembled order and hands back the
URL the buyer must be redirected to in order to complete it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from checkout.domain.model.order import Order


@dataclass(frozen=True)
class CheckoutRedirect:
    redirect_url: str


class PaymentGateway(ABC):

    @abstractmethod
    def checkout(self, order: Order) -> CheckoutRedirect:
        """Start the payment of *order*.

        Raises PaymentGatewayError when the gateway answers with something
        that is not a usable checkout.  Transport failures are not
        translated and propagate as raised by the underlying client.
        """

    def close(self) -> None:
        """Release any connection held by the gateway."""
