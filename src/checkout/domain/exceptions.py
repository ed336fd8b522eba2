"""Domain-level exceptions.

Invariant violations are ``ValidationError`` subclasses.  The business
errors a checkout can end with are ``CheckoutError`` subclasses: the
application layer returns them as values so the outer layer can render
them uniformly, while anything else is left to propagate.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class InvalidAmount(ValidationError):
    """A value is not a valid non-negative decimal amount."""


class CheckoutError(DomainException):
    """Base class for the business errors a checkout can end with."""

    status_code = 500

    @property
    def type(self) -> str:
        return type(self).__name__

    def to_dict(self) -> dict:
        return {"type": self.type}


class InvalidRequest(CheckoutError):
    """The inbound create-order request is structurally invalid."""

    status_code = 422

    def __init__(self, errors: list[str]) -> None:
        super().__init__(f"Invalid request: {'; '.join(errors)}")
        self.errors = list(errors)

    def to_dict(self) -> dict:
        return {"type": self.type, "errors": list(self.errors)}


class UnavailableProducts(CheckoutError):
    """One or more requested SKUs are not in the catalog."""

    status_code = 400

    def __init__(self, skus: list[str]) -> None:
        super().__init__(f"Unavailable products: {', '.join(skus)}")
        self.skus = list(skus)

    def to_dict(self) -> dict:
        return {"type": self.type, "skus": list(self.skus)}


class PaymentGatewayError(CheckoutError):
    """The payment gateway answered with something we cannot use."""

    def __init__(self) -> None:
        super().__init__("Payment gateway error")
