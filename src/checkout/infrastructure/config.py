"""Runtime configuration, read from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[3] / "data" / "products.json"

NonEmptyStr = Annotated[StrictStr, Field(min_length=1)]
PositiveInt = Annotated[StrictInt, Field(gt=0)]


def _env(name: str, default: str | None = None):
    return Field(default_factory=lambda: os.getenv(name, default))


class ScalapayConfig(BaseModel):
    """Everything the Scalapay adapter needs; opaque to the domain."""

    model_config = ConfigDict(frozen=True)

    auth_token: NonEmptyStr
    base_url: NonEmptyStr
    client_timeout_ms: PositiveInt
    order_expiry_ms: PositiveInt
    merchant_redirect_success_url: NonEmptyStr
    merchant_redirect_cancel_url: NonEmptyStr


class Settings(BaseModel):
    model_config = ConfigDict(validate_default=True)

    # Catalog
    CATALOG_PATH: Path = _env("CHECKOUT_CATALOG_PATH", str(_DEFAULT_CATALOG_PATH))

    # "scalapay" or "development" (no network, redirects to the recipient name)
    PAYMENT_GATEWAY: str = _env("CHECKOUT_PAYMENT_GATEWAY", "development")

    # Fixed shipping cost quoted for every order
    SHIPPING_NET_PRICE_EUR: str = _env("CHECKOUT_SHIPPING_NET_PRICE_EUR", "0")
    SHIPPING_VAT: int = _env("CHECKOUT_SHIPPING_VAT", "0")

    # Scalapay
    SCALAPAY_BASE_URL: str = _env("SCALAPAY_BASE_URL", "https://integration.api.scalapay.com")
    SCALAPAY_AUTH_TOKEN: str = _env("SCALAPAY_AUTH_TOKEN", "")
    SCALAPAY_CLIENT_TIMEOUT_MS: int = _env("SCALAPAY_CLIENT_TIMEOUT_MS", "5000")
    SCALAPAY_ORDER_EXPIRY_MS: int = _env("SCALAPAY_ORDER_EXPIRY_MS", "600000")
    SCALAPAY_REDIRECT_SUCCESS_URL: str = _env(
        "SCALAPAY_REDIRECT_SUCCESS_URL", "http://localhost:8080/checkout/success"
    )
    SCALAPAY_REDIRECT_CANCEL_URL: str = _env(
        "SCALAPAY_REDIRECT_CANCEL_URL", "http://localhost:8080/checkout/cancel"
    )

    # Logging
    LOG_LEVEL: str = _env("CHECKOUT_LOG_LEVEL", "INFO")
    LOG_FILE: str | None = _env("CHECKOUT_LOG_FILE")

    def scalapay(self) -> ScalapayConfig:
        return ScalapayConfig(
            auth_token=self.SCALAPAY_AUTH_TOKEN,
            base_url=self.SCALAPAY_BASE_URL,
            client_timeout_ms=self.SCALAPAY_CLIENT_TIMEOUT_MS,
            order_expiry_ms=self.SCALAPAY_ORDER_EXPIRY_MS,
            merchant_redirect_success_url=self.SCALAPAY_REDIRECT_SUCCESS_URL,
            merchant_redirect_cancel_url=self.SCALAPAY_REDIRECT_CANCEL_URL,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
