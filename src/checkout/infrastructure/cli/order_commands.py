"""CLI commands for creating and quoting orders.

Requests are read as JSON (a file, or ``-`` for stdin) in the same shape
an HTTP client would post them.  Results are printed to stdout as JSON;
business errors and internal failures are printed to stderr as JSON
carrying the HTTP-like status of the error.
"""

from __future__ import annotations

import json
import logging
from typing import IO, Any, NoReturn

import click

from checkout.application.create_order import CreateOrderHandler
from checkout.application.quote_order import QuoteOrderHandler
from checkout.domain.exceptions import CheckoutError
from checkout.infrastructure.bootstrap import (
    payment_gateway,
    product_catalog,
    shipping_service,
)

log = logging.getLogger(__name__)


def _read_request(request_file: IO[str]) -> Any:
    try:
        return json.load(request_file)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(
            f"Request is not valid JSON ({exc.msg} at line {exc.lineno})",
            param_hint="--request",
        )


def _exit_with(body: dict) -> NoReturn:
    click.echo(json.dumps(body), err=True)
    click.get_current_context().exit(1)


def _fail(error: CheckoutError) -> NoReturn:
    _exit_with({"status": error.status_code, **error.to_dict()})


def _internal_error() -> NoReturn:
    _exit_with({"status": 500, "type": "InternalServerError"})


@click.command("create")
@click.option(
    "--request",
    "request_file",
    required=True,
    type=click.File("r"),
    help="Create-order request as JSON ('-' for stdin).",
)
def order_create(request_file: IO[str]) -> None:
    """Create an order and start its payment."""
    raw = _read_request(request_file)

    gateway = None
    try:
        gateway = payment_gateway()
        handler = CreateOrderHandler(
            catalog=product_catalog(),
            shipping_service=shipping_service(),
            payment_gateway=gateway,
        )
        result = handler.handle(raw)
    except Exception:
        log.exception("Create order request failed unexpectedly")
        _internal_error()
    finally:
        if gateway is not None:
            gateway.close()

    if isinstance(result, CheckoutError):
        _fail(result)

    click.echo(json.dumps(result.to_dict()))


@click.command("quote")
@click.option(
    "--request",
    "request_file",
    required=True,
    type=click.File("r"),
    help="Create-order request as JSON ('-' for stdin).",
)
def order_quote(request_file: IO[str]) -> None:
    """Price an order without starting its payment."""
    raw = _read_request(request_file)

    try:
        handler = QuoteOrderHandler(
            catalog=product_catalog(),
            shipping_service=shipping_service(),
        )
        result = handler.handle(raw)
    except Exception:
        log.exception("Quote order request failed unexpectedly")
        _internal_error()

    if isinstance(result, CheckoutError):
        _fail(result)

    click.echo(json.dumps(result.to_dict(), indent=2))
