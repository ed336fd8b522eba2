"""Integration tests for the CreateOrder use case.

Uses in-memory fakes for the catalog, shipping service and gateway.
"""

import copy

import httpx
import pytest

from checkout.application.create_order import CreateOrderHandler
from checkout.application.dto import OrderCreated
from checkout.domain.exceptions import (
    InvalidRequest,
    PaymentGatewayError,
    UnavailableProducts,
)
from checkout.domain.model.order import Address, BillingInfo, ShippingCost
from checkout.domain.model.product import Product
from checkout.domain.model.value_objects import Money, Vat
from checkout.infrastructure.persistence.json_product_catalog import (
    InMemoryProductCatalog,
)
from tests.fakes import FakePaymentGateway, FakeShippingService

PRODUCTS = [
    Product("0", "product-0", "0400939035768", "acme", "clothes", Money.of("9.99"), Vat.STANDARD),
    Product("1", "product-1", "1400939035767", "acme", "electronic", Money.of("17.54"), Vat.STANDARD),
    Product("2", "product-2", "2400939035766", "acme", "home", Money.of("1.12"), Vat.REDUCED),
]

REQUEST = {
    "user": {"firstName": "Mario", "lastName": "Rossi"},
    "shipping": {
        "name": "test",
        "address": {
            "countryCode": "IT",
            "city": "Milano",
            "postCode": "20100",
            "addressLine": "Vicolo Stretto, 1",
        },
        "phoneNumber": "+39 000 000000",
    },
    "items": [
        {"sku": "0", "quantity": 1},
        {"sku": "1", "quantity": 2},
        {"sku": "2", "quantity": 3},
    ],
}


def _setup(
    shipping: FakeShippingService | None = None,
    gateway: FakePaymentGateway | None = None,
) -> tuple[CreateOrderHandler, FakeShippingService, FakePaymentGateway]:
    shipping = shipping or FakeShippingService()
    gateway = gateway or FakePaymentGateway()
    handler = CreateOrderHandler(InMemoryProductCatalog(PRODUCTS), shipping, gateway)
    return handler, shipping, gateway


def _request(**changes) -> dict:
    request = copy.deepcopy(REQUEST)
    request.update(changes)
    return request


def _without(path: str) -> dict:
    """Copy of REQUEST with the dotted *path* removed."""
    request = copy.deepcopy(REQUEST)
    *parents, leaf = path.split(".")
    node = request
    for key in parents:
        node = node[key]
    del node[leaf]
    return request


class TestCreateOrderHappyPath:

    def test_returns_checkout_url(self):
        handler, _, _ = _setup(gateway=FakePaymentGateway("https://pay.example/xyz"))
        result = handler.handle(REQUEST)
        assert result == OrderCreated(checkout_url="https://pay.example/xyz")
        assert result.to_dict() == {"checkoutUrl": "https://pay.example/xyz"}

    def test_gateway_receives_assembled_order(self):
        cost = ShippingCost(net_price=Money.of("4.90"), vat=Vat.STANDARD)
        handler, _, gateway = _setup(shipping=FakeShippingService(cost))
        handler.handle(REQUEST)

        [order] = gateway.orders
        assert [(i.sku, i.quantity.value) for i in order.items] == [("0", 1), ("1", 2), ("2", 3)]
        assert order.items[1].net_unit_price == Money.of("17.54")
        assert order.user.first_name == "Mario"
        assert order.user.email is None
        assert order.shipping.to.name == "test"
        assert order.shipping.to.phone_number == "+39 000 000000"
        assert order.shipping.net_price == Money.of("4.90")
        assert order.shipping.vat == Vat.STANDARD
        assert order.billing is None

    def test_shipping_is_quoted_for_resolved_items_and_address(self):
        handler, shipping, _ = _setup()
        handler.handle(REQUEST)

        [(items, destination)] = shipping.calls
        assert [i.sku for i in items] == ["0", "1", "2"]
        assert destination == Address(
            country_code="IT",
            city="Milano",
            post_code="20100",
            address_line="Vicolo Stretto, 1",
        )

    def test_billing_is_carried_over(self):
        handler, _, gateway = _setup()
        handler.handle(_request(billing={"name": "ACME S.p.A.", "phoneNumber": "+39 02 000"}))
        assert gateway.orders[0].billing == BillingInfo(
            name="ACME S.p.A.", phone_number="+39 02 000"
        )

    def test_billing_address_is_mapped(self):
        handler, _, gateway = _setup()
        handler.handle(_request(billing={"address": REQUEST["shipping"]["address"]}))
        billing = gateway.orders[0].billing
        assert billing.name is None
        assert billing.address.city == "Milano"

    def test_each_external_call_made_once(self):
        handler, shipping, gateway = _setup()
        handler.handle(REQUEST)
        assert len(shipping.calls) == 1
        assert len(gateway.orders) == 1


class TestCreateOrderInvalidRequest:

    @pytest.mark.parametrize(
        "path",
        [
            "user",
            "user.firstName",
            "user.lastName",
            "shipping",
            "shipping.name",
            "shipping.address",
            "shipping.address.countryCode",
            "shipping.address.city",
            "shipping.address.postCode",
            "shipping.address.addressLine",
            "items",
        ],
    )
    def test_missing_field(self, path):
        handler, shipping, gateway = _setup()
        result = handler.handle(_without(path))
        assert isinstance(result, InvalidRequest)
        assert any(error.startswith(f"{path}:") for error in result.errors)
        assert shipping.calls == []
        assert gateway.orders == []

    def test_item_without_sku(self):
        handler, _, _ = _setup()
        result = handler.handle(_request(items=[*REQUEST["items"], {"quantity": 2}]))
        assert isinstance(result, InvalidRequest)
        assert result.errors == ["items.3.sku: Field required"]

    def test_item_without_quantity(self):
        handler, _, _ = _setup()
        result = handler.handle(_request(items=[*REQUEST["items"], {"sku": "23409832598"}]))
        assert isinstance(result, InvalidRequest)
        assert result.errors == ["items.3.quantity: Field required"]

    @pytest.mark.parametrize("quantity", [0, -1, 0.1, 1.5, "1", "not-a-number", None])
    def test_invalid_quantity(self, quantity):
        handler, _, _ = _setup()
        result = handler.handle(_request(items=[{"sku": "0", "quantity": quantity}]))
        assert isinstance(result, InvalidRequest)
        assert all(error.startswith("items.0.quantity:") for error in result.errors)

    def test_empty_items(self):
        handler, _, _ = _setup()
        result = handler.handle(_request(items=[]))
        assert isinstance(result, InvalidRequest)

    def test_empty_address_field(self):
        request = _request()
        request["shipping"]["address"]["city"] = ""
        handler, _, _ = _setup()
        result = handler.handle(request)
        assert isinstance(result, InvalidRequest)

    def test_reports_every_violated_field(self):
        handler, _, _ = _setup()
        result = handler.handle({"items": []})
        paths = sorted(error.split(":")[0] for error in result.errors)
        assert paths == ["items", "shipping", "user"]

    def test_non_object_request(self):
        handler, _, _ = _setup()
        result = handler.handle(["not", "an", "object"])
        assert isinstance(result, InvalidRequest)
        assert result.errors[0].startswith("request:")

    def test_error_payload(self):
        handler, _, _ = _setup()
        result = handler.handle(_without("shipping.name"))
        assert result.to_dict()["type"] == "InvalidRequest"
        assert result.status_code == 422


class TestCreateOrderUnavailableProducts:

    def test_unknown_skus_are_reported(self):
        handler, _, _ = _setup()
        result = handler.handle(
            _request(items=[{"sku": "4598712487", "quantity": 1}, {"sku": "23409823409", "quantity": 1}])
        )
        assert isinstance(result, UnavailableProducts)
        assert result.to_dict() == {
            "type": "UnavailableProducts",
            "skus": ["4598712487", "23409823409"],
        }
        assert result.status_code == 400

    def test_no_external_call_when_a_sku_is_missing(self):
        handler, shipping, gateway = _setup()
        result = handler.handle(
            _request(items=[{"sku": "0", "quantity": 1}, {"sku": "B", "quantity": 1}])
        )
        assert isinstance(result, UnavailableProducts)
        assert result.skus == ["B"]
        assert shipping.calls == []
        assert gateway.orders == []


class TestCreateOrderGatewayFailures:

    def test_gateway_business_error_is_returned(self):
        handler, _, _ = _setup(gateway=FakePaymentGateway(error=PaymentGatewayError()))
        result = handler.handle(REQUEST)
        assert isinstance(result, PaymentGatewayError)
        assert result.to_dict() == {"type": "PaymentGatewayError"}

    def test_transport_error_propagates(self):
        error = httpx.ConnectError("connection refused")
        handler, _, _ = _setup(gateway=FakePaymentGateway(error=error))
        with pytest.raises(httpx.ConnectError):
            handler.handle(REQUEST)

    def test_shipping_failure_propagates_before_payment(self):
        shipping = FakeShippingService(error=RuntimeError("shipping service down"))
        handler, _, gateway = _setup(shipping=shipping)
        with pytest.raises(RuntimeError, match="shipping service down"):
            handler.handle(REQUEST)
        assert gateway.orders == []
