"""Tests for CoffeeShopClient.

The client is pointed at a live application through FastAPI's
``TestClient`` (which speaks the requests-style ``request`` API), and
transport failures are simulated with ``unittest.mock``.
"""

from unittest.mock import MagicMock

import pytest
import requests
from fastapi.testclient import TestClient

from coffee_shop_client import CoffeeShopClient


@pytest.fixture
def api(client: TestClient) -> CoffeeShopClient:
    return CoffeeShopClient(base_url="http://testserver/", session=client)


class TestCatalogCalls:
    def test_list_coffees(self, api: CoffeeShopClient) -> None:
        coffees, error = api.list_coffees()

        assert error is None
        assert [c["id"] for c in coffees] == ["c001", "c002", "c003"]

    def test_get_coffee(self, api: CoffeeShopClient) -> None:
        coffee, error = api.get_coffee("c002")

        assert error is None
        assert coffee["name"] == "Americano"
        assert coffee["type"] == "Espresso"

    def test_get_unknown_coffee(self, api: CoffeeShopClient) -> None:
        coffee, error = api.get_coffee("c404")

        assert coffee is None
        assert error == {"status_code": 404, "message": "Coffee not found"}

    def test_search_unwraps_envelope(self, api: CoffeeShopClient) -> None:
        coffees, error = api.search_coffees(coffee_type="ESPRESSO")

        assert error is None
        assert [c["id"] for c in coffees] == ["c001", "c002"]

    def test_search_by_name(self, api: CoffeeShopClient) -> None:
        coffees, _ = api.search_coffees(name="latte")

        assert [c["id"] for c in coffees] == ["c003"]


class TestOrderCalls:
    def test_create_and_get_order(self, api: CoffeeShopClient) -> None:
        created, error = api.create_order("c003", 2)

        assert error is None
        assert created["status"] == "Pending"
        fetched, error = api.get_order(created["order_id"])
        assert error is None
        assert fetched == created

    def test_invalid_quantity(self, api: CoffeeShopClient) -> None:
        order, error = api.create_order("c001", 0)

        assert order is None
        assert error == {"status_code": 400, "message": "Invalid quantity, must be greater than 0"}

    def test_unknown_order(self, api: CoffeeShopClient) -> None:
        _, error = api.get_order("missing")

        assert error["status_code"] == 404
        assert error["message"] == "Order not found"


class TestTransport:
    def test_connection_error_is_reported(self) -> None:
        session = MagicMock()
        session.request.side_effect = requests.ConnectionError("refused")
        api = CoffeeShopClient(base_url="http://coffee.invalid", session=session)

        data, error = api.list_coffees()

        assert data is None
        assert error["status_code"] is None
        assert "refused" in error["message"]

    def test_request_uses_base_url_and_timeout(self) -> None:
        session = MagicMock()
        session.request.return_value.status_code = 200
        session.request.return_value.content = b"[]"
        session.request.return_value.json.return_value = []
        api = CoffeeShopClient(base_url="http://coffee.local:8080/", timeout=3, session=session)

        coffees, error = api.list_coffees()

        assert (coffees, error) == ([], None)
        session.request.assert_called_once_with(
            method="GET",
            url="http://coffee.local:8080/coffees",
            params=None,
            json=None,
            timeout=3,
        )

    def test_non_json_error_body_falls_back_to_text(self) -> None:
        session = MagicMock()
        response = session.request.return_value
        response.status_code = 502
        response.json.side_effect = ValueError("no json")
        response.text = "Bad Gateway"
        api = CoffeeShopClient(session=session)

        _, error = api.get_coffee("c001")

        assert error == {"status_code": 502, "message": "Bad Gateway"}
