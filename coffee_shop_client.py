"""Coffee Shop API client.

This module defines a small client wrapper around the Coffee Shop REST
API.  It uses the ``requests`` library internally to make HTTP calls.

The client exposes one method per API operation:

* :meth:`list_coffees` – return the whole catalog.
* :meth:`get_coffee` – fetch a single coffee by its identifier.
* :meth:`search_coffees` – filter the catalog by name and/or type.
* :meth:`create_order` – place an order.
* :meth:`get_order` – fetch a previously placed order.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is ``None`` and ``error`` is a
dictionary with keys ``status_code`` and ``message``.  The message is
taken from the ``error`` field of the server's JSON reply when there
is one.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


class CoffeeShopClient:
    """Client for interacting with the Coffee Shop API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8080",
        timeout: float = 15,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL for the API, including any path prefix,
                e.g. ``http://localhost:8080``.
            timeout: Seconds to wait for each response.
            session: Optional session.  Anything with a requests-style
                ``request`` method works, e.g. FastAPI's ``TestClient``.
                If not supplied a new ``requests.Session`` is created.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helper
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET`` or ``POST``).
            path: Path relative to :attr:`base_url` (e.g. ``/coffees``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if response.status_code >= 400:
            message = ""
            try:
                err_json = response.json()
                if isinstance(err_json, dict):
                    message = err_json.get("error") or err_json.get("detail") or ""
                if not message:
                    message = str(err_json)
            except ValueError:
                message = response.text
            if not message:
                message = f"HTTP {response.status_code}"
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}

        if response.content:
            return response.json(), None
        return None, None

    # ------------------------------------------------------------------
    # Catalog operations
    # ------------------------------------------------------------------
    def list_coffees(self) -> Result:
        """Retrieve every coffee in the catalog as a list of dicts."""
        return self._request("GET", "/coffees")

    def get_coffee(self, coffee_id: str) -> Result:
        """Retrieve one coffee.  Unknown identifiers yield a 404 error."""
        return self._request("GET", f"/coffees/{coffee_id}")

    def search_coffees(self, name: Optional[str] = None, coffee_type: Optional[str] = None) -> Result:
        """Search the catalog.

        Args:
            name: Case-insensitive substring of the coffee name.
            coffee_type: Coffee type, matched exactly ignoring case.
        Returns:
            ``(coffees, error)`` where ``coffees`` is the list found
            under the ``coffees`` key of the response.
        """
        params: Dict[str, str] = {}
        if name:
            params["name"] = name
        if coffee_type:
            params["type"] = coffee_type
        data, error = self._request("GET", "/coffees/search", params=params or None)
        if error:
            return None, error
        coffees: List[Dict[str, Any]] = (data or {}).get("coffees", [])
        return coffees, None

    # ------------------------------------------------------------------
    # Order operations
    # ------------------------------------------------------------------
    def create_order(self, coffee_id: str, quantity: int) -> Result:
        """Place an order and return the created order record."""
        return self._request("POST", "/orders", json_body={"coffee_id": coffee_id, "quantity": quantity})

    def get_order(self, order_id: str) -> Result:
        """Retrieve an order by ID.  Unknown identifiers yield a 404 error."""
        return self._request("GET", f"/orders/{order_id}")
