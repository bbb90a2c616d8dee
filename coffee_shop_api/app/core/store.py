"""
In-memory storage for the catalog and the order ledger.

Both stores live for the lifetime of the process and are created by
``create_app``, which attaches them to ``app.state``.  Nothing here is
global, so tests and embedding code can build as many independent
stores as they like.  Swapping in a persistent backend means
replacing these two classes while keeping their method signatures.

``CoffeeCatalog`` is read-only after construction.  ``OrderLedger`` is
append-only and guarded by a lock, so concurrent ``append`` calls never
lose an order and readers never observe a half-written index.
"""

from __future__ import annotations

import threading
from typing import Dict, Iterable, Iterator, List, Optional

from coffee_shop_api.app.schemas.coffee import Coffee
from coffee_shop_api.app.schemas.order import Order, OrderStatus


class CoffeeCatalog:
    """Fixed, ordered set of coffees indexed by identifier."""

    def __init__(self, coffees: Iterable[Coffee] = ()) -> None:
        self._coffees = tuple(coffees)
        self._index: Dict[str, Coffee] = {}
        for coffee in self._coffees:
            if coffee.id in self._index:
                raise ValueError(f"Duplicate coffee id {coffee.id!r}")
            self._index[coffee.id] = coffee

    def all(self) -> List[Coffee]:
        """Return every coffee in insertion order."""
        return list(self._coffees)

    def get(self, coffee_id: str) -> Optional[Coffee]:
        return self._index.get(coffee_id)

    def __iter__(self) -> Iterator[Coffee]:
        return iter(self._coffees)

    def __len__(self) -> int:
        return len(self._coffees)


class OrderLedger:
    """Append-only record of placed orders."""

    def __init__(self, orders: Iterable[Order] = ()) -> None:
        self._lock = threading.Lock()
        self._orders: List[Order] = []
        self._index: Dict[str, Order] = {}
        for order in orders:
            self.append(order)

    def append(self, order: Order) -> Order:
        """Record ``order``.  Raises ``ValueError`` on a reused ``order_id``."""
        with self._lock:
            if order.order_id in self._index:
                raise ValueError(f"Duplicate order id {order.order_id!r}")
            self._orders.append(order)
            self._index[order.order_id] = order
        return order

    def get(self, order_id: str) -> Optional[Order]:
        with self._lock:
            return self._index.get(order_id)

    def all(self) -> List[Order]:
        """Return a snapshot of every order in insertion order."""
        with self._lock:
            return list(self._orders)

    def __len__(self) -> int:
        with self._lock:
            return len(self._orders)


# Sample data loaded when ``settings.seed_sample_data`` is enabled.
SAMPLE_COFFEES = (
    Coffee(id="c001", name="Espresso", category="Espresso", price=60, description="เข้มข้น กลมกล่อม"),
    Coffee(id="c002", name="Americano", category="Espresso", price=65, description="เอสเพรสโซ่ผสมน้ำร้อน"),
    Coffee(id="c003", name="Latte", category="Latte", price=75, description="เอสเพรสโซ่ผสมนมร้อน"),
)

SAMPLE_ORDERS = (
    Order(
        order_id="o12345",
        coffee_id="c003",
        quantity=2,
        created_at="2025-03-03T15:30:45+07:00",
        estimated_delivery="2025-03-03T15:40:45+07:00",
        status=OrderStatus.IN_PROGRESS,
    ),
)


def build_catalog(seed: bool = True) -> CoffeeCatalog:
    return CoffeeCatalog(SAMPLE_COFFEES if seed else ())


def build_ledger(seed: bool = True) -> OrderLedger:
    return OrderLedger(SAMPLE_ORDERS if seed else ())
