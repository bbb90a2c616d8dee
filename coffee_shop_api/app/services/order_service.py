"""
Business logic for orders.

``OrderService.create_order`` validates the requested quantity and
coffee, stamps the order with its creation and estimated delivery
times and appends it to the ledger.  New orders always start as
``Pending``; there are no status transitions.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timedelta
from typing import Callable, Optional

from coffee_shop_api.app.core.errors import InvalidArgumentError, NotFoundError
from coffee_shop_api.app.core.store import OrderLedger
from coffee_shop_api.app.schemas.order import Order, OrderStatus
from coffee_shop_api.app.services.catalog_service import CatalogService

logger = logging.getLogger(__name__)

ORDER_NOT_FOUND = "Order not found"
INVALID_QUANTITY = "Invalid quantity, must be greater than 0"

DEFAULT_DELIVERY_MINUTES = 10


def local_now() -> datetime:
    """Current wall-clock time, timezone-aware in the local zone."""
    return datetime.now().astimezone()


def format_timestamp(moment: datetime) -> str:
    """Render ``moment`` as RFC 3339 with second precision, e.g. ``2025-03-03T15:30:45+07:00``."""
    return moment.isoformat(timespec="seconds")


class OrderService:
    """Places and looks up orders.

    ``clock`` and ``id_factory`` default to the local wall clock and
    UUID4 strings; tests replace them to get deterministic values.
    """

    def __init__(
        self,
        catalog: CatalogService,
        ledger: OrderLedger,
        delivery_minutes: int = DEFAULT_DELIVERY_MINUTES,
        clock: Optional[Callable[[], datetime]] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.catalog = catalog
        self.ledger = ledger
        self.delivery_window = timedelta(minutes=delivery_minutes)
        self._clock = clock or local_now
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))

    def create_order(self, coffee_id: str, quantity: int) -> Order:
        """Create and record a new order.

        Raises ``InvalidArgumentError`` if ``quantity`` is not positive
        (checked first) and ``NotFoundError`` if ``coffee_id`` is not in
        the catalog.  Both timestamps derive from a single reading of the
        clock, so ``estimated_delivery - created_at`` is exactly the
        delivery window.
        """
        if quantity <= 0:
            raise InvalidArgumentError(INVALID_QUANTITY)
        # Raises NotFoundError("Coffee not found") for unknown ids.
        self.catalog.get_coffee(coffee_id)

        created = self._clock().replace(microsecond=0)
        order = Order(
            order_id=self._new_id(),
            coffee_id=coffee_id,
            quantity=quantity,
            created_at=format_timestamp(created),
            estimated_delivery=format_timestamp(created + self.delivery_window),
            status=OrderStatus.PENDING,
        )
        self.ledger.append(order)
        logger.info("Created order %s: %d x %s", order.order_id, quantity, coffee_id)
        return order

    def get_order(self, order_id: str) -> Order:
        """Return the order with ``order_id``, or raise ``NotFoundError``."""
        order = self.ledger.get(order_id)
        if order is None:
            raise NotFoundError(ORDER_NOT_FOUND)
        return order
