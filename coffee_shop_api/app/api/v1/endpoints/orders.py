"""
Order endpoints for API v1.

Orders are placed with ``POST /orders`` and read back with
``GET /orders/{order_id}``.  There is no listing, update or delete
endpoint; the ledger is append-only.
"""

from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from coffee_shop_api.app.core.deps import get_order_service
from coffee_shop_api.app.core.errors import INVALID_REQUEST, InvalidArgumentError
from coffee_shop_api.app.schemas.order import Order, OrderCreate
from coffee_shop_api.app.services.order_service import OrderService

router = APIRouter()

# The body is read by hand, so describe it to OpenAPI explicitly.
_ORDER_BODY_DOC = {
    "requestBody": {
        "required": True,
        "content": {"application/json": {"schema": OrderCreate.model_json_schema()}},
    }
}


async def parse_order_body(request: Request) -> OrderCreate:
    """Decode the request body as an ``OrderCreate``.

    The body is treated as JSON whatever ``Content-Type`` says, so
    ``curl -d '{...}'`` (form-encoded by default) and ``text/plain``
    clients are accepted.  Anything that does not decode into the schema
    raises ``InvalidArgumentError("Invalid request")``.
    """
    body = await request.body()
    try:
        return OrderCreate.model_validate_json(body)
    except ValidationError as exc:
        raise InvalidArgumentError(INVALID_REQUEST) from exc


@router.post("", response_model=Order, status_code=status.HTTP_201_CREATED, openapi_extra=_ORDER_BODY_DOC)
async def create_order(
    order_in: OrderCreate = Depends(parse_order_body),
    orders: OrderService = Depends(get_order_service),
) -> Order:
    """Place an order for ``quantity`` units of ``coffee_id``.

    Responds 400 for a malformed body or a non-positive quantity and
    404 if the coffee does not exist.  New orders are ``Pending`` and
    due ten minutes after creation by default.
    """
    return orders.create_order(order_in.coffee_id, order_in.quantity)


@router.get("/{order_id}", response_model=Order)
async def get_order(order_id: str, orders: OrderService = Depends(get_order_service)) -> Order:
    """Retrieve an order by its ID.  Returns 404 if it was never placed."""
    return orders.get_order(order_id)
