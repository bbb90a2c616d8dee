"""
Pydantic schemas for orders.

``OrderCreate`` is the request body of ``POST /orders`` and ``Order``
is the record stored in the ledger and returned by the API.
Timestamps are kept as RFC 3339 strings (second precision, numeric
offset) so that stored and returned values are byte-for-byte the same.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class OrderStatus(str, Enum):
    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class OrderCreate(BaseModel):
    """Schema for placing a new order.

    Both fields are optional on the wire: a missing ``coffee_id`` is an
    empty string and a missing ``quantity`` is zero, and the service
    rejects them with its own errors.  Types are strict, so a quoted or
    fractional quantity makes the body malformed, as does a quantity
    outside the signed 64-bit range.
    """

    coffee_id: StrictStr = Field("", examples=["c003"])
    quantity: StrictInt = Field(0, ge=INT64_MIN, le=INT64_MAX, examples=[2])


class Order(BaseModel):
    """A placed order."""

    order_id: str
    coffee_id: str
    quantity: int
    created_at: str = Field(..., examples=["2025-03-03T15:30:45+07:00"])
    estimated_delivery: str = Field(..., examples=["2025-03-03T15:40:45+07:00"])
    status: OrderStatus

    model_config = ConfigDict(frozen=True)
