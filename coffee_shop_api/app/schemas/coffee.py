"""
Pydantic models for catalog entries.

A coffee's coarse type label is called ``category`` in Python code but
travels as ``type`` on the wire, which is the field name existing
clients of the service read.
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Coffee(BaseModel):
    """A purchasable coffee product.  Instances are immutable."""

    id: str = Field(..., examples=["c001"])
    name: str = Field(..., examples=["Espresso"])
    category: str = Field(..., alias="type", examples=["Espresso"])
    price: float = Field(..., ge=0, examples=[60])
    description: str = Field("", examples=["Rich and smooth"])

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class CoffeeSearchResult(BaseModel):
    """Envelope returned by ``GET /coffees/search``."""

    coffees: List[Coffee]
