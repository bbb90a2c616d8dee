"""
Coffee catalog endpoints for API v1.

These routes expose the read-only catalog: the full list, a
case-insensitive search and lookup of a single coffee.  ``/search`` is
declared before ``/{coffee_id}`` so that it is never captured as an
identifier.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from coffee_shop_api.app.core.deps import get_catalog_service
from coffee_shop_api.app.schemas.coffee import Coffee, CoffeeSearchResult
from coffee_shop_api.app.services.catalog_service import CatalogService

router = APIRouter()


@router.get("", response_model=List[Coffee])
async def list_coffees(catalog: CatalogService = Depends(get_catalog_service)) -> List[Coffee]:
    """Return every coffee in the catalog."""
    return catalog.list_coffees()


@router.get("/search", response_model=CoffeeSearchResult)
async def search_coffees(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the coffee name"),
    category: Optional[str] = Query(None, alias="type", description="Coffee type, compared ignoring case"),
    catalog: CatalogService = Depends(get_catalog_service),
) -> CoffeeSearchResult:
    """Search coffees by name and type.

    - **name**: substring match on the name, ignoring case.
    - **type**: exact match on the type, ignoring case.

    Omitted filters match everything; no match yields ``{"coffees": []}``.
    """
    return CoffeeSearchResult(coffees=catalog.search_coffees(name=name, category=category))


@router.get("/{coffee_id}", response_model=Coffee)
async def get_coffee(coffee_id: str, catalog: CatalogService = Depends(get_catalog_service)) -> Coffee:
    """Retrieve a single coffee by ID.  Returns 404 if it does not exist."""
    return catalog.get_coffee(coffee_id)
