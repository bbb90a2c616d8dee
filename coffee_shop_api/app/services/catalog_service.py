"""
Business logic for the coffee catalog.

The catalog is fixed at startup, so every operation here is a pure
read: listing, lookup by identifier and filtered search.
"""

from typing import List, Optional

from coffee_shop_api.app.core.errors import NotFoundError
from coffee_shop_api.app.core.store import CoffeeCatalog
from coffee_shop_api.app.schemas.coffee import Coffee

COFFEE_NOT_FOUND = "Coffee not found"


class CatalogService:
    """Read-only access to a ``CoffeeCatalog``."""

    def __init__(self, catalog: CoffeeCatalog) -> None:
        self.catalog = catalog

    def list_coffees(self) -> List[Coffee]:
        """Return every coffee in catalog order."""
        return self.catalog.all()

    def get_coffee(self, coffee_id: str) -> Coffee:
        """Return the coffee whose ``id`` equals ``coffee_id`` exactly.

        Raises ``NotFoundError`` when no coffee matches.  Matching is
        case-sensitive.
        """
        coffee = self.catalog.get(coffee_id)
        if coffee is None:
            raise NotFoundError(COFFEE_NOT_FOUND)
        return coffee

    def search_coffees(self, name: Optional[str] = None, category: Optional[str] = None) -> List[Coffee]:
        """Return coffees matching both filters, in catalog order.

        - **name** matches when it is a case-insensitive substring of the
          coffee's name.
        - **category** matches when it equals the coffee's category,
          ignoring case.

        An empty or missing filter matches every coffee.  No match gives
        an empty list.
        """
        name_query = (name or "").casefold()
        category_query = (category or "").casefold()
        return [
            coffee
            for coffee in self.catalog
            if (not name_query or name_query in coffee.name.casefold())
            and (not category_query or coffee.category.casefold() == category_query)
        ]
