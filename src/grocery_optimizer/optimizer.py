"""Grocery deal optimization operations."""

import logging
from collections.abc import Iterable

from .assignment import assign_items
from .catalog import DEFAULT_CATALOG, Catalog, normalize_product_name
from .list_parser import parse_grocery_list

logger = logging.getLogger(__name__)

EXAMPLE_LIST = """milk x2
eggs x12
boneless chicken breast x3
apples x6
cereal
pasta x4
salmon x2
rice x2
ice cream"""


class NoStoresSelectedError(Exception):
    """Raised when optimizing without any selected store."""

    def __init__(self):
        super().__init__("Select at least one store first.")


class EmptyGroceryListError(Exception):
    """Raised when the grocery list has no usable items."""

    def __init__(self):
        super().__init__("Enter at least one grocery item.")


class UnknownStoreError(Exception):
    """Raised when a selected store is not in the catalog."""

    def __init__(self, store: str, known: Iterable[str]):
        self.store = store
        self.known = tuple(known)
        super().__init__(f"Unknown store '{store}'. Known stores: {', '.join(self.known)}")


class ProductNotFoundError(Exception):
    """Raised when a product lookup misses the catalog."""

    def __init__(self, product: str):
        self.product = product
        super().__init__(f"No price data for '{product}'")


class DealOptimizer:
    """Splits grocery lists across stores using a price catalog."""

    def __init__(self, catalog: Catalog | None = None):
        """Initialize optimizer.

        Args:
            catalog: Price catalog. Uses the built-in catalog if not provided.
        """
        self.catalog = catalog or DEFAULT_CATALOG

    @property
    def stores(self) -> tuple[str, ...]:
        """Stores known to the catalog."""
        return self.catalog.stores

    def resolve_stores(self, names: Iterable[str]) -> list[str]:
        """Map user-entered store names onto catalog store names.

        Matching ignores case and surrounding whitespace. Duplicates are
        dropped, keeping the first occurrence.

        Raises:
            UnknownStoreError: If a name matches no catalog store
        """
        lookup = {store.lower(): store for store in self.stores}
        resolved: list[str] = []
        for name in names:
            store = lookup.get(name.strip().lower())
            if store is None:
                raise UnknownStoreError(name, self.stores)
            if store not in resolved:
                resolved.append(store)
        return resolved

    def optimize(self, text: str, stores: Iterable[str]) -> dict:
        """Parse a grocery list and assign every item to its cheapest store.

        Args:
            text: Raw grocery list, one item per line
            stores: Selected store names

        Returns:
            Dict with success status and assignment data

        Raises:
            NoStoresSelectedError: If no store is selected
            UnknownStoreError: If a selected store is not in the catalog
            EmptyGroceryListError: If the list has no parseable items
        """
        selected = self.resolve_stores(stores)
        if not selected:
            raise NoStoresSelectedError()

        items = parse_grocery_list(text)
        if not items:
            raise EmptyGroceryListError()

        result = assign_items(items, selected, self.catalog)
        logger.info(
            "Assigned %d of %d items across %d store(s)",
            result.assigned_count,
            len(items),
            result.used_stores,
        )

        if result.unknown:
            message = (
                f"Matched {result.assigned_count} of {len(items)} items; "
                f"{len(result.unknown)} without price data"
            )
        else:
            message = f"Matched all {len(items)} items"

        return {
            "success": True,
            "message": message,
            "data": {
                "assignment": {
                    "selected_stores": selected,
                    "all_matched": result.all_matched,
                    **result.model_dump(mode="json"),
                }
            },
        }

    def list_stores(self, selected: Iterable[str] | None = None) -> dict:
        """List catalog stores, flagging those in the default selection."""
        chosen = set(selected or [])
        return {
            "success": True,
            "message": f"{len(self.stores)} stores available",
            "data": {
                "stores": [
                    {"name": store, "selected": store in chosen} for store in self.stores
                ]
            },
        }

    def show_catalog(self, product: str | None = None) -> dict:
        """Show the whole price table or one product's prices.

        Raises:
            ProductNotFoundError: If the product is not in the catalog
        """
        if product is None:
            return {
                "success": True,
                "message": f"{len(self.catalog)} products in catalog",
                "data": {"catalog": self.catalog.to_dict()},
            }

        name = normalize_product_name(product)
        prices = self.catalog.prices_for(name)
        if prices is None:
            raise ProductNotFoundError(product)

        cheapest_store = min(prices, key=lambda s: prices[s]) if prices else None
        return {
            "success": True,
            "message": f"Prices for {name}",
            "data": {
                "product": {
                    "name": name,
                    "prices": dict(prices),
                    "sale_tags": dict(self.catalog.sale_tags_for(name)),
                    "cheapest_store": cheapest_store,
                }
            },
        }
