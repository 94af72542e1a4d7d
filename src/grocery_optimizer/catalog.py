"""Static price catalog: product to store to unit price, plus sale tags."""

import logging
import math
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog file cannot be read or is malformed."""


def normalize_product_name(name: str) -> str:
    """Normalize a product name into its catalog lookup key."""
    return name.strip().lower()


class Catalog:
    """Immutable price table shared by every optimization run.

    Prices are keyed by normalized product name, then by store name.
    A missing price is ``None`` from :meth:`price`, never a falsy zero.
    """

    def __init__(
        self,
        prices: Mapping[str, Mapping[str, float]],
        sale_tags: Mapping[str, Mapping[str, str]] | None = None,
        stores: Iterable[str] | None = None,
    ):
        """Build a catalog.

        Args:
            prices: Product name -> store -> unit price.
            sale_tags: Product name -> store -> sale annotation.
            stores: Ordered store enumeration. Derived from prices
                    (first-seen order) when omitted.

        Raises:
            CatalogError: If a price is negative or not a finite number.
        """
        price_table: dict[str, MappingProxyType] = {}
        for product, by_store in prices.items():
            key = normalize_product_name(product)
            entry: dict[str, float] = {}
            for store, price in by_store.items():
                entry[store] = _coerce_price(key, store, price)
            price_table[key] = MappingProxyType(entry)

        tag_table: dict[str, MappingProxyType] = {}
        for product, by_store in (sale_tags or {}).items():
            key = normalize_product_name(product)
            priced = price_table.get(key, MappingProxyType({}))
            entry_tags: dict[str, str] = {}
            for store, tag in by_store.items():
                if not tag:
                    continue
                if store not in priced:
                    logger.warning(
                        "Dropping sale tag %r for %s at %s: store has no price", tag, key, store
                    )
                    continue
                entry_tags[store] = str(tag)
            if entry_tags:
                tag_table[key] = MappingProxyType(entry_tags)

        if stores is None:
            seen: dict[str, None] = {}
            for by_store in price_table.values():
                for store in by_store:
                    seen.setdefault(store, None)
            store_order = tuple(seen)
        else:
            store_order = tuple(dict.fromkeys(stores))

        self._prices = MappingProxyType(price_table)
        self._sale_tags = MappingProxyType(tag_table)
        self._stores = store_order

    @property
    def stores(self) -> tuple[str, ...]:
        """The closed, ordered set of known store names."""
        return self._stores

    @property
    def products(self) -> tuple[str, ...]:
        """Known product names in catalog order."""
        return tuple(self._prices)

    @property
    def prices(self) -> Mapping[str, Mapping[str, float]]:
        """Read-only view of the full price table."""
        return self._prices

    def __contains__(self, product: object) -> bool:
        return isinstance(product, str) and normalize_product_name(product) in self._prices

    def __len__(self) -> int:
        return len(self._prices)

    def prices_for(self, product: str) -> Mapping[str, float] | None:
        """Get the store -> price mapping for a product, or None if unknown."""
        return self._prices.get(normalize_product_name(product))

    def price(self, product: str, store: str) -> float | None:
        """Get one store's unit price for a product."""
        by_store = self.prices_for(product)
        if by_store is None:
            return None
        return by_store.get(store)

    def sale_tag(self, product: str, store: str) -> str | None:
        """Get the sale annotation for a product at a store, if any."""
        tags = self._sale_tags.get(normalize_product_name(product))
        if tags is None:
            return None
        return tags.get(store)

    def sale_tags_for(self, product: str) -> Mapping[str, str]:
        """Get every sale annotation for a product."""
        return self._sale_tags.get(normalize_product_name(product), MappingProxyType({}))

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for JSON output."""
        return {
            "stores": list(self._stores),
            "prices": {product: dict(by_store) for product, by_store in self._prices.items()},
            "sale_tags": {product: dict(tags) for product, tags in self._sale_tags.items()},
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Catalog":
        """Build a catalog from a parsed TOML/JSON document.

        Raises:
            CatalogError: If the price table is missing or any section is malformed.
        """
        prices = data.get("prices")
        if not isinstance(prices, Mapping) or not prices:
            raise CatalogError("Catalog must define a non-empty [prices] table")
        for product, by_store in prices.items():
            if not isinstance(by_store, Mapping):
                raise CatalogError(f"Prices for '{product}' must be a table of store = price")

        sale_tags = data.get("sale_tags", {})
        if not isinstance(sale_tags, Mapping):
            raise CatalogError("[sale_tags] must be a table")
        for product, by_store in sale_tags.items():
            if not isinstance(by_store, Mapping):
                raise CatalogError(f"Sale tags for '{product}' must be a table of store = tag")

        stores = data.get("stores")
        if stores is not None and (
            not isinstance(stores, list) or not all(isinstance(s, str) for s in stores)
        ):
            raise CatalogError("'stores' must be a list of store names")

        return cls(prices=prices, sale_tags=sale_tags, stores=stores)


def _coerce_price(product: str, store: str, price: Any) -> float:
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise CatalogError(f"Price for {product} at {store} must be a number, got {price!r}")
    value = float(price)
    if not math.isfinite(value) or value < 0:
        raise CatalogError(f"Price for {product} at {store} must be non-negative, got {price!r}")
    return value


def load_catalog(path: Path) -> Catalog:
    """Load a catalog from a TOML file.

    Args:
        path: Path to the catalog file

    Returns:
        Catalog built from the file

    Raises:
        CatalogError: If the file is missing, unreadable or malformed
    """
    path = Path(path).expanduser()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except tomllib.TOMLDecodeError as e:
        raise CatalogError(f"Invalid catalog file {path}: {e}") from e

    catalog = Catalog.from_dict(data)
    logger.info("Loaded catalog with %d products from %s", len(catalog), path)
    return catalog


DEFAULT_STORES = ("Giant Eagle", "Kuhn's", "Aldi", "Shop 'n Save")

DEFAULT_PRICES: dict[str, dict[str, float]] = {
    "milk": {"Giant Eagle": 3.49, "Kuhn's": 3.19, "Aldi": 2.69, "Shop 'n Save": 3.09},
    "eggs": {"Giant Eagle": 2.99, "Kuhn's": 2.79, "Aldi": 1.89, "Shop 'n Save": 2.49},
    "boneless chicken breast": {"Giant Eagle": 4.99, "Kuhn's": 4.79, "Aldi": 3.99},
    "apples": {"Giant Eagle": 1.79, "Kuhn's": 1.69, "Aldi": 1.49, "Shop 'n Save": 1.59},
    "cereal": {"Giant Eagle": 3.99, "Kuhn's": 3.59, "Aldi": 2.49},
    "pasta": {"Giant Eagle": 1.49, "Kuhn's": 1.39, "Aldi": 1.09, "Shop 'n Save": 1.29},
    "ground beef": {"Giant Eagle": 5.49, "Kuhn's": 5.19, "Aldi": 4.79},
    "rice": {"Giant Eagle": 2.99, "Aldi": 2.49, "Shop 'n Save": 2.69},
    "salmon": {"Giant Eagle": 9.99, "Kuhn's": 9.49, "Shop 'n Save": 8.99},
}

DEFAULT_SALE_TAGS: dict[str, dict[str, str]] = {
    "milk": {"Aldi": "Weekly sale"},
    "eggs": {"Aldi": "Weekly sale"},
    "boneless chicken breast": {"Aldi": "Manager's special"},
    "cereal": {"Kuhn's": "Card price"},
    "salmon": {"Shop 'n Save": "3-day sale"},
}

DEFAULT_CATALOG = Catalog(DEFAULT_PRICES, DEFAULT_SALE_TAGS, stores=DEFAULT_STORES)
