"""Grocery Optimizer - Split a grocery list across stores to minimize spend."""

from .assignment import assign_items
from .catalog import DEFAULT_CATALOG, Catalog, CatalogError, load_catalog
from .config import ConfigManager
from .list_parser import parse_grocery_list
from .models import AssignedItem, AssignmentResult, GroceryLineItem, StoreBucket
from .optimizer import (
    EXAMPLE_LIST,
    DealOptimizer,
    EmptyGroceryListError,
    NoStoresSelectedError,
    ProductNotFoundError,
    UnknownStoreError,
)
from .output_formatter import OutputFormatter, format_currency

__version__ = "0.1.0"

__all__ = [
    "assign_items",
    "AssignedItem",
    "AssignmentResult",
    "Catalog",
    "CatalogError",
    "ConfigManager",
    "DealOptimizer",
    "DEFAULT_CATALOG",
    "EmptyGroceryListError",
    "EXAMPLE_LIST",
    "format_currency",
    "GroceryLineItem",
    "load_catalog",
    "NoStoresSelectedError",
    "OutputFormatter",
    "parse_grocery_list",
    "ProductNotFoundError",
    "StoreBucket",
    "UnknownStoreError",
]
