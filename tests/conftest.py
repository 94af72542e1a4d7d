"""Shared test fixtures for Grocery Optimizer."""

import pytest

from grocery_optimizer.catalog import Catalog
from grocery_optimizer.optimizer import DealOptimizer


@pytest.fixture
def small_catalog():
    """Three stores A, B, C with a handful of products."""
    return Catalog(
        prices={
            "milk": {"A": 3.00, "B": 2.00},
            "bread": {"A": 2.50, "B": 2.50},
            "salmon": {"C": 9.99},
            "water": {"A": 0.0, "B": 1.00},
            "eggs": {"A": 1.89, "B": 2.79, "C": 2.49},
        },
        sale_tags={
            "milk": {"B": "Weekly sale"},
            "eggs": {"C": "Card price"},
        },
        stores=["A", "B", "C"],
    )


@pytest.fixture
def optimizer(small_catalog):
    """Create a DealOptimizer over the small catalog."""
    return DealOptimizer(catalog=small_catalog)


@pytest.fixture
def catalog_file(tmp_path):
    """Write a catalog TOML file."""
    path = tmp_path / "prices.toml"
    path.write_text("""
stores = ["Corner", "Mart"]

[prices.milk]
Corner = 3.25
Mart = 2.75

[prices."Oat Milk"]
Mart = 4.10

[sale_tags.milk]
Mart = "Weekend deal"
""")
    return path


@pytest.fixture
def cli_args(tmp_path):
    """Global CLI options pointing at an isolated (missing) config file."""
    return ["--json", "--config", str(tmp_path / "config.toml")]
