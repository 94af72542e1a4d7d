"""CLI entry point for Grocery Optimizer."""

import sys
from pathlib import Path
from typing import Annotated

import typer

from .catalog import CatalogError, load_catalog
from .config import ConfigManager
from .log import configure_logging
from .optimizer import (
    EXAMPLE_LIST,
    DealOptimizer,
    EmptyGroceryListError,
    NoStoresSelectedError,
    ProductNotFoundError,
    UnknownStoreError,
)
from .output_formatter import OutputFormatter
from .tui import DealOptimizerTUI

app = typer.Typer(
    name="grocery-optimizer",
    help="Split a grocery list across stores to minimize spend",
    no_args_is_help=True,
)

# Global state for formatter and config (set by callback)
formatter: OutputFormatter = OutputFormatter()
config: ConfigManager | None = None
optimizer: DealOptimizer | None = None


def get_config() -> ConfigManager:
    """Get or create ConfigManager instance."""
    global config
    if config is None:
        config = ConfigManager()
    return config


def get_optimizer() -> DealOptimizer:
    """Get or create DealOptimizer instance using config values."""
    global optimizer
    if optimizer is None:
        cfg = get_config()
        catalog = load_catalog(cfg.catalog.path) if cfg.catalog.path else None
        optimizer = DealOptimizer(catalog)
    return optimizer


def default_stores() -> list[str]:
    """Configured default store selection, limited to stores the catalog knows."""
    known = set(get_optimizer().stores)
    return [store for store in get_config().defaults.stores if store in known]


@app.callback()
def main(
    json_output: Annotated[
        bool, typer.Option("--json", help="Output as JSON for programmatic use")
    ] = False,
    config_path: Annotated[
        Path | None, typer.Option("--config", help="Path to config.toml")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
) -> None:
    """Grocery Optimizer CLI - Find the cheapest store for every item on your list."""
    global formatter, config, optimizer

    config = ConfigManager(config_path=config_path)
    configure_logging("DEBUG" if verbose else config.logging.level)

    formatter = OutputFormatter(
        json_mode=json_output, currency_symbol=config.defaults.currency_symbol
    )

    optimizer = None
    try:
        get_optimizer()
    except CatalogError as e:
        formatter.error(str(e), error_code="CATALOG_ERROR")
        raise typer.Exit(code=1)


@app.command()
def optimize(
    text: Annotated[
        str | None, typer.Argument(help="Grocery list, one item per line (e.g. 'milk x2')")
    ] = None,
    file: Annotated[
        Path | None, typer.Option("--file", "-f", help="Read the list from a file ('-' for stdin)")
    ] = None,
    store: Annotated[
        list[str] | None,
        typer.Option("--store", "-s", help="Store to include (repeatable)"),
    ] = None,
    example: Annotated[
        bool, typer.Option("--example", help="Use the built-in example list")
    ] = False,
) -> None:
    """Assign each item to the cheapest selected store."""
    try:
        if example:
            if text or file:
                formatter.warning("Ignoring the given list; using the example list")
            grocery_text = EXAMPLE_LIST
        elif file is not None:
            grocery_text = sys.stdin.read() if str(file) == "-" else file.read_text()
        else:
            grocery_text = text or ""

        stores = store if store else default_stores()
        result = get_optimizer().optimize(grocery_text, stores)
        formatter.output(result, result["message"])
    except NoStoresSelectedError as e:
        formatter.error(str(e), error_code="NO_STORES_SELECTED")
        raise typer.Exit(code=1)
    except EmptyGroceryListError as e:
        formatter.error(str(e), error_code="EMPTY_LIST")
        raise typer.Exit(code=1)
    except UnknownStoreError as e:
        formatter.error(str(e), error_code="UNKNOWN_STORE")
        raise typer.Exit(code=1)
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def stores() -> None:
    """List the stores in the price catalog."""
    try:
        result = get_optimizer().list_stores(selected=default_stores())
        formatter.output(result, result["message"])
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command()
def catalog(
    product: Annotated[str | None, typer.Argument(help="Show prices for one product")] = None,
) -> None:
    """Show the price catalog."""
    try:
        result = get_optimizer().show_catalog(product)
        formatter.output(result, result["message"])
    except ProductNotFoundError as e:
        formatter.error(str(e), error_code="PRODUCT_NOT_FOUND")
        raise typer.Exit(code=1)
    except Exception as e:
        formatter.error(str(e))
        raise typer.Exit(code=1)


@app.command("example")
def show_example() -> None:
    """Print the example grocery list."""
    formatter.output({"success": True, "data": {"example": EXAMPLE_LIST}})


@app.command()
def tui() -> None:
    """Launch the interactive terminal UI."""
    DealOptimizerTUI(
        optimizer=get_optimizer(),
        default_stores=default_stores(),
        currency_symbol=get_config().defaults.currency_symbol,
    ).run()


if __name__ == "__main__":
    app()
