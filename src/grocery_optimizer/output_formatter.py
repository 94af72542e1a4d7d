"""Output formatting for CLI and programmatic use."""

import json
from typing import Any

from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text


def format_currency(value: float, symbol: str = "$") -> str:
    """Format an amount with a currency symbol and two decimals."""
    return f"{symbol}{value:.2f}"


def render_assignment(assignment: dict[str, Any], currency: str = "$") -> RenderableType:
    """Build the Rich renderable for an assignment result.

    Shared by the CLI and the terminal UI. Stores that received no items
    are skipped.
    """
    parts: list[RenderableType] = []

    for store, bucket in assignment["per_store"].items():
        if not bucket["items"]:
            continue

        table = Table(show_header=True, header_style="bold cyan", expand=True)
        table.add_column("Item", style="cyan")
        table.add_column("Each", justify="right")
        table.add_column("Total", justify="right", style="magenta")
        table.add_column("Note", style="yellow")

        for item in bucket["items"]:
            table.add_row(
                f"{item['name']} x{item['quantity']}",
                f"@ {format_currency(item['unit_price'], currency)}/ea",
                format_currency(item["line_total"], currency),
                item.get("sale_tag") or "",
            )

        parts.append(
            Panel(
                table,
                title=f"[bold]{store}[/bold]",
                subtitle=f"Store total: {format_currency(bucket['total'], currency)}",
                border_style="green",
            )
        )

    if assignment["grand_total"] > 0:
        parts.append(
            Text.from_markup(
                f"Estimated spend across [bold]{assignment['used_stores']}[/bold] store(s): "
                f"[bold green]{format_currency(assignment['grand_total'], currency)}[/bold green]"
            )
        )

    if assignment["unknown"]:
        raw = ", ".join(u["raw_text"] for u in assignment["unknown"])
        parts.append(
            Text.from_markup(
                f"[yellow]⚠[/yellow] No price data for: {raw}. "
                "Add these to the catalog to have them priced."
            )
        )
    elif assignment["grand_total"] > 0:
        parts.append(
            Text.from_markup(
                "[green]✓[/green] [bold]Nice![/bold] "
                "Every item was matched to at least one store."
            )
        )

    return Group(*parts)


class OutputFormatter:
    """Formats output for both Rich terminal and JSON modes."""

    def __init__(self, json_mode: bool = False, currency_symbol: str = "$"):
        """Initialize formatter.

        Args:
            json_mode: If True, output JSON instead of Rich formatting
            currency_symbol: Symbol prefixed to prices in Rich mode
        """
        self.json_mode = json_mode
        self.currency_symbol = currency_symbol
        self.console = Console()

    def output(self, data: dict[str, Any], message: str = "") -> None:
        """Output data in appropriate format.

        Args:
            data: Data to output
            message: Optional message for Rich mode
        """
        if self.json_mode:
            self._output_json(data)
        else:
            self._output_rich(data, message)

    def _output_json(self, data: dict[str, Any]) -> None:
        """Output as JSON to stdout."""
        print(json.dumps(data, indent=2))

    def _output_rich(self, data: dict[str, Any], message: str) -> None:
        """Output with Rich formatting."""
        if message:
            self.console.print(f"[green]✓[/green] {message}")

        payload = data.get("data", {})
        if "assignment" in payload:
            self._render_assignment(data)
        elif "stores" in payload:
            self._render_stores(data)
        elif "catalog" in payload:
            self._render_catalog(data)
        elif "product" in payload:
            self._render_product(data)
        elif "example" in payload:
            self.console.print(payload["example"], markup=False, highlight=False)

    def _render_assignment(self, data: dict) -> None:
        """Render per-store lists, totals and unmatched items."""
        self.console.print(render_assignment(data["data"]["assignment"], self.currency_symbol))

    def _render_stores(self, data: dict) -> None:
        """Render the store enumeration."""
        for store in data["data"]["stores"]:
            marker = "[green]●[/green]" if store["selected"] else "○"
            self.console.print(f"  {marker} {store['name']}", highlight=False)

    def _render_catalog(self, data: dict) -> None:
        """Render the full price table."""
        catalog = data["data"]["catalog"]
        stores = catalog["stores"]

        table = Table(title="Price Catalog", show_header=True, header_style="bold cyan")
        table.add_column("Product", style="cyan")
        for store in stores:
            table.add_column(store, justify="right")

        for product, prices in catalog["prices"].items():
            tags = catalog["sale_tags"].get(product, {})
            cells = []
            for store in stores:
                if store not in prices:
                    cells.append("[dim]-[/dim]")
                    continue
                cell = format_currency(prices[store], self.currency_symbol)
                if store in tags:
                    cell += " [yellow]*[/yellow]"
                cells.append(cell)
            table.add_row(product, *cells)

        self.console.print(table)
        self.console.print("[dim][yellow]*[/yellow] sale price[/dim]")

    def _render_product(self, data: dict) -> None:
        """Render one product's prices across stores."""
        product = data["data"]["product"]

        table = Table(title=product["name"], show_header=True, header_style="bold")
        table.add_column("Store")
        table.add_column("Price", justify="right")
        table.add_column("", justify="center")

        for store, price in sorted(product["prices"].items(), key=lambda x: x[1]):
            marker = " [green](best)[/green]" if store == product.get("cheapest_store") else ""
            tag = product["sale_tags"].get(store)
            if tag:
                marker += f" [yellow]{tag}[/yellow]"
            table.add_row(store, format_currency(price, self.currency_symbol), marker)

        self.console.print(table)

    def error(self, message: str, error_code: str | None = None) -> None:
        """Output error message.

        Args:
            message: Error message
            error_code: Optional error code
        """
        if self.json_mode:
            output = {"success": False, "error": message}
            if error_code:
                output["error_code"] = error_code
            print(json.dumps(output))
        else:
            self.console.print(f"[red]✗ Error:[/red] {message}")

    def warning(self, message: str) -> None:
        """Output warning message.

        Args:
            message: Warning message
        """
        if self.json_mode:
            print(json.dumps({"warning": message}))
        else:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
