"""Terminal UI for Grocery Optimizer."""

from __future__ import annotations

from typing import Any

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Checkbox, Footer, Header, Label, Static, TextArea

from .optimizer import (
    EXAMPLE_LIST,
    DealOptimizer,
    EmptyGroceryListError,
    NoStoresSelectedError,
)
from .output_formatter import render_assignment


class DealOptimizerTUI(App[None]):
    """Pick stores, paste a list, and see the per-store split."""

    TITLE = "Grocery Deal Optimizer"
    SUB_TITLE = "Enter a list, pick your stores"

    DEFAULT_CSS = """
    #controls {
        width: 45%;
        padding: 0 1;
    }

    #results-pane {
        width: 1fr;
        padding: 0 1;
        border: round $primary;
    }

    #grocery-text {
        height: 1fr;
    }

    #actions {
        height: auto;
        margin-top: 1;
    }

    .section-title {
        text-style: bold;
        margin-top: 1;
    }

    #status {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $boost;
        color: $text;
    }
    """

    BINDINGS = [
        Binding("ctrl+o", "optimize", "Optimize"),
        Binding("ctrl+e", "fill_example", "Fill Example"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        optimizer: DealOptimizer,
        default_stores: list[str] | None = None,
        currency_symbol: str = "$",
    ):
        super().__init__()
        self.optimizer = optimizer
        self.default_stores = set(default_stores or [])
        self.currency_symbol = currency_symbol
        self.assignment: dict[str, Any] | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal():
            with Vertical(id="controls"):
                yield Label("1. Choose your stores", classes="section-title")
                for index, store in enumerate(self.optimizer.stores):
                    yield Checkbox(
                        store, value=store in self.default_stores, id=f"store-{index}"
                    )
                yield Label(
                    "2. Paste your grocery list (one per line, e.g. milk x2)",
                    classes="section-title",
                )
                yield TextArea(EXAMPLE_LIST, id="grocery-text")
                with Horizontal(id="actions"):
                    yield Button("Optimize List", id="optimize", variant="primary")
                    yield Button("Fill Example List", id="fill-example")
            with VerticalScroll(id="results-pane"):
                yield Label("3. Recommended per-store lists", classes="section-title")
                yield Static(id="results")
        yield Static("ctrl+o:optimize  ctrl+e:example  ctrl+q:quit", id="status")
        yield Footer()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "optimize":
            self.action_optimize()
        elif event.button.id == "fill-example":
            self.action_fill_example()

    def action_fill_example(self) -> None:
        self.query_one("#grocery-text", TextArea).load_text(EXAMPLE_LIST)
        self._set_status("Example list restored")

    def action_optimize(self) -> None:
        text = self.query_one("#grocery-text", TextArea).text
        try:
            result = self.optimizer.optimize(text, self.selected_stores())
        except (NoStoresSelectedError, EmptyGroceryListError) as exc:
            self.bell()
            self._set_status(str(exc))
            return

        self.assignment = assignment = result["data"]["assignment"]
        self.query_one("#results", Static).update(
            render_assignment(assignment, self.currency_symbol)
        )
        self._set_status(result["message"])

    def selected_stores(self) -> list[str]:
        """Checked stores in catalog order; that order breaks price ties."""
        return [
            store
            for index, store in enumerate(self.optimizer.stores)
            if self.query_one(f"#store-{index}", Checkbox).value
        ]

    def _set_status(self, message: str) -> None:
        self.query_one("#status", Static).update(message)
