"""Tests for the optimizer service."""

import pytest

from grocery_optimizer.optimizer import (
    EXAMPLE_LIST,
    DealOptimizer,
    EmptyGroceryListError,
    NoStoresSelectedError,
    ProductNotFoundError,
    UnknownStoreError,
)


class TestResolveStores:
    """Tests for store name resolution."""

    def test_case_insensitive(self, optimizer):
        """Names match regardless of case and spacing."""
        assert optimizer.resolve_stores([" a", "B "]) == ["A", "B"]

    def test_duplicates_dropped(self, optimizer):
        """Repeated names keep the first occurrence."""
        assert optimizer.resolve_stores(["b", "A", "B"]) == ["B", "A"]

    def test_unknown_store(self, optimizer):
        """Stores outside the catalog are rejected."""
        with pytest.raises(UnknownStoreError) as exc_info:
            optimizer.resolve_stores(["A", "Costco"])
        assert exc_info.value.store == "Costco"
        assert exc_info.value.known == ("A", "B", "C")


class TestOptimize:
    """Tests for optimize."""

    def test_result_shape(self, optimizer):
        """Returns the success envelope with assignment data."""
        result = optimizer.optimize("milk x2", ["A", "B"])

        assert result["success"] is True
        assignment = result["data"]["assignment"]
        assert assignment["selected_stores"] == ["A", "B"]
        assert assignment["per_store"]["B"]["items"][0]["line_total"] == 4.0
        assert assignment["per_store"]["A"]["items"] == []
        assert assignment["grand_total"] == 4.0
        assert assignment["used_stores"] == 1
        assert assignment["all_matched"] is True
        assert result["message"] == "Matched all 1 items"

    def test_unknown_reported(self, optimizer):
        """Unmatched lines are listed with their raw text."""
        result = optimizer.optimize("milk\nKale x2", ["A", "B"])

        assignment = result["data"]["assignment"]
        assert assignment["unknown"] == [{"raw_text": "Kale x2", "name": "kale", "quantity": 2}]
        assert assignment["all_matched"] is False
        assert "1 without price data" in result["message"]

    def test_no_stores(self, optimizer):
        """An empty selection is refused."""
        with pytest.raises(NoStoresSelectedError, match="Select at least one store"):
            optimizer.optimize("milk", [])

    def test_empty_list(self, optimizer):
        """A list with nothing parseable is refused."""
        with pytest.raises(EmptyGroceryListError, match="Enter at least one grocery item"):
            optimizer.optimize("\n  \nx3\n", ["A"])

    def test_store_checked_before_list(self, optimizer):
        """Missing stores are reported before an empty list."""
        with pytest.raises(NoStoresSelectedError):
            optimizer.optimize("", [])

    def test_default_catalog_example(self):
        """The example list against the first two built-in stores."""
        result = DealOptimizer().optimize(EXAMPLE_LIST, ["Giant Eagle", "Kuhn's"])
        assignment = result["data"]["assignment"]

        kuhns = [i["name"] for i in assignment["per_store"]["Kuhn's"]["items"]]
        giant = [i["name"] for i in assignment["per_store"]["Giant Eagle"]["items"]]
        assert kuhns == [
            "milk",
            "eggs",
            "boneless chicken breast",
            "apples",
            "cereal",
            "pasta",
            "salmon",
        ]
        assert giant == ["rice"]
        assert [u["raw_text"] for u in assignment["unknown"]] == ["ice cream"]
        assert assignment["used_stores"] == 2
        cereal = assignment["per_store"]["Kuhn's"]["items"][4]
        assert cereal["sale_tag"] == "Card price"


class TestCatalogViews:
    """Tests for list_stores and show_catalog."""

    def test_list_stores(self, optimizer):
        """Stores are listed with selection flags."""
        result = optimizer.list_stores(selected=["B"])
        assert result["data"]["stores"] == [
            {"name": "A", "selected": False},
            {"name": "B", "selected": True},
            {"name": "C", "selected": False},
        ]

    def test_show_catalog(self, optimizer):
        """Full catalog is returned."""
        result = optimizer.show_catalog()
        assert "milk" in result["data"]["catalog"]["prices"]

    def test_show_product(self, optimizer):
        """One product's prices with the cheapest store."""
        result = optimizer.show_catalog("Eggs")
        product = result["data"]["product"]
        assert product["name"] == "eggs"
        assert product["cheapest_store"] == "A"
        assert product["sale_tags"] == {"C": "Card price"}

    def test_show_unknown_product(self, optimizer):
        """Unknown products raise."""
        with pytest.raises(ProductNotFoundError):
            optimizer.show_catalog("kale")
