"""Tests for grocery list parsing."""

from grocery_optimizer.list_parser import parse_grocery_list, parse_line
from grocery_optimizer.models import GroceryLineItem


class TestParseLine:
    """Tests for single-line parsing."""

    def test_name_only(self):
        """A bare name gets quantity 1."""
        item = parse_line("cereal")
        assert item == GroceryLineItem(raw_text="cereal", name="cereal", quantity=1)

    def test_quantity_marker(self):
        """Trailing xN sets the quantity."""
        item = parse_line("milk x2")
        assert item.name == "milk"
        assert item.quantity == 2
        assert item.raw_text == "milk x2"

    def test_marker_without_space(self):
        """The marker may touch the name."""
        item = parse_line("eggsx12")
        assert item.name == "eggs"
        assert item.quantity == 12

    def test_marker_case_insensitive(self):
        """Uppercase X works too."""
        item = parse_line("Apples X6")
        assert item.name == "apples"
        assert item.quantity == 6

    def test_name_lowercased_raw_kept(self):
        """Name is lowercased, raw text is preserved."""
        item = parse_line("Boneless Chicken Breast x3")
        assert item.name == "boneless chicken breast"
        assert item.raw_text == "Boneless Chicken Breast x3"

    def test_zero_quantity_defaults_to_one(self):
        """x0 falls back to quantity 1."""
        item = parse_line("pasta x0")
        assert item.name == "pasta"
        assert item.quantity == 1

    def test_marker_without_digits_is_part_of_name(self):
        """A dangling x is not a marker."""
        item = parse_line("milk x")
        assert item.name == "milk x"
        assert item.quantity == 1

    def test_negative_marker_is_part_of_name(self):
        """x-2 is not a valid marker, so quantity stays 1."""
        item = parse_line("milk x-2")
        assert item.name == "milk x-2"
        assert item.quantity == 1

    def test_non_ascii_digits_not_a_marker(self):
        """Only ASCII digits count as a quantity."""
        item = parse_line("milk x٣")
        assert item.name == "milk x٣"
        assert item.quantity == 1

    def test_marker_only_line_dropped(self):
        """A line that is only a marker has no name."""
        assert parse_line("x3") is None

    def test_marker_must_close_line(self):
        """A marker in the middle is part of the name."""
        item = parse_line("x2 milk")
        assert item.name == "x2 milk"
        assert item.quantity == 1


class TestParseGroceryList:
    """Tests for multi-line parsing."""

    def test_empty_text(self):
        """Empty input yields nothing."""
        assert parse_grocery_list("") == []

    def test_blank_lines_skipped(self):
        """Whitespace-only lines are ignored."""
        items = parse_grocery_list("\n  milk x2 \n\n\t\neggs\n")
        assert [i.name for i in items] == ["milk", "eggs"]
        assert items[0].raw_text == "milk x2"

    def test_order_preserved(self):
        """Output follows input order."""
        text = "rice x2\napples x6\nmilk"
        assert [i.name for i in parse_grocery_list(text)] == ["rice", "apples", "milk"]

    def test_degenerate_lines_dropped(self):
        """Nameless lines vanish without an error."""
        items = parse_grocery_list("x3\nmilk\nX10")
        assert [i.name for i in items] == ["milk"]

    def test_windows_line_endings(self):
        """Carriage returns are trimmed with the line."""
        items = parse_grocery_list("milk x2\r\neggs\r\n")
        assert [(i.name, i.quantity) for i in items] == [("milk", 2), ("eggs", 1)]

    def test_duplicate_lines_kept(self):
        """Repeated items stay separate entries."""
        items = parse_grocery_list("milk\nmilk x3")
        assert [(i.name, i.quantity) for i in items] == [("milk", 1), ("milk", 3)]

    def test_concatenation(self):
        """Parsing two lists joined by a newline equals joining the results."""
        first = "milk x2\neggs x12\ncereal"
        second = "salmon x2\nice cream"
        combined = parse_grocery_list(first + "\n" + second)
        assert combined == parse_grocery_list(first) + parse_grocery_list(second)

    def test_missing_marker_means_one(self):
        """Every line without a marker has quantity 1."""
        items = parse_grocery_list("milk\neggs\nice cream")
        assert all(i.quantity == 1 for i in items)
