"""Free-text grocery list parsing."""

import logging
import re

from .models import GroceryLineItem

logger = logging.getLogger(__name__)

# "name xN" or just "name"; the marker must close the line
_LINE_PATTERN = re.compile(r"^(.*?)(?:\s*x(\d+))?$", re.IGNORECASE | re.ASCII)


def _parse_quantity(raw: str | None) -> int:
    if raw is None:
        return 1
    try:
        quantity = int(raw)
    except ValueError:
        return 1
    return quantity if quantity > 0 else 1


def parse_line(line: str) -> GroceryLineItem | None:
    """Parse one trimmed, non-empty line.

    Returns None when the line has no name left once the quantity
    marker is removed (e.g. ``"x3"``).
    """
    match = _LINE_PATTERN.match(line)
    if match is None:
        return None

    name = match.group(1).strip().lower()
    if not name:
        return None

    return GroceryLineItem(raw_text=line, name=name, quantity=_parse_quantity(match.group(2)))


def parse_grocery_list(text: str) -> list[GroceryLineItem]:
    """Parse a grocery list with one item per line.

    Each line may end with an ``xN`` quantity marker (``milk x2``).
    Blank lines and lines without a name are dropped; parsing never fails.

    Args:
        text: Raw multi-line grocery list

    Returns:
        Line items in input order
    """
    items: list[GroceryLineItem] = []
    for raw_line in text.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        item = parse_line(line)
        if item is None:
            logger.debug("Dropping unparseable line %r", line)
            continue
        items.append(item)

    return items
