"""Greedy per-item store assignment."""

import logging
from collections.abc import Iterable, Sequence
from functools import reduce
from typing import NamedTuple

from .catalog import Catalog
from .models import AssignedItem, AssignmentResult, GroceryLineItem, StoreBucket

logger = logging.getLogger(__name__)


class Candidate(NamedTuple):
    """A selected store that prices the item."""

    store: str
    price: float


class _Fold(NamedTuple):
    per_store: dict[str, list[AssignedItem]]
    unknown: list[GroceryLineItem]


def find_candidates(
    item: GroceryLineItem, stores: Sequence[str], catalog: Catalog
) -> list[Candidate]:
    """List (store, price) pairs for the item among the given stores, in store order."""
    by_store = catalog.prices_for(item.name)
    if by_store is None:
        return []
    return [Candidate(store, by_store[store]) for store in stores if store in by_store]


def cheapest(candidates: Sequence[Candidate]) -> Candidate | None:
    """Pick the lowest price; ties go to the earliest candidate."""
    if not candidates:
        return None
    return min(candidates, key=lambda c: c.price)


def assign_items(
    items: Iterable[GroceryLineItem],
    selected_stores: Iterable[str],
    catalog: Catalog,
) -> AssignmentResult:
    """Assign each item to the cheapest selected store that prices it.

    Items with no catalog entry, or priced only at stores outside the
    selection, are collected in ``unknown``. Every selected store gets a
    bucket, including stores that receive nothing.

    Args:
        items: Parsed line items
        selected_stores: Store names in selection order; the order
                         decides ties between equal prices
        catalog: Price table to look up

    Returns:
        AssignmentResult with per-store buckets and totals
    """
    stores = tuple(dict.fromkeys(selected_stores))

    def step(acc: _Fold, item: GroceryLineItem) -> _Fold:
        best = cheapest(find_candidates(item, stores, catalog))
        if best is None:
            logger.debug("No selected store prices %r", item.name)
            acc.unknown.append(item)
            return acc

        acc.per_store[best.store].append(
            AssignedItem(
                name=item.name,
                quantity=item.quantity,
                unit_price=best.price,
                line_total=best.price * item.quantity,
                sale_tag=catalog.sale_tag(item.name, best.store),
            )
        )
        return acc

    folded = reduce(step, items, _Fold({store: [] for store in stores}, []))

    buckets = {
        store: StoreBucket(items=tuple(assigned), total=sum(a.line_total for a in assigned))
        for store, assigned in folded.per_store.items()
    }
    used = [bucket for bucket in buckets.values() if not bucket.is_empty]

    return AssignmentResult(
        per_store=buckets,
        unknown=tuple(folded.unknown),
        grand_total=sum(bucket.total for bucket in used),
        used_stores=len(used),
    )
