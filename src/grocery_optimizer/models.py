"""Core data models for Grocery Optimizer."""

from pydantic import BaseModel, ConfigDict, Field


class GroceryLineItem(BaseModel):
    """One parsed entry from a grocery list."""

    model_config = ConfigDict(frozen=True)

    raw_text: str
    name: str
    quantity: int = Field(default=1, ge=1)


class AssignedItem(BaseModel):
    """A line item matched to a store at that store's unit price."""

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int = Field(ge=1)
    unit_price: float
    line_total: float
    sale_tag: str | None = None


class StoreBucket(BaseModel):
    """Items assigned to one selected store and their subtotal."""

    model_config = ConfigDict(frozen=True)

    items: tuple[AssignedItem, ...] = ()
    total: float = 0.0

    @property
    def is_empty(self) -> bool:
        """Whether no item was assigned to this store."""
        return not self.items


class AssignmentResult(BaseModel):
    """Outcome of assigning a grocery list to the selected stores."""

    model_config = ConfigDict(frozen=True)

    per_store: dict[str, StoreBucket] = Field(default_factory=dict)
    unknown: tuple[GroceryLineItem, ...] = ()
    grand_total: float = 0.0
    used_stores: int = 0

    @property
    def used_buckets(self) -> dict[str, StoreBucket]:
        """Buckets that received at least one item, in selection order."""
        return {store: bucket for store, bucket in self.per_store.items() if not bucket.is_empty}

    @property
    def assigned_count(self) -> int:
        """Number of assigned items across all buckets."""
        return sum(len(bucket.items) for bucket in self.per_store.values())

    @property
    def all_matched(self) -> bool:
        """True when every item found a store and at least one was assigned."""
        return not self.unknown and self.assigned_count > 0
