from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


class ItemNotPackableError(ValueError):
    """Raised when pack_item() is called with an item that cannot be packed."""


class Item(BaseModel):
    """Named rectangular item. Equality is by value; names need not be unique."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Identifier of the item")
    width: int = Field(gt=0, strict=True, description="Width of the item")
    height: int = Field(gt=0, strict=True, description="Height of the item")

    @property
    def area(self) -> int:
        return self.width * self.height


def total_area(items) -> int:
    return sum(item.area for item in items)


class Suitcase(BaseModel):
    """
    Suitcase with a fixed area budget and a packed/unpacked partition of items.

    Capacity is an aggregate budget of width * height, not a geometric layout:
    an item fits when it is no wider and no taller than the suitcase and its
    area fits in what is left of the budget. No positions are tracked.

    Snapshots are frozen. pack_item() returns the successor state and leaves
    the receiver untouched, so sibling search branches never share history.
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(gt=0, strict=True, description="Width of the suitcase")
    height: int = Field(gt=0, strict=True, description="Height of the suitcase")
    unpacked: tuple[Item, ...] = Field(default_factory=tuple, description="Items not packed yet, in scan order")
    packed: tuple[Item, ...] = Field(default_factory=tuple, description="Packed items, in commit order")

    @model_validator(mode="after")
    def check_packed_fits(self) -> "Suitcase":
        seen: set[int] = set()
        for item in self.unpacked + self.packed:
            if id(item) in seen:
                raise ValueError(f"item {item.name!r} appears more than once in the suitcase")
            seen.add(id(item))
        for item in self.packed:
            if item.width > self.width or item.height > self.height:
                raise ValueError(
                    f"packed item {item.name!r} ({item.width}x{item.height}) exceeds "
                    f"suitcase {self.width}x{self.height}"
                )
        if self.area_packed() > self.capacity_area():
            raise ValueError(
                f"packed area {self.area_packed()} exceeds capacity {self.capacity_area()}"
            )
        return self

    @classmethod
    def create(cls, width: int, height: int, items=()) -> "Suitcase":
        """New suitcase with every item unpacked."""
        return cls(width=width, height=height, unpacked=tuple(items))

    # Capacity queries

    def capacity_area(self) -> int:
        return self.width * self.height

    def area_packed(self) -> int:
        return total_area(self.packed)

    def area_unpacked(self) -> int:
        return total_area(self.unpacked)

    def remaining_area(self) -> int:
        return self.capacity_area() - self.area_packed()

    def num_items_packed(self) -> int:
        return len(self.packed)

    def num_items_unpacked(self) -> int:
        return len(self.unpacked)

    def get_packed_items(self) -> tuple[Item, ...]:
        return self.packed

    def get_unpacked_items(self) -> tuple[Item, ...]:
        return self.unpacked

    def _fits(self, item: Item, area_packed: int) -> bool:
        if item.width > self.width or item.height > self.height:
            return False
        return item.area + area_packed <= self.capacity_area()

    def can_pack_item(self, item: Item) -> bool:
        """True if item is unpacked, no wider or taller than the suitcase, and its area fits what is left."""
        return item in self.unpacked and self._fits(item, self.area_packed())

    def packable_items(self) -> list[Item]:
        """Unpacked items that can be packed right now, in scan order."""
        area_packed = self.area_packed()
        return [item for item in self.unpacked if self._fits(item, area_packed)]

    def can_pack_any(self) -> bool:
        area_packed = self.area_packed()
        return any(self._fits(item, area_packed) for item in self.unpacked)

    # Packing

    def _unpacked_index(self, item: Item) -> Optional[int]:
        # Prefer the exact object so the packed/unpacked partition holds by identity
        for i, candidate in enumerate(self.unpacked):
            if candidate is item:
                return i
        for i, candidate in enumerate(self.unpacked):
            if candidate == item:
                return i
        return None

    def pack_item(self, item: Item) -> "Suitcase":
        """
        Move item from unpacked to the end of packed and return the new state.

        Raises:
            ItemNotPackableError: item is not unpacked here or does not fit.
        """
        i = self._unpacked_index(item)
        reason = None
        if i is None:
            reason = "it is not in the unpacked items"
        elif item.width > self.width or item.height > self.height:
            reason = f"it is larger than the {self.width}x{self.height} suitcase"
        elif not self._fits(item, self.area_packed()):
            reason = f"only {self.remaining_area()} of {self.capacity_area()} area left"
        if reason is not None:
            raise ItemNotPackableError(
                f"Cannot pack item {item.name!r} ({item.width}x{item.height}): {reason}"
            )

        return self.model_copy(
            update={
                "unpacked": self.unpacked[:i] + self.unpacked[i + 1:],
                "packed": self.packed + (self.unpacked[i],),
            }
        )


class PackingResult(BaseModel):
    """Outcome of running one strategy on a suitcase."""

    strategy: str
    packed: list[Item] = Field(default_factory=list)
    unpacked: list[Item] = Field(default_factory=list)
    num_items_packed: int = 0
    area_packed: int = 0
    capacity_area: int = 0
    fill_rate: float = 0.0
    elapsed_ms: Optional[float] = None

    @classmethod
    def from_suitcase(
        cls,
        strategy: str,
        suitcase: Suitcase,
        elapsed_ms: Optional[float] = None,
    ) -> "PackingResult":
        from suitcase_packer.metrics import compute_metrics

        area_packed, capacity_area, fill_rate = compute_metrics(suitcase)
        return cls(
            strategy=strategy,
            packed=list(suitcase.packed),
            unpacked=list(suitcase.unpacked),
            num_items_packed=suitcase.num_items_packed(),
            area_packed=area_packed,
            capacity_area=capacity_area,
            fill_rate=fill_rate,
            elapsed_ms=elapsed_ms,
        )
