"""Equipment slots and an inventory: buy items, fit them to slots, move and remove them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

SLOT_LABELS = (
    "Left Mouse Button",
    "Right Mouse Button",
    "Middle Mouse Button",
    "Space",
    '"1"',
    '"2"',
    '"3"',
)


@dataclass
class Slot:
    """An equipment slot that holds at most one item."""

    id: int
    label: str
    item: str | None = None


@dataclass(frozen=True)
class Unfit:
    """Remove the item from ``target_slot``."""

    target_slot: int


@dataclass(frozen=True)
class Fit:
    """Put ``item`` from the inventory into ``target_slot``."""

    target_slot: int
    item: str


@dataclass(frozen=True)
class Refit:
    """Move the item in ``origin_slot`` to ``target_slot``."""

    target_slot: int
    origin_slot: int


FittingCommand = Union[Unfit, Fit, Refit]


def _default_slots() -> list[Slot]:
    return [Slot(id=number, label=label) for number, label in enumerate(SLOT_LABELS, start=1)]


@dataclass
class Inventory:
    """Items bought so far and the slots they can be fitted to."""

    items: list[str] = field(default_factory=list)
    slots: list[Slot] = field(default_factory=_default_slots)

    def buy(self, index: int) -> str:
        """Add the shop item with the given number to the inventory and return its name."""
        item = f"Item {index}"
        self.items.append(item)
        return item

    def _find(self, slot_id: int) -> Slot | None:
        return next((slot for slot in self.slots if slot.id == slot_id), None)

    def set_item(self, slot_id: int, item: str | None) -> None:
        """Put ``item`` (or nothing) in the slot with ``slot_id``; unknown ids are ignored."""
        slot = self._find(slot_id)
        if slot is not None:
            slot.item = item

    def apply(self, command: FittingCommand) -> None:
        """Carry out a fitting command."""
        match command:
            case Unfit(target_slot=target):
                self.set_item(target, None)
            case Fit(target_slot=target, item=item):
                self.set_item(target, item)
            case Refit(target_slot=target, origin_slot=origin):
                origin_slot = self._find(origin)
                origin_item = origin_slot.item if origin_slot is not None else None
                self.set_item(target, origin_item)
                self.set_item(origin, None)
            case _:
                raise TypeError(f"not a fitting command: {command!r}")