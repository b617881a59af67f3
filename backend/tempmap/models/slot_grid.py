"""
Pydantic models for DST status and slot grids.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from tempmap.config import GridKind


class DSTStatusOutput(BaseModel):
    """DST observance for a date and the date right after it."""
    date: date
    is_dst_on_date: bool
    is_dst_on_next_date: bool


class SlotGrid(BaseModel):
    """The selectable local-hour slots for one calendar date."""

    model_config = ConfigDict(frozen=True)

    slots: tuple[int, ...] = Field(
        ...,
        description="Valid NY-local hours of day, ascending",
        examples=[(1, 4, 7, 10, 13, 16, 19, 22)],
    )
    kind: GridKind

    def __contains__(self, slot: int) -> bool:
        return slot in self.slots


class SlotGridOutput(BaseModel):
    """Slot grid resolved for a requested date."""
    date: date
    slots: list[int]
    kind: GridKind
