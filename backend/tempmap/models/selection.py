"""
Pydantic models for the immutable selection snapshot and its events.
"""

import datetime

from pydantic import BaseModel, ConfigDict, Field

from tempmap.config import DEFAULT_DATE, DEFAULT_SLOT, GridKind


class SelectionState(BaseModel):
    """
    A fully reconciled (date, slot, grid) snapshot.

    Snapshots are never mutated; every event produces a new one.
    """

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    slot: int = Field(..., ge=0, le=23)
    slots: tuple[int, ...]
    kind: GridKind
    is_dst_on_date: bool
    is_dst_on_next_date: bool


class InitialSelectionInput(BaseModel):
    date: datetime.date = DEFAULT_DATE
    slot: int = Field(default=DEFAULT_SLOT, ge=0, le=23)


class DateChangeInput(BaseModel):
    """A date picker change applied to the current snapshot."""
    state: SelectionState
    date: datetime.date


class SlotChangeInput(BaseModel):
    """A slot selector change applied to the current snapshot."""
    state: SelectionState
    slot: int = Field(..., ge=0, le=23)
