"""
Selection state machine.

The current (date, slot) selection is an immutable SelectionState snapshot.
Each UI event is a pure transition that returns a new, fully reconciled
snapshot: the grid for the date is resolved and the slot migrated into it
before anything downstream gets to read the slot.
"""

from datetime import date, datetime
from typing import Optional

from tempmap.config import DEFAULT_DATE, DEFAULT_SLOT
from tempmap.engine.dst_status import dst_status
from tempmap.engine.lookup_key import derive_key
from tempmap.engine.slot_grid import resolve_grid, grid_for_date
from tempmap.engine.slot_migrator import migrate
from tempmap.models.lookup import LookupKeyResult
from tempmap.models.selection import SelectionState


def _reconcile(d: date, slot: int, old_state: Optional[SelectionState] = None) -> SelectionState:
    is_dst_today, is_dst_tomorrow = dst_status(d)
    grid = resolve_grid(is_dst_today, is_dst_tomorrow)
    new_slot = migrate(slot, old_state.kind if old_state else None, grid)
    return SelectionState(
        date=d,
        slot=new_slot,
        slots=grid.slots,
        kind=grid.kind,
        is_dst_on_date=is_dst_today,
        is_dst_on_next_date=is_dst_tomorrow,
    )


def initial_state(d: date = DEFAULT_DATE, slot: int = DEFAULT_SLOT) -> SelectionState:
    """Snapshot for a fresh session, with `slot` moved into the grid of `d`."""
    return _reconcile(d, slot)


def apply_date_change(state: SelectionState, new_date: date) -> SelectionState:
    """Date picker changed: resolve the new grid and carry the slot over."""
    return _reconcile(new_date, state.slot, state)


def apply_slot_change(state: SelectionState, new_slot: int) -> SelectionState:
    """Slot selector changed. Only members of the current grid can be chosen."""
    # Checked against the date, not the grid carried by the snapshot
    grid = grid_for_date(state.date)
    if new_slot not in grid:
        raise ValueError(
            f"Slot {new_slot} is not available on {state.date.isoformat()}; "
            f"choose one of {list(grid.slots)}."
        )
    return _reconcile(state.date, new_slot, state)


def lookup(state: SelectionState, latest_utc: datetime) -> LookupKeyResult:
    """Derive the readings-table key for a snapshot."""
    return derive_key(state.date, state.slot, latest_utc)
