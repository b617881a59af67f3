"""
API routes for the selection state machine.

The client keeps the current SelectionState snapshot and posts it back with
each event; the response is the next snapshot.
"""

from fastapi import APIRouter, HTTPException

from tempmap.engine.selection import initial_state, apply_date_change, apply_slot_change
from tempmap.models.selection import (
    SelectionState,
    InitialSelectionInput,
    DateChangeInput,
    SlotChangeInput,
)

router = APIRouter(prefix="/api/v1", tags=["selection"])


@router.post("/selection/initial", response_model=SelectionState)
def create_selection(body: InitialSelectionInput):
    """Start a selection, moving the requested slot into the date's grid."""
    try:
        return initial_state(body.date, body.slot)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/selection/date", response_model=SelectionState)
def change_date(body: DateChangeInput):
    """Apply a date change; the slot is migrated into the new grid."""
    try:
        return apply_date_change(body.state, body.date)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/selection/slot", response_model=SelectionState)
def change_slot(body: SlotChangeInput):
    """Apply a slot change; the slot must belong to the current grid."""
    try:
        return apply_slot_change(body.state, body.slot)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
