"""
API routes for DST status and slot grids.
"""

from datetime import date

from fastapi import APIRouter, Query

from tempmap.engine.dst_status import dst_status
from tempmap.engine.slot_grid import resolve_grid
from tempmap.models.slot_grid import DSTStatusOutput, SlotGridOutput

router = APIRouter(prefix="/api/v1", tags=["slot-grid"])


@router.get("/dst-status", response_model=DSTStatusOutput)
def get_dst_status(date: date = Query(..., description="NY-local calendar date")):
    """Whether DST is observed on a date and on the following date."""
    today, tomorrow = dst_status(date)
    return DSTStatusOutput(date=date, is_dst_on_date=today, is_dst_on_next_date=tomorrow)


@router.get("/slot-grid", response_model=SlotGridOutput)
def get_slot_grid(date: date = Query(..., description="NY-local calendar date")):
    """Selectable NY-local hours for a date, and whether it is a transition day."""
    grid = resolve_grid(*dst_status(date))
    return SlotGridOutput(date=date, slots=list(grid.slots), kind=grid.kind)
