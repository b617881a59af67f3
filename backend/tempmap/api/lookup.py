"""
API routes for UTC lookup key derivation.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query

from tempmap.engine.dataset import TemperatureDataset, get_dataset
from tempmap.engine.lookup_key import derive_key
from tempmap.models.lookup import LookupKeyResult

router = APIRouter(prefix="/api/v1", tags=["lookup-key"])


@router.get("/lookup-key", response_model=LookupKeyResult)
def get_lookup_key(
    date: date = Query(..., description="NY-local calendar date"),
    slot: int = Query(..., ge=0, le=23, description="NY-local hour of day"),
    dataset: TemperatureDataset = Depends(get_dataset),
):
    """
    Derive the readings-table key for a selection.

    Rejections are part of the result, not an HTTP error.
    """
    try:
        return derive_key(date, slot, dataset.latest_utc)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
