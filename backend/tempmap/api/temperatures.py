"""
API routes for the per-zone temperature map.
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, Response

from tempmap.config import UnitSystem, RejectionReason
from tempmap.engine.dataset import TemperatureDataset, get_dataset
from tempmap.engine.temperature_map import build_temperature_map
from tempmap.models.temperature import TemperatureMapOutput

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["temperatures"])


@router.get(
    "/temperatures",
    response_model=TemperatureMapOutput,
    responses={204: {"description": "Slot not yet reconciled with the date; skip this render"}},
)
def get_temperatures(
    date: date = Query(..., description="NY-local calendar date"),
    slot: int = Query(..., ge=0, le=23, description="NY-local hour of day"),
    unit_system: UnitSystem = Query("SI"),
    dataset: TemperatureDataset = Depends(get_dataset),
):
    """
    Temperatures per zipcode for a NY-local date and hour.

    Out-of-range selections return 422 with a message to show instead of the
    map. A slot that does not belong to the date's grid returns 204.
    """
    try:
        result = build_temperature_map(dataset, date, slot, unit_system)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        raise HTTPException(status_code=500, detail=str(e))

    rejection = result.lookup.rejection
    if rejection == RejectionReason.INCONSISTENT_SLOT:
        logger.debug("Skipping render for %s slot %d: slot not in grid", date, slot)
        return Response(status_code=204)
    if rejection is not None:
        raise HTTPException(status_code=422, detail=result.lookup.message)
    return result
