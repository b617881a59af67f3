"""
Pydantic models for the per-zone temperature map.
"""

from typing import Optional

from pydantic import BaseModel

from tempmap.config import UnitSystem
from tempmap.models.lookup import LookupKeyResult


class ZoneReading(BaseModel):
    """Temperature for a single zipcode at the selected instant."""
    zipcode: str
    temperature: Optional[float] = None
    # Daily aggregates, only when published for the local date
    daily_min: Optional[float] = None
    daily_max: Optional[float] = None
    daily_avg: Optional[float] = None


class LegendDomain(BaseModel):
    min: Optional[float] = None
    max: Optional[float] = None


class TemperatureMapOutput(BaseModel):
    """Everything the map renderer needs for one selection."""
    lookup: LookupKeyResult
    unit_system: UnitSystem
    units: str
    readings: list[ZoneReading]
    legend: LegendDomain
    has_daily_aggregates: bool
