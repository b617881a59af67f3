"""
Temperature map builder.

Feeds the map renderer: per-zipcode readings for the derived UTC key, daily
min/max/avg for the local date when the daily tables carry it, and the
legend domain over the readings that are present.
"""

from datetime import date
from typing import Optional

import numpy as np
import psychrolib

from tempmap.config import UnitSystem, TEMPERATURE_UNITS
from tempmap.engine.dataset import TemperatureDataset
from tempmap.engine.lookup_key import derive_key
from tempmap.models.lookup import LookupKeyResult
from tempmap.models.temperature import LegendDomain, TemperatureMapOutput, ZoneReading


def _convert(value_c: Optional[float], unit_system: UnitSystem) -> Optional[float]:
    """Convert a °C value to the display unit system, rounded for display."""
    if value_c is None:
        return None
    if unit_system == UnitSystem.IP:
        return round(psychrolib.GetTFahrenheitFromTCelsius(value_c), 2)
    return round(value_c, 2)


def _legend(readings: list[ZoneReading]) -> LegendDomain:
    values = np.array(
        [r.temperature for r in readings if r.temperature is not None], dtype=float
    )
    if values.size == 0:
        return LegendDomain()
    return LegendDomain(min=float(np.min(values)), max=float(np.max(values)))


def zone_readings(
    dataset: TemperatureDataset,
    lookup: LookupKeyResult,
    unit_system: UnitSystem,
) -> list[ZoneReading]:
    """Readings for every zipcode at an accepted lookup key."""
    with_daily = dataset.has_daily(lookup.local_date_key)
    readings = []
    for zipcode in dataset.zipcodes:
        reading = {
            "zipcode": zipcode,
            "temperature": _convert(
                dataset.readings.value(zipcode, lookup.key), unit_system
            ),
        }
        if with_daily:
            reading["daily_min"] = _convert(
                dataset.daily_min.value(zipcode, lookup.local_date_key), unit_system
            )
            reading["daily_max"] = _convert(
                dataset.daily_max.value(zipcode, lookup.local_date_key), unit_system
            )
            reading["daily_avg"] = _convert(
                dataset.daily_avg.value(zipcode, lookup.local_date_key), unit_system
            )
        readings.append(ZoneReading(**reading))
    return readings


def build_temperature_map(
    dataset: TemperatureDataset,
    d: date,
    slot: int,
    unit_system: UnitSystem = UnitSystem.SI,
) -> TemperatureMapOutput:
    """
    Build the renderer payload for a selection.

    Rejected selections come back with no readings and the rejection set on
    `lookup`; callers decide whether to show the message or skip the cycle.
    """
    unit_system = UnitSystem(unit_system)
    lookup = derive_key(d, slot, dataset.latest_utc)

    if not lookup.ok:
        return TemperatureMapOutput(
            lookup=lookup,
            unit_system=unit_system,
            units=TEMPERATURE_UNITS[unit_system.value],
            readings=[],
            legend=LegendDomain(),
            has_daily_aggregates=False,
        )

    readings = zone_readings(dataset, lookup, unit_system)
    return TemperatureMapOutput(
        lookup=lookup,
        unit_system=unit_system,
        units=TEMPERATURE_UNITS[unit_system.value],
        readings=readings,
        legend=_legend(readings),
        has_daily_aggregates=dataset.has_daily(lookup.local_date_key),
    )
