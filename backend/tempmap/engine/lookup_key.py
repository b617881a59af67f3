"""
UTC lookup key derivation and validation.

Turns a (local date, local slot) selection into the column header of the
temperature table, e.g. 2020-07-04 at 14:00 EDT -> "X2020.07.04.18.00.00".

Fall-back day correction: the dataset was generated on the 3-hour UTC grid,
so the 2 AM slot offered on the day DST ends stands for the first (DST)
occurrence of the early morning hours. A plain conversion of 02:00 resolves
to standard time, one hour past the grid point, so one hour is taken off.
"""

from datetime import date, datetime, time, timedelta, timezone

from tempmap.config import (
    GridKind,
    RejectionReason,
    DATASET_START_UTC,
    GRID_STEP_HOURS,
    UTC_KEY_FORMAT,
    LOCAL_DATE_KEY_FORMAT,
    BEFORE_RANGE_MESSAGE,
    AFTER_RANGE_MESSAGE,
)
from tempmap.engine.dst_status import dst_status, local_zone
from tempmap.engine.slot_grid import resolve_grid
from tempmap.models.lookup import LookupKeyResult

FALL_BACK_SLOT = 2


def format_utc_key(instant: datetime) -> str:
    """Format an aware instant as a readings-table header."""
    return instant.astimezone(timezone.utc).strftime(UTC_KEY_FORMAT)


def parse_utc_key(key: str) -> datetime:
    """Parse a readings-table header into an aware UTC datetime."""
    try:
        parsed = datetime.strptime(key, UTC_KEY_FORMAT)
    except ValueError:
        raise ValueError(f"Not a UTC key in {UTC_KEY_FORMAT!r} format: {key!r}")
    return parsed.replace(tzinfo=timezone.utc)


def format_local_date_key(d: date) -> str:
    """Format a local calendar date as a daily-aggregate header."""
    return d.strftime(LOCAL_DATE_KEY_FORMAT)



def _check_slot(slot: int) -> None:
    if not 0 <= slot <= 23:
        raise ValueError(f"Slot must be an hour of day in [0, 23], got {slot}.")


def local_instant(d: date, slot: int) -> datetime:
    """The NY-local wall-clock instant `slot`:00 on `d`."""
    _check_slot(slot)
    return datetime.combine(d, time(slot), tzinfo=local_zone())


def naive_utc(d: date, slot: int) -> datetime:
    """Convert with the zone's offset for that wall-clock time, no correction."""
    return local_instant(d, slot).astimezone(timezone.utc)


def local_instant_from_key(key: str) -> datetime:
    """NY-local instant for a readings-table header."""
    return parse_utc_key(key).astimezone(local_zone())


def derive_key(d: date, slot: int, latest_utc: datetime) -> LookupKeyResult:
    """
    Derive the readings-table key for a selection, or the reason it has none.

    Args:
        d: Selected NY-local calendar date
        slot: Selected NY-local hour of day
        latest_utc: Latest instant (aware) published in the readings table

    Returns:
        LookupKeyResult with either `key` or `rejection` set. Rejections are
        checked in order: before range, after range, inconsistent slot.
    """
    _check_slot(slot)
    result = {"date": d, "slot": slot}

    # Dates two or more days outside the data cannot convert into range;
    # rejecting them up front keeps conversion clear of the datetime limits
    if (DATASET_START_UTC.date() - d).days > 1:
        return LookupKeyResult(
            **result,
            rejection=RejectionReason.BEFORE_RANGE,
            message=BEFORE_RANGE_MESSAGE,
        )
    if (d - latest_utc.date()).days > 1:
        return LookupKeyResult(
            **result,
            rejection=RejectionReason.AFTER_RANGE,
            message=AFTER_RANGE_MESSAGE,
        )

    grid = resolve_grid(*dst_status(d))

    utc = naive_utc(d, slot)
    corrected = slot == FALL_BACK_SLOT and grid.kind == GridKind.FALL_BACK
    if corrected:
        utc -= timedelta(hours=1)

    if utc < DATASET_START_UTC:
        return LookupKeyResult(
            **result,
            rejection=RejectionReason.BEFORE_RANGE,
            message=BEFORE_RANGE_MESSAGE,
        )
    if utc >= latest_utc + timedelta(hours=GRID_STEP_HOURS):
        return LookupKeyResult(
            **result,
            rejection=RejectionReason.AFTER_RANGE,
            message=AFTER_RANGE_MESSAGE,
        )
    # Slot not yet migrated into this date's grid; the next event fixes it
    if slot not in grid:
        return LookupKeyResult(
            **result,
            rejection=RejectionReason.INCONSISTENT_SLOT,
        )

    return LookupKeyResult(
        **result,
        utc_instant=utc,
        key=format_utc_key(utc),
        local_date_key=format_local_date_key(d),
        fall_back_corrected=corrected,
    )
