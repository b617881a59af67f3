"""
DST status oracle.

Reports whether a calendar date, and the date right after it, observe
Daylight Saving Time in the local (New York) zone. Status is evaluated at
local midnight of each date so that a transition happening later in the day
does not leak into the answer for that day.
"""

from datetime import date, datetime, time, timedelta
from functools import lru_cache
from zoneinfo import ZoneInfo

from tempmap.config import LOCAL_TIMEZONE


@lru_cache(maxsize=1)
def local_zone() -> ZoneInfo:
    """The fixed local zone slots are expressed in."""
    return ZoneInfo(LOCAL_TIMEZONE)


def is_dst(d: date) -> bool:
    """True if DST is in effect at local midnight of `d`."""
    midnight = datetime.combine(d, time(0), tzinfo=local_zone())
    return bool(midnight.dst())


def dst_status(d: date) -> tuple[bool, bool]:
    """Return (is_dst_on_date, is_dst_on_next_date) for `d`."""
    today = is_dst(d)
    # No transition falls on Dec 31, so the last representable date keeps its status
    if d == date.max:
        return today, today
    return today, is_dst(d + timedelta(days=1))
