"""
Slot grid resolver.

The dataset is indexed on a fixed 3-hour UTC grid. In NY local time that grid
lands on hours 2, 5, 8, ... while DST is active and on 1, 4, 7, ... otherwise.
On the two transition days the local day contains both offsets, so the grid
for that day is irregular: the hours before the transition follow the old
offset and the rest follow the new one.
"""

from datetime import date

from tempmap.config import (
    GridKind,
    DST_GRID,
    STANDARD_GRID,
    FALL_BACK_GRID,
    SPRING_FORWARD_GRID,
)
from tempmap.engine.dst_status import dst_status
from tempmap.models.slot_grid import SlotGrid

# Keyed by (is_dst_on_date, is_dst_on_next_date); all four cases
_GRIDS: dict[tuple[bool, bool], SlotGrid] = {
    (True, True): SlotGrid(slots=DST_GRID, kind=GridKind.REGULAR),
    (False, False): SlotGrid(slots=STANDARD_GRID, kind=GridKind.REGULAR),
    (True, False): SlotGrid(slots=FALL_BACK_GRID, kind=GridKind.FALL_BACK),
    (False, True): SlotGrid(slots=SPRING_FORWARD_GRID, kind=GridKind.SPRING_FORWARD),
}


def resolve_grid(is_dst_on_date: bool, is_dst_on_next_date: bool) -> SlotGrid:
    """Return the slot grid for a date with the given DST status pair."""
    return _GRIDS[(bool(is_dst_on_date), bool(is_dst_on_next_date))]


def grid_for_date(d: date) -> SlotGrid:
    """Resolve the slot grid for a calendar date."""
    return resolve_grid(*dst_status(d))
