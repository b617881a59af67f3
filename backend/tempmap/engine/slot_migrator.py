"""
Slot migrator.

When the date changes, the selected slot has to move into the grid of the new
date. The rules keep the user's intent: the slot moves by at most one hour,
toward the neighbour that the new grid actually offers.
"""

import logging
from typing import Optional

from tempmap.config import GridKind, DST_GRID
from tempmap.models.slot_grid import SlotGrid

logger = logging.getLogger(__name__)


def _check_slot(slot: int) -> None:
    if not 0 <= slot <= 23:
        raise ValueError(f"Slot must be an hour of day in [0, 23], got {slot}.")


def _into_fall_back(slot: int) -> int:
    # Grid: 2, 4, 7, ..., 22
    if slot == 1:
        return 2
    if slot % 3 == 2 and slot != 2:
        return slot - 1
    return slot


def _into_spring_forward(slot: int) -> int:
    # Grid: 1, 5, 8, ..., 23
    if slot == 2:
        return 1
    if slot % 3 == 1 and slot != 1:
        return slot + 1
    return slot


def _into_dst(slot: int) -> int:
    # Grid: 2, 5, 8, ..., 23
    if slot % 3 == 1:
        return slot + 1
    return slot


def _into_standard(slot: int) -> int:
    # Grid: 1, 4, 7, ..., 22
    if slot % 3 == 2:
        return slot - 1
    return slot


def _nearest(slot: int, slots: tuple[int, ...]) -> int:
    """Closest grid member; ties go to the earlier hour."""
    return min(slots, key=lambda s: (abs(s - slot), s))


def migrate(
    old_slot: int,
    old_kind: Optional[GridKind],
    new_grid: SlotGrid,
) -> int:
    """
    Move `old_slot` into `new_grid`.

    Args:
        old_slot: Previously selected local hour (0-23)
        old_kind: Kind of the grid `old_slot` was selected from (None if unknown)
        new_grid: Grid resolved for the newly selected date

    Returns:
        A member of `new_grid.slots`
    """
    _check_slot(old_slot)

    if new_grid.kind == GridKind.FALL_BACK:
        new_slot = _into_fall_back(old_slot)
    elif new_grid.kind == GridKind.SPRING_FORWARD:
        new_slot = _into_spring_forward(old_slot)
    elif new_grid.slots == DST_GRID:
        new_slot = _into_dst(old_slot)
    else:
        new_slot = _into_standard(old_slot)

    # Hours off every grid (0, 3, 6, ...) only reach here from direct input
    if new_slot not in new_grid:
        new_slot = _nearest(old_slot, new_grid.slots)

    assert new_slot in new_grid, (new_slot, new_grid.slots)

    if new_slot != old_slot:
        logger.debug(
            "Migrated slot %d -> %d (%s grid -> %s grid)",
            old_slot,
            new_slot,
            old_kind.value if old_kind else "unknown",
            new_grid.kind.value,
        )
    return new_slot
