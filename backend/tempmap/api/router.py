"""
Top-level API router that aggregates all sub-routers.
"""

from fastapi import APIRouter

from tempmap.api.slot_grid import router as slot_grid_router
from tempmap.api.lookup import router as lookup_router
from tempmap.api.selection import router as selection_router
from tempmap.api.temperatures import router as temperatures_router

router = APIRouter()
router.include_router(slot_grid_router)
router.include_router(lookup_router)
router.include_router(selection_router)
router.include_router(temperatures_router)
