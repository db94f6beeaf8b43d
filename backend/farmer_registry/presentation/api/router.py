"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from farmer_registry.presentation.api.endpoints.farmers import router as farmers_router
from farmer_registry.presentation.api.endpoints.health import router as health_router

router = APIRouter()
router.include_router(health_router)
router.include_router(farmers_router)
