from fastapi import APIRouter

from backend.app.api.v1.endpoints.health import router as health_router
from backend.app.api.v1.endpoints.suppliers import router as suppliers_router
from backend.app.api.v1.endpoints.analytics import router as analytics_router
from backend.app.api.v1.endpoints.materials import router as materials_router
from backend.app.api.v1.endpoints.finance import router as finance_router
from backend.app.api.v1.endpoints.inventory import router as inventory_router
from backend.app.api.v1.endpoints.orders import router as orders_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(suppliers_router, tags=["suppliers"])
router.include_router(analytics_router, tags=["analytics"])
router.include_router(materials_router, tags=["materials"])
router.include_router(finance_router, tags=["finance"])
router.include_router(inventory_router, tags=["inventory"])
router.include_router(orders_router, tags=["orders"])
