"""
API v1 — Router aggregation.
"""

from fastapi import APIRouter

from chart_geometry.api.v1.system import router as system_router
from chart_geometry.api.v1.charts import router as charts_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(system_router)
api_router.include_router(charts_router)
