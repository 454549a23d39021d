"""System endpoints — health check, cache info, cache reset."""

from fastapi import APIRouter

from chart_geometry.core.cache import geometry_cache

router = APIRouter(prefix="/system", tags=["system"])


@router.get("/health")
async def health_check():
    """Basic liveness check."""
    return {
        "status": "ok",
        "cache": geometry_cache.get_cache_info(),
    }


@router.post("/cache/clear")
async def cache_clear():
    """Drop every memoized geometry result."""
    geometry_cache.clear()
    return {
        "status": "cleared",
        "info": geometry_cache.get_cache_info(),
    }
