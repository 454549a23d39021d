"""
Chart geometry endpoints.

POST /api/v1/charts/{chart}/geometry
  ``chart`` is a registered alias (``pie``, ``bar``, ``line``).
  The body carries the raw dataset plus optional sizing options; the
  response is the serialized geometry, or ``data: null`` with
  ``metadata.empty`` when there is nothing to draw.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from chart_geometry.config.chart_registry import CHART_REGISTRY, resolve_chart_name
from chart_geometry.services.charts.engine import geometry_engine

router = APIRouter(prefix="/charts", tags=["charts"])


# ── Pydantic request/response models ────────────────────────────

class ChartGeometryRequest(BaseModel):
    """
    Request body for POST /charts/{chart}/geometry.

    Entries are passed through untouched; malformed ones are dropped
    by the validator rather than rejected here.
    """
    data: Optional[List[Any]] = Field(
        None, description="Records shaped like {label, value}.",
    )
    size: Optional[float] = Field(
        None, description="Pie chart square size in pixels.",
    )
    height: Optional[float] = Field(
        None, description="Bar / line chart height in pixels.",
    )
    colors: Optional[List[str]] = Field(
        None, description="Palette, reused cyclically.",
    )
    color: Optional[str] = Field(None, description="Line stroke colour.")


class ChartGeometryResponse(BaseModel):
    chart_type: str
    chart_name: str
    data: Optional[Dict[str, Any]] = None
    metadata: Dict[str, Any] = {}


# ── Endpoints ────────────────────────────────────────────────────

@router.get("")
async def list_charts():
    """Registered chart types and the options each accepts."""
    return {
        entry["chart_type"]: {
            "chart_name": class_name,
            "options": entry["options"],
        }
        for class_name, entry in CHART_REGISTRY.items()
    }


@router.post("/{chart}/geometry", response_model=ChartGeometryResponse)
async def chart_geometry(chart: str, req: ChartGeometryRequest):
    """Compute geometry for one chart."""
    class_name = resolve_chart_name(chart)
    if class_name is None:
        raise HTTPException(status_code=404, detail=f"Unknown chart type '{chart}'")

    options = req.model_dump(exclude={"data"}, exclude_none=True)
    return geometry_engine.render_payload(class_name, req.data, **options)
