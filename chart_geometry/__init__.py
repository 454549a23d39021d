"""
Chart geometry engine.

Turns ``{label, value}`` datasets into the primitives needed to draw
pie, bar and line charts.  Every entry point is pure and never raises
on bad data; it returns a ``NoDataResult`` instead.

Usage::

    from chart_geometry import compute_pie

    pie = compute_pie([{"label": "A", "value": 25}, {"label": "B", "value": 75}])
    if pie:
        for s in pie.slices:
            print(s.datum.label, s.percentage, s.path_data)
"""

from chart_geometry.models.geometry_models import (
    AxisTick,
    Bar,
    BarGeometry,
    ChartDatum,
    LineGeometry,
    NoDataReason,
    NoDataResult,
    PieGeometry,
    Point,
    Slice,
    ValidationResult,
)
from chart_geometry.services.charts.engine import geometry_engine
from chart_geometry.services.charts.types import compute_bars, compute_line, compute_pie
from chart_geometry.services.palette import PaletteCursor
from chart_geometry.services.validation import validate

__version__ = "1.0.0"

__all__ = [
    "AxisTick",
    "Bar",
    "BarGeometry",
    "ChartDatum",
    "LineGeometry",
    "NoDataReason",
    "NoDataResult",
    "PaletteCursor",
    "PieGeometry",
    "Point",
    "Slice",
    "ValidationResult",
    "compute_bars",
    "compute_line",
    "compute_pie",
    "geometry_engine",
    "validate",
]
