"""
Chart geometry package.

Modules:
  base     : BaseChartGeometry ABC and GeometryContext dataclass.
  engine   : GeometryEngine — registry lookup, dynamic import, memoization.
  helpers  : Shared path / trigonometry / axis utilities.
  types/   : Concrete transformers (pie, bar, line).
"""

from chart_geometry.services.charts.base import BaseChartGeometry, GeometryContext
from chart_geometry.services.charts.engine import (
    GeometryEngine,
    UnknownChartError,
    geometry_engine,
)

__all__ = [
    "BaseChartGeometry",
    "GeometryContext",
    "GeometryEngine",
    "UnknownChartError",
    "geometry_engine",
]
