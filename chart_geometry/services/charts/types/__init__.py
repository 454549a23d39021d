"""
Concrete geometry transformers.

Each module defines one ``BaseChartGeometry`` subclass named after the
module in CamelCase, plus a pure ``compute_*`` entry point.
"""

from chart_geometry.services.charts.types.pie_chart_geometry import (
    PieChartGeometry,
    compute_pie,
)
from chart_geometry.services.charts.types.bar_chart_geometry import (
    BarChartGeometry,
    compute_bars,
)
from chart_geometry.services.charts.types.line_chart_geometry import (
    LineChartGeometry,
    compute_line,
)

__all__ = [
    "PieChartGeometry",
    "BarChartGeometry",
    "LineChartGeometry",
    "compute_pie",
    "compute_bars",
    "compute_line",
]
