"""
Line Chart Geometry — an ordered series as a straight-segment polyline.

Points are spaced evenly across the plot width; ``y`` is the inverted
linear interpolation of the value between the series minimum and
maximum, so larger values sit higher on screen.

A flat series (``max == min``) substitutes ``range = 1``: every point
lands on the top edge of the plot and the result is marked
``is_flat`` so callers may show a placeholder instead.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from chart_geometry.core.config import settings
from chart_geometry.models.geometry_models import AxisTick, LineGeometry, Point
from chart_geometry.services.charts.base import (
    BaseChartGeometry,
    GeometryContext,
    GeometryResult,
)
from chart_geometry.services.charts.helpers import format_value, polyline_path, tick_step
from chart_geometry.services.palette import LINE_COLOR

logger = logging.getLogger(__name__)


class LineChartGeometry(BaseChartGeometry):

    require_label = False

    def compute(self) -> GeometryResult:
        validation = self.validated()
        if validation.is_empty:
            return self._no_data()

        values = validation.values
        max_value = max(values)
        min_value = min(values)
        is_flat = max_value == min_value
        value_range = (max_value - min_value) or 1
        if is_flat:
            logger.info(f"[{self.chart_name}] Flat series, drawing at constant height")

        height = self.dimension("height", 200)
        padding = self.plot_padding
        chart_width = self.chart_width
        chart_height = max(height - padding * 2, 0.0)
        plot_width = chart_width - padding * 2
        count = len(validation)

        points: List[Point] = []
        for index, datum in enumerate(validation.valid_data):
            if count > 1:
                x = padding + index / (count - 1) * plot_width
            else:
                x = padding
            y = padding + (max_value - datum.value) / value_range * chart_height
            points.append(Point(x=x, y=y, datum=datum))

        return LineGeometry(
            points=tuple(points),
            path_data=polyline_path((p.x, p.y) for p in points),
            min_value=min_value,
            max_value=max_value,
            chart_width=chart_width,
            chart_height=chart_height,
            height=height,
            padding=padding,
            color=self.option("color", LINE_COLOR),
            is_flat=is_flat,
            x_ticks=_sample_ticks(points, height),
            y_ticks=(
                AxisTick(x=10, y=padding + 5, text=format_value(max_value)),
                AxisTick(x=10, y=height - padding + 5, text=format_value(min_value)),
            ),
        )


def _sample_ticks(points: List[Point], height: float) -> tuple:
    """One x-axis label every ``ceil(n / MAX_AXIS_TICKS)`` points."""
    step = tick_step(len(points))
    baseline = height - settings.TICK_LABEL_OFFSET
    return tuple(
        AxisTick(x=point.x, y=baseline, text=point.datum.label)
        for index, point in enumerate(points)
        if index % step == 0
    )


def compute_line(
    data: Any,
    height: float = 200,
    color: Optional[str] = None,
) -> GeometryResult:
    """Pure entry point: polyline geometry for *data* in a ``height``-tall plot."""
    ctx = GeometryContext(
        chart_name="LineChartGeometry",
        data=data,
        config={"height": height, "color": color},
    )
    return LineChartGeometry(ctx).compute()
