"""
Pie Chart Geometry — proportional wedges plus legend percentages.

Each slice is a filled wedge drawn from the centre::

    M cx cy  L x1 y1  A r r 0 <large-arc> 1 x2 y2  Z

The first wedge starts at 12 o'clock (-90°) and wedges advance
clockwise in input order.  A concentric inner circle of
``radius * DONUT_RATIO`` is reported for donut-style rendering.
"""

from __future__ import annotations

import math
from typing import Any, List, Optional, Sequence

from chart_geometry.core.config import settings
from chart_geometry.models.geometry_models import PieGeometry, Slice
from chart_geometry.services.charts.base import (
    BaseChartGeometry,
    GeometryContext,
    GeometryResult,
)
from chart_geometry.services.charts.helpers import (
    fmt_number,
    fmt_point,
    polar_point,
    round_half_up,
)
from chart_geometry.services.palette import PIE_PALETTE

START_ANGLE = -90.0


class PieChartGeometry(BaseChartGeometry):

    def compute(self) -> GeometryResult:
        validation = self.validated()
        if validation.is_empty:
            return self._no_data()

        total = sum(validation.values)
        if total == 0:
            return self._degenerate("No data to display (total is 0)")
        if not math.isfinite(total):
            return self._degenerate("Total is not finite")

        size = self.dimension("size", 200)
        center = size / 2
        radius = max(size / 2 - settings.PIE_PADDING, 0.0)
        palette = self.palette(PIE_PALETTE)

        slices: List[Slice] = []
        current_angle = START_ANGLE

        for index, datum in enumerate(validation.valid_data):
            share = datum.value / total
            sweep = share * 360
            large_arc = large_arc_flag(sweep)

            slices.append(
                Slice(
                    datum=datum,
                    path_data=wedge_path(center, center, radius, current_angle, sweep),
                    color=palette.color_for(index),
                    percentage=round_half_up(share * 100, 1),
                    start_angle=current_angle,
                    sweep_angle=sweep,
                    large_arc_flag=large_arc,
                )
            )
            current_angle += sweep

        return PieGeometry(
            slices=tuple(slices),
            total=total,
            size=size,
            center_x=center,
            center_y=center,
            radius=radius,
            inner_radius=radius * settings.DONUT_RATIO,
        )


# ── Path building ────────────────────────────────────────────────────

def large_arc_flag(sweep_angle: float) -> int:
    """1 selects the major arc; strictly greater than 180° only."""
    return 1 if sweep_angle > 180 else 0


def wedge_path(
    cx: float, cy: float, radius: float, start_angle: float, sweep: float
) -> str:
    """Move to centre, line to the arc start, clockwise arc, close."""
    x1, y1 = polar_point(cx, cy, radius, start_angle)
    x2, y2 = polar_point(cx, cy, radius, start_angle + sweep)
    r = fmt_number(radius)
    return " ".join([
        f"M {fmt_point(cx, cy)}",
        f"L {fmt_point(x1, y1)}",
        f"A {r} {r} 0 {large_arc_flag(sweep)} 1 {fmt_point(x2, y2)}",
        "Z",
    ])


def compute_pie(
    data: Any,
    size: float = 200,
    colors: Optional[Sequence[str]] = None,
) -> GeometryResult:
    """Pure entry point: pie geometry for *data* inside a ``size`` square."""
    ctx = GeometryContext(
        chart_name="PieChartGeometry",
        data=data,
        config={"size": size, "colors": colors},
    )
    return PieChartGeometry(ctx).compute()
