"""
Bar Chart Geometry — proportional rectangles along a horizontal axis.

The plot area is split into ``n`` equal slots; each bar fills
``BAR_FILL_RATIO`` of its slot and the rest is inter-bar gap, so the
total layout width is constant regardless of ``n``.  Bars grow
upward from the baseline at ``height - padding``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from chart_geometry.core.config import settings
from chart_geometry.models.geometry_models import AxisTick, Bar, BarGeometry
from chart_geometry.services.charts.base import (
    BaseChartGeometry,
    GeometryContext,
    GeometryResult,
)
from chart_geometry.services.charts.helpers import format_value
from chart_geometry.services.palette import BAR_PALETTE


class BarChartGeometry(BaseChartGeometry):

    def compute(self) -> GeometryResult:
        validation = self.validated()
        if validation.is_empty:
            return self._no_data()

        max_value = max(validation.values)
        if max_value == 0:
            return self._degenerate("No data to display")

        height = self.dimension("height", 200)
        padding = self.plot_padding
        chart_width = self.chart_width
        chart_height = max(height - padding * 2, 0.0)
        baseline = height - padding

        slot = (chart_width - padding * 2) / len(validation)
        bar_width = slot * settings.BAR_FILL_RATIO
        bar_spacing = slot * (1 - settings.BAR_FILL_RATIO)
        palette = self.palette(BAR_PALETTE)

        bars: List[Bar] = []
        for index, datum in enumerate(validation.valid_data):
            bar_height = datum.value / max_value * chart_height
            x = padding + index * (bar_width + bar_spacing) + bar_spacing / 2
            y = baseline - bar_height
            bars.append(
                Bar(
                    datum=datum,
                    x=x,
                    y=y,
                    width=bar_width,
                    height=bar_height,
                    color=palette.color_for(index),
                    value_label_y=y - settings.VALUE_LABEL_OFFSET,
                )
            )

        x_ticks = tuple(
            AxisTick(x=bar.label_x, y=height - settings.TICK_LABEL_OFFSET,
                     text=bar.datum.label)
            for bar in bars
        )
        y_ticks = (
            AxisTick(x=10, y=padding + 5, text=format_value(max_value)),
            AxisTick(x=10, y=baseline + 5, text="0"),
        )

        return BarGeometry(
            bars=tuple(bars),
            max_value=max_value,
            chart_width=chart_width,
            chart_height=chart_height,
            height=height,
            padding=padding,
            bar_width=bar_width,
            bar_spacing=bar_spacing,
            x_ticks=x_ticks,
            y_ticks=y_ticks,
        )


def compute_bars(
    data: Any,
    height: float = 200,
    colors: Optional[Sequence[str]] = None,
) -> GeometryResult:
    """Pure entry point: bar geometry for *data* in a ``height``-tall plot."""
    ctx = GeometryContext(
        chart_name="BarChartGeometry",
        data=data,
        config={"height": height, "colors": colors},
    )
    return BarChartGeometry(ctx).compute()
