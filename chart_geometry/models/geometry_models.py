"""
Geometry value objects.

Every entity produced by the engine is a frozen dataclass owned by the
call that created it.  Each exposes ``to_dict()`` so the API layer (or
any renderer) can serialize it without knowing the class.

Entities:
  ChartDatum        : one validated ``{label, value}`` point.
  ValidationResult  : filtered dataset + emptiness flag.
  NoDataResult      : sentinel returned instead of raising.
  Slice / PieGeometry
  Bar   / BarGeometry
  Point / AxisTick / LineGeometry
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class ChartDatum:
    label: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "value": self.value}


@dataclass(frozen=True)
class ValidationResult:
    """Output of the input validator, derived once per computation."""
    valid_data: Tuple[ChartDatum, ...] = ()

    @property
    def is_empty(self) -> bool:
        return len(self.valid_data) == 0

    @property
    def values(self) -> List[float]:
        return [d.value for d in self.valid_data]

    def __len__(self) -> int:
        return len(self.valid_data)


# ─── Sentinel ────────────────────────────────────────────────────────

class NoDataReason(str, Enum):
    NO_VALID_DATA = "no_valid_data"
    DEGENERATE = "degenerate"


@dataclass(frozen=True)
class NoDataResult:
    """
    "Nothing to draw" sentinel.

    ``NO_VALID_DATA`` means no entry survived validation; ``DEGENERATE``
    means the data validated but its aggregate (total or max) is zero.
    Falsy, so callers can write ``if not result: ...``.
    """
    reason: NoDataReason
    message: str = ""

    @property
    def is_empty(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "empty": True,
            "reason": self.reason.value,
            "message": self.message,
        }


def no_valid_data() -> NoDataResult:
    return NoDataResult(NoDataReason.NO_VALID_DATA, "No valid data available")


def degenerate(message: str) -> NoDataResult:
    return NoDataResult(NoDataReason.DEGENERATE, message)


# ─── Pie ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Slice:
    """
    One wedge of a pie chart.

    Angles are in degrees, measured clockwise on screen from the
    positive x-axis; the first slice starts at -90 (12 o'clock).
    """
    datum: ChartDatum
    path_data: str
    color: str
    percentage: float
    start_angle: float
    sweep_angle: float
    large_arc_flag: int

    @property
    def end_angle(self) -> float:
        return self.start_angle + self.sweep_angle

    @property
    def mid_angle(self) -> float:
        return self.start_angle + self.sweep_angle / 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.datum.to_dict(),
            "path_data": self.path_data,
            "color": self.color,
            "percentage": self.percentage,
            "start_angle": self.start_angle,
            "sweep_angle": self.sweep_angle,
            "mid_angle": self.mid_angle,
            "large_arc_flag": self.large_arc_flag,
        }


@dataclass(frozen=True)
class PieGeometry:
    slices: Tuple[Slice, ...]
    total: float
    size: float
    center_x: float
    center_y: float
    radius: float
    inner_radius: float

    @property
    def is_empty(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "slices": [s.to_dict() for s in self.slices],
            "total": self.total,
            "size": self.size,
            "center": {"x": self.center_x, "y": self.center_y},
            "radius": self.radius,
            "inner_radius": self.inner_radius,
        }


# ─── Bar ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Bar:
    datum: ChartDatum
    x: float
    y: float
    width: float
    height: float
    color: str
    value_label_y: float = 0.0

    @property
    def label_x(self) -> float:
        """Horizontal centre, the anchor for the x-axis and value labels."""
        return self.x + self.width / 2

    def to_dict(self) -> Dict[str, Any]:
        return {
            **self.datum.to_dict(),
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "color": self.color,
            "label_x": self.label_x,
            "value_label_y": self.value_label_y,
        }


@dataclass(frozen=True)
class AxisTick:
    """A text label positioned on a chart axis."""
    x: float
    y: float
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, "text": self.text}


@dataclass(frozen=True)
class BarGeometry:
    bars: Tuple[Bar, ...]
    max_value: float
    chart_width: float
    chart_height: float
    height: float
    padding: float
    bar_width: float
    bar_spacing: float
    x_ticks: Tuple[AxisTick, ...] = ()
    y_ticks: Tuple[AxisTick, ...] = ()

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def baseline_y(self) -> float:
        return self.height - self.padding

    def to_dict(self) -> Dict[str, Any]:
        return {
            "bars": [b.to_dict() for b in self.bars],
            "max_value": self.max_value,
            "chart_width": self.chart_width,
            "chart_height": self.chart_height,
            "height": self.height,
            "padding": self.padding,
            "bar_width": self.bar_width,
            "bar_spacing": self.bar_spacing,
            "baseline_y": self.baseline_y,
            "x_ticks": [t.to_dict() for t in self.x_ticks],
            "y_ticks": [t.to_dict() for t in self.y_ticks],
        }


# ─── Line ────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Point:
    x: float
    y: float
    datum: ChartDatum

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "y": self.y, **self.datum.to_dict()}


@dataclass(frozen=True)
class LineGeometry:
    points: Tuple[Point, ...]
    path_data: str
    min_value: float
    max_value: float
    chart_width: float
    chart_height: float
    height: float
    padding: float
    color: str
    is_flat: bool = False
    x_ticks: Tuple[AxisTick, ...] = ()
    y_ticks: Tuple[AxisTick, ...] = ()

    @property
    def is_empty(self) -> bool:
        return False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "points": [p.to_dict() for p in self.points],
            "path_data": self.path_data,
            "min_value": self.min_value,
            "max_value": self.max_value,
            "chart_width": self.chart_width,
            "chart_height": self.chart_height,
            "height": self.height,
            "padding": self.padding,
            "color": self.color,
            "is_flat": self.is_flat,
            "x_ticks": [t.to_dict() for t in self.x_ticks],
            "y_ticks": [t.to_dict() for t in self.y_ticks],
        }
