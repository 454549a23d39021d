"""
Shared helpers for geometry transformers.

Single Responsibility: reusable numeric / formatting utilities
consumed by multiple chart types.  No chart-specific logic here.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

from chart_geometry.core.config import settings


# ── Path formatting ──────────────────────────────────────────────

def fmt_number(value: float, precision: Optional[int] = None) -> str:
    """
    Format a coordinate for a path string.

    Rounded to ``PATH_PRECISION`` decimals with trailing zeros stripped,
    so ``100.00000000000001`` becomes ``"100"``.
    """
    digits = settings.PATH_PRECISION if precision is None else precision
    text = f"{round(value, digits):.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    return text


def fmt_point(x: float, y: float) -> str:
    return f"{fmt_number(x)} {fmt_number(y)}"


def round_half_up(value: float, places: int = 1) -> float:
    """
    Round on the exact binary value with ties away from zero.

    Matches how percentage labels are usually printed: ``6.25`` gives
    ``6.3`` where built-in ``round`` would give ``6.2``.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def polyline_path(coords) -> str:
    """Straight-segment path ``M x0 y0 L x1 y1 ...`` in point order."""
    return " ".join(
        f"{'M' if i == 0 else 'L'} {fmt_point(x, y)}"
        for i, (x, y) in enumerate(coords)
    )


# ── Trigonometry ─────────────────────────────────────────────────

def polar_point(
    cx: float, cy: float, radius: float, angle_deg: float
) -> Tuple[float, float]:
    """Point on the circle at *angle_deg* (screen coordinates, y down)."""
    theta = math.radians(angle_deg)
    return cx + radius * math.cos(theta), cy + radius * math.sin(theta)


# ── Axis helpers ─────────────────────────────────────────────────

def tick_step(count: int, max_ticks: Optional[int] = None) -> int:
    """Label every ``ceil(count / max_ticks)``-th point (at least 1)."""
    limit = max_ticks or settings.MAX_AXIS_TICKS
    if count <= 0:
        return 1
    return max(1, math.ceil(count / limit))


def format_value(value: float) -> str:
    """Thousands-separated label text: 1234.0 → '1,234', 0.5 → '0.5'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
