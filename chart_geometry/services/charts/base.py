"""
BaseChartGeometry — Abstract base class for all geometry transformers.

Single Responsibility: define the contract every transformer follows.
Transformers are pure processors: they receive raw data plus sizing
options and return a geometry model (or a ``NoDataResult`` sentinel).
They do NOT know how the geometry will be painted.

Usage in a concrete transformer::

    from chart_geometry.services.charts.base import BaseChartGeometry

    class PieChartGeometry(BaseChartGeometry):
        def compute(self) -> GeometryResult:
            ...
"""

from __future__ import annotations

import logging
import math
import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Union

from chart_geometry.core.config import settings
from chart_geometry.models.geometry_models import (
    BarGeometry,
    LineGeometry,
    NoDataResult,
    PieGeometry,
    ValidationResult,
    degenerate,
    no_valid_data,
)
from chart_geometry.services.palette import PaletteCursor
from chart_geometry.services.validation import validate

logger = logging.getLogger(__name__)

GeometryResult = Union[PieGeometry, BarGeometry, LineGeometry, NoDataResult]


@dataclass
class GeometryContext:
    """
    Everything a transformer needs for one computation.

    Built by the module-level ``compute_*`` functions or by the
    ``GeometryEngine`` from ``CHART_REGISTRY`` defaults.
    """
    chart_name: str

    # Raw, unvalidated dataset
    data: Any = None

    # Sizing / colour options (size, height, colors, color)
    config: Dict[str, Any] = field(default_factory=dict)


class BaseChartGeometry(ABC):
    """
    Abstract base class for all geometry transformers.

    Subclasses MUST implement:
      - ``compute()`` → geometry model or NoDataResult

    Subclasses MAY override ``require_label`` (line charts do not need
    labels).
    """

    require_label: bool = True

    def __init__(self, ctx: GeometryContext) -> None:
        self.ctx = ctx

    @abstractmethod
    def compute(self) -> GeometryResult:
        """
        Turn the context data into renderable geometry.

        Returns:
            A geometry model, or NoDataResult when nothing can be drawn.
        """
        ...

    # ── Convenience accessors ────────────────────────────────────

    @property
    def chart_name(self) -> str:
        return self.ctx.chart_name

    def validated(self) -> ValidationResult:
        return validate(self.ctx.data, require_label=self.require_label)

    def option(self, name: str, default: Any = None) -> Any:
        value = self.ctx.config.get(name)
        return default if value is None else value

    def dimension(self, name: str, default: float) -> float:
        """A positive, finite sizing option; falls back to *default*."""
        value = self.ctx.config.get(name)
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return float(default)
        try:
            value = float(value)
        except OverflowError:
            return float(default)
        if not math.isfinite(value) or value <= 0:
            return float(default)
        return value

    def palette(self, default) -> PaletteCursor:
        return PaletteCursor(self.option("colors", default))

    @property
    def plot_padding(self) -> float:
        return settings.PLOT_PADDING

    @property
    def chart_width(self) -> float:
        return settings.CHART_WIDTH

    # ── Sentinel builders ────────────────────────────────────────

    def _no_data(self) -> NoDataResult:
        logger.debug(f"[{self.chart_name}] No valid data")
        return no_valid_data()

    def _degenerate(self, message: str) -> NoDataResult:
        logger.info(f"[{self.chart_name}] Degenerate dataset: {message}")
        return degenerate(message)
