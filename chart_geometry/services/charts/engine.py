"""
GeometryEngine — Dynamic transformer instantiation via Registry Pattern.

Single Responsibility: given a registered class name, instantiate the
concrete transformer and execute ``compute()``, memoizing the result.

Uses ``CHART_REGISTRY`` for metadata and Python's module system for
class resolution.  No hardcoded if/else chains.

Usage::

    from chart_geometry.services.charts.engine import geometry_engine

    pie = geometry_engine.compute("PieChartGeometry", data, size=240)
    payload = geometry_engine.render_payload("LineChartGeometry", data)
"""

from __future__ import annotations

import importlib
import logging
from typing import Any, Dict, List, Optional, Type

from chart_geometry.config.chart_registry import CHART_REGISTRY
from chart_geometry.core.cache import geometry_cache
from chart_geometry.services.charts.base import (
    BaseChartGeometry,
    GeometryContext,
    GeometryResult,
)
from chart_geometry.services.validation import coerce_records, record_field

logger = logging.getLogger(__name__)

# Module path where concrete transformers live
_TYPES_MODULE = "chart_geometry.services.charts.types"


class UnknownChartError(KeyError):
    """Raised when a class name is not present in CHART_REGISTRY."""


class GeometryEngine:
    """
    Dynamic transformer resolver and executor.

    Pipeline per computation:
      1. Look up metadata in CHART_REGISTRY.
      2. Import the concrete class from ``services/charts/types/``.
      3. Merge registry defaults with caller options.
      4. Return a memoized result or call ``compute()``.
    """

    def __init__(self) -> None:
        # Cache: class_name → class object (avoids repeated imports)
        self._class_cache: Dict[str, Type[BaseChartGeometry]] = {}

    def compute(
        self,
        class_name: str,
        data: Any,
        use_cache: bool = True,
        **options: Any,
    ) -> GeometryResult:
        """
        Compute geometry for *data* with the named transformer.

        Args:
            class_name: Key in CHART_REGISTRY (e.g. ``"BarChartGeometry"``).
            data:       Raw dataset, any shape the validator accepts.
            use_cache:  Reuse a memoized result for identical input.
            **options:  Sizing / colour options; ``None`` values and
                        options the transformer does not accept are ignored.

        Raises:
            UnknownChartError: *class_name* is not registered.
        """
        registry_entry = CHART_REGISTRY.get(class_name)
        if not registry_entry:
            raise UnknownChartError(class_name)

        chart_cls = self._resolve_class(class_name)
        if chart_cls is None:
            raise UnknownChartError(class_name)

        records = coerce_records(data)
        config = self._merge_config(class_name, registry_entry, options)

        key = None
        if use_cache:
            key = geometry_cache.make_key(
                class_name,
                ((record_field(r, "label"), record_field(r, "value")) for r in records),
                config,
            )
            cached = geometry_cache.get(key)
            if cached is not None:
                logger.debug(f"[GeometryEngine] Cache hit for '{class_name}'")
                return cached

        ctx = GeometryContext(chart_name=class_name, data=records, config=config)
        result = chart_cls(ctx).compute()
        geometry_cache.put(key, result)
        return result

    def render_payload(
        self, class_name: str, data: Any, **options: Any
    ) -> Dict[str, Any]:
        """
        Compute and serialize in one step.

        Never raises: unknown charts and unexpected failures become an
        error payload, a ``NoDataResult`` becomes an empty payload.
        """
        try:
            result = self.compute(class_name, data, **options)
        except UnknownChartError:
            logger.warning(f"[GeometryEngine] '{class_name}' not in CHART_REGISTRY")
            return self._error_result(class_name, "Chart not registered")
        except Exception as exc:
            logger.error(
                f"[GeometryEngine] Error computing '{class_name}': {exc}",
                exc_info=True,
            )
            return self._error_result(class_name, str(exc))

        chart_type = CHART_REGISTRY[class_name]["chart_type"]
        if result.is_empty:
            return {
                "chart_type": chart_type,
                "chart_name": class_name,
                "data": None,
                "metadata": result.to_dict(),
            }
        return {
            "chart_type": chart_type,
            "chart_name": class_name,
            "data": result.to_dict(),
            "metadata": {"empty": False, "total_points": _count_items(result)},
        }

    # ── Resolution ───────────────────────────────────────────────

    def _resolve_class(self, class_name: str) -> Optional[Type[BaseChartGeometry]]:
        """
        Import and cache the transformer class by its name.

        Converts CamelCase class name to snake_case module name:
          ``PieChartGeometry`` → ``pie_chart_geometry``
        """
        if class_name in self._class_cache:
            return self._class_cache[class_name]

        module_name = self._class_to_module(class_name)
        full_path = f"{_TYPES_MODULE}.{module_name}"

        try:
            module = importlib.import_module(full_path)
            cls = getattr(module, class_name, None)
            if cls and issubclass(cls, BaseChartGeometry):
                self._class_cache[class_name] = cls
                return cls
            logger.error(
                f"[GeometryEngine] {full_path} does not export '{class_name}' "
                f"as a BaseChartGeometry subclass"
            )
        except ImportError as exc:
            logger.error(f"[GeometryEngine] Cannot import {full_path}: {exc}")

        return None

    @staticmethod
    def _class_to_module(class_name: str) -> str:
        """
        Convert CamelCase to snake_case for module resolution.

        ``BarChartGeometry``  → ``bar_chart_geometry``
        """
        result: List[str] = []
        for i, ch in enumerate(class_name):
            if ch.isupper() and i > 0:
                result.append("_")
            result.append(ch.lower())
        return "".join(result)

    @staticmethod
    def _merge_config(
        class_name: str,
        registry_entry: dict,
        options: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Registry defaults overlaid with the accepted, non-None options."""
        accepted = registry_entry.get("options", [])
        config = dict(registry_entry.get("default_config", {}))
        for name, value in options.items():
            if name not in accepted:
                logger.debug(
                    f"[GeometryEngine] Ignoring option '{name}' for '{class_name}'"
                )
                continue
            if value is not None:
                config[name] = value
        return config

    @staticmethod
    def _error_result(class_name: str, error: str) -> Dict[str, Any]:
        """Build an error result dict for a failed computation."""
        return {
            "chart_type": "error",
            "chart_name": class_name,
            "data": None,
            "metadata": {"error": True, "message": error},
        }


def _count_items(result: GeometryResult) -> int:
    for attr in ("slices", "bars", "points"):
        items = getattr(result, attr, None)
        if items is not None:
            return len(items)
    return 0


# ── Singleton ────────────────────────────────────────────────────
geometry_engine = GeometryEngine()
