"""Unit tests for the registry-driven geometry engine and its cache."""

from __future__ import annotations

import math

import pandas as pd
import pytest

from chart_geometry import NoDataResult, PieGeometry
from chart_geometry.config.chart_registry import CHART_REGISTRY, resolve_chart_name
from chart_geometry.core.cache import GeometryCache, geometry_cache
from chart_geometry.core.config import settings
from chart_geometry.services.charts.engine import GeometryEngine, UnknownChartError, geometry_engine
from chart_geometry.services.charts.types import BarChartGeometry, LineChartGeometry, PieChartGeometry

pytestmark = pytest.mark.unit

PIE_DATA = [{"label": "A", "value": 25}, {"label": "B", "value": 75}]


def test_class_to_module() -> None:
    assert GeometryEngine._class_to_module("PieChartGeometry") == "pie_chart_geometry"
    assert GeometryEngine._class_to_module("LineChartGeometry") == "line_chart_geometry"


def test_every_registered_chart_resolves() -> None:
    engine = GeometryEngine()
    resolved = {name: engine._resolve_class(name) for name in CHART_REGISTRY}

    assert resolved == {
        "PieChartGeometry": PieChartGeometry,
        "BarChartGeometry": BarChartGeometry,
        "LineChartGeometry": LineChartGeometry,
    }


@pytest.mark.parametrize(
    ("alias", "expected"),
    [("pie", "PieChartGeometry"), ("BAR", "BarChartGeometry"), (" line ", "LineChartGeometry"),
     ("piechartgeometry", "PieChartGeometry"), ("scatter", None), ("", None)],
)
def test_resolve_chart_name(alias, expected) -> None:
    assert resolve_chart_name(alias) == expected


def test_registry_defaults_are_applied() -> None:
    pie = geometry_engine.compute("PieChartGeometry", PIE_DATA)

    assert isinstance(pie, PieGeometry)
    assert pie.size == 200
    assert pie.slices[0].color == CHART_REGISTRY["PieChartGeometry"]["default_config"]["colors"][0]


def test_options_override_defaults_and_unknown_options_are_ignored() -> None:
    pie = geometry_engine.compute(
        "PieChartGeometry", PIE_DATA, size=300, colors=["#000"], height=999, color=None
    )

    assert pie.size == 300
    assert [s.color for s in pie.slices] == ["#000", "#000"]


def test_unknown_chart_raises_on_compute() -> None:
    with pytest.raises(UnknownChartError):
        geometry_engine.compute("ScatterChartGeometry", PIE_DATA)


def test_repeat_computation_is_memoized() -> None:
    first = geometry_engine.compute("BarChartGeometry", PIE_DATA, height=180)
    second = geometry_engine.compute("BarChartGeometry", list(PIE_DATA), height=180)

    assert second is first
    info = geometry_cache.get_cache_info()
    assert info["hits"] == 1
    assert info["entries"] == 1


def test_different_options_are_different_entries() -> None:
    a = geometry_engine.compute("BarChartGeometry", PIE_DATA, height=180)
    b = geometry_engine.compute("BarChartGeometry", PIE_DATA, height=220)

    assert a is not b
    assert len(geometry_cache) == 2


def test_use_cache_false_bypasses_memoization() -> None:
    first = geometry_engine.compute("LineChartGeometry", PIE_DATA, use_cache=False)
    second = geometry_engine.compute("LineChartGeometry", PIE_DATA, use_cache=False)

    assert first == second
    assert first is not second
    assert len(geometry_cache) == 0


def test_nan_inputs_share_a_cache_key() -> None:
    data = [{"label": "A", "value": math.nan}]

    first = geometry_engine.compute("PieChartGeometry", data)
    second = geometry_engine.compute("PieChartGeometry", [{"label": "A", "value": math.nan}])

    assert isinstance(first, NoDataResult)
    assert second is first


def test_generator_input_is_materialized_before_keying() -> None:
    result = geometry_engine.compute(
        "PieChartGeometry", ({"label": str(i), "value": i + 1} for i in range(3))
    )

    assert len(result.slices) == 3


def test_pandas_series_input() -> None:
    series = pd.Series([3, 1], index=["North", "South"])

    bars = geometry_engine.compute("BarChartGeometry", series)

    assert [b.datum.label for b in bars.bars] == ["North", "South"]


def test_unhashable_option_skips_cache() -> None:
    assert GeometryCache.make_key("PieChartGeometry", [("A", 1)], {"colors": {"#000"}}) is None


def test_cache_is_bounded(monkeypatch) -> None:
    monkeypatch.setattr(settings, "CACHE_MAX_ENTRIES", 2)

    for height in (100, 150, 200):
        geometry_engine.compute("LineChartGeometry", PIE_DATA, height=height)

    assert len(geometry_cache) == 2


def test_render_payload_for_geometry() -> None:
    payload = geometry_engine.render_payload("PieChartGeometry", PIE_DATA, colors=["#000", "#fff"])

    assert payload["chart_type"] == "pie"
    assert payload["metadata"] == {"empty": False, "total_points": 2}
    assert [s["percentage"] for s in payload["data"]["slices"]] == [25.0, 75.0]


def test_render_payload_for_sentinel() -> None:
    payload = geometry_engine.render_payload("BarChartGeometry", [{"label": "A", "value": 0}])

    assert payload["data"] is None
    assert payload["metadata"]["empty"] is True
    assert payload["metadata"]["reason"] == "degenerate"


def test_render_payload_never_raises_for_unknown_chart() -> None:
    payload = geometry_engine.render_payload("Nope", PIE_DATA)

    assert payload["chart_type"] == "error"
    assert payload["metadata"]["error"] is True


def test_render_payload_reports_internal_failures(monkeypatch) -> None:
    def boom(self):
        raise RuntimeError("kaboom")

    monkeypatch.setattr(PieChartGeometry, "compute", boom)

    payload = geometry_engine.render_payload("PieChartGeometry", PIE_DATA)

    assert payload["chart_type"] == "error"
    assert payload["metadata"]["message"] == "kaboom"
