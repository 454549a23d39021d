"""Unit tests for polyline geometry."""

from __future__ import annotations

import math

import pytest

from chart_geometry import LineGeometry, NoDataReason, NoDataResult, compute_line

pytestmark = pytest.mark.unit


def test_two_point_endpoints_hit_vertical_extremes() -> None:
    line = compute_line([{"value": 0}, {"value": 10}], 200)

    assert isinstance(line, LineGeometry)
    first, second = line.points
    assert (first.x, first.y) == (40, 160)
    assert (second.x, second.y) == (360, 40)
    assert line.path_data == "M 40 160 L 360 40"
    assert not line.is_flat


def test_x_is_evenly_spaced_and_increasing() -> None:
    line = compute_line([{"value": v} for v in [3, 1, 4, 1, 5]], 200)

    xs = [p.x for p in line.points]
    assert xs == pytest.approx([40, 120, 200, 280, 360])


def test_y_is_inverted_interpolation() -> None:
    line = compute_line([{"value": v} for v in [2, 6, 4]], 240)

    assert [p.y for p in line.points] == pytest.approx([200, 40, 120])
    assert line.chart_height == 160


def test_single_point_sits_at_padding() -> None:
    line = compute_line([{"label": "only", "value": 7}])

    (only,) = line.points
    assert (only.x, only.y) == (40, 40)
    assert line.path_data == "M 40 40"
    assert line.is_flat


def test_flat_series_draws_at_constant_height() -> None:
    line = compute_line([{"value": 5}] * 4, 200)

    assert {p.y for p in line.points} == {40}
    assert line.is_flat


def test_points_keep_input_order() -> None:
    data = [{"label": "Mon", "value": 3}, {"label": "Tue", "value": 1}, {"label": "Wed", "value": 2}]
    line = compute_line(data)

    assert [p.datum.label for p in line.points] == ["Mon", "Tue", "Wed"]
    assert line.path_data.startswith("M ")
    assert line.path_data.count(" L ") == 2


@pytest.mark.parametrize(("count", "expected"), [(1, [0]), (6, [0, 1, 2, 3, 4, 5]), (12, [0, 2, 4, 6, 8, 10]), (13, [0, 3, 6, 9, 12])])
def test_tick_sampling(count, expected) -> None:
    data = [{"label": f"d{i}", "value": i} for i in range(count)]
    line = compute_line(data, 200)

    assert [t.text for t in line.x_ticks] == [f"d{i}" for i in expected]
    assert all(t.y == 190 for t in line.x_ticks)
    assert len(line.x_ticks) <= 6


def test_y_axis_labels_show_extremes() -> None:
    line = compute_line([{"value": 2.5}, {"value": 1000}], 200)

    assert [t.text for t in line.y_ticks] == ["1,000", "2.5"]


def test_stroke_color() -> None:
    assert compute_line([{"value": 1}]).color == "#0EA5E9"
    assert compute_line([{"value": 1}], color="#123456").color == "#123456"


def test_nan_only_is_no_valid_data() -> None:
    result = compute_line([{"value": math.nan}], 200)

    assert isinstance(result, NoDataResult)
    assert result.reason is NoDataReason.NO_VALID_DATA


def test_invalid_entries_are_skipped() -> None:
    line = compute_line([{"value": 1}, {"value": "x"}, None, {"value": 3}])

    assert [p.datum.value for p in line.points] == [1, 3]


def test_identical_calls_are_identical() -> None:
    data = [{"value": v} for v in [5, 3, 8]]

    assert compute_line(data, 200) == compute_line(data, 200)
