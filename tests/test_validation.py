"""Unit tests for the shared input validator."""

from __future__ import annotations

import math
from types import SimpleNamespace

import pandas as pd
import pytest

from chart_geometry.models.geometry_models import ChartDatum
from chart_geometry.services.validation import coerce_records, is_valid_value, validate

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("raw", [None, [], (), "abc", b"abc", 42, {"label": "A", "value": 1}])
def test_absent_or_non_array_input_is_empty(raw) -> None:
    """Anything that is not a collection of records counts as no data."""

    result = validate(raw)
    assert result.is_empty
    assert result.valid_data == ()


def test_malformed_entries_are_dropped_silently() -> None:
    """Only finite, non-negative, numeric, labelled entries survive."""

    raw = [
        None,
        {"label": "ok", "value": 3},
        {"label": "nan", "value": math.nan},
        {"label": "inf", "value": math.inf},
        {"label": "neg", "value": -1},
        {"label": "text", "value": "5"},
        {"label": "bool", "value": True},
        {"label": "", "value": 2},
        {"value": 2},
        {"label": "zero", "value": 0},
        {"label": "huge", "value": 10**400},
    ]

    result = validate(raw)

    assert not result.is_empty
    assert [d.label for d in result.valid_data] == ["ok", "zero"]
    assert result.values == [3.0, 0.0]


def test_label_is_optional_when_not_required() -> None:
    """Line data may omit labels; they become empty strings."""

    result = validate([{"value": 1}, {"value": 2, "label": None}], require_label=False)

    assert [d.label for d in result.valid_data] == ["", ""]
    assert result.values == [1.0, 2.0]


def test_objects_with_attributes_are_accepted() -> None:
    raw = [SimpleNamespace(label="a", value=1), ChartDatum(label="b", value=2.5)]

    result = validate(raw)

    assert result.valid_data == (ChartDatum("a", 1.0), ChartDatum("b", 2.5))


def test_generators_are_consumed_once() -> None:
    result = validate({"label": str(i), "value": i} for i in range(3))

    assert len(result) == 3


def test_dataframe_rows_are_records() -> None:
    """pandas rows with NaN labels or values are dropped like any other bad row."""

    df = pd.DataFrame(
        {
            "label": ["North", None, "South", "East"],
            "value": [10, 4, float("nan"), 7],
        }
    )

    result = validate(df)

    assert [d.label for d in result.valid_data] == ["North", "East"]
    assert result.values == [10.0, 7.0]


def test_dataframe_without_value_column_is_empty() -> None:
    assert validate(pd.DataFrame({"label": ["a"], "count": [1]})).is_empty


def test_series_index_becomes_label() -> None:
    """A groupby-size result can be charted directly."""

    df = pd.DataFrame({"area_name": ["A", "B", "A", "A"]})
    series = df.groupby("area_name").size()

    result = validate(series)

    assert result.valid_data == (ChartDatum("A", 3.0), ChartDatum("B", 1.0))


def test_coerce_records_returns_list() -> None:
    assert coerce_records(None) == []
    assert coerce_records(iter([{"value": 1}])) == [{"value": 1}]


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, True), (1.5, True), (-0.1, False), (math.nan, False), (math.inf, False),
     (False, False), ("1", False), (None, False)],
)
def test_is_valid_value(value, expected) -> None:
    assert is_valid_value(value) is expected
