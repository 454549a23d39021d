"""
Input Validator — leaf component shared by every chart transformer.

Single Responsibility: reduce an arbitrary raw dataset to the
well-formed ``ChartDatum`` entries and report whether anything is left.

Accepted shapes (anything else counts as absent data):
  - ``None`` / empty containers
  - iterables of mappings (``{"label": ..., "value": ...}``)
  - iterables of objects exposing ``label`` / ``value`` attributes
  - ``pandas.DataFrame`` with ``label`` and ``value`` columns
  - ``pandas.Series`` (index → label, values → value), e.g. the result
    of ``df.groupby("area_name").size()``

Never raises.  Malformed entries are dropped silently; the aggregate
``is_empty`` flag is the only feedback.
"""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Mapping
from typing import Any, List, Optional

import pandas as pd

from chart_geometry.models.geometry_models import ChartDatum, ValidationResult

logger = logging.getLogger(__name__)


def validate(data: Any, require_label: bool = True) -> ValidationResult:
    """
    Filter *data* down to valid chart points.

    Args:
        data:          Raw dataset in any of the accepted shapes.
        require_label: Pie and bar charts need a truthy label; line
                       charts only use labels for axis ticks.

    Returns:
        ValidationResult with the surviving entries in input order.
    """
    valid: List[ChartDatum] = []
    dropped = 0

    for item in coerce_records(data):
        datum = _to_datum(item, require_label)
        if datum is None:
            dropped += 1
            continue
        valid.append(datum)

    if dropped:
        logger.debug(f"[Validator] Dropped {dropped} malformed entries")

    return ValidationResult(valid_data=tuple(valid))


def is_valid_value(value: Any) -> bool:
    """A real, finite, non-negative number (booleans excluded)."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    try:
        value = float(value)
    except OverflowError:
        return False
    return not math.isnan(value) and math.isfinite(value) and value >= 0


# ── Record coercion ──────────────────────────────────────────────────

def coerce_records(data: Any) -> List[Any]:
    """Coerce the raw input into a list of record-like items."""
    if data is None:
        return []

    if isinstance(data, pd.DataFrame):
        if data.empty or "value" not in data.columns:
            return []
        return data.to_dict("records")

    if isinstance(data, pd.Series):
        return [
            {"label": str(idx), "value": val}
            for idx, val in data.items()
        ]

    # A lone string or mapping is not a dataset
    if isinstance(data, (str, bytes, Mapping)):
        return []

    try:
        return list(data)
    except TypeError:
        return []


def record_field(item: Any, name: str) -> Any:
    if isinstance(item, Mapping):
        return item.get(name)
    return getattr(item, name, None)


# ── Private helpers ──────────────────────────────────────────────────

def _is_missing(label: Any) -> bool:
    # pandas fills absent labels with NaN, which is truthy
    return label is None or (isinstance(label, float) and math.isnan(label))


def _to_datum(item: Any, require_label: bool) -> Optional[ChartDatum]:
    if item is None:
        return None

    value = record_field(item, "value")
    if not is_valid_value(value):
        return None

    label = record_field(item, "label")
    if _is_missing(label):
        label = ""
    if require_label and not label:
        return None

    return ChartDatum(label=str(label), value=float(value))
