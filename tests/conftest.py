"""Pytest fixtures shared across the geometry test suite."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chart_geometry.core.cache import geometry_cache


@pytest.fixture(autouse=True)
def _clear_geometry_cache():
    """Every test starts with an empty memoization cache."""

    geometry_cache.clear()
    yield
    geometry_cache.clear()


@pytest.fixture
def palette3() -> list[str]:
    return ["#111111", "#222222", "#333333"]


@pytest.fixture
def seven_items() -> list[dict]:
    return [{"label": f"Item {i}", "value": i + 1} for i in range(7)]


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure, fast tests with no I/O.
    - `integration`: tests going through the FastAPI app.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            invalid.append(item.nodeid)

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
