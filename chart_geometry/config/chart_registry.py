"""
Chart Registry Configuration.

Maps geometry class names to their runtime metadata.  This file is
the ONLY place where a transformer is registered; the engine
discovers the class automatically via the Registry Pattern.

Keys:
  class_name → str : must match the class defined in
                     ``chart_geometry/services/charts/types/<snake_case>.py``.

Values: dict with:
  chart_type     → str       : short alias used by the HTTP layer ("pie", ...).
  options        → list[str] : keyword options the transformer accepts.
  default_config → dict      : defaults merged under caller options.

To add a new transformer:
  1. Create the class in chart_geometry/services/charts/types/
  2. Add an entry here.
  Done. No other files to touch.
"""

from typing import Optional

from chart_geometry.services.palette import BAR_PALETTE, LINE_COLOR, PIE_PALETTE

CHART_REGISTRY: dict[str, dict] = {
    "PieChartGeometry": {
        "chart_type": "pie",
        "options": ["size", "colors"],
        "default_config": {"size": 200, "colors": PIE_PALETTE},
    },
    "BarChartGeometry": {
        "chart_type": "bar",
        "options": ["height", "colors"],
        "default_config": {"height": 200, "colors": BAR_PALETTE},
    },
    "LineChartGeometry": {
        "chart_type": "line",
        "options": ["height", "color"],
        "default_config": {"height": 200, "color": LINE_COLOR},
    },
}


def resolve_chart_name(chart_type: str) -> Optional[str]:
    """Return the registered class name for a short alias like ``"pie"``."""
    alias = (chart_type or "").strip().lower()
    for class_name, entry in CHART_REGISTRY.items():
        if entry["chart_type"] == alias or class_name.lower() == alias:
            return class_name
    return None
