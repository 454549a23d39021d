"""
Colour palettes and the cyclic palette cursor.

Colour assignment is ``colors[index % len(colors)]``: deterministic,
stable, and independent of palette length.  ``PaletteCursor`` keeps
that rule in one place so every transformer applies it identically.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence


# ─── Colour palettes ────────────────────────────────────────────────

FALLBACK_PALETTE = [
    "#3b82f6", "#22c55e", "#ef4444", "#f59e0b",
    "#8b5cf6", "#ec4899", "#14b8a6", "#f97316",
]

PIE_PALETTE = ["#0EA5E9", "#10B981", "#F59E0B", "#EF4444", "#8B5CF6"]

BAR_PALETTE = ["#0EA5E9", "#10B981", "#F59E0B", "#EF4444"]

LINE_COLOR = "#0EA5E9"


class PaletteCursor:
    """
    Cyclic view over a colour palette.

    Entries are used exactly as given. A bare string is a one-colour
    palette; an empty or missing palette falls back to
    ``FALLBACK_PALETTE`` rather than failing on the modulo.

    Usage::

        cursor = PaletteCursor(["#000", "#fff"])
        cursor.color_for(3)          # "#fff"
        list(cursor.take(3))         # ["#000", "#fff", "#000"]
    """

    def __init__(self, colors: Optional[Sequence[str]] = None) -> None:
        if colors is None:
            entries: List[str] = []
        elif isinstance(colors, str):
            entries = [colors]
        else:
            try:
                entries = list(colors)
            except TypeError:
                entries = []
        self._colors: List[str] = entries or list(FALLBACK_PALETTE)

    @property
    def colors(self) -> List[str]:
        return list(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def color_for(self, index: int) -> str:
        return self._colors[index % len(self._colors)]

    def take(self, count: int) -> Iterator[str]:
        for index in range(count):
            yield self.color_for(index)
