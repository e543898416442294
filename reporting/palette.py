"""Deterministic color assignment for chart series."""

from __future__ import annotations

from typing import Final

DEFAULT_COLORS: Final[tuple[str, ...]] = (
    "#0072bd",
    "#d95319",
    "#edb120",
    "#7e2f8e",
    "#77ac30",
    "#4dbeee",
    "#a2142f",
)


def palette(n: int) -> tuple[str, ...]:
    """Return `n` colors cycling over the default base sequence.

    Args:
        n: Number of series that need a color.

    Returns:
        Tuple of hex color strings; empty when `n` is not positive.
    """

    return tuple(DEFAULT_COLORS[i % len(DEFAULT_COLORS)] for i in range(max(n, 0)))
