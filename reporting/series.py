"""Time-series resolution.

A series object either carries its data inline (`{Dates, Values}`) or names an
entry in the data bank. Resolution turns both forms into aligned
(date, value) points with a label, color and render style.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import cast

from .databank import DataBank, DataBankEntry, is_sequence
from .dates import parse_date_like
from .descriptors import EMPTY_SERIES, ResolvedSeries, SeriesPoint
from .elements import type_matches
from .frequency import advance, period_unit

DEFAULT_RENDER_TYPE = "line"


def resolve_series(series: object, color: str | None, *, data_bank: DataBank) -> ResolvedSeries:
    """Resolve a raw series object into chart-ready points.

    Args:
        series: Raw series object (`Type`, `Title`, `Settings`, `Content`).
        color: Palette color assigned by the caller; `Settings.Color`
            overrides it.
        data_bank: Read-only lookup for series whose `Content` is a name.

    Returns:
        ResolvedSeries. Objects that are not valid series resolve to
        `EMPTY_SERIES`; valid series whose data cannot be resolved keep their
        label and color but carry no points.
    """

    if not is_valid_series(series):
        return EMPTY_SERIES
    series = cast(Mapping[str, object], series)

    content = series["Content"]
    if isinstance(content, str):
        points = _points_from_entry(data_bank.get(content))
    else:
        inline = cast(Mapping[str, object], content)
        points = _pair_points(_parse_dates(inline["Dates"]), inline["Values"])

    settings = series.get("Settings")
    if not isinstance(settings, Mapping):
        settings = {}
    override_color = settings.get("Color")
    render_type = settings.get("Type")
    title = series.get("Title")

    return ResolvedSeries(
        points=points,
        label=title if isinstance(title, str) else "",
        color=override_color if isinstance(override_color, str) and override_color else color,
        render_type=render_type if isinstance(render_type, str) and render_type else DEFAULT_RENDER_TYPE,
    )


def is_valid_series(series: object) -> bool:
    """Return True when `series` has the shape of a series object.

    The object must have `Type == "series"` (case-insensitive) and a
    `Content` that is either a data bank name or an object holding both
    `Dates` and `Values`.
    """

    if not type_matches(series, "series"):
        return False
    content = cast(Mapping[str, object], series).get("Content")
    if content is None:
        return False
    if isinstance(content, str):
        return True
    return isinstance(content, Mapping) and "Dates" in content and "Values" in content


def reconstruct_dates(start: object, frequency: object, count: int) -> tuple[datetime, ...]:
    """Rebuild an implicit date axis from a start date and frequency code.

    The cursor is advanced before each date is emitted, so the first date is
    one period after `start`.

    Args:
        start: Date-like nominal start.
        frequency: Periods-per-year code.
        count: Number of dates to produce.

    Returns:
        `count` dates, or an empty tuple when the start date or frequency
        cannot be interpreted.
    """

    unit = period_unit(frequency)
    cursor = parse_date_like(start)
    if not unit or cursor is None:
        return ()
    dates: list[datetime] = []
    for _ in range(count):
        cursor = advance(cursor, unit)
        dates.append(cursor)
    return tuple(dates)


def _points_from_entry(entry: DataBankEntry | None) -> tuple[SeriesPoint, ...]:
    """Resolve points for a data bank entry."""

    if entry is None or entry.values is None:
        return ()
    if is_sequence(entry.dates):
        dates = _parse_dates(entry.dates)
    else:
        dates = reconstruct_dates(entry.dates, entry.frequency, len(entry.values))
    return _pair_points(dates, entry.values)


def _parse_dates(raw_dates: object) -> tuple[datetime | None, ...]:
    """Parse each date-like value; a non-sequence yields no dates."""

    if not is_sequence(raw_dates):
        return ()
    return tuple(parse_date_like(value) for value in cast(Sequence[object], raw_dates))


def _pair_points(dates: Sequence[datetime | None], values: object) -> tuple[SeriesPoint, ...]:
    """Pair dates with values in value order.

    Pairing stops at the shorter sequence. Points with an unparseable date or
    a non-numeric value are skipped.
    """

    if not is_sequence(values):
        return ()
    points: list[SeriesPoint] = []
    for moment, value in zip(dates, cast(Sequence[object], values)):
        number = coerce_number(value)
        if moment is None or number is None:
            continue
        points.append(SeriesPoint(moment=moment, value=number))
    return tuple(points)


def coerce_number(value: object) -> float | None:
    """Return `value` as a float when it is a real number (booleans excluded)."""

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)
