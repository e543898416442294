"""Typed report elements parsed from plain document data.

Report documents arrive as nested plain objects whose `Type` field selects the
element kind. `parse_element` is the single normalization point: it matches
`Type` case-insensitively, checks the settings each kind needs, and returns
one of the closed element variants. Anything that does not fit returns None,
which callers treat as "omit this node".

Chart series, table rows and grid cells are kept as raw objects; they are
validated by the builders that consume them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import cast

from .databank import is_sequence
from .dates import parse_date_like

DEFAULT_NUM_DECIMALS = 2
MAX_NUM_DECIMALS = 100


class ElementKind(StrEnum):
    """Report element kinds, keyed by their lower-cased `Type` value."""

    chart = "chart"
    table = "table"
    grid = "grid"
    pagebreak = "pagebreak"


@dataclass(frozen=True, slots=True)
class ChartSettings:
    """Chart-level configuration.

    Args:
        start_date: Lower bound of the time axis.
        end_date: Upper bound of the time axis.
        date_format: moment-style pattern used to parse and label dates.
        is_title_part_of_chart: Draw the title inside the chart when True,
            otherwise as a separate label above it.
        classes: Extra style classes for the chart container.
    """

    start_date: datetime | None
    end_date: datetime | None
    date_format: str | None
    is_title_part_of_chart: bool = True
    classes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TableSettings:
    """Table-level configuration.

    Args:
        dates: Raw date-like values defining the column headers.
        date_format: moment-style pattern for header labels.
        num_decimals: Fixed decimals used for data cells.
        classes: Extra style classes for the table node.
    """

    dates: tuple[object, ...]
    date_format: str | None
    num_decimals: int = DEFAULT_NUM_DECIMALS
    classes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class GridSettings:
    """Grid dimensions."""

    num_rows: int
    num_columns: int


@dataclass(frozen=True, slots=True)
class ChartElement:
    """A time-series chart with one or more raw series objects."""

    title: str
    settings: ChartSettings
    content: tuple[object, ...] = ()


@dataclass(frozen=True, slots=True)
class TableElement:
    """A date-columned table with raw series and heading rows."""

    title: str
    settings: TableSettings
    content: tuple[object, ...] = ()


@dataclass(frozen=True, slots=True)
class GridElement:
    """A row-major grid of nested raw report elements."""

    title: str
    settings: GridSettings
    content: tuple[object, ...] = ()


@dataclass(frozen=True, slots=True)
class PageBreakElement:
    """A forced page break when printing."""


ReportElement = ChartElement | TableElement | GridElement | PageBreakElement


def element_kind(raw: object) -> ElementKind | None:
    """Return the normalized kind of a raw element, if it has a known `Type`."""

    if not isinstance(raw, Mapping):
        return None
    type_value = raw.get("Type")
    if not isinstance(type_value, str):
        return None
    try:
        return ElementKind(type_value.lower())
    except ValueError:
        return None


def type_matches(raw: object, expected: str) -> bool:
    """Return True when `raw` is an object whose `Type` equals `expected` ignoring case."""

    if not isinstance(raw, Mapping):
        return False
    type_value = raw.get("Type")
    return isinstance(type_value, str) and type_value.lower() == expected


def parse_element(raw: object) -> ReportElement | None:
    """Parse a raw report element into its typed variant.

    Args:
        raw: Plain object from a report document.

    Returns:
        The typed element, or None when the object is not a renderable
        element (unknown `Type`, missing or malformed settings).
    """

    kind = element_kind(raw)
    if kind is None:
        return None
    raw = cast(Mapping[str, object], raw)

    if kind is ElementKind.pagebreak:
        return PageBreakElement()

    settings = raw.get("Settings")
    if not isinstance(settings, Mapping):
        return None

    title = _parse_title(raw.get("Title"))
    content = _parse_content(raw.get("Content"))

    if kind is ElementKind.chart:
        return ChartElement(title=title, settings=_parse_chart_settings(settings), content=content)
    if kind is ElementKind.table:
        table_settings = _parse_table_settings(settings)
        if table_settings is None:
            return None
        return TableElement(title=title, settings=table_settings, content=content)
    grid_settings = _parse_grid_settings(settings)
    if grid_settings is None:
        return None
    return GridElement(title=title, settings=grid_settings, content=content)


def parse_classes(value: object) -> tuple[str, ...]:
    """Normalize a `Class` setting (string or list of strings) into class names.

    Space-separated strings contribute one class per word; non-string list
    entries are ignored.
    """

    if isinstance(value, str):
        return tuple(value.split())
    if is_sequence(value):
        classes: list[str] = []
        for item in value:  # type: ignore[attr-defined]
            if isinstance(item, str):
                classes.extend(item.split())
        return tuple(classes)
    return ()


def _parse_title(value: object) -> str:
    return value if isinstance(value, str) else ""


def _parse_content(value: object) -> tuple[object, ...]:
    return tuple(value) if is_sequence(value) else ()  # type: ignore[arg-type]


def _parse_date_format(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


def _parse_chart_settings(settings: Mapping[str, object]) -> ChartSettings:
    """Parse chart settings; every field is optional."""

    return ChartSettings(
        start_date=parse_date_like(settings.get("StartDate")),
        end_date=parse_date_like(settings.get("EndDate")),
        date_format=_parse_date_format(settings.get("DateFormat")),
        is_title_part_of_chart=bool(settings.get("IsTitlePartOfChart", True)),
        classes=parse_classes(settings.get("Class")),
    )


def _parse_table_settings(settings: Mapping[str, object]) -> TableSettings | None:
    """Parse table settings; `Dates` is required to lay out columns."""

    dates = settings.get("Dates")
    if not is_sequence(dates):
        return None
    num_decimals = settings.get("NumDecimals")
    if (
        isinstance(num_decimals, bool)
        or not isinstance(num_decimals, int)
        or not 0 <= num_decimals <= MAX_NUM_DECIMALS
    ):
        num_decimals = DEFAULT_NUM_DECIMALS
    return TableSettings(
        dates=tuple(dates),  # type: ignore[arg-type]
        date_format=_parse_date_format(settings.get("DateFormat")),
        num_decimals=num_decimals,
        classes=parse_classes(settings.get("Class")),
    )


def _parse_grid_settings(settings: Mapping[str, object]) -> GridSettings | None:
    """Parse grid dimensions; both must be positive integers."""

    num_rows = settings.get("NumRows")
    num_columns = settings.get("NumColumns")
    for value in (num_rows, num_columns):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return None
    return GridSettings(num_rows=num_rows, num_columns=num_columns)  # type: ignore[arg-type]
