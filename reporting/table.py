"""Table building: date header plus series and heading rows."""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import cast

from .databank import is_sequence
from .dates import format_date, parse_date_like
from .descriptors import TableCell, TableDescriptor, TableRow
from .elements import TableElement, type_matches
from .series import coerce_number

HEADER_CELL_CLASSES = ("rephrase-table-header-cell",)

_FORMAT_CONTEXT = Context(prec=500)


def build_table(table: TableElement) -> TableDescriptor:
    """Build a table descriptor from a parsed table element.

    Args:
        table: Parsed table element.

    Returns:
        TableDescriptor. The header always has one blank label cell plus one
        cell per header date; body rows that are not headings or well-formed
        series rows are omitted.
    """

    settings = table.settings
    header_labels = tuple(_header_label(value, settings.date_format) for value in settings.dates)
    header = TableRow(
        row_type="header",
        cells=(
            TableCell(text="", classes=HEADER_CELL_CLASSES),
            *(TableCell(text=label, classes=HEADER_CELL_CLASSES) for label in header_labels),
        ),
        classes=("rephrase-table-header-row",),
    )

    rows: list[TableRow] = []
    for raw_row in table.content:
        row = build_table_row(raw_row, num_dates=len(header_labels), num_decimals=settings.num_decimals)
        if row is not None:
            rows.append(row)

    return TableDescriptor(
        title=table.title,
        header=header,
        rows=tuple(rows),
        classes=("rephrase-table", "hover", "unstriped", *settings.classes),
    )


def build_table_row(raw_row: object, *, num_dates: int, num_decimals: int) -> TableRow | None:
    """Build a single body row.

    Args:
        raw_row: Raw row object (`heading` or `series`).
        num_dates: Number of header date columns.
        num_decimals: Fixed decimals for data cells.

    Returns:
        TableRow, or None when the row must be skipped: unknown `Type`, or a
        series row whose `Content.Values` is missing, has the wrong length, or
        holds a non-numeric value.
    """

    if type_matches(raw_row, "heading"):
        return TableRow(
            row_type="heading",
            cells=(TableCell(text=_title(raw_row), classes=("h5",), colspan=num_dates + 1),),
            classes=("rephrase-table-row", "rephrase-table-heading-row"),
        )
    if not type_matches(raw_row, "series"):
        return None

    values = _row_values(raw_row)
    if values is None or len(values) != num_dates:
        return None
    numbers = [coerce_number(value) for value in values]
    if any(number is None for number in numbers):
        return None

    data_cells = tuple(
        TableCell(text=format_number(number, num_decimals), classes=("rephrase-table-data-cell",))
        for number in cast(list[float], numbers)
    )
    return TableRow(
        row_type="data",
        cells=(TableCell(text=_title(raw_row), classes=("rephrase-table-data-row-title",)), *data_cells),
        classes=("rephrase-table-row", "rephrase-table-data-row"),
    )


def format_number(value: float, num_decimals: int) -> str:
    """Format a value with a fixed number of decimals (e.g. 3.1 -> "3.10").

    Ties on the exact binary value round away from zero, so 0.125 becomes
    "0.13" while 1.005 (stored as 1.00499...) becomes "1.00".
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-num_decimals)
    rounded = Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_FORMAT_CONTEXT)
    return f"{rounded:f}"


def _header_label(value: object, date_format: str | None) -> str:
    """Format a header date; unparseable dates give an empty label."""

    moment = parse_date_like(value)
    if moment is None:
        return ""
    return format_date(moment, date_format)


def _row_values(raw_row: object) -> Sequence[object] | None:
    """Return `Content.Values` of a series row when it is a sequence."""

    content = cast(Mapping[str, object], raw_row).get("Content")
    if not isinstance(content, Mapping):
        return None
    values = content.get("Values")
    if not is_sequence(values):
        return None
    return cast(Sequence[object], values)


def _title(raw_row: object) -> str:
    title = cast(Mapping[str, object], raw_row).get("Title")
    return title if isinstance(title, str) else ""
