"""Resolved descriptors handed to the host UI toolkit and rendering backend.

Descriptors are fully resolved: every data reference has been looked up,
every label formatted, and every style class decided. A host only has to turn
them into visual nodes. Each descriptor exposes a `kind` used by hosts to pick
a renderer.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import ClassVar, Literal


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """A single (date, value) observation."""

    moment: datetime
    value: float


@dataclass(frozen=True, slots=True)
class ResolvedSeries:
    """A labelled series ready for a chart.

    Args:
        points: Observations in value order.
        label: Legend label (empty when the series has no title).
        color: Line color; None only for series that failed validation.
        render_type: Rendering style requested for the series (e.g. `line`).
    """

    points: tuple[SeriesPoint, ...] = ()
    label: str = ""
    color: str | None = None
    render_type: str = "line"

    @property
    def is_empty(self) -> bool:
        """Return True when the series has no points to draw."""

        return not self.points


EMPTY_SERIES = ResolvedSeries()


@dataclass(frozen=True, slots=True)
class ChartDescriptor:
    """A time-indexed line chart.

    Args:
        title: Chart title (may be empty).
        title_in_chart: Whether the backend draws the title over the chart.
        series: Resolved series in content order.
        start_date: Lower bound of the time axis.
        end_date: Upper bound of the time axis.
        date_format: moment-style pattern for axis parsing and tooltips.
        min_unit: Smallest time unit shown on the axis.
        tooltip_decimals: Decimals used for hover values.
        classes: Style classes for the outer chart container.
    """

    kind: ClassVar[str] = "chart"

    title: str
    title_in_chart: bool
    series: tuple[ResolvedSeries, ...]
    start_date: datetime | None
    end_date: datetime | None
    date_format: str | None
    min_unit: str = "day"
    tooltip_decimals: int = 3
    classes: tuple[str, ...] = ("rephrase-chart",)
    title_classes: tuple[str, ...] = ("rephrase-chart-title", "h4")
    canvas_classes: tuple[str, ...] = ("rephrase-chart-canvas",)

    @property
    def show_title_label(self) -> bool:
        """Return True when the title is rendered as a label above the chart."""

        return bool(self.title) and not self.title_in_chart


@dataclass(frozen=True, slots=True)
class TableCell:
    """A header or body cell."""

    text: str
    classes: tuple[str, ...] = ()
    colspan: int = 1


@dataclass(frozen=True, slots=True)
class TableRow:
    """A table row; `row_type` is `header`, `data` or `heading`."""

    row_type: Literal["header", "data", "heading"]
    cells: tuple[TableCell, ...]
    classes: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TableDescriptor:
    """A table with one date column per header date.

    Args:
        title: Optional title rendered above the table.
        header: Header row (blank label cell followed by formatted dates).
        rows: Accepted body rows in content order.
        classes: Style classes for the table node.
    """

    kind: ClassVar[str] = "table"

    title: str
    header: TableRow
    rows: tuple[TableRow, ...]
    classes: tuple[str, ...] = ("rephrase-table", "hover", "unstriped")
    parent_classes: tuple[str, ...] = ("rephrase-table-parent", "table-scroll")
    title_classes: tuple[str, ...] = ("rephrase-table-title",)
    header_classes: tuple[str, ...] = ("rephrase-table-header",)
    body_classes: tuple[str, ...] = ("rephrase-table-body",)


@dataclass(slots=True)
class Container:
    """An attachment point collecting descriptors in document order.

    Containers are the only mutable structure the engine produces: the
    dispatcher attaches each resolved descriptor to the container it was
    given (the document root or a grid cell).
    """

    kind: ClassVar[str] = "container"

    classes: tuple[str, ...] = ()
    children: list[Descriptor] = field(default_factory=list)

    def attach(self, descriptor: Descriptor) -> None:
        """Append a resolved descriptor."""

        self.children.append(descriptor)

    @property
    def is_empty(self) -> bool:
        return not self.children


@dataclass(frozen=True, slots=True)
class GridRow:
    """One grid row holding a cell container per column."""

    cells: tuple[Container, ...]
    classes: tuple[str, ...] = ("cell", "shrink")
    column_classes: tuple[str, ...] = ("grid-x", "grid-padding-x")


@dataclass(frozen=True, slots=True)
class GridDescriptor:
    """A row-major grid of nested report elements."""

    kind: ClassVar[str] = "grid"

    title: str
    rows: tuple[GridRow, ...]
    classes: tuple[str, ...] = ("rephrase-grid", "grid-y", "grid-padding-y")
    title_classes: tuple[str, ...] = ("rephrase-grid-title",)


@dataclass(frozen=True, slots=True)
class PageBreakDescriptor:
    """Marker forcing a page break when printing."""

    kind: ClassVar[str] = "pagebreak"

    classes: tuple[str, ...] = ("page-break",)


Descriptor = ChartDescriptor | TableDescriptor | GridDescriptor | PageBreakDescriptor
