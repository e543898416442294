"""Chart building and the Chart.js payload for the rendering backend."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, TypedDict

from .databank import DataBank
from .descriptors import ChartDescriptor, ResolvedSeries
from .elements import ChartElement
from .palette import palette
from .series import resolve_series

TITLE_FONT_FAMILY = "Lato"


class ChartPoint(TypedDict):
    """A Chart.js time-series point."""

    x: int
    y: float


class ChartDataset(TypedDict, total=False):
    """A Chart.js dataset payload for one resolved series."""

    data: list[ChartPoint]
    label: str
    lineTension: float
    backgroundColor: str
    borderColor: str
    type: str


def build_chart(chart: ChartElement, *, data_bank: DataBank) -> ChartDescriptor:
    """Resolve every series of a chart element into a chart descriptor.

    Args:
        chart: Parsed chart element.
        data_bank: Read-only lookup for named series.

    Returns:
        ChartDescriptor with one resolved series per content entry. Entries
        that fail to resolve still consume their palette color and show up as
        empty series.
    """

    colors = palette(len(chart.content))
    series = tuple(
        resolve_series(raw_series, color, data_bank=data_bank)
        for raw_series, color in zip(chart.content, colors)
    )
    settings = chart.settings
    return ChartDescriptor(
        title=chart.title,
        title_in_chart=settings.is_title_part_of_chart,
        series=series,
        start_date=settings.start_date,
        end_date=settings.end_date,
        date_format=settings.date_format,
        classes=("rephrase-chart", *settings.classes),
    )


def chartjs_config(chart: ChartDescriptor) -> dict[str, Any]:
    """Build the Chart.js configuration for a chart descriptor.

    Args:
        chart: Resolved chart descriptor.

    Returns:
        JSON-serializable Chart.js (v2) configuration. `options.tooltips`
        carries `roundDecimals`, applied by the page script when labelling
        hovered values.
    """

    time_options: dict[str, Any] = {
        "min": _epoch_ms(chart.start_date),
        "max": _epoch_ms(chart.end_date),
        "minUnit": chart.min_unit,
    }
    if chart.date_format:
        time_options["tooltipFormat"] = chart.date_format
        time_options["parser"] = chart.date_format

    return {
        "type": "line",
        "data": {"datasets": [_dataset(series) for series in chart.series]},
        "options": {
            "title": {
                "display": bool(chart.title) and chart.title_in_chart,
                "text": chart.title,
                "fontFamily": TITLE_FONT_FAMILY,
                "fontSize": 20,
                "fontStyle": "300",
                "fontColor": "#0a0a0a",
            },
            "tooltips": {
                "intersect": False,
                "mode": "x",
                "roundDecimals": chart.tooltip_decimals,
            },
            "maintainAspectRatio": True,
            "scales": {
                "xAxes": [
                    {
                        "type": "time",
                        "distribution": "series",
                        "time": time_options,
                    }
                ]
            },
        },
    }


def _dataset(series: ResolvedSeries) -> ChartDataset:
    """Build a Chart.js dataset for one series."""

    dataset: ChartDataset = {
        "data": [{"x": _epoch_ms(point.moment), "y": point.value} for point in series.points],
        "label": series.label,
        "lineTension": 0,
        "backgroundColor": "rgba(0,0,0,0)",
        "type": series.render_type,
    }
    if series.color is not None:
        dataset["borderColor"] = series.color
    return dataset


def _epoch_ms(value: datetime | None) -> int | None:
    """Return a naive UTC datetime as epoch milliseconds.

    Numeric timestamps bypass the time scale parser, which only understands
    the display pattern.
    """

    if value is None:
        return None
    return round(value.replace(tzinfo=UTC).timestamp() * 1000)
