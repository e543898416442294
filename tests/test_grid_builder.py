"""Tests for row-major grid layout."""

from __future__ import annotations

import pytest

from reporting import DataBank
from reporting.descriptors import ChartDescriptor, GridDescriptor, PageBreakDescriptor, TableDescriptor
from reporting.elements import GridElement, parse_element
from reporting.grid import build_grid

pytestmark = pytest.mark.unit


def _grid(num_rows: int, num_columns: int, content: list[object], title: str = "") -> GridElement:
    element = parse_element(
        {
            "Type": "grid",
            "Title": title,
            "Settings": {"NumRows": num_rows, "NumColumns": num_columns},
            "Content": content,
        }
    )
    assert isinstance(element, GridElement)
    return element


def _chart(title: str) -> dict[str, object]:
    return {"Type": "chart", "Title": title, "Settings": {}, "Content": []}


def test_build_grid_missing_trailing_cell_renders_empty() -> None:
    """A 2x2 grid with three elements leaves the fourth cell empty."""

    grid = build_grid(_grid(2, 2, [_chart("a"), _chart("b"), _chart("c")]), data_bank=DataBank())

    assert len(grid.rows) == 2
    assert all(len(row.cells) == 2 for row in grid.rows)
    assert [len(cell.children) for row in grid.rows for cell in row.cells] == [1, 1, 1, 0]
    assert grid.rows[1].cells[1].is_empty


def test_build_grid_is_row_major() -> None:
    """Cell (i, j) holds Content[NumColumns * i + j]."""

    content = [_chart(str(index)) for index in range(6)]
    grid = build_grid(_grid(2, 3, content), data_bank=DataBank())

    titles = [
        [cell.children[0].title for cell in row.cells]  # type: ignore[union-attr]
        for row in grid.rows
    ]
    assert titles == [["0", "1", "2"], ["3", "4", "5"]]


def test_build_grid_ignores_content_beyond_the_matrix() -> None:
    """Elements past NumRows * NumColumns are not rendered."""

    grid = build_grid(_grid(1, 1, [_chart("kept"), _chart("dropped")]), data_bank=DataBank())

    assert len(grid.rows) == 1
    assert [child.title for child in grid.rows[0].cells[0].children] == ["kept"]  # type: ignore[union-attr]


def test_build_grid_renders_mixed_and_invalid_cells() -> None:
    """Each cell dispatches its own element; invalid elements leave the cell empty."""

    content = [
        {"Type": "PageBreak"},
        {"Type": "table", "Settings": {"Dates": []}},
        {"Type": "unknown"},
        {"Type": "grid", "Settings": {"NumRows": 1, "NumColumns": 1}, "Content": [_chart("nested")]},
    ]
    grid = build_grid(_grid(2, 2, content, title="Mixed"), data_bank=DataBank())

    cells = [cell for row in grid.rows for cell in row.cells]
    assert isinstance(cells[0].children[0], PageBreakDescriptor)
    assert isinstance(cells[1].children[0], TableDescriptor)
    assert cells[2].is_empty
    nested = cells[3].children[0]
    assert isinstance(nested, GridDescriptor)
    assert isinstance(nested.rows[0].cells[0].children[0], ChartDescriptor)
    assert grid.title == "Mixed"


def test_build_grid_style_classes() -> None:
    """Grid, row, column and cell containers carry their layout classes."""

    grid = build_grid(_grid(1, 1, []), data_bank=DataBank())

    assert grid.classes == ("rephrase-grid", "grid-y", "grid-padding-y")
    assert grid.rows[0].classes == ("cell", "shrink")
    assert grid.rows[0].column_classes == ("grid-x", "grid-padding-x")
    assert grid.rows[0].cells[0].classes == ("cell", "auto")


@pytest.mark.parametrize(
    "settings",
    [{}, {"NumRows": 0, "NumColumns": 2}, {"NumRows": 2, "NumColumns": -1}, {"NumRows": "2", "NumColumns": 2}],
)
def test_parse_element_rejects_bad_grid_dimensions(settings: dict[str, object]) -> None:
    """Grid dimensions must both be positive integers."""

    assert parse_element({"Type": "grid", "Settings": settings, "Content": []}) is None
