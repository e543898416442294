"""Grid building: a row-major matrix of nested report elements."""

from __future__ import annotations

from .databank import DataBank
from .descriptors import Container, GridDescriptor, GridRow
from .elements import GridElement

CELL_CLASSES = ("cell", "auto")


def build_grid(grid: GridElement, *, data_bank: DataBank) -> GridDescriptor:
    """Lay out a grid and dispatch each cell's element into its own container.

    Cell `(i, j)` holds `Content[NumColumns * i + j]`. Cells past the end of
    `Content` stay empty.

    Args:
        grid: Parsed grid element.
        data_bank: Read-only lookup passed through to nested elements.

    Returns:
        GridDescriptor with `NumRows` rows of `NumColumns` cells.
    """

    from .dispatch import dispatch

    num_columns = grid.settings.num_columns
    rows: list[GridRow] = []
    for i in range(grid.settings.num_rows):
        cells: list[Container] = []
        for j in range(num_columns):
            index = num_columns * i + j
            cell = Container(classes=CELL_CLASSES)
            dispatch(cell, grid.content[index] if index < len(grid.content) else None, data_bank=data_bank)
            cells.append(cell)
        rows.append(GridRow(cells=tuple(cells)))
    return GridDescriptor(title=grid.title, rows=tuple(rows))
