"""Recursive element dispatch.

`dispatch` is the single entry point for rendering a report element: it
normalizes the element, routes it to its builder, and attaches the result to
the given container. Malformed or unknown elements are dropped without error
so the rest of the document still renders.
"""

from __future__ import annotations

from .chart import build_chart
from .databank import DataBank, is_sequence
from .descriptors import Container, Descriptor, PageBreakDescriptor
from .elements import ChartElement, GridElement, PageBreakElement, TableElement, parse_element
from .grid import build_grid
from .table import build_table


def dispatch(parent: Container, element: object, *, data_bank: DataBank) -> None:
    """Render `element` and attach its descriptor to `parent`.

    Args:
        parent: Container receiving the descriptor.
        element: Raw report element; invalid elements are a no-op.
        data_bank: Read-only lookup for named series.
    """

    descriptor = build_element(element, data_bank=data_bank)
    if descriptor is not None:
        parent.attach(descriptor)


def build_element(element: object, *, data_bank: DataBank) -> Descriptor | None:
    """Build the descriptor for a raw report element.

    Args:
        element: Raw report element.
        data_bank: Read-only lookup for named series.

    Returns:
        The element's descriptor, or None when the element is not renderable.
    """

    parsed = parse_element(element)
    if parsed is None:
        return None
    if isinstance(parsed, ChartElement):
        return build_chart(parsed, data_bank=data_bank)
    if isinstance(parsed, TableElement):
        return build_table(parsed)
    if isinstance(parsed, GridElement):
        return build_grid(parsed, data_bank=data_bank)
    if isinstance(parsed, PageBreakElement):
        return PageBreakDescriptor()
    return None


def render_document(root: object, *, data_bank: DataBank) -> Container:
    """Render a whole document into a fresh top-level container.

    Args:
        root: Root report element, or a list of top-level elements.
        data_bank: Read-only lookup for named series.

    Returns:
        Container holding the root descriptors in document order.
    """

    container = Container(classes=("rephrase-report",))
    elements = root if is_sequence(root) else (root,)
    for element in elements:  # type: ignore[union-attr]
        dispatch(container, element, data_bank=data_bank)
    return container
