"""Tests for element parsing and recursive dispatch."""

from __future__ import annotations

import copy

import pytest

from reporting import DataBank, build_element, dispatch, render_document
from reporting.descriptors import (
    ChartDescriptor,
    Container,
    GridDescriptor,
    PageBreakDescriptor,
    TableDescriptor,
)
from reporting.elements import ElementKind, element_kind, parse_classes

pytestmark = pytest.mark.unit


def _two_series_chart() -> dict[str, object]:
    return {
        "Type": "ChArT",
        "Title": "Two series",
        "Settings": {"StartDate": "2020-01-01", "EndDate": "2020-12-31", "DateFormat": "YYYY-MM-DD"},
        "Content": [
            {"Type": "series", "Title": "A", "Content": {"Dates": ["2020-01-01"], "Values": [1]}},
            {"Type": "series", "Title": "B", "Content": {"Dates": ["2020-02-01"], "Values": [2]}},
        ],
    }


def test_dispatch_chart_end_to_end() -> None:
    """A chart with two inline series attaches a two-series descriptor."""

    parent = Container()
    dispatch(parent, _two_series_chart(), data_bank=DataBank())

    (chart,) = parent.children
    assert isinstance(chart, ChartDescriptor)
    assert [s.color for s in chart.series] == ["#0072bd", "#d95319"]


@pytest.mark.parametrize(
    ("element", "expected"),
    [
        ({"Type": "TABLE", "Settings": {"Dates": []}}, TableDescriptor),
        ({"Type": "Grid", "Settings": {"NumRows": 1, "NumColumns": 1}}, GridDescriptor),
        ({"Type": "pageBreak"}, PageBreakDescriptor),
    ],
)
def test_dispatch_matches_type_case_insensitively(element: dict[str, object], expected: type) -> None:
    """Type values are matched regardless of case."""

    assert isinstance(build_element(element, data_bank=DataBank()), expected)


@pytest.mark.parametrize(
    "element",
    [
        None,
        42,
        "chart",
        [],
        {},
        {"Type": None},
        {"Type": 1},
        {"Type": "series"},
        {"Type": "image"},
        {"Type": "chart"},
        {"Type": "chart", "Settings": "not an object"},
        {"Type": "grid", "Settings": {"NumRows": 1}},
    ],
)
def test_dispatch_invalid_elements_are_silent_no_ops(element: object) -> None:
    """Malformed or unknown elements attach nothing and raise nothing."""

    parent = Container()
    dispatch(parent, element, data_bank=DataBank())
    assert parent.is_empty


def test_page_break_descriptor_marker() -> None:
    """Page breaks produce the page-break marker class."""

    descriptor = build_element({"Type": "pagebreak"}, data_bank=DataBank())
    assert isinstance(descriptor, PageBreakDescriptor)
    assert descriptor.classes == ("page-break",)


def test_render_document_accepts_root_or_list_in_document_order() -> None:
    """A list root renders every element in order, skipping invalid ones."""

    document = [{"Type": "pagebreak"}, {"Type": "nope"}, _two_series_chart()]
    report = render_document(document, data_bank=DataBank())

    assert [node.kind for node in report.children] == ["pagebreak", "chart"]
    assert report.classes == ("rephrase-report",)

    single = render_document(_two_series_chart(), data_bank=DataBank())
    assert [node.kind for node in single.children] == ["chart"]


def test_render_document_does_not_mutate_input(data_bank: DataBank) -> None:
    """The document tree is left untouched by rendering."""

    document = {
        "Type": "grid",
        "Settings": {"NumRows": 1, "NumColumns": 2},
        "Content": [_two_series_chart(), {"Type": "table", "Settings": {"Dates": ["2020-01-01"]}}],
    }
    snapshot = copy.deepcopy(document)
    render_document(document, data_bank=data_bank)
    assert document == snapshot


def test_element_kind_normalizes_type() -> None:
    """Known Type values map to ElementKind; others map to None."""

    assert element_kind({"Type": "PageBreak"}) is ElementKind.pagebreak
    assert element_kind({"Type": "Chart"}) is ElementKind.chart
    assert element_kind({"Type": "heading"}) is None
    assert element_kind(["Type"]) is None


def test_parse_classes_accepts_string_or_list() -> None:
    """Class settings may be a string (space separated) or a list of strings."""

    assert parse_classes("a b") == ("a", "b")
    assert parse_classes(["a", 3, "b c"]) == ("a", "b", "c")
    assert parse_classes(None) == ()
    assert parse_classes({"a": 1}) == ()
