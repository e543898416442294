"""Pytest fixtures shared across engine and Django integration tests."""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

import pytest

from reporting import DataBank


@pytest.fixture
def data_bank() -> DataBank:
    """Return a synthetic data bank covering explicit and reconstructed dates."""

    return DataBank(
        {
            "monthly": {"Values": [1, 2, 3], "Dates": "2020-01-01", "Frequency": 12},
            "explicit": {"Values": [10.5, 11.25], "Dates": ["2020-03-31", "2020-06-30"]},
            "no_values": {"Dates": ["2020-01-01"]},
            "bad_frequency": {"Values": [1, 2], "Dates": "2020-01-01", "Frequency": 7},
        }
    )


@pytest.fixture
def report_dir(tmp_path: Path, settings) -> Path:
    """Point the report viewer at a temporary document directory.

    The directory holds a data bank and a `quarterly` document mixing a chart,
    a page break, a table, and a grid with a missing trailing cell.
    """

    (tmp_path / "data_bank.json").write_text(
        json.dumps({"cpi": {"Values": [1.5, 2.0, 2.5], "Dates": "2019-12-01", "Frequency": 12}}),
        encoding="utf-8",
    )
    document = {
        "Type": "Grid",
        "Title": "Quarterly review",
        "Settings": {"NumRows": 2, "NumColumns": 2},
        "Content": [
            {
                "Type": "Chart",
                "Title": "Consumer prices",
                "Settings": {"StartDate": "2020-01-01", "EndDate": "2020-12-31", "DateFormat": "MMM YYYY"},
                "Content": [{"Type": "Series", "Title": "CPI", "Content": "cpi"}],
            },
            {"Type": "PageBreak"},
            {
                "Type": "Table",
                "Title": "Summary",
                "Settings": {"Dates": ["2020-03-31", "2020-06-30"], "DateFormat": "YYYY-MM"},
                "Content": [
                    {"Type": "Heading", "Title": "Prices"},
                    {"Type": "Series", "Title": "CPI", "Content": {"Dates": [], "Values": [3.1, 2]}},
                ],
            },
        ],
    }
    (tmp_path / "quarterly.json").write_text(json.dumps(document), encoding="utf-8")
    (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")

    settings.REPHRASE_DOCUMENT_DIR = tmp_path
    settings.REPHRASE_DATA_BANK_PATH = tmp_path / "data_bank.json"
    return tmp_path


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    - `unit`: pure engine tests with no Django request cycle.
    - `integration`: tests touching Django views, templates, or commands.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
