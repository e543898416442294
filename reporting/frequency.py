"""Frequency codes and calendar period arithmetic.

Data bank entries without explicit dates carry an integer frequency code
(periods per year). The code maps to a calendar unit used to rebuild the
implicit date axis.
"""

from __future__ import annotations

from datetime import datetime
from typing import Final, Literal

from dateutil.relativedelta import relativedelta

PeriodUnit = Literal["day", "week", "month", "quarter", "year", ""]

_UNIT_BY_FREQUENCY: Final[dict[int, PeriodUnit]] = {
    365: "day",
    52: "week",
    12: "month",
    4: "quarter",
    1: "year",
}

_STEP_BY_UNIT: Final[dict[str, relativedelta]] = {
    "day": relativedelta(days=1),
    "week": relativedelta(weeks=1),
    "month": relativedelta(months=1),
    "quarter": relativedelta(months=3),
    "year": relativedelta(years=1),
}


def period_unit(frequency: object) -> PeriodUnit:
    """Map a frequency code to its calendar unit.

    Args:
        frequency: Periods-per-year code (365, 52, 12, 4 or 1).

    Returns:
        The unit name, or an empty string when the code is not recognized.
    """

    if isinstance(frequency, bool) or not isinstance(frequency, (int, float)):
        return ""
    return _UNIT_BY_FREQUENCY.get(frequency, "")  # type: ignore[call-overload]


def advance(moment: datetime, unit: PeriodUnit) -> datetime:
    """Move a date cursor forward by one period of `unit`.

    Args:
        moment: Current cursor position.
        unit: A non-empty unit returned by `period_unit`.

    Returns:
        The cursor advanced by one period. Month-based units clamp to the last
        day of shorter months.

    Raises:
        ValueError: When `unit` is empty or unknown.
    """

    step = _STEP_BY_UNIT.get(unit)
    if step is None:
        raise ValueError(f"Cannot advance a date by unit {unit!r}.")
    return moment + step
