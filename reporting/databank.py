"""Read-only data bank lookup.

The data bank maps series names to stored time-series entries. It is populated
by the host before rendering and threaded explicitly through every resolution
call; the engine only ever reads from it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class DataBankEntry:
    """A stored time series.

    Args:
        values: Observed values, or None when the entry has no usable
            `Values` sequence.
        dates: Either a sequence of date-like values, or a single start date
            used together with `frequency` to rebuild the date axis.
        frequency: Optional periods-per-year code (365, 52, 12, 4 or 1).
    """

    values: tuple[object, ...] | None
    dates: object = None
    frequency: object = None

    @classmethod
    def from_raw(cls, raw: Mapping[str, object]) -> DataBankEntry:
        """Build an entry from its plain mapping form."""

        values = raw.get("Values")
        return cls(
            values=tuple(values) if is_sequence(values) else None,
            dates=raw.get("Dates"),
            frequency=raw.get("Frequency"),
        )


class DataBank:
    """Named, read-only repository of time-series entries."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, object] | None = None) -> None:
        """Wrap a mapping of series name to raw entry.

        Args:
            entries: Mapping of name to `{Values, Dates, Frequency}` objects.
                The mapping is copied so later changes by the caller are not
                observed.
        """

        self._entries: Mapping[str, object] = MappingProxyType(dict(entries or {}))

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def names(self) -> tuple[str, ...]:
        """Return stored series names in insertion order."""

        return tuple(self._entries)

    def get(self, name: str) -> DataBankEntry | None:
        """Look up a series by name.

        Args:
            name: Series name as referenced by a series `Content` string.

        Returns:
            DataBankEntry, or None when the name is absent or the stored value
            is not an object.
        """

        raw = self._entries.get(name)
        if not isinstance(raw, Mapping):
            return None
        return DataBankEntry.from_raw(raw)


def is_sequence(value: object) -> bool:
    """Return True for list-like values (excluding strings and bytes)."""

    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))
