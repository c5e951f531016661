"""Data models and type aliases for ``cost_report``.

An :class:`Entry` is the typed form of one accepted input row. The two totals
structures are plain nested dictionaries built by
:mod:`cost_report.aggregate`; :class:`Summary` bundles everything a single run
produces for the reporter.
"""

from __future__ import annotations

import enum
import struct
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Core record
# ---------------------------------------------------------------------------


def cost_sort_key(cost: float) -> int:
    """Map a float onto an integer that orders like IEEE-754 ``totalOrder``.

    The resulting order is ``-NaN < -inf < ... < -0.0 < +0.0 < ... < +inf <
    +NaN``, so every pair of floats compares as exactly one of ``<``, ``==``,
    ``>``.
    """

    (bits,) = struct.unpack(">q", struct.pack(">d", cost))
    # Negative values: flip the magnitude bits so larger magnitudes sort lower.
    if bits < 0:
        bits ^= 0x7FFF_FFFF_FFFF_FFFF
    return bits


@dataclass(frozen=True, slots=True)
class Entry:
    """A validated record derived from one input row.

    ``category`` is never empty (blank input becomes ``"Unknown"``), ``year``
    is the non-empty leading component of the row's date, and ``note`` is
    ``None`` unless the source column held non-blank text.
    """

    year: str
    category: str
    cost: float
    note: str | None = None

    def sort_key(self) -> tuple[str, str, int]:
        return (self.year, self.category, cost_sort_key(self.cost))


class FilterOutcome(enum.Enum):
    """Result of checking a row's filter column against the target category.

    A missing column is not a mismatch: only ``MISMATCH`` rejects the row.
    """

    ABSENT = "absent"
    MATCH = "match"
    MISMATCH = "mismatch"

    @property
    def rejects(self) -> bool:
        return self is FilterOutcome.MISMATCH


# ---------------------------------------------------------------------------
# Aggregates
# ---------------------------------------------------------------------------

type Row = list[str]
"""One raw record: string fields addressable by position."""

type CategoryTotals = dict[str, dict[str, float]]
"""year -> category -> summed cost."""

type YearTotals = dict[str, float]
"""year -> summed cost, derived from :data:`CategoryTotals`."""


@dataclass(frozen=True, slots=True)
class Summary:
    """Everything one run produces: sorted entries and both totals maps."""

    entries: tuple[Entry, ...]
    category_totals: CategoryTotals
    year_totals: YearTotals


__all__ = [
    "CategoryTotals",
    "Entry",
    "FilterOutcome",
    "Row",
    "Summary",
    "YearTotals",
    "cost_sort_key",
]
