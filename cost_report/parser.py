"""Row → :class:`~cost_report.models.Entry` parsing.

Column positions are fixed:

- ``1``: filter column, compared case-insensitively with the target category
- ``2``: category
- ``4``: cost
- ``7``: date (``YYYY-...``; only the leading ``-``-separated part is used)
- ``10``: note

Rules are applied in that order: filter, category, cost, note, date. The
first failure rejects the row by returning ``None``. Rejection is not an
error and is never logged; a row that does not apply and a row that is
malformed look the same to the caller.
"""

from __future__ import annotations

import math
import re
import string
from collections.abc import Sequence

from .config import ReportSettings
from .models import Entry, FilterOutcome

FILTER_COLUMN = 1
CATEGORY_COLUMN = 2
COST_COLUMN = 4
DATE_COLUMN = 7
NOTE_COLUMN = 10

UNKNOWN_CATEGORY = "Unknown"

# Plain decimal literal: optional sign, digits with optional fraction (or a
# bare fraction), optional exponent. No whitespace, separators or symbols.
_COST_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(value: str) -> str:
    # Only A-Z fold; non-ASCII letters must match exactly.
    return value.translate(_ASCII_LOWER)


def _field(row: Sequence[str], index: int) -> str | None:
    return row[index] if index < len(row) else None


def classify_filter(row: Sequence[str], target_category: str) -> FilterOutcome:
    """Classify the filter column of ``row`` against ``target_category``."""

    value = _field(row, FILTER_COLUMN)
    if value is None:
        return FilterOutcome.ABSENT
    if _ascii_lower(value) == _ascii_lower(target_category):
        return FilterOutcome.MATCH
    return FilterOutcome.MISMATCH


def parse_cost(raw: str | None) -> float | None:
    """Parse a cost cell into a finite float, or ``None`` when it is not one."""

    if raw is None or not _COST_RE.fullmatch(raw):
        return None
    value = float(raw)
    # Huge exponents overflow to inf.
    return value if math.isfinite(value) else None


def parse_category(raw: str) -> str:
    category = raw.strip()
    return category or UNKNOWN_CATEGORY


def parse_note(raw: str | None) -> str | None:
    if raw is None:
        return None
    note = raw.strip()
    return note or None


def parse_year(raw: str | None) -> str | None:
    if raw is None:
        return None
    year = raw.split("-", 1)[0]
    return year or None


def parse_row(row: Sequence[str], target_category: str) -> Entry | None:
    """Turn one raw row into an :class:`Entry`, or ``None`` if it is rejected."""

    if classify_filter(row, target_category).rejects:
        return None

    raw_category = _field(row, CATEGORY_COLUMN)
    if raw_category is None:
        return None
    category = parse_category(raw_category)

    cost = parse_cost(_field(row, COST_COLUMN))
    if cost is None:
        return None

    note = parse_note(_field(row, NOTE_COLUMN))

    year = parse_year(_field(row, DATE_COLUMN))
    if year is None:
        return None

    return Entry(year=year, category=category, cost=cost, note=note)


class RecordParser:
    """Callable row parser bound to a target category."""

    __slots__ = ("target_category",)

    def __init__(self, target_category: str) -> None:
        self.target_category = target_category

    @classmethod
    def from_settings(cls, settings: ReportSettings) -> RecordParser:
        return cls(settings.target_category)

    def __call__(self, row: Sequence[str]) -> Entry | None:
        return parse_row(row, self.target_category)

    def __repr__(self) -> str:
        return f"RecordParser(target_category={self.target_category!r})"


__all__ = [
    "CATEGORY_COLUMN",
    "COST_COLUMN",
    "DATE_COLUMN",
    "FILTER_COLUMN",
    "NOTE_COLUMN",
    "UNKNOWN_CATEGORY",
    "RecordParser",
    "classify_filter",
    "parse_cost",
    "parse_row",
]
