"""Public interface for the ``cost_report`` package.

Re-exports the pipeline entry points and models as the stable import surface.
"""

from .aggregate import category_totals, summarize, year_totals
from .config import DEFAULT_SOURCE_PATH, DEFAULT_TARGET_CATEGORY, ReportSettings
from .models import (
    CategoryTotals,
    Entry,
    FilterOutcome,
    Summary,
    YearTotals,
    cost_sort_key,
)
from .parser import RecordParser, classify_filter, parse_cost, parse_row
from .pipeline import Pipeline, load_entries, read_rows, sort_entries
from .report import format_entry, render, render_lines

__all__ = [
    # Pipeline
    "Pipeline",
    "RecordParser",
    "ReportSettings",
    "DEFAULT_SOURCE_PATH",
    "DEFAULT_TARGET_CATEGORY",
    "read_rows",
    "load_entries",
    "sort_entries",
    "parse_row",
    "parse_cost",
    "classify_filter",
    "category_totals",
    "year_totals",
    "summarize",
    "format_entry",
    "render",
    "render_lines",
    # Models / types
    "Entry",
    "FilterOutcome",
    "Summary",
    "CategoryTotals",
    "YearTotals",
    "cost_sort_key",
]
