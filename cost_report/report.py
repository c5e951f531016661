"""Text rendering of a :class:`~cost_report.models.Summary`.

Layout::

    [2021] Dental: $80.00
    [2021] Dental: $120.50 (cleaning)

    Category Totals:

    2021

    Dental: $200.5

    Year Totals:

    2021: $200.5

Entry costs always show two decimals. Totals use the shortest representation
that round-trips the float, without a trailing ``.0``. Years and categories are
listed in sorted order.
"""

from __future__ import annotations

from .models import CategoryTotals, Entry, Summary, YearTotals


def format_cost(value: float) -> str:
    return f"{value:.2f}"


def format_total(value: float) -> str:
    text = repr(value)
    return text[:-2] if text.endswith(".0") else text


def format_entry(entry: Entry) -> str:
    line = f"[{entry.year}] {entry.category}: ${format_cost(entry.cost)}"
    if entry.note is not None:
        line += f" ({entry.note})"
    return line


def _category_lines(totals: CategoryTotals) -> list[str]:
    lines = ["", "Category Totals:"]
    for year in sorted(totals):
        lines.extend(["", year, ""])
        by_category = totals[year]
        lines.extend(
            f"{category}: ${format_total(by_category[category])}"
            for category in sorted(by_category)
        )
    return lines


def _year_lines(totals: YearTotals) -> list[str]:
    lines = ["", "Year Totals:", ""]
    lines.extend(f"{year}: ${format_total(totals[year])}" for year in sorted(totals))
    return lines


def render_lines(summary: Summary) -> list[str]:
    """Return the report as a list of lines (without newline characters)."""

    lines = [format_entry(entry) for entry in summary.entries]
    lines.extend(_category_lines(summary.category_totals))
    lines.extend(_year_lines(summary.year_totals))
    return lines


def render(summary: Summary) -> str:
    return "\n".join(render_lines(summary)) + "\n"


__all__ = ["format_cost", "format_entry", "format_total", "render", "render_lines"]
