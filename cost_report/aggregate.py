"""Totals by year and by year+category.

Both folds ignore input order: feeding any permutation of the same entries
yields the same maps (up to floating-point rounding of the per-bucket sums).
"""

from __future__ import annotations

from collections.abc import Iterable

from .models import CategoryTotals, Entry, Summary, YearTotals


def category_totals(entries: Iterable[Entry]) -> CategoryTotals:
    """Sum entry costs into ``year -> category -> total`` buckets."""

    totals: CategoryTotals = {}
    for entry in entries:
        by_category = totals.setdefault(entry.year, {})
        if entry.category in by_category:
            by_category[entry.category] += entry.cost
        else:
            by_category[entry.category] = entry.cost
    return totals


def year_totals(totals: CategoryTotals) -> YearTotals:
    """Derive ``year -> total`` by summing each year's category buckets."""

    return {year: sum(by_category.values()) for year, by_category in totals.items()}


def summarize(entries: Iterable[Entry]) -> Summary:
    """Build a :class:`Summary` from already-sorted entries."""

    ordered = tuple(entries)
    by_category = category_totals(ordered)
    return Summary(
        entries=ordered,
        category_totals=by_category,
        year_totals=year_totals(by_category),
    )


__all__ = ["category_totals", "summarize", "year_totals"]
