"""Load → parse → sort, and the :class:`Pipeline` that ties a run together.

Reading uses the stdlib :mod:`csv` module (UTF-8, RFC 4180 quoting). Rows the
reader cannot decode are dropped the same way parser rejections are: silently.
Only failing to open or read the file at all is reported to the caller, as an
:class:`OSError`.
"""

from __future__ import annotations

import csv
from collections.abc import Callable, Iterable, Iterator
from os import PathLike
from pathlib import Path

from .aggregate import summarize
from .config import ReportSettings
from .logging_setup import get_logger
from .models import Entry, Row, Summary
from .parser import RecordParser

logger = get_logger("cost_report.pipeline")


def _is_decodable(record: Row) -> bool:
    # Invalid UTF-8 bytes survive ``surrogateescape`` as lone surrogates.
    for field in record:
        try:
            field.encode("utf-8")
        except UnicodeEncodeError:
            return False
    return True


def read_rows(
    path: str | PathLike[str],
    *,
    has_header: bool = True,
    strict_width: bool = True,
) -> Iterator[Row]:
    """Yield the data records of a delimited file as lists of strings.

    Behavior:
    - The first record is the header when ``has_header`` is true and is not
      yielded. It still fixes the expected width.
    - With ``strict_width``, records whose field count differs from the first
      record's are skipped.
    - Blank lines produce no record and do not count as the header.
    - Records containing invalid UTF-8, or that the csv reader rejects, are
      skipped.

    Raises ``OSError`` when the file cannot be opened or read.
    """

    p = Path(path)
    with p.open(encoding="utf-8", errors="surrogateescape", newline="") as f:
        reader = csv.reader(f)
        width: int | None = None
        first = True
        while True:
            try:
                record = next(reader)
            except StopIteration:
                break
            except csv.Error:
                continue
            if not record:
                continue
            if width is None:
                width = len(record)
            if strict_width and len(record) != width:
                continue
            if first:
                first = False
                if has_header:
                    continue
            if not _is_decodable(record):
                continue
            yield record


def load_entries(rows: Iterable[Row], parser: Callable[[Row], Entry | None]) -> list[Entry]:
    """Apply ``parser`` to each row and keep the accepted entries in input order."""

    entries: list[Entry] = []
    for row in rows:
        entry = parser(row)
        if entry is not None:
            entries.append(entry)
    return entries


def sort_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Sort by ``(year, category, cost)`` with a total order on cost.

    Python's sort is stable, so entries with identical keys keep input order.
    """

    return sorted(entries, key=Entry.sort_key)


class Pipeline:
    """One report run: read the source, parse, sort and aggregate."""

    def __init__(self, settings: ReportSettings) -> None:
        self.settings = settings
        self.parser = RecordParser.from_settings(settings)

    def rows(self) -> Iterator[Row]:
        return read_rows(
            self.settings.source_path,
            has_header=self.settings.has_header,
            strict_width=self.settings.strict_width,
        )

    def load(self) -> list[Entry]:
        """Return the accepted entries, sorted."""

        entries = sort_entries(load_entries(self.rows(), self.parser))
        logger.debug(
            "loaded %d entries from %s (target category %r)",
            len(entries),
            self.settings.source_path,
            self.settings.target_category,
        )
        return entries

    def run(self) -> Summary:
        return summarize(self.load())


__all__ = ["Pipeline", "load_entries", "read_rows", "sort_entries"]
