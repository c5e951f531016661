"""Run configuration for ``cost_report``.

The source path and target category used to be compiled-in constants; they
are now carried by :class:`ReportSettings` and handed to the pipeline at
construction time. The defaults below preserve the historical behavior.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

DEFAULT_SOURCE_PATH = Path("data.csv")
DEFAULT_TARGET_CATEGORY = "health"


class ReportSettings(BaseModel):
    """Validated settings for one report run.

    Attributes
    ----------
    source_path:
        Delimited file to read.
    target_category:
        Value the filter column must match (case-insensitively) for a row to
        be considered.
    has_header:
        Whether the first record is a header row (skipped, never parsed).
    strict_width:
        When true, records whose field count differs from the first record's
        are treated as undecodable and skipped.
    """

    model_config = ConfigDict(strict=True, frozen=True, extra="forbid")

    source_path: Path = DEFAULT_SOURCE_PATH
    target_category: str = DEFAULT_TARGET_CATEGORY
    has_header: bool = True
    strict_width: bool = True

    @field_validator("target_category")
    @classmethod
    def _target_category_non_empty(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("target_category must be non-empty")
        return v


__all__ = ["DEFAULT_SOURCE_PATH", "DEFAULT_TARGET_CATEGORY", "ReportSettings"]
