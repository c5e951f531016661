"""CLI for the ``cost_report`` package.

This module exposes a callable command handler (:func:`cmd_report`) and a
Typer-based console interface. Environment variables (notably
``COST_REPORT_LOG_LEVEL``) may be provided through a local ``.env``, loaded
with ``python-dotenv`` before any command runs. Business logic lives in
:mod:`cost_report.pipeline` and :mod:`cost_report.report`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from typer.models import OptionInfo

from .config import DEFAULT_SOURCE_PATH, DEFAULT_TARGET_CATEGORY
from .logging_setup import configure_logging, get_logger

logger = get_logger("cost_report.cli")


def cmd_report(
    csv_path: str | Path = DEFAULT_SOURCE_PATH,
    *,
    category: str = DEFAULT_TARGET_CATEGORY,
    has_header: bool = True,
    strict_width: bool = True,
) -> int:
    """Print the cost report for ``csv_path`` to stdout.

    Behavior
    --------
    - Reads ``csv_path`` once, keeping rows whose filter column matches
      ``category`` case-insensitively (rows without that column are kept too).
    - Prints the entry listing, then ``Category Totals`` and ``Year Totals``.

    Errors (unreadable file, invalid settings) are written to stderr and the
    function returns ``1`` without printing any part of the report. On
    success, returns ``0``.
    """

    import sys

    from pydantic import ValidationError

    from .config import ReportSettings
    from .pipeline import Pipeline
    from .report import render

    try:
        settings = ReportSettings(
            source_path=Path(csv_path),
            target_category=category,
            has_header=has_header,
            strict_width=strict_width,
        )
    except ValidationError as e:
        logger.error("invalid settings: %s", e)
        print(f"Error: invalid settings: {e}", file=sys.stderr)
        return 1

    try:
        summary = Pipeline(settings).run()
    except FileNotFoundError:
        logger.error("source not found: %s", csv_path)
        print(f"Error: File not found: {csv_path}", file=sys.stderr)
        return 1
    except PermissionError:
        logger.error("permission denied: %s", csv_path)
        print(f"Error: Permission denied: {csv_path}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error("failed reading %s: %s", csv_path, e)
        print(f"Error: Failed to read '{csv_path}': {e}", file=sys.stderr)
        return 1

    # Rendered in full before writing so a failure never leaves a partial report.
    sys.stdout.write(render(summary))
    return 0


# ---- Typer application -------------------------------------------------------

app = typer.Typer(
    help="Summarize costs of one category by year and by year+category.",
    no_args_is_help=False,
    add_completion=False,
)

# Module-level option object to satisfy ruff B008 (no calls in parameter
# defaults).
CSV_PATH_OPTION: OptionInfo = typer.Option(
    "--csv-path",
    help="Path to the delimited file to summarize",
    dir_okay=False,
    file_okay=True,
    exists=False,  # the handler reports missing files itself
)


@app.command("report")
def report_cmd(
    csv_path: Annotated[Path, CSV_PATH_OPTION] = DEFAULT_SOURCE_PATH,
    *,
    category: str = typer.Option(
        DEFAULT_TARGET_CATEGORY,
        "--category",
        help="Target category; rows whose filter column differs are skipped.",
    ),
    no_header: bool = typer.Option(
        False, "--no-header", help="Treat the first record as data, not a header."
    ),
    flexible: bool = typer.Option(
        False, "--flexible", help="Accept records whose field count differs from the first."
    ),
) -> None:
    code = cmd_report(
        csv_path,
        category=category,
        has_header=not no_header,
        strict_width=not flexible,
    )
    if code:
        raise typer.Exit(code)


@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context) -> None:
    """Root command.

    Loads ``.env`` from the current working directory (without overriding any
    already-set environment variables), configures logging, and runs the
    ``report`` command with its defaults when no subcommand is given.
    """

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()

    if ctx.invoked_subcommand is None:
        code = cmd_report()
        if code:
            raise typer.Exit(code)


if __name__ == "__main__":  # pragma: no cover
    app()
