"""CLI for the ``n26_hledger`` package.

``n26-hledger PATH [PATH ...]`` converts each N26 CSV export into an hledger
journal next to it (``<name>#hledger.journal``). Environment variables are
loaded from a local ``.env`` using ``python-dotenv`` (never overriding
variables that are already set) before configuration is resolved.

Console contract, per input path::

    <path>:
    \tline 3: Date: '2018/09/20' is not a YYYY-MM-DD date
    \thledger

A file that produced no entries still gets its (empty) tab-indented tag line.
Row diagnostics never change the exit code. Unreadable inputs or unwritable
journals are reported on stderr; the remaining paths are still converted and
the exit code is 1.
"""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import Annotated

import typer
from dotenv import load_dotenv
from pydantic import ValidationError

from .config import LedgerConfig, load_config
from .ingest.tokenizers import TOKENIZER_NAMES
from .journal import ConversionContext, convert_file
from .logging_setup import configure_logging, get_logger

_logger = get_logger("n26_hledger.cli")

USAGE = (
    "Usage: n26-hledger pathname [pathname ...]\n\n"
    "Converts N26 CSV export file format to HLedger."
)


def cmd_convert(
    paths: Sequence[str | PathLike[str]],
    config: LedgerConfig | None = None,
) -> int:
    """Convert each path in order and print the per-file summary.

    Returns the process exit code: ``0`` when every file was converted
    (row diagnostics included), ``1`` when at least one file failed on I/O.
    """

    if not paths:
        typer.echo(USAGE)
        return 0

    ctx = ConversionContext(config=config or load_config())
    failed = 0
    for path in paths:
        typer.echo(f"{path}:")
        try:
            report = convert_file(ctx, path)
        except FileNotFoundError:
            typer.echo(f"Error: File not found: {path}", err=True)
            failed += 1
            continue
        except PermissionError as e:
            typer.echo(f"Error: Permission denied: {e.filename or path}", err=True)
            failed += 1
            continue
        except UnicodeDecodeError as e:
            typer.echo(f"Error: '{path}' is not valid UTF-8: {e}", err=True)
            failed += 1
            continue
        except OSError as e:
            typer.echo(f"Error: I/O failure converting '{path}': {e}", err=True)
            failed += 1
            continue

        for diagnostic in report.diagnostics:
            typer.echo(f"\t{diagnostic}")
        # Always one tab-indented tag block, empty when nothing was written.
        typer.echo("\t" + "\n\t".join(report.tags))

    if failed:
        _logger.error("%d of %d input files failed", failed, len(paths))
        return 1
    return 0


app = typer.Typer(
    add_completion=False,
    help="Convert N26 CSV exports (2018 format) to hledger journals.",
)


@app.command()
def convert(
    paths: Annotated[
        list[Path] | None,
        typer.Argument(help="N26 CSV export files to convert.", show_default=False),
    ] = None,
    *,
    asset_account: str | None = typer.Option(
        None, help="Asset account receiving the EUR amount (env N26_HLEDGER_ASSET_ACCOUNT)."
    ),
    asset_iban: str | None = typer.Option(
        None, help="IBAN label shown after the asset account (env N26_HLEDGER_ASSET_IBAN)."
    ),
    source_tag: str | None = typer.Option(
        None, help="Import source segment in equity:import:<tag>:... (env N26_HLEDGER_SOURCE_TAG)."
    ),
    tokenizer: str | None = typer.Option(
        None, help=f"Row tokenizer: {', '.join(TOKENIZER_NAMES)} (env N26_HLEDGER_TOKENIZER)."
    ),
    log_level: str | None = typer.Option(
        None, help="Log level (env N26_HLEDGER_LOG_LEVEL, default INFO)."
    ),
) -> None:
    """Convert N26 CSV export files to hledger journals."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)

    try:
        configure_logging(log_level)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(2) from e

    try:
        config = load_config(
            asset_account=asset_account,
            asset_iban=asset_iban,
            source_tag=source_tag,
            tokenizer=tokenizer,
        )
    except ValidationError as e:
        typer.echo(f"Error: invalid configuration: {e}", err=True)
        raise typer.Exit(2) from e

    code = cmd_convert(paths or [], config)
    if code:
        raise typer.Exit(code)


if __name__ == "__main__":  # pragma: no cover
    app()
