"""Conversion driver: N26 export file -> hledger journal file.

For an input ``statements/2018.csv`` entries are appended to
``statements/2018#hledger.journal``. A journal that already exists is deleted
the first time a run targets it and appended to afterwards, so re-running an
import replaces the previous output instead of duplicating it while all rows
of one run still accumulate.

Rows are processed strictly in file order, one file at a time. The set of
touched output paths lives on :class:`ConversionContext`, scoped to one run.
If conversion is ever parallelised, ``claim`` plus the subsequent append must
become one critical section per output path.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from .config import LedgerConfig
from .entries import NumericParseError, convert_row
from .ingest.adapters.n26_csv import parse_line
from .ingest.tokenizers import RowTokenizer, get_tokenizer
from .ingest.utils import data_lines, read_export
from .logging_setup import get_logger
from .models import RowDiagnostic

_logger = get_logger("n26_hledger.journal")


def output_path_for(
    input_path: str | PathLike[str],
    *,
    tag: str = "hledger",
    extension: str = ".journal",
) -> Path:
    """Derive the journal path that sits next to ``input_path``.

    The input's last extension is replaced by ``#<tag><extension>``; a name
    without extension keeps its full name.
    """

    p = Path(input_path)
    return p.with_name(f"{p.stem}#{tag}{extension}")


@dataclass
class ConversionContext:
    """State for one conversion run."""

    config: LedgerConfig = field(default_factory=LedgerConfig)
    touched: set[Path] = field(default_factory=set)
    tokenizer: RowTokenizer | None = None

    def __post_init__(self) -> None:
        if self.tokenizer is None:
            self.tokenizer = get_tokenizer(self.config.tokenizer)

    def claim(self, path: Path) -> None:
        """Delete a pre-existing ``path`` the first time this run targets it."""

        key = Path(os.path.abspath(path))
        if key in self.touched:
            return
        if path.exists():
            _logger.info("replacing existing journal %s", path)
            path.unlink()
        self.touched.add(key)

    def append(self, path: Path, text: str) -> None:
        self.claim(path)
        with path.open("a", encoding="utf-8", newline="\n") as f:
            f.write(text)


@dataclass(frozen=True, slots=True)
class LineResult:
    tag: str | None
    diagnostics: tuple[RowDiagnostic, ...] = ()

    @property
    def written(self) -> bool:
        return self.tag is not None


@dataclass
class ConversionReport:
    """Outcome of converting one input file."""

    input_path: Path
    output_path: Path
    tags: list[str] = field(default_factory=list)
    entries_written: int = 0
    rows_skipped: int = 0
    diagnostics: list[RowDiagnostic] = field(default_factory=list)

    def add(self, result: LineResult) -> None:
        self.diagnostics.extend(result.diagnostics)
        if result.tag is None:
            self.rows_skipped += 1
            return
        self.entries_written += 1
        if result.tag not in self.tags:
            self.tags.append(result.tag)


def convert_line(
    ctx: ConversionContext,
    input_path: str | PathLike[str],
    line: str,
    line_no: int = 0,
) -> LineResult:
    """Convert one data line and append the entry to its journal.

    Shape problems are reported but the row is still converted. A row whose
    EUR amount is not numeric is skipped and reported; nothing is written for
    it. Filesystem errors propagate.
    """

    config = ctx.config
    parsed = parse_line(line, ctx.tokenizer)
    diagnostics = [RowDiagnostic(line_no, msg) for msg in parsed.diagnostics]
    for d in diagnostics:
        _logger.warning("%s: %s", input_path, d)

    try:
        text = convert_row(parsed.row, config)
    except NumericParseError as exc:
        skipped = RowDiagnostic(line_no, f"row skipped: {exc}")
        _logger.error("%s: %s", input_path, skipped)
        return LineResult(tag=None, diagnostics=(*diagnostics, skipped))

    out = output_path_for(input_path, tag=config.output_tag, extension=config.journal_extension)
    ctx.append(out, text)
    return LineResult(tag=config.output_tag, diagnostics=tuple(diagnostics))


def convert_text(
    ctx: ConversionContext,
    input_path: str | PathLike[str],
    csv_text: str,
) -> ConversionReport:
    """Convert every data line of ``csv_text`` (header dropped) in order."""

    config = ctx.config
    report = ConversionReport(
        input_path=Path(input_path),
        output_path=output_path_for(
            input_path, tag=config.output_tag, extension=config.journal_extension
        ),
    )
    for line_no, line in data_lines(csv_text):
        report.add(convert_line(ctx, input_path, line, line_no))

    _logger.info(
        "%s: %d entries written to %s, %d rows skipped",
        input_path,
        report.entries_written,
        report.output_path,
        report.rows_skipped,
    )
    return report


def convert_file(ctx: ConversionContext, input_path: str | PathLike[str]) -> ConversionReport:
    """Read ``input_path`` as UTF-8 and convert it. ``OSError`` propagates."""

    _logger.debug("reading %s", input_path)
    return convert_text(ctx, input_path, read_export(input_path))


__all__ = [
    "ConversionContext",
    "ConversionReport",
    "LineResult",
    "convert_file",
    "convert_line",
    "convert_text",
    "output_path_for",
]
