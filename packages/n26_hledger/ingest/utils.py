"""Ingest helpers shared by the conversion driver and the CLI."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path

_LINE_END_RE = re.compile(r"\r?\n")


def data_lines(csv_text: str) -> list[tuple[int, str]]:
    """Return ``(line_no, line)`` pairs for every data line of an export.

    The first line (the header) is dropped, as are blank lines. Line numbers
    are 1-based positions in the original text. Only ``\\n`` and ``\\r\\n``
    end a line; other Unicode line separators stay inside their field.
    """

    lines = _LINE_END_RE.split(csv_text)
    return [(no, line) for no, line in enumerate(lines, start=1) if no > 1 and line.strip()]


def read_export(csv_path: str | PathLike[str]) -> str:
    """Read a whole N26 export as UTF-8 text.

    ``OSError`` (missing file, permissions) and ``UnicodeDecodeError``
    propagate to the caller.
    """

    return Path(csv_path).read_text(encoding="utf-8")


__all__ = ["data_lines", "read_export"]
