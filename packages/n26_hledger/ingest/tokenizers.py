"""Split one CSV line into raw field values.

The N26 2018 export quotes every field and never escapes quotes, so the
default :class:`QuotedFieldTokenizer` simply collects each ``"..."`` span in
order. A literal double quote inside a field cannot be represented with it.
:class:`Rfc4180Tokenizer` is available for exports that double embedded
quotes; it delegates to the stdlib :mod:`csv` module.
"""

from __future__ import annotations

import csv
import re
from typing import Protocol

_QUOTED_FIELD_RE = re.compile(r'"([^"]*)"')


class RowTokenizer(Protocol):
    name: str

    def tokenize(self, line: str) -> list[str]: ...


class QuotedFieldTokenizer:
    name = "quoted"

    def tokenize(self, line: str) -> list[str]:
        return _QUOTED_FIELD_RE.findall(line)


class Rfc4180Tokenizer:
    name = "rfc4180"

    def tokenize(self, line: str) -> list[str]:
        rows = list(csv.reader([line]))
        return rows[0] if rows else []


_TOKENIZERS: dict[str, type[QuotedFieldTokenizer] | type[Rfc4180Tokenizer]] = {
    QuotedFieldTokenizer.name: QuotedFieldTokenizer,
    Rfc4180Tokenizer.name: Rfc4180Tokenizer,
}

TOKENIZER_NAMES: tuple[str, ...] = tuple(_TOKENIZERS)


def get_tokenizer(name: str) -> RowTokenizer:
    key = name.strip().lower()
    try:
        return _TOKENIZERS[key]()
    except KeyError:
        raise ValueError(
            f"unknown tokenizer: {name!r} (expected one of: {', '.join(TOKENIZER_NAMES)})"
        ) from None


__all__ = [
    "TOKENIZER_NAMES",
    "QuotedFieldTokenizer",
    "Rfc4180Tokenizer",
    "RowTokenizer",
    "get_tokenizer",
]
