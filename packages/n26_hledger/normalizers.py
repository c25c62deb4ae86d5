"""String normalizers that make N26 CSV values safe for hledger journals.

hledger gives ``;``, ``|``, ``[`` and ``]`` structural meaning (comments,
payee/note separator, virtual postings), and a run of two spaces ends an
account name. Every value copied from the CSV into a journal line goes through
one of the two composite helpers below:

- :func:`soft_format` for payee and description text (case preserved).
- :func:`format_token` for classification fields that end up as account-path
  segments (lower-cased).

All helpers are total: blank input (empty or whitespace-only) is returned
unchanged.
"""

from __future__ import annotations

import re

SEPARATOR_NEWLINE = " => "

_DATE_RE = re.compile(r"(....)-(..)-(..)")
_SPECIAL_CHARS_RE = re.compile(r"[;|\[\]]")
_WHITESPACE_RE = re.compile(r"\s+")


def _is_blank(s: str) -> bool:
    return not s or s.isspace()


def reformat_date(s: str) -> str:
    """Rewrite an N26 ``YYYY-MM-DD`` date as hledger's ``YYYY/MM/DD``."""

    if _is_blank(s):
        return s
    return _DATE_RE.sub(r"\1/\2/\3", s)


def collapse_newlines(s: str) -> str:
    if _is_blank(s):
        return s
    return s.replace("\n", SEPARATOR_NEWLINE)


def strip_special_chars(s: str) -> str:
    if _is_blank(s):
        return s
    return _SPECIAL_CHARS_RE.sub(" ", s)


def squeeze(s: str) -> str:
    """Trim and condense whitespace runs to a single space."""

    if _is_blank(s):
        return s
    return _WHITESPACE_RE.sub(" ", s.strip())


def soft_format(s: str) -> str:
    """Escape free text (payee, description) for a journal header line."""

    if _is_blank(s):
        return s
    return squeeze(strip_special_chars(collapse_newlines(s)))


def format_token(s: str) -> str:
    """Escape and lower-case a value used as an account-path segment."""

    if _is_blank(s):
        return s
    return squeeze(strip_special_chars(collapse_newlines(s).lower()))


__all__ = [
    "SEPARATOR_NEWLINE",
    "collapse_newlines",
    "format_token",
    "reformat_date",
    "soft_format",
    "squeeze",
    "strip_special_chars",
]
