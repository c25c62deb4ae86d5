"""Adapter for the N26 2018 CSV export (ten quoted columns).

CSV header (exact, as exported)::

    "Date","Payee","Account number","Transaction type","Payment reference",
    "Category","Amount (EUR)","Amount (Foreign Currency)",
    "Type Foreign Currency","Exchange Rate"

Example data row::

    "2018-09-20","Business Inc.","NL00RABO0123456789","Income","Ping",
    "Miscellaneous","0.88","1.0","USD","0.8821879"

Shape checks are advisory. :func:`parse_line` always returns a row (padded or
truncated to ten fields) together with any diagnostics, and never raises for
malformed input.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ...models import ParsedRow, RawRow
from ..tokenizers import QuotedFieldTokenizer, RowTokenizer

# Field name -> header label, in export order.
COLUMNS: dict[str, str] = {
    "date": "Date",
    "payee": "Payee",
    "account_number": "Account number",
    "transaction_type": "Transaction type",
    "payment_reference": "Payment reference",
    "category": "Category",
    "amount_eur": "Amount (EUR)",
    "amount_foreign": "Amount (Foreign Currency)",
    "currency_foreign": "Type Foreign Currency",
    "exchange_rate": "Exchange Rate",
}

DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
BBAN_RE = re.compile(r"P?[0-9]+", re.IGNORECASE)
IBAN_RE = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{4,}", re.IGNORECASE)
AMOUNT_RE = re.compile(r"[+-]?[0-9]+\.?[0-9]*")
EXCHANGE_RATE_RE = re.compile(r"[0-9]+\.?[0-9]*")

MAX_DATE_LENGTH = 10
MAX_ACCOUNT_NUMBER_LENGTH = 34


class N26Columns(BaseModel):
    """Shape model for one row; used only to collect validation errors."""

    model_config = ConfigDict(strict=True, frozen=True)

    date: str
    payee: str
    account_number: str
    transaction_type: str
    payment_reference: str
    category: str
    amount_eur: str
    amount_foreign: str
    currency_foreign: str
    exchange_rate: str

    @field_validator("date")
    @classmethod
    def _date_shape(cls, v: str) -> str:
        if len(v) > MAX_DATE_LENGTH or not DATE_RE.fullmatch(v):
            raise ValueError(f"{v!r} is not a YYYY-MM-DD date")
        return v

    @field_validator("account_number")
    @classmethod
    def _iban_or_bban(cls, v: str) -> str:
        if len(v) > MAX_ACCOUNT_NUMBER_LENGTH:
            raise ValueError(
                f"{v!r} is longer than {MAX_ACCOUNT_NUMBER_LENGTH} characters"
            )
        if v and not (BBAN_RE.fullmatch(v) or IBAN_RE.fullmatch(v)):
            raise ValueError(f"{v!r} is neither an IBAN nor a BBAN")
        return v

    @field_validator("amount_eur")
    @classmethod
    def _amount_required(cls, v: str) -> str:
        if not AMOUNT_RE.fullmatch(v):
            raise ValueError(f"{v!r} is not a signed decimal amount")
        return v

    @field_validator("amount_foreign")
    @classmethod
    def _amount_optional(cls, v: str) -> str:
        if v and not AMOUNT_RE.fullmatch(v):
            raise ValueError(f"{v!r} is not a signed decimal amount")
        return v

    @field_validator("exchange_rate")
    @classmethod
    def _exchange_rate(cls, v: str) -> str:
        if v and not EXCHANGE_RATE_RE.fullmatch(v):
            raise ValueError(f"{v!r} is not an unsigned decimal rate")
        return v


def _describe_errors(exc: ValidationError) -> list[str]:
    out: list[str] = []
    for err in exc.errors():
        loc = err.get("loc") or ()
        name = str(loc[0]) if loc else "row"
        label = COLUMNS.get(name, name)
        msg = str(err.get("msg", "")).removeprefix("Value error, ")
        out.append(f"{label}: {msg}")
    return out


def validate_fields(values: list[str]) -> ParsedRow:
    """Validate positional field values and wrap them into a :class:`ParsedRow`."""

    diagnostics: list[str] = []
    if len(values) != len(COLUMNS):
        diagnostics.append(f"expected {len(COLUMNS)} quoted fields, found {len(values)}")

    row = RawRow.from_fields(values)
    try:
        N26Columns.model_validate(
            {name: getattr(row, name) for name in COLUMNS},
        )
    except ValidationError as exc:
        diagnostics.extend(_describe_errors(exc))

    return ParsedRow(row=row, diagnostics=tuple(diagnostics))


def parse_line(line: str, tokenizer: RowTokenizer | None = None) -> ParsedRow:
    """Tokenize one CSV line and validate its columns."""

    values = (tokenizer or QuotedFieldTokenizer()).tokenize(line)
    return validate_fields(list(values))


__all__ = ["COLUMNS", "N26Columns", "parse_line", "validate_fields"]
