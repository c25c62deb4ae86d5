"""Data models for ``n26_hledger``.

The N26 2018 CSV export has ten positional columns. Rows are carried as
strings end to end (``RawRow``) so the journal output can reproduce the exact
source text; only the EUR amount is parsed into a :class:`~decimal.Decimal`
when an entry is built.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, fields
from decimal import Decimal

# ---------------------------------------------------------------------------
# CSV rows
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RawRow:
    """One N26 CSV data row, fields in export order.

    Values are the raw cell text between the enclosing double quotes. Columns
    as exported: ``Date, Payee, Account number, Transaction type, Payment
    reference, Category, Amount (EUR), Amount (Foreign Currency), Type Foreign
    Currency, Exchange Rate``.
    """

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

    @classmethod
    def from_fields(cls, values: Sequence[str]) -> RawRow:
        """Build a row from positional values.

        Missing trailing values become ``""``; surplus values are ignored.
        Callers are expected to have reported a count mismatch already.
        """

        names = [f.name for f in fields(cls)]
        padded = list(values[: len(names)]) + [""] * max(0, len(names) - len(values))
        return cls(**dict(zip(names, padded, strict=True)))


@dataclass(frozen=True, slots=True)
class ParsedRow:
    """Best-effort row plus the shape diagnostics collected while parsing.

    Diagnostics never prevent conversion; ``ok`` is ``False`` whenever at least
    one was recorded.
    """

    row: RawRow
    diagnostics: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.diagnostics


@dataclass(frozen=True, slots=True)
class RowDiagnostic:
    """A diagnostic tied to a 1-based line number of the input file."""

    line_no: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line_no}: {self.message}"


# ---------------------------------------------------------------------------
# Journal entries
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class LedgerEntry:
    """A journal transaction with its two balancing postings.

    ``asset_amount_text`` keeps the literal ``Amount (EUR)`` text for output;
    ``asset_amount`` is its parsed value and ``category_amount`` the exact
    negation, so the two postings always sum to zero.
    """

    date: str
    transaction_id: str
    payee: str
    description: str
    asset_account: str
    asset_amount: Decimal
    asset_amount_text: str
    category_account: str
    category_amount: Decimal

    @property
    def balanced(self) -> bool:
        return self.asset_amount + self.category_amount == 0


__all__ = ["LedgerEntry", "ParsedRow", "RawRow", "RowDiagnostic"]
