"""Turn a validated N26 row into an hledger journal entry.

Rendered shape (two-space separators before amounts are significant to
hledger)::

    2018/09/20 ! (<md5>) Business Inc. | NL00RABO0123456789 Ping Income ...
      asset:betaalrekening (de60 1001 1001 2625 7281 09)  EUR 0.88
      equity:import:n26:income:miscellaneous  EUR -0.88
    <blank line>

Imported entries are always marked pending (``!``). The code in parentheses
is a digest of the unescaped date, payee and description.
"""

from __future__ import annotations

import hashlib
from decimal import Decimal

from .config import LedgerConfig
from .description import synthesize_description
from .ingest.adapters.n26_csv import AMOUNT_RE
from .logging_setup import get_logger
from .models import LedgerEntry, RawRow
from .normalizers import format_token, reformat_date, soft_format

_logger = get_logger("n26_hledger.entries")

PENDING_MARK = "!"
SEPARATOR_PAYEE = " | "
POSTING_INDENT = "  "
AMOUNT_GAP = "  "


class NumericParseError(ValueError):
    """Raised when ``Amount (EUR)`` is not a plain signed decimal."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Amount (EUR) {text!r} is not a number")
        self.text = text


def parse_amount(text: str) -> Decimal:
    """Parse ``Amount (EUR)``; only ASCII ``[+-]digits[.digits]`` is accepted.

    The literal text is copied onto the asset posting, so anything else
    (``1_000``, ``1e3``, non-ASCII digits, surrounding spaces) is rejected even
    where ``Decimal`` would accept it.
    """

    if not AMOUNT_RE.fullmatch(text):
        raise NumericParseError(text)
    return Decimal(text)


def negate(amount: Decimal) -> Decimal:
    """Exact negation; zero stays unsigned so it never renders as ``-0.00``."""

    return amount.copy_negate() if amount else amount.copy_abs()


def transaction_id(date: str, payee: str, description: str) -> str:
    """Content digest identifying an entry across repeated imports.

    MD5 over ``date + payee + description`` (raw, before any escaping),
    lower-case hex.
    """

    return hashlib.md5((date + payee + description).encode("utf-8")).hexdigest()


def _segment(value: str) -> str:
    if not value or value.isspace():
        return ""
    return format_token(value)


def category_account(row: RawRow, config: LedgerConfig) -> str:
    account = (
        f"{config.category_prefix}:{_segment(row.transaction_type)}:{_segment(row.category)}"
    )
    if account.endswith("::"):
        _logger.debug("blank transaction type and category; using %s", account)
    return account


def build_entry(row: RawRow, config: LedgerConfig) -> LedgerEntry:
    amount = parse_amount(row.amount_eur)
    description = synthesize_description(row)
    return LedgerEntry(
        date=reformat_date(row.date),
        transaction_id=transaction_id(row.date, row.payee, description),
        payee=row.payee,
        description=description,
        asset_account=config.asset_account,
        asset_amount=amount,
        asset_amount_text=row.amount_eur,
        category_account=category_account(row, config),
        category_amount=negate(amount),
    )


def render_entry(entry: LedgerEntry, config: LedgerConfig) -> str:
    header = f"{entry.date} {PENDING_MARK} ({entry.transaction_id}) {soft_format(entry.payee)}"
    if entry.payee and not entry.payee.isspace():
        header += SEPARATOR_PAYEE
    header += soft_format(entry.description)

    asset = entry.asset_account
    if config.asset_iban:
        asset += f" ({config.asset_iban})"

    return (
        f"{header}\n"
        f"{POSTING_INDENT}{asset}{AMOUNT_GAP}{config.currency} {entry.asset_amount_text}\n"
        f"{POSTING_INDENT}{entry.category_account}{AMOUNT_GAP}"
        f"{config.currency} {entry.category_amount}\n"
        "\n"
    )


def convert_row(row: RawRow, config: LedgerConfig) -> str:
    """Build and render the journal text for one row.

    Raises :class:`NumericParseError` when the EUR amount is not numeric.
    """

    return render_entry(build_entry(row, config), config)


__all__ = [
    "NumericParseError",
    "build_entry",
    "category_account",
    "convert_row",
    "negate",
    "parse_amount",
    "render_entry",
    "transaction_id",
]
