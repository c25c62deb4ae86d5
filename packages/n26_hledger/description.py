"""Compose the journal description for an N26 row.

The description folds the counter-account, payment reference, classification
and foreign-currency columns into one line::

    [<account number>] <payment reference> <type>; <category>; <foreign amount> <currency> <rate>

The exact bytes matter: the transaction id is a digest over this string, so
re-importing the same export must reproduce it verbatim.
"""

from __future__ import annotations

from .models import RawRow


def _suffixed(value: str) -> str:
    if not value or value.isspace():
        return value
    return f"{value}; "


def synthesize_description(row: RawRow) -> str:
    extra_parts = [
        _suffixed(row.transaction_type),
        _suffixed(row.category),
        row.amount_foreign,
        row.currency_foreign,
        row.exchange_rate,
    ]
    # Empty parts still contribute their separating space; only the ends are trimmed.
    extra = " ".join(p.strip() for p in extra_parts).strip()

    prefix = f"[{row.account_number}] " if row.account_number else ""
    text = row.payment_reference
    if extra:
        text += (" " if row.payment_reference else "") + extra
    return prefix + text


__all__ = ["synthesize_description"]
