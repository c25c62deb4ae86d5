"""Public interface for the ``n26_hledger`` package.

Symbol re-exports only; the conversion pipeline lives in the submodules
(``normalizers`` → ``ingest`` → ``description`` → ``entries`` → ``journal``).
"""

from .config import LedgerConfig, load_config
from .description import synthesize_description
from .entries import NumericParseError, build_entry, convert_row, render_entry, transaction_id
from .ingest.adapters.n26_csv import parse_line
from .journal import (
    ConversionContext,
    ConversionReport,
    convert_file,
    convert_line,
    convert_text,
    output_path_for,
)
from .models import LedgerEntry, ParsedRow, RawRow, RowDiagnostic

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "parse_line",
    "synthesize_description",
    "build_entry",
    "render_entry",
    "convert_row",
    "transaction_id",
    "convert_line",
    "convert_text",
    "convert_file",
    "output_path_for",
    # Models / config
    "ConversionContext",
    "ConversionReport",
    "LedgerConfig",
    "LedgerEntry",
    "NumericParseError",
    "ParsedRow",
    "RawRow",
    "RowDiagnostic",
    "load_config",
]
