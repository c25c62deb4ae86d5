from pathlib import Path

import pytest

from n26_hledger.config import LedgerConfig
from n26_hledger.journal import (
    ConversionContext,
    convert_file,
    convert_line,
    convert_text,
    output_path_for,
)
from tests.helpers.n26 import (
    HEADER,
    INCOME_ENTRY,
    INCOME_LINE,
    OUTGOING_ENTRY,
    OUTGOING_LINE,
    row_line,
)


@pytest.mark.parametrize(
    ("given", "expected"),
    [
        ("n26-2018.csv", "n26-2018#hledger.journal"),
        ("exports/sept.CSV", "exports/sept#hledger.journal"),
        ("statement", "statement#hledger.journal"),
        ("archive.2018.csv", "archive.2018#hledger.journal"),
    ],
)
def test_output_path_replaces_last_extension(given, expected):
    assert output_path_for(given) == Path(expected)


def test_output_path_honours_tag_and_extension():
    assert output_path_for("a/b.csv", tag="beancount", extension=".txt") == Path(
        "a/b#beancount.txt"
    )


def test_convert_file_writes_all_entries_in_order(export_csv: Path):
    ctx = ConversionContext()
    report = convert_file(ctx, export_csv)

    out = export_csv.with_name("n26_2018#hledger.journal")
    assert report.output_path == out
    assert out.read_text(encoding="utf-8") == INCOME_ENTRY + OUTGOING_ENTRY
    assert report.tags == ["hledger"]
    assert report.entries_written == 2
    assert report.rows_skipped == 0
    assert report.diagnostics == []


def test_rerun_replaces_previous_output(export_csv: Path):
    convert_file(ConversionContext(), export_csv)
    convert_file(ConversionContext(), export_csv)

    out = export_csv.with_name("n26_2018#hledger.journal")
    assert out.read_text(encoding="utf-8") == INCOME_ENTRY + OUTGOING_ENTRY


def test_stale_journal_is_truncated_once_per_run(tmp_path: Path):
    src = tmp_path / "n26.csv"
    out = tmp_path / "n26#hledger.journal"
    out.write_text("stale entry\n", encoding="utf-8")

    ctx = ConversionContext()
    convert_line(ctx, src, INCOME_LINE, 2)
    convert_line(ctx, src, OUTGOING_LINE, 3)

    assert out.read_text(encoding="utf-8") == INCOME_ENTRY + OUTGOING_ENTRY
    assert out.resolve() in {p.resolve() for p in ctx.touched}


def test_same_output_from_two_inputs_accumulates_within_a_run(tmp_path: Path):
    # "n26.csv" and "n26.txt" both map to "n26#hledger.journal".
    first = tmp_path / "n26.csv"
    second = tmp_path / "n26.txt"
    first.write_text(f"{HEADER}\n{INCOME_LINE}\n", encoding="utf-8")
    second.write_text(f"{HEADER}\n{OUTGOING_LINE}\n", encoding="utf-8")

    ctx = ConversionContext()
    convert_file(ctx, first)
    convert_file(ctx, second)

    out = tmp_path / "n26#hledger.journal"
    assert out.read_text(encoding="utf-8") == INCOME_ENTRY + OUTGOING_ENTRY


def test_header_and_blank_lines_are_skipped(tmp_path: Path):
    src = tmp_path / "n26.csv"
    text = f"{HEADER}\r\n{INCOME_LINE}\r\n\r\n{OUTGOING_LINE}\r\n"

    report = convert_text(ConversionContext(), src, text)

    assert report.entries_written == 2
    out = tmp_path / "n26#hledger.journal"
    assert out.read_text(encoding="utf-8") == INCOME_ENTRY + OUTGOING_ENTRY


def test_header_only_file_writes_nothing(tmp_path: Path):
    src = tmp_path / "empty.csv"
    report = convert_text(ConversionContext(), src, HEADER + "\n")

    assert report.entries_written == 0
    assert report.tags == []
    assert not (tmp_path / "empty#hledger.journal").exists()


def test_shape_diagnostics_do_not_stop_conversion(tmp_path: Path):
    src = tmp_path / "n26.csv"
    bad_date = row_line("20.09.2018", "Shop", "", "Income", "", "Misc", "1.00", "", "", "")
    report = convert_text(ConversionContext(), src, f"{HEADER}\n{bad_date}\n{INCOME_LINE}\n")

    assert report.entries_written == 2
    assert [str(d) for d in report.diagnostics] == [
        "line 2: Date: '20.09.2018' is not a YYYY-MM-DD date"
    ]
    journal = (tmp_path / "n26#hledger.journal").read_text(encoding="utf-8")
    assert journal.startswith("20.09.2018 ! (")


def test_non_numeric_amount_skips_only_that_row(tmp_path: Path):
    src = tmp_path / "n26.csv"
    bad = row_line("2018-09-20", "Shop", "", "Income", "", "Misc", "n/a", "", "", "")
    report = convert_text(
        ConversionContext(), src, f"{HEADER}\n{INCOME_LINE}\n{bad}\n{OUTGOING_LINE}\n"
    )

    assert report.entries_written == 2
    assert report.rows_skipped == 1
    messages = [str(d) for d in report.diagnostics]
    assert messages[0].startswith("line 3: Amount (EUR): ")
    assert messages[-1] == "line 3: row skipped: Amount (EUR) 'n/a' is not a number"
    journal = (tmp_path / "n26#hledger.journal").read_text(encoding="utf-8")
    assert journal == INCOME_ENTRY + OUTGOING_ENTRY


def test_context_uses_configured_tokenizer_and_tag(tmp_path: Path):
    config = LedgerConfig(tokenizer="rfc4180", output_tag="ledger")
    ctx = ConversionContext(config=config)
    src = tmp_path / "n26.csv"
    line = row_line("2018-09-20", 'The ""Shop""', "", "Income", "", "Misc", "1.00", "", "", "")

    result = convert_line(ctx, src, line, 2)

    assert result.written
    assert result.tag == "ledger"
    journal = (tmp_path / "n26#ledger.journal").read_text(encoding="utf-8")
    assert ') The "Shop" | Income Misc\n' in journal


def test_missing_input_raises_os_error(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        convert_file(ConversionContext(), tmp_path / "missing.csv")
