"""Pytest configuration for test isolation.

Configuration resolves ``N26_HLEDGER_*`` environment variables (and the CLI
loads a ``.env`` from the working directory). A developer shell or a local
``.env`` must not leak into the tests, so every test runs with those
variables cleared and with a temporary directory as its working directory.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

import pytest

from n26_hledger import logging_setup

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture(autouse=True)
def _isolate_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in list(os.environ):
        if name.startswith("N26_HLEDGER_"):
            monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def export_csv(tmp_path: Path) -> Path:
    """A copy of the two-row sample export in a scratch directory."""

    dest = tmp_path / "n26_2018.csv"
    shutil.copyfile(FIXTURES / "n26_2018.csv", dest)
    return dest


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch):
    """Let each CLI invocation configure package logging from scratch."""

    monkeypatch.setattr(logging_setup, "_CONFIGURED", False)
    yield
    logger = logging.getLogger("n26_hledger")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
