"""Runtime configuration for the converter.

The asset account, its IBAN label and the import source tag identify the
account that owns the export; they are not derived from the CSV. Values
resolve in this order (first wins):

1. Explicit keyword overrides passed to :func:`load_config` (CLI options).
2. ``N26_HLEDGER_<FIELD>`` environment variables (the CLI loads ``.env``
   first via ``python-dotenv``).
3. The defaults below.
"""

from __future__ import annotations

import os
import re
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, field_validator

ENV_PREFIX = "N26_HLEDGER_"

_TAG_FORBIDDEN_RE = re.compile(r"[:\s/\\]")


class LedgerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    asset_account: str = "asset:betaalrekening"
    asset_iban: str = "de60 1001 1001 2625 7281 09"
    source_tag: str = "n26"
    currency: str = "EUR"
    output_tag: str = "hledger"
    journal_extension: str = ".journal"
    tokenizer: Literal["quoted", "rfc4180"] = "quoted"

    @field_validator("asset_account", "currency")
    @classmethod
    def _non_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be non-empty")
        if "  " in v:
            raise ValueError("must not contain two consecutive spaces")
        return v

    @field_validator("source_tag", "output_tag")
    @classmethod
    def _tag(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must be non-empty")
        if _TAG_FORBIDDEN_RE.search(v):
            raise ValueError("must not contain ':', whitespace or path separators")
        return v

    @field_validator("journal_extension")
    @classmethod
    def _extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("must start with '.' followed by at least one character")
        return v

    @property
    def category_prefix(self) -> str:
        return f"equity:import:{self.source_tag}"


def _from_env() -> dict[str, str]:
    values: dict[str, str] = {}
    for name in LedgerConfig.model_fields:
        env_val = os.getenv(ENV_PREFIX + name.upper())
        if env_val is not None:
            values[name] = env_val
    return values


def load_config(**overrides: Any) -> LedgerConfig:
    """Resolve a :class:`LedgerConfig` from the environment plus overrides.

    ``None`` overrides are ignored so CLI options that were not given fall
    through to the environment. Raises ``pydantic.ValidationError`` for
    invalid values.
    """

    values: dict[str, Any] = _from_env()
    values.update({k: v for k, v in overrides.items() if v is not None})
    return LedgerConfig(**values)


__all__ = ["ENV_PREFIX", "LedgerConfig", "load_config"]
