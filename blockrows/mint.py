"""Rows of the inflation and mint_params tables."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class InflationRow:
    """The single row of the inflation table."""

    value: float
    height: int
    one_row_id: bool = field(default=True, compare=False)


@dataclass(frozen=True)
class MintParamsRow:
    """The single row of the mint_params table."""

    params: str
    height: int
    one_row_id: bool = field(default=True, compare=False)