"""Rows of the staking_pool and staking_params tables."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class StakingPoolRow:
    """The single row of the staking_pool table."""

    bonded_tokens: int
    not_bonded_tokens: int
    height: int
    one_row_id: bool = field(default=True, compare=False)


@dataclass(frozen=True)
class StakingParamsRow:
    """The single row of the staking_params table."""

    params: str
    height: int
    one_row_id: bool = True