"""Rows of the delegation, unbonding_delegation and redelegation tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from blockrows.coins import DbCoin


@dataclass(frozen=True)
class DelegationRow:
    """A single row of the delegation table; the id is not compared."""

    delegator_address: str
    validator_address: str
    amount: DbCoin
    height: int
    id: str = field(default="", compare=False)


@dataclass(frozen=True)
class UnbondingDelegationRow:
    """A single row of the unbonding_delegation table."""

    delegator_address: str
    validator_address: str
    amount: DbCoin
    completion_timestamp: datetime
    height: int


@dataclass(frozen=True)
class RedelegationRow:
    """A single row of the redelegation table."""

    delegator_address: str
    src_validator_address: str
    dst_validator_address: str
    amount: DbCoin
    completion_time: datetime
    height: int