"""Rows of the distribution_params, community_pool and reward tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockrows.coins import DbDecCoins


@dataclass(frozen=True)
class DistributionParamsRow:
    """The single row of the distribution_params table."""

    params: str
    height: int
    one_row_id: bool = True


@dataclass(frozen=True)
class CommunityPoolRow:
    """The single row of the community_pool table."""

    coins: DbDecCoins
    height: int
    one_row_id: bool = field(default=True, compare=False)


@dataclass(frozen=True)
class ValidatorCommissionAmountRow:
    """A single row of the validator_commission_amount table."""

    validator_address: str
    amount: DbDecCoins
    height: int


@dataclass(frozen=True)
class DelegationRewardRow:
    """A single row of the delegation_reward table."""

    delegator_address: str
    validator_address: str
    withdraw_address: str
    amount: DbDecCoins
    height: int