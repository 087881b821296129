from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from blockrows.coins import Coin, DbCoin
from blockrows.delegations import DelegationRow, RedelegationRow, UnbondingDelegationRow

T0 = datetime(2020, 5, 5, tzinfo=timezone.utc)
AMOUNT = DbCoin("udaric", "100")


def test_delegation_row_ignores_id():
    row = DelegationRow("cosmos1del", "cosmosvalcons1val", AMOUNT, 10)
    assert row.id == ""
    assert row == DelegationRow("cosmos1del", "cosmosvalcons1val", AMOUNT, 10, id="7")


@pytest.mark.parametrize(
    "changes",
    [
        {"delegator_address": "cosmos1other"},
        {"validator_address": "cosmosvalcons1other"},
        {"amount": DbCoin("udaric", "101")},
        {"amount": DbCoin("uatom", "100")},
        {"height": 11},
    ],
)
def test_delegation_row_differs_on_compared_fields(changes):
    row = DelegationRow("cosmos1del", "cosmosvalcons1val", AMOUNT, 10)
    assert row != replace(row, **changes)


def test_delegation_row_amount_round_trips_through_coin():
    row = DelegationRow("cosmos1del", "cosmosvalcons1val", DbCoin.from_coin(Coin("udaric", 100)), 10)
    assert row.amount.to_coin() == Coin("udaric", 100)


def test_unbonding_delegation_row_equality():
    row = UnbondingDelegationRow("cosmos1del", "cosmosvalcons1val", AMOUNT, T0, 10)
    assert row == UnbondingDelegationRow("cosmos1del", "cosmosvalcons1val", AMOUNT, T0, 10)
    assert row != replace(row, completion_timestamp=T0 + timedelta(seconds=1))
    assert row != replace(row, validator_address="cosmosvalcons1other")


def test_unbonding_delegation_row_compares_instants():
    row = UnbondingDelegationRow("cosmos1del", "cosmosvalcons1val", AMOUNT, T0, 10)
    shifted = T0.astimezone(timezone(timedelta(hours=3)))
    assert row == replace(row, completion_timestamp=shifted)


@pytest.mark.parametrize(
    "changes",
    [
        {"delegator_address": "cosmos1other"},
        {"src_validator_address": "cosmosvalcons1c"},
        {"dst_validator_address": "cosmosvalcons1c"},
        {"amount": DbCoin("udaric", "1")},
        {"completion_time": T0 - timedelta(days=1)},
        {"height": 1},
    ],
)
def test_redelegation_row_differs_on_each_field(changes):
    row = RedelegationRow("cosmos1del", "cosmosvalcons1a", "cosmosvalcons1b", AMOUNT, T0, 10)
    assert row == RedelegationRow("cosmos1del", "cosmosvalcons1a", "cosmosvalcons1b", AMOUNT, T0, 10)
    assert row != replace(row, **changes)