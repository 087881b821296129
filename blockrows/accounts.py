"""Rows of the account, account_balance and supply tables."""

from __future__ import annotations

from dataclasses import dataclass, field

from blockrows.coins import DbCoins


@dataclass(frozen=True)
class AccountRow:
    """A single row of the account table."""

    address: str


@dataclass(frozen=True)
class AccountBalanceRow:
    """A single row of the account_balance table."""

    address: str
    coins: DbCoins
    height: int


@dataclass(frozen=True)
class SupplyRow:
    """The single row of the supply table."""

    coins: DbCoins
    height: int
    one_row_id: bool = field(default=True, compare=False)