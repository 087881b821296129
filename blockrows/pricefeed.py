"""Rows of the token, token_unit and token_price tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class TokenUnitRow:
    """A single row of the token_unit table."""

    token_name: str
    denom: str
    exponent: int
    aliases: tuple[str, ...] = ()
    price_id: Optional[str] = None


@dataclass(frozen=True)
class TokenRow:
    """A single row of the token table."""

    name: str
    traded_unit: str


@dataclass(frozen=True)
class TokenPriceRow:
    """A single row of the token_price table; the id is not compared."""

    name: str
    price: float
    market_cap: int
    timestamp: datetime
    id: str = field(default="", compare=False)