"""Coin values and their textual database representation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext
from typing import Iterable, Optional, Union

_DENOM_PATTERN = re.compile(r"[a-zA-Z][a-zA-Z0-9/]{2,127}")
_INT_PATTERN = re.compile(r"-?\d+")
_DEC_PATTERN = re.compile(r"-?(\d+(\.\d*)?|\.\d+)")
_MAX_INT_BITS = 255
_DEC_PRECISION = 18

Source = Union[bytes, bytearray, memoryview, str]


def to_string(value: Optional[str]) -> str:
    """Return the string held by a nullable value, or an empty string for NULL."""
    return value if value is not None else ""


def to_null_string(value: str) -> Optional[str]:
    """Trim the value and return it, or None when nothing is left."""
    value = value.strip()
    return value or None


def remove_empty(strings: Iterable[str]) -> list[str]:
    """Drop the empty strings, keeping the order of the others."""
    return [item for item in strings if item != ""]


def _validate_denom(denom: str) -> None:
    if not _DENOM_PATTERN.fullmatch(denom):
        raise ValueError(f"invalid denom: {denom}")


def _parse_int(text: str) -> int:
    if not _INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer amount: {text!r}")
    value = int(text)
    if value.bit_length() > _MAX_INT_BITS:
        raise ValueError(f"integer amount out of range: {text!r}")
    return value


def _parse_dec(text: str) -> Decimal:
    if not _DEC_PATTERN.fullmatch(text):
        raise ValueError(f"invalid decimal amount: {text!r}")
    _, _, fraction = text.partition(".")
    if len(fraction) > _DEC_PRECISION:
        raise ValueError(f"too many decimal places in amount: {text!r}")
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"invalid decimal amount: {text!r}") from exc


def _format_dec(value: Decimal) -> str:
    with localcontext() as ctx:
        ctx.prec = 200
        scaled = int(value.scaleb(_DEC_PRECISION))
    sign = "-" if scaled < 0 else ""
    whole, fraction = divmod(abs(scaled), 10**_DEC_PRECISION)
    return f"{sign}{whole}.{fraction:0{_DEC_PRECISION}d}"


def _decode(src: Source) -> str:
    if isinstance(src, str):
        return src
    return bytes(src).decode()


def _strip_markup(text: str) -> str:
    for char in ('"', "{", "}", "(", ")"):
        text = text.replace(char, "")
    return text


def _split_pair(text: str) -> tuple[str, str]:
    parts = text.split(",")
    if len(parts) < 2:
        raise ValueError(f"malformed coin value: {text!r}")
    return parts[0], parts[1]


def _split_array(src: Source) -> list[tuple[str, str]]:
    text = _decode(src)
    for char in ('"', "{", "}"):
        text = text.replace(char, "")
    text = text.replace("),(", ") (")
    text = text.replace("(", "").replace(")", "")
    return [_split_pair(item) for item in remove_empty(text.split(" "))]


@dataclass(frozen=True)
class Coin:
    """An integer amount of a single denomination."""

    denom: str
    amount: int

    def __post_init__(self) -> None:
        _validate_denom(self.denom)
        if self.amount < 0:
            raise ValueError(f"negative coin amount: {self.amount}")


@dataclass(frozen=True)
class DecCoin:
    """A decimal amount of a single denomination."""

    denom: str
    amount: Decimal

    def __post_init__(self) -> None:
        _validate_denom(self.denom)
        if self.amount < 0:
            raise ValueError(f"negative decimal coin amount: {self.amount}")


@dataclass(frozen=True)
class DbCoin:
    """A coin as stored inside the database."""

    denom: str
    amount: str

    @classmethod
    def from_coin(cls, coin: Coin) -> DbCoin:
        return cls(denom=coin.denom, amount=str(coin.amount))

    def value(self) -> str:
        """Return the composite literal stored in the database."""
        return f"({self.denom},{self.amount})"

    @classmethod
    def scan(cls, src: Source) -> DbCoin:
        denom, amount = _split_pair(_strip_markup(_decode(src)))
        return cls(denom=denom, amount=amount)

    def to_coin(self) -> Coin:
        return Coin(self.denom, _parse_int(self.amount))


class DbCoins(list):
    """An ordered list of DbCoin values."""

    @classmethod
    def from_coins(cls, coins: Iterable[Coin]) -> DbCoins:
        return cls(DbCoin.from_coin(coin) for coin in coins)

    @classmethod
    def scan(cls, src: Source) -> DbCoins:
        return cls(DbCoin(denom, amount) for denom, amount in _split_array(src))

    def to_coins(self) -> list[Coin]:
        return [coin.to_coin() for coin in self]


@dataclass(frozen=True)
class DbDecCoin:
    """A decimal coin as stored inside the database."""

    denom: str
    amount: str

    @classmethod
    def from_dec_coin(cls, coin: DecCoin) -> DbDecCoin:
        return cls(denom=coin.denom, amount=_format_dec(coin.amount))

    def value(self) -> str:
        """Return the composite literal stored in the database."""
        return f"({self.denom},{self.amount})"

    @classmethod
    def scan(cls, src: Source) -> DbDecCoin:
        denom, amount = _split_pair(_strip_markup(_decode(src)))
        return cls(denom=denom, amount=amount)

    def to_dec_coin(self) -> DecCoin:
        return DecCoin(self.denom, _parse_dec(self.amount))


class DbDecCoins(list):
    """An ordered list of DbDecCoin values."""

    @classmethod
    def from_dec_coins(cls, coins: Iterable[DecCoin]) -> DbDecCoins:
        return cls(DbDecCoin.from_dec_coin(coin) for coin in coins)

    @classmethod
    def scan(cls, src: Source) -> DbDecCoins:
        return cls(DbDecCoin(denom, amount) for denom, amount in _split_array(src))

    def to_dec_coins(self) -> list[DecCoin]:
        return [coin.to_dec_coin() for coin in self]