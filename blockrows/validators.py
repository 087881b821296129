"""Rows of the validator tables."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional

from blockrows.coins import to_null_string

_INT64_PATTERN = re.compile(r"[+-]?\d+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int64(text: str) -> Decimal:
    if not _INT64_PATTERN.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return Decimal(value)


@dataclass(frozen=True)
class ValidatorData:
    """All the data stored about a single validator."""

    cons_address: str
    val_address: str
    cons_pub_key: str
    self_delegate_address: str
    max_rate: str
    max_change_rate: str
    height: int

    def parsed_max_rate(self) -> Decimal:
        """Return the maximum commission rate, which must be a whole number."""
        return _parse_int64(self.max_rate)

    def parsed_max_change_rate(self) -> Decimal:
        """Return the maximum commission change rate, which must be a whole number."""
        return _parse_int64(self.max_change_rate)


@dataclass(frozen=True)
class ValidatorRow:
    """A single row of the validator table."""

    cons_address: str
    cons_pub_key: str


@dataclass(frozen=True)
class ValidatorInfoRow:
    """A single row of the validator_info table."""

    cons_address: str
    val_address: str
    self_delegate_address: str
    max_rate: str
    max_change_rate: str
    height: int


@dataclass(frozen=True)
class ValidatorDescriptionRow:
    """A single row of the validator_description table; the avatar is not compared."""

    val_address: str
    moniker: Optional[str]
    identity: Optional[str]
    avatar_url: Optional[str] = field(compare=False)
    website: Optional[str]
    security_contact: Optional[str]
    details: Optional[str]
    height: int

    @classmethod
    def create(
        cls,
        val_address: str,
        moniker: str,
        identity: str,
        avatar_url: str,
        website: str,
        security_contact: str,
        details: str,
        height: int,
    ) -> ValidatorDescriptionRow:
        """Build a row, storing blank descriptive fields as NULL."""
        return cls(
            val_address=val_address,
            moniker=to_null_string(moniker),
            identity=to_null_string(identity),
            avatar_url=to_null_string(avatar_url),
            website=to_null_string(website),
            security_contact=to_null_string(security_contact),
            details=to_null_string(details),
            height=height,
        )


@dataclass(frozen=True)
class ValidatorCommissionRow:
    """A single row of the validator_commission table."""

    operator_address: str
    commission: Optional[str]
    min_self_delegation: Optional[str]
    height: int

    @classmethod
    def create(
        cls,
        operator_address: str,
        commission: str,
        min_self_delegation: str,
        height: int,
    ) -> ValidatorCommissionRow:
        """Build a row, storing blank values as NULL."""
        return cls(
            operator_address=operator_address,
            commission=to_null_string(commission),
            min_self_delegation=to_null_string(min_self_delegation),
            height=height,
        )


@dataclass(frozen=True)
class ValidatorCommissionHistoryRow:
    """A single row of the validator_commission_history table."""

    commission_id: int
    height: int
    timestamp: datetime


@dataclass(frozen=True)
class ValidatorVotingPowerRow:
    """A single row of the validator_voting_power table."""

    validator_address: str
    voting_power: int
    height: int


@dataclass(frozen=True)
class ValidatorStatusRow:
    """A single row of the validator_status table."""

    status: int
    jailed: bool
    tombstoned: bool
    cons_address: str
    height: int


@dataclass(frozen=True)
class DoubleSignVoteRow:
    """A single row of the double_sign_vote table."""

    id: int
    vote_type: int
    height: int
    round: int
    block_id: str
    validator_address: str
    validator_index: int
    signature: str


@dataclass(frozen=True)
class DoubleSignEvidenceRow:
    """A single row of the double_sign_evidence table."""

    height: int
    vote_a_id: int
    vote_b_id: int