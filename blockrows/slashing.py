"""Rows of the validator_signing_info and slashing_params tables."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ValidatorSigningInfoRow:
    """A single row of the validator_signing_info table."""

    validator_address: str
    start_height: int
    index_offset: int
    jailed_until: datetime
    tombstoned: bool
    missed_blocks_counter: int
    height: int


@dataclass(frozen=True)
class SlashingParamsRow:
    """The single row of the slashing_params table."""

    params: str
    height: int
    one_row_id: bool = True