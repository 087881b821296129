"""Rows of the genesis, consensus, average block time and block tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class GenesisRow:
    """The single row of the genesis table."""

    chain_id: str
    time: datetime
    initial_height: int
    one_row_id: bool = field(default=True, compare=False)


@dataclass(frozen=True)
class ConsensusRow:
    """The single row of the consensus table."""

    height: int
    round: int
    step: str
    one_row_id: bool = field(default=True, compare=False)


@dataclass(frozen=True)
class AverageTimeRow:
    """The average block time over a minute, hour, day or since genesis."""

    average_time: float
    height: int
    one_row_id: bool = field(default=True, compare=False)


@dataclass(frozen=True)
class BlockRow:
    """A single block stored inside the database."""

    height: int
    hash: str
    tx_num: int
    total_gas: int
    proposer_address: Optional[str]
    pre_commits_num: int
    timestamp: datetime