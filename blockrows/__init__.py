"""Row types, coin column encoding, batching and configuration helpers for indexed blockchain data."""

__version__ = "0.1.0"