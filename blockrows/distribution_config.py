"""Configuration of the distribution refresh frequency."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import yaml

DEFAULT_REWARDS_FREQUENCY = 100
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class ConfigError(ValueError):
    """Raised when the distribution configuration is missing or malformed."""


@dataclass(frozen=True)
class DistributionConfig:
    """How often, in blocks, rewards and commissions are refreshed."""

    rewards_frequency: int = 0


def default_config() -> DistributionConfig:
    """Return the configuration used when none is given."""
    return DistributionConfig(DEFAULT_REWARDS_FREQUENCY)


def _parse_frequency(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"invalid rewards_frequency: {value!r}")
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ConfigError(f"rewards_frequency out of range: {value}")
    return value


def parse_config(data: Union[bytes, str]) -> Optional[DistributionConfig]:
    """Read the distribution section of a YAML document.

    Returns None when the document has no distribution section.
    """
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}") from exc

    if document is None:
        return None
    if not isinstance(document, dict):
        raise ConfigError("configuration document must be a mapping")

    section = document.get("distribution")
    if section is None:
        return None
    if not isinstance(section, dict):
        raise ConfigError("distribution section must be a mapping")

    return DistributionConfig(_parse_frequency(section.get("rewards_frequency")))


def check_config(cfg: Optional[DistributionConfig]) -> None:
    """Raise ConfigError when the module is enabled without a configuration."""
    if cfg is None:
        raise ConfigError("distribution config is not set but module is enabled")