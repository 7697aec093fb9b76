"""
Generator Configuration

Loads randid generator settings from YAML files and environment variables.

Supports loading from:
- A YAML file (path given explicitly or via RANDID_CONFIG)
- Environment variable overrides (RANDID_SECURE, RANDID_SEED, RANDID_MAX_LENGTH)
- Built-in defaults
"""

import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import ENV_CONFIG_PATH, ENV_MAX_LENGTH, ENV_SECURE, ENV_SEED
from .exceptions import ConfigError
from .logging import config_logger

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class GeneratorConfig:
    """
    Settings used to build an IdGenerator.

    - secure: draw from random.SystemRandom (os.urandom). When False a
      random.Random is used, optionally seeded for reproducible output.
    - seed: seed for the non-secure source. Only valid with secure=False.
    - max_length: optional upper bound on requested lengths. None means
      lengths are unbounded.
    """
    secure: bool = True
    seed: Optional[int] = None
    max_length: Optional[int] = None

    def __post_init__(self):
        """Validate field types and combinations."""
        if not isinstance(self.secure, bool):
            raise ConfigError(f"secure must be a boolean, got {self.secure!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.seed is not None and self.secure:
            raise ConfigError("seed requires secure=False")
        if self.max_length is not None:
            if not _is_int(self.max_length):
                raise ConfigError(
                    f"max_length must be an integer, got {self.max_length!r}"
                )
            if self.max_length < 0:
                raise ConfigError(
                    f"max_length must be non-negative, got {self.max_length}"
                )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        return {key: value for key, value in self.__dict__.items() if value is not None}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GeneratorConfig":
        """
        Create from dictionary. Unknown keys are ignored.

        A seed without an explicit secure flag selects the non-secure source.
        """
        return cls(
            secure=data.get("secure", data.get("seed") is None),
            seed=data.get("seed"),
            max_length=data.get("max_length"),
        )

    @classmethod
    def from_yaml(cls, path: str | Path) -> "GeneratorConfig":
        """Create from a YAML file. An empty file yields the defaults."""
        return cls.from_dict(_read_yaml(Path(path)))

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """
        Create from the environment.

        Reads the YAML file named by RANDID_CONFIG (if set), then applies
        the RANDID_SECURE, RANDID_SEED and RANDID_MAX_LENGTH overrides.
        """
        data: dict[str, Any] = {}
        config_path = os.environ.get(ENV_CONFIG_PATH)
        if config_path:
            data = _read_yaml(Path(config_path))
        data.update(_env_overrides())
        return cls.from_dict(data)

    def create_rng(self) -> random.Random:
        """Return the random source described by this configuration."""
        if self.secure:
            return random.SystemRandom()
        return random.Random(self.seed)


def load_config(path: str | Path | None = None) -> GeneratorConfig:
    """
    Load generator configuration.

    Args:
        path: YAML file to read. When omitted, RANDID_CONFIG is consulted.

    Returns:
        GeneratorConfig with environment overrides applied
    """
    logger = config_logger()
    if path is None:
        config = GeneratorConfig.from_env()
    else:
        data = _read_yaml(Path(path))
        data.update(_env_overrides())
        config = GeneratorConfig.from_dict(data)
    logger.info("Generator config loaded", path=str(path) if path else None, **config.to_dict())
    return config


def _read_yaml(path: Path) -> dict[str, Any]:
    """Read a YAML mapping from disk."""
    logger = config_logger()
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        logger.error("Config file unreadable", path=str(path), error=str(e))
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        logger.error("Config file is not valid YAML", path=str(path), error=str(e))
        raise ConfigError(f"YAML error in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.error("Config file is not a mapping", path=str(path))
        raise ConfigError(f"Config file {path} must contain a mapping")
    return data


def _env_overrides() -> dict[str, Any]:
    """Collect overrides from RANDID_* environment variables."""
    overrides: dict[str, Any] = {}

    secure = os.environ.get(ENV_SECURE)
    if secure is not None:
        overrides["secure"] = _parse_bool(ENV_SECURE, secure)

    seed = os.environ.get(ENV_SEED)
    if seed is not None:
        overrides["seed"] = _parse_int(ENV_SEED, seed)

    max_length = os.environ.get(ENV_MAX_LENGTH)
    if max_length is not None:
        overrides["max_length"] = _parse_int(ENV_MAX_LENGTH, max_length)

    return overrides


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _parse_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as e:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from e
