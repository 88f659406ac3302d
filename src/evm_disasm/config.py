"""Environment configuration loading."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from evm_disasm.analysis.reader import DEFAULT_CHUNK_SIZE

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigError(Exception):
    """Raised when configuration is invalid."""


@dataclass(frozen=True, slots=True)
class Config:
    rpc_url: str = "https://mainnet.base.org"
    log_level: int = logging.WARNING
    read_chunk_size: int = DEFAULT_CHUNK_SIZE


def load_config() -> Config:
    """Load configuration from environment variables (and a .env file).

    Raises ConfigError if LOG_LEVEL or READ_CHUNK_SIZE is invalid.
    """
    load_dotenv(find_dotenv(usecwd=True))

    level_name = os.environ.get("LOG_LEVEL", "WARNING").strip().upper()
    if level_name not in _LOG_LEVELS:
        raise ConfigError(
            f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {level_name!r}"
        )

    raw_chunk = os.environ.get("READ_CHUNK_SIZE", "")
    try:
        chunk_size = int(raw_chunk) if raw_chunk else DEFAULT_CHUNK_SIZE
    except ValueError as e:
        raise ConfigError(f"READ_CHUNK_SIZE must be an integer, got {raw_chunk!r}") from e
    if chunk_size <= 0:
        raise ConfigError(f"READ_CHUNK_SIZE must be positive, got {chunk_size}")

    return Config(
        rpc_url=os.environ.get("RPC_URL", "https://mainnet.base.org"),
        log_level=getattr(logging, level_name),
        read_chunk_size=chunk_size,
    )
