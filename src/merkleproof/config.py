"""merkleproof configuration.

All settings can be overridden via environment variables with the
MERKLEPROOF_ prefix. Library code takes explicit arguments; only the CLI
reads the environment.
"""
import codecs
import logging
import os
from dataclasses import dataclass

from .core.constants import DEFAULT_ENCODING, DEFAULT_LOG_LEVEL, ENV_PREFIX, LOG_FORMAT

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MerkleConfig:
    """Tree and CLI configuration."""

    # Text payloads are encoded with this before hashing
    encoding: str = DEFAULT_ENCODING

    # digest -> first index map instead of a linear scan
    index_lookup: bool = True

    # Level for the merkleproof logger namespace
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "MerkleConfig":
        """Load configuration from environment variables."""
        config = cls()

        if f"{ENV_PREFIX}ENCODING" in os.environ:
            config.encoding = os.environ[f"{ENV_PREFIX}ENCODING"]
        if f"{ENV_PREFIX}INDEX_LOOKUP" in os.environ:
            config.index_lookup = os.environ[f"{ENV_PREFIX}INDEX_LOOKUP"].lower() == "true"
        if f"{ENV_PREFIX}LOG_LEVEL" in os.environ:
            config.log_level = os.environ[f"{ENV_PREFIX}LOG_LEVEL"].upper()

        return config

    def validate(self) -> list[str]:
        """Validate configuration. Returns list of errors."""
        errors = []

        try:
            codecs.lookup(self.encoding)
        except LookupError:
            errors.append(f"Unknown encoding: {self.encoding}")

        if self.log_level.upper() not in _LOG_LEVELS:
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def configure_logging(self, verbose: bool = False) -> None:
        """Route merkleproof.* log records to stderr at the configured level."""
        level = logging.DEBUG if verbose else getattr(logging, self.log_level.upper())
        logger = logging.getLogger("merkleproof")
        logger.setLevel(level)
        if not logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(handler)


DEFAULT_CONFIG = MerkleConfig()
