"""
=============================================================================
CODEC CONFIGURATION
=============================================================================

Settings for the codec and its command line front-end.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION SOURCES                            │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                     │
    │   Priority (highest to lowest):                                     │
    │                                                                     │
    │   1. Command-line arguments                                         │
    │      └── python -m httpcodec --log-level DEBUG parse req.txt        │
    │                                                                     │
    │   2. Environment variables                                          │
    │      └── HTTPCODEC_LOG_LEVEL=DEBUG python -m httpcodec ...          │
    │                                                                     │
    │   3. Default values (in this dataclass)                             │
    │                                                                     │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class CodecConfig:
    """
    Configuration for request parsing and logging.

    Development:
        CodecConfig(log_level="DEBUG")

    Behind a server that must bound memory per request:
        CodecConfig(max_request_size=1024 * 1024)
    """

    log_level: str = "INFO"
    """Logging level name for the ``httpcodec`` logger."""

    log_format: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    max_request_size: Optional[int] = None
    """
    Largest raw request accepted, in bytes. None disables the check.
    Larger requests raise RequestTooLarge (413).
    """

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """
        Create configuration from environment variables.

        HTTPCODEC_LOG_LEVEL         Logging level (default: INFO)
        HTTPCODEC_MAX_REQUEST_SIZE  Size limit in bytes (default: unlimited)
        """
        max_size = os.getenv("HTTPCODEC_MAX_REQUEST_SIZE")
        return cls(
            log_level=os.getenv("HTTPCODEC_LOG_LEVEL", "INFO"),
            max_request_size=int(max_size) if max_size else None,
        )

    def validate(self) -> None:
        """Raise ValueError on bad settings, before anything is parsed."""
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. Must be one of {LOG_LEVELS}."
            )

        if self.max_request_size is not None and self.max_request_size <= 0:
            raise ValueError("max_request_size must be > 0")


def setup_logging(config: CodecConfig) -> None:
    """Configure root logging and the ``httpcodec`` logger level."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format=config.log_format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("httpcodec").setLevel(level)
