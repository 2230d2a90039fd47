"""
@meta
name: shared_logging_utils
type: utility
domain: shared
responsibility:
  - Provide consistent logging for the karaoke config tooling
  - Configure the root logger with standardized formatting
inputs:
  - Log level names
outputs:
  - Configured root logger
tags:
  - utility
  - shared
  - logging
lifecycle:
  status: active
"""

"""Shared logging utilities for consistent logging across scripts."""

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_log_level(level: Union[str, int]) -> int:
    """
    Translate a level name such as ``"debug"`` into its numeric value.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(level: Union[str, int] = "INFO") -> None:
    """
    Configure root logging for a script entry point.

    Library modules log through ``logging.getLogger(__name__)`` and inherit
    this configuration.
    """
    numeric_level = parse_log_level(level)

    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric_level)
