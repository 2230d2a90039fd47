"""Filesystem locations for the player configuration (single authority)."""

from .context import (
    APP_DIR_NAME,
    CONFIG_FILE_NAME,
    SONGS_DIR_NAME,
    ResolutionContext,
    platform_context,
)
from .platform import platform_config_root, platform_data_root

__all__ = [
    # Context
    "APP_DIR_NAME",
    "CONFIG_FILE_NAME",
    "SONGS_DIR_NAME",
    "ResolutionContext",
    "platform_context",
    # Platform roots
    "platform_config_root",
    "platform_data_root",
]
