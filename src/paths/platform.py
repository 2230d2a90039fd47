"""Platform-standard configuration and data roots."""

from pathlib import Path

from platformdirs import user_config_path, user_data_path


def platform_config_root() -> Path:
    """
    Resolve the per-user configuration root.

    ``$XDG_CONFIG_HOME`` or ``~/.config`` on Linux,
    ``~/Library/Application Support`` on macOS and the roaming
    ``%APPDATA%`` on Windows.
    """
    return user_config_path(appname=None, appauthor=False, roaming=True)


def platform_data_root() -> Path:
    """
    Resolve the per-user data root.

    ``$XDG_DATA_HOME`` or ``~/.local/share`` on Linux,
    ``~/Library/Application Support`` on macOS and the roaming
    ``%APPDATA%`` on Windows.
    """
    return user_data_path(appname=None, appauthor=False, roaming=True)
