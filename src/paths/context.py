"""Resolved directories that the configuration layer depends on."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from paths.platform import platform_config_root, platform_data_root

logger = logging.getLogger(__name__)

APP_DIR_NAME = "karaoke-rs"
CONFIG_FILE_NAME = "config.yaml"
SONGS_DIR_NAME = "songs"


@dataclass(frozen=True)
class ResolutionContext:
    """
    Directories used to build the default configuration.

    Computed once at startup and passed explicitly into the resolver, so
    tests can inject temporary locations.
    """

    config_file: Path
    data_dir: Path
    song_dir: Path

    @classmethod
    def for_roots(cls, config_root: Path, data_root: Path) -> "ResolutionContext":
        """
        Build the application layout below the given roots.

        Args:
            config_root: Per-user configuration root (e.g. ``~/.config``).
            data_root: Per-user data root (e.g. ``~/.local/share``).

        Returns:
            Context with ``<config_root>/karaoke-rs/config.yaml``,
            ``<data_root>/karaoke-rs`` and ``<data_root>/karaoke-rs/songs``.
        """
        data_dir = Path(data_root) / APP_DIR_NAME
        return cls(
            config_file=Path(config_root) / APP_DIR_NAME / CONFIG_FILE_NAME,
            data_dir=data_dir,
            song_dir=data_dir / SONGS_DIR_NAME,
        )

    @property
    def config_dir(self) -> Path:
        return self.config_file.parent

    def ensure_directories(self) -> None:
        """
        Create the config and data directories (recursively) if missing.

        The song directory is left to the library scanner.

        Raises:
            OSError: If a directory cannot be created.
        """
        for directory in (self.config_dir, self.data_dir):
            directory.mkdir(parents=True, exist_ok=True)
            logger.debug(f"Ensured directory exists: {directory}")


@lru_cache(maxsize=1)
def platform_context() -> ResolutionContext:
    """
    Resolve the platform context once per process and create its directories.

    Raises:
        OSError: If a directory cannot be created.
    """
    context = ResolutionContext.for_roots(platform_config_root(), platform_data_root())
    context.ensure_directories()
    return context
