"""Runtime overrides applied on top of the merged configuration."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from config.models import Configuration


@dataclass(frozen=True)
class ConfigOverrides:
    """
    Caller-supplied values that win over both defaults and the config file.

    ``None`` means "not supplied". ``refresh_collection`` is expressed as
    "should refresh" and is stored inverted as ``no_collection_update``.
    ``song_format`` and ``player`` can only be set in the config file.
    """

    song_path: Optional[Path] = None
    data_path: Optional[Path] = None
    refresh_collection: Optional[bool] = None
    use_web_player: Optional[bool] = None
    port: Optional[int] = None
    port_ws: Optional[int] = None

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> "ConfigOverrides":
        """Collect overrides from parsed CLI arguments; missing attributes count as absent."""
        return cls(
            song_path=getattr(args, "song_path", None),
            data_path=getattr(args, "data_path", None),
            refresh_collection=getattr(args, "refresh_collection", None),
            use_web_player=getattr(args, "use_web_player", None),
            port=getattr(args, "port", None),
            port_ws=getattr(args, "port_ws", None),
        )


def apply_overrides(config: Configuration, overrides: ConfigOverrides) -> Configuration:
    """
    Apply runtime overrides to configuration in-place.

    Args:
        config: Merged configuration to modify.
        overrides: Values supplied by the caller.

    Returns:
        The same ``config`` instance, for chaining.
    """
    if overrides.song_path is not None:
        config.song_path = Path(overrides.song_path)
    if overrides.data_path is not None:
        config.data_path = Path(overrides.data_path)
    if overrides.refresh_collection is not None:
        config.no_collection_update = not overrides.refresh_collection
    if overrides.use_web_player is not None:
        config.use_web_player = overrides.use_web_player
    if overrides.port is not None:
        config.port = overrides.port
    if overrides.port_ws is not None:
        config.port_ws = overrides.port_ws
    return config
