"""
@meta
name: config_loader
type: utility
domain: config
responsibility:
  - Resolve the player configuration from defaults, config file and overrides
  - Create the default config file on first run
  - Report the resolved locations and flags
inputs:
  - Optional config file path
  - Optional runtime overrides (CLI arguments)
outputs:
  - Configuration dataclass
tags:
  - utility
  - config
  - loading
lifecycle:
  status: active
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from config.bootstrap import create_config_if_not_exists
from config.defaults import default_config
from config.errors import IoFailure
from config.merging import merge_default_with_file
from config.models import Configuration
from config.overrides import ConfigOverrides, apply_overrides
from paths.context import ResolutionContext, platform_context

logger = logging.getLogger(__name__)


def resolve_context(context: Optional[ResolutionContext] = None) -> ResolutionContext:
    """
    Return ``context`` or the platform context, computed once per process.

    Raises:
        IoFailure: If the platform directories cannot be determined or created.
    """
    if context is not None:
        return context
    try:
        return platform_context()
    except OSError as e:
        raise IoFailure(f"Could not prepare platform directories: {e}") from e


def resolve_config(
    config_path: Optional[Path],
    overrides: ConfigOverrides,
    *,
    context: Optional[ResolutionContext] = None,
) -> Configuration:
    """
    Bootstrap the config file, merge it over the defaults, apply overrides.

    Errors from bootstrapping or decoding propagate unchanged; there is no
    partial result.

    Args:
        config_path: Config file to use instead of the platform default.
        overrides: Runtime overrides to apply last.
        context: Directories for defaults; the platform context if omitted.

    Raises:
        IoFailure: Filesystem errors while preparing or reading the file.
        EncodeFailure: If the default file cannot be serialized.
        DecodeFailure: If the existing file is malformed.
    """
    context = resolve_context(context)
    config_file = Path(config_path) if config_path is not None else context.config_file
    logger.info(f"Using config file: {config_file}")

    default = default_config(context)
    create_config_if_not_exists(config_file, default)
    config = merge_default_with_file(default, config_file)
    apply_overrides(config, overrides)

    logger.info(f"Using song dir: {config.song_path}")
    logger.info(f"Using data dir: {config.data_path}")
    logger.info(f"Collection to be refreshed: {not config.no_collection_update}")
    logger.info(f"Use web player: {config.use_web_player}")
    return config


def load_config(
    config_path: Optional[Path] = None,
    song_path: Optional[Path] = None,
    data_path: Optional[Path] = None,
    refresh_collection: Optional[bool] = None,
    use_web_player: Optional[bool] = None,
    port: Optional[int] = None,
    port_ws: Optional[int] = None,
    *,
    context: Optional[ResolutionContext] = None,
) -> Configuration:
    """
    Load the configuration file, then apply any supplied overrides.

    Args:
        config_path: Config file to use instead of the platform default.
        song_path: Song library directory override.
        data_path: Data directory override.
        refresh_collection: Whether to rescan the library on startup;
            stored inverted as ``no_collection_update``.
        use_web_player: Browser player instead of the native window.
        port: HTTP server port override.
        port_ws: WebSocket server port override.
        context: Directories for defaults; the platform context if omitted.

    Returns:
        A freshly built ``Configuration``.
    """
    overrides = ConfigOverrides(
        song_path=song_path,
        data_path=data_path,
        refresh_collection=refresh_collection,
        use_web_player=use_web_player,
        port=port,
        port_ws=port_ws,
    )
    return resolve_config(config_path, overrides, context=context)
