"""Layering of config file values over the built-in defaults."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from config.errors import DecodeFailure, IoFailure
from config.models import Configuration, PartialConfiguration
from shared.yaml_utils import load_yaml


def decode_config_file(config_path: Path) -> PartialConfiguration:
    """
    Decode a YAML config file into a record of optional fields.

    An empty document decodes to a record with every field absent. Unknown
    keys are ignored. A present key of the wrong type fails the whole decode.

    Raises:
        IoFailure: If the file cannot be read.
        DecodeFailure: On invalid YAML, a non-mapping document, or a field
            with an incompatible type.
    """
    try:
        raw = load_yaml(config_path)
    except (yaml.YAMLError, UnicodeDecodeError) as e:
        raise DecodeFailure(f"Invalid YAML in {config_path}: {e}", path=config_path) from e
    except OSError as e:
        raise IoFailure(f"Could not read config file {config_path}: {e}", path=config_path) from e

    return decode_mapping(raw, config_path)


def decode_mapping(raw: Any, config_path: Path | None = None) -> PartialConfiguration:
    """
    Validate an already parsed YAML document.

    Raises:
        DecodeFailure: If ``raw`` is not a mapping or a field has the wrong type.
    """
    location = f" in {config_path}" if config_path is not None else ""
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise DecodeFailure(
            f"Config{location} must be a mapping, got {type(raw).__name__}",
            path=config_path,
        )
    try:
        return PartialConfiguration.model_validate(raw)
    except ValidationError as e:
        raise DecodeFailure(f"Invalid config{location}: {e}", path=config_path) from e


def apply_partial(base: Configuration, partial: PartialConfiguration) -> Configuration:
    """
    Overlay every field present in ``partial`` onto a copy of ``base``.

    ``player`` is merged key by key, so a file that only sets
    ``player.scale`` keeps the other player defaults. An empty string for
    ``song_path`` or ``data_path`` is treated like a missing key.
    """
    result = copy.deepcopy(base)

    # Empty paths count as absent
    if partial.song_path:
        result.song_path = Path(partial.song_path)
    if partial.data_path:
        result.data_path = Path(partial.data_path)
    if partial.no_collection_update is not None:
        result.no_collection_update = partial.no_collection_update
    if partial.use_web_player is not None:
        result.use_web_player = partial.use_web_player
    if partial.port is not None:
        result.port = partial.port
    if partial.port_ws is not None:
        result.port_ws = partial.port_ws
    if partial.song_format is not None:
        result.song_format = partial.song_format

    player = partial.player
    if player is not None:
        if player.fullscreen is not None:
            result.player.fullscreen = player.fullscreen
        if player.scale is not None:
            result.player.scale = float(player.scale)
        if player.disable_background is not None:
            result.player.disable_background = player.disable_background

    return result


def merge_default_with_file(default: Configuration, config_path: Path) -> Configuration:
    """
    Start from ``default`` and overlay the values found in ``config_path``.

    Defaults are always applied first and the file second. A missing file
    leaves the defaults untouched.

    Raises:
        IoFailure: If the file exists but cannot be read.
        DecodeFailure: If the file cannot be decoded.
    """
    if not config_path.is_file():
        return copy.deepcopy(default)
    return apply_partial(default, decode_config_file(config_path))
