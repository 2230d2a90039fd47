"""Layered configuration resolution: defaults, config file, runtime overrides."""

from .errors import ConfigError, DecodeFailure, EncodeFailure, IoFailure
from .models import (
    Configuration,
    PartialConfiguration,
    PartialPlayerConfig,
    PlayerConfig,
)
from .defaults import default_config
from .bootstrap import create_config_if_not_exists
from .merging import (
    apply_partial,
    decode_config_file,
    decode_mapping,
    merge_default_with_file,
)
from .overrides import ConfigOverrides, apply_overrides
from .loader import load_config, resolve_config, resolve_context

__all__ = [
    "ConfigError",
    "IoFailure",
    "EncodeFailure",
    "DecodeFailure",
    "Configuration",
    "PlayerConfig",
    "PartialConfiguration",
    "PartialPlayerConfig",
    "default_config",
    "create_config_if_not_exists",
    "decode_config_file",
    "decode_mapping",
    "apply_partial",
    "merge_default_with_file",
    "ConfigOverrides",
    "apply_overrides",
    "load_config",
    "resolve_config",
    "resolve_context",
]
