"""Shared utilities used by the config resolver and its command line."""

from .logging_utils import LOG_FORMAT, parse_log_level, setup_logging
from .argument_parsing import (
    add_config_file_argument,
    add_library_arguments,
    add_player_arguments,
    add_log_level_argument,
    existing_directory,
    port_number,
)
from .yaml_utils import dump_yaml, load_yaml

__all__ = [
    "LOG_FORMAT",
    "parse_log_level",
    "setup_logging",
    "add_config_file_argument",
    "add_library_arguments",
    "add_player_arguments",
    "add_log_level_argument",
    "existing_directory",
    "port_number",
    "dump_yaml",
    "load_yaml",
]
