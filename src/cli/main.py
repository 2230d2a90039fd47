"""
@meta
name: karaoke_config_cli
type: script
domain: config
responsibility:
  - Parse player command-line arguments
  - Resolve the configuration and print it as YAML
inputs:
  - Optional config file path
  - Runtime override flags
outputs:
  - Resolved configuration on stdout
tags:
  - entrypoint
  - config
lifecycle:
  status: active
"""

"""CLI script to resolve and print the player configuration."""

import argparse
import logging
import sys
from typing import List, Optional

from config import ConfigError, ConfigOverrides, resolve_config
from shared.argument_parsing import (
    add_config_file_argument,
    add_library_arguments,
    add_log_level_argument,
    add_player_arguments,
)
from shared.logging_utils import setup_logging
from shared.yaml_utils import dump_yaml

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all override flags."""
    parser = argparse.ArgumentParser(
        prog="karaoke-config",
        description="Resolve the karaoke player configuration",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    add_config_file_argument(parser)
    add_library_arguments(parser)
    add_player_arguments(parser)
    add_log_level_argument(parser)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        config = resolve_config(args.config_path, ConfigOverrides.from_namespace(args))
    except ConfigError as e:
        logger.error(str(e))
        return 1

    sys.stdout.write(dump_yaml(config.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
