"""
@meta
name: shared_argument_parsing
type: utility
domain: shared
responsibility:
  - Provide shared argument parsing utilities for CLI scripts
  - Add the runtime override flags accepted by the player
inputs:
  - ArgumentParser instances
outputs:
  - Configured parsers
tags:
  - utility
  - shared
  - cli
lifecycle:
  status: active
"""

"""Shared argument parsing utilities for CLI scripts."""

import argparse
from pathlib import Path

MAX_PORT = 65535


def port_number(value: str) -> int:
    """argparse type for a 16-bit unsigned port."""
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid port number: {value!r}")
    if not 0 <= port <= MAX_PORT:
        raise argparse.ArgumentTypeError(
            f"Port must be between 0 and {MAX_PORT}, got {port}"
        )
    return port


def existing_directory(value: str) -> Path:
    """argparse type for a directory that must already exist."""
    path = Path(value)
    if not path.is_dir():
        raise argparse.ArgumentTypeError(f"Directory not found: {path}")
    return path


def add_config_file_argument(parser: argparse.ArgumentParser) -> None:
    """Add --config argument to parser."""
    parser.add_argument(
        "-c",
        "--config",
        dest="config_path",
        type=Path,
        default=None,
        help="Path to config.yaml (default: platform config directory)",
    )


def add_library_arguments(parser: argparse.ArgumentParser) -> None:
    """Add song library and data directory overrides to parser."""
    parser.add_argument(
        "-s",
        "--songs",
        dest="song_path",
        type=existing_directory,
        default=None,
        help="Song library directory override",
    )
    parser.add_argument(
        "-d",
        "--data",
        dest="data_path",
        type=existing_directory,
        default=None,
        help="Data directory override",
    )
    parser.add_argument(
        "-r",
        "--refresh-collection",
        dest="refresh_collection",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Rescan the song library on startup",
    )


def add_player_arguments(parser: argparse.ArgumentParser) -> None:
    """Add player and server overrides to parser."""
    parser.add_argument(
        "-w",
        "--use-web-player",
        dest="use_web_player",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Use the browser based player instead of the native window",
    )
    parser.add_argument(
        "-p",
        "--port",
        type=port_number,
        default=None,
        help="HTTP server port override",
    )
    parser.add_argument(
        "--port-ws",
        dest="port_ws",
        type=port_number,
        default=None,
        help="WebSocket server port override",
    )


def add_log_level_argument(parser: argparse.ArgumentParser) -> None:
    """Add --log-level argument to parser."""
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
