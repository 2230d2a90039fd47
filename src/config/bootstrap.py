"""First-run creation of the configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from config.errors import EncodeFailure, IoFailure
from config.models import Configuration
from shared.yaml_utils import dump_yaml

logger = logging.getLogger(__name__)


def create_config_if_not_exists(config_path: Path, default: Configuration) -> bool:
    """
    Write ``default`` to ``config_path`` unless something already exists there.

    Parent directories are created as needed. An existing file is never
    touched, so repeated calls are no-ops.

    Args:
        config_path: Target config file.
        default: Configuration to serialize on first run.

    Returns:
        True if the file was written, False if it already existed.

    Raises:
        IoFailure: If the directory cannot be created or the file written.
        EncodeFailure: If ``default`` cannot be serialized.
    """
    if config_path.exists():
        logger.debug(f"Config file already exists: {config_path}")
        return False

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise IoFailure(
            f"Could not create config directory {config_path.parent}: {e}",
            path=config_path.parent,
        ) from e

    try:
        document = dump_yaml(default.to_dict())
    except yaml.YAMLError as e:
        raise EncodeFailure(
            f"Could not serialize default config: {e}", path=config_path
        ) from e

    try:
        config_path.write_text(document, encoding="utf-8")
    except OSError as e:
        raise IoFailure(
            f"Could not write config file {config_path}: {e}", path=config_path
        ) from e

    logger.info(f"Wrote default config file: {config_path}")
    return True
