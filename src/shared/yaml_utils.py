from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml(path: Path) -> Any:
    """
    Load a YAML document from disk.

    Args:
        path: Absolute or relative path to a YAML file.

    Returns:
        Parsed YAML content. An empty document yields ``None``.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file cannot be parsed as valid YAML.
    """
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle)


def dump_yaml(data: Dict[str, Any]) -> str:
    """
    Serialize a mapping to a block-style YAML document.

    Keys keep their insertion order so the written file reads in the same
    order as the mapping was built.

    Raises:
        yaml.YAMLError: If a value cannot be represented.
    """
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
