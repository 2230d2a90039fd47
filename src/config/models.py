"""Configuration records for the karaoke player."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_PORT = 8080
DEFAULT_PORT_WS = 9000
DEFAULT_SONG_FORMAT = "[*] - [Artist] - [Title]"
DEFAULT_PLAYER_SCALE = 1.5


@dataclass
class PlayerConfig:
    """Display settings for the native player window."""

    fullscreen: bool = False
    scale: float = DEFAULT_PLAYER_SCALE
    disable_background: bool = False


@dataclass
class Configuration:
    """
    Fully resolved player configuration.

    Built fresh on every resolution from defaults, the config file and
    runtime overrides. ``port`` and ``port_ws`` are not required to differ.
    """

    song_path: Path
    data_path: Path
    no_collection_update: bool = False
    use_web_player: bool = False
    port: int = DEFAULT_PORT
    port_ws: int = DEFAULT_PORT_WS
    song_format: str = DEFAULT_SONG_FORMAT
    player: PlayerConfig = field(default_factory=PlayerConfig)

    def to_dict(self) -> Dict[str, Any]:
        """
        Render as a plain mapping in field order, paths as strings.

        This is the layout written to ``config.yaml``.
        """
        data: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, Path):
                value = str(value)
            elif isinstance(value, PlayerConfig):
                value = {p.name: getattr(value, p.name) for p in fields(value)}
            data[f.name] = value
        return data


Port = Annotated[int, Field(ge=0, le=65535)]


class PartialPlayerConfig(BaseModel):
    """``player`` section as found in the file; absent keys stay ``None``."""

    model_config = ConfigDict(extra="ignore")

    fullscreen: Optional[bool] = None
    scale: Optional[float] = None
    disable_background: Optional[bool] = None


class PartialConfiguration(BaseModel):
    """
    Decoded contents of a config file.

    Every field is optional so that only keys present in the file take part
    in the merge. Unknown keys are ignored. Scalars are converted where the
    conversion is lossless (``"8080"`` to 8080, ``"true"`` to True, 123 to
    ``"123"``); a value that cannot be converted fails the whole record.
    """

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)

    song_path: Optional[str] = None
    data_path: Optional[str] = None
    no_collection_update: Optional[bool] = None
    use_web_player: Optional[bool] = None
    port: Optional[Port] = None
    port_ws: Optional[Port] = None
    song_format: Optional[str] = None
    player: Optional[PartialPlayerConfig] = None
