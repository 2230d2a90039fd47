"""Built-in default configuration."""

from config.models import Configuration, PlayerConfig
from paths.context import ResolutionContext


def default_config(context: ResolutionContext) -> Configuration:
    """Baseline configuration; only the two paths depend on ``context``."""
    return Configuration(
        song_path=context.song_dir,
        data_path=context.data_dir,
        player=PlayerConfig(),
    )
