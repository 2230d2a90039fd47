"""Tests for configuration records."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from config.models import (
    Configuration,
    PartialConfiguration,
    PlayerConfig,
)


class TestConfiguration:
    """Tests for the resolved Configuration dataclass."""

    def test_defaults(self):
        """Test non-path fields default to the built-in values."""
        config = Configuration(song_path=Path("/s"), data_path=Path("/d"))

        assert config.no_collection_update is False
        assert config.use_web_player is False
        assert config.port == 8080
        assert config.port_ws == 9000
        assert config.song_format == "[*] - [Artist] - [Title]"
        assert config.player == PlayerConfig(fullscreen=False, scale=1.5, disable_background=False)

    def test_player_not_shared_between_instances(self):
        """Test each Configuration gets its own PlayerConfig."""
        first = Configuration(song_path=Path("/s"), data_path=Path("/d"))
        second = Configuration(song_path=Path("/s"), data_path=Path("/d"))

        first.player.fullscreen = True

        assert second.player.fullscreen is False

    def test_to_dict_field_order_and_types(self):
        """Test to_dict keeps field order and renders paths as strings."""
        config = Configuration(song_path=Path("/music/songs"), data_path=Path("/music"))

        data = config.to_dict()

        assert list(data) == [
            "song_path",
            "data_path",
            "no_collection_update",
            "use_web_player",
            "port",
            "port_ws",
            "song_format",
            "player",
        ]
        assert data["song_path"] == str(Path("/music/songs"))
        assert data["player"] == {"fullscreen": False, "scale": 1.5, "disable_background": False}

    def test_same_port_for_http_and_websocket_allowed(self):
        """Test overlapping ports are accepted."""
        config = Configuration(song_path=Path("/s"), data_path=Path("/d"), port=9000, port_ws=9000)

        assert config.port == config.port_ws


class TestPartialConfiguration:
    """Tests for the decoded file record."""

    def test_empty_mapping_has_no_fields(self):
        """Test every field is absent for an empty document."""
        partial = PartialConfiguration.model_validate({})

        assert partial.model_dump() == {
            "song_path": None,
            "data_path": None,
            "no_collection_update": None,
            "use_web_player": None,
            "port": None,
            "port_ws": None,
            "song_format": None,
            "player": None,
        }

    def test_unknown_keys_ignored(self):
        """Test keys that are not configuration fields are dropped."""
        partial = PartialConfiguration.model_validate({"port": 1234, "volume": 11})

        assert partial.port == 1234
        assert not hasattr(partial, "volume")

    @pytest.mark.parametrize(
        "raw",
        [
            {"port": "not-a-number"},
            {"port": 8080.5},
            {"port": 70000},
            {"port": "70000"},
            {"port_ws": -1},
            {"use_web_player": "yes please"},
            {"no_collection_update": 2},
            {"song_path": ["a", "b"]},
            {"song_format": {"artist": "title"}},
            {"player": "fullscreen"},
            {"player": {"scale": "big"}},
            {"player": {"fullscreen": "sometimes"}},
        ],
    )
    def test_wrong_types_rejected(self, raw):
        """Test a value that cannot be converted fails the whole record."""
        with pytest.raises(ValidationError):
            PartialConfiguration.model_validate(raw)

    @pytest.mark.parametrize(
        "raw, field, expected",
        [
            ({"port": "8080"}, "port", 8080),
            ({"port_ws": 9000.0}, "port_ws", 9000),
            ({"use_web_player": "true"}, "use_web_player", True),
            ({"no_collection_update": "no"}, "no_collection_update", False),
            ({"no_collection_update": 1}, "no_collection_update", True),
            ({"song_path": 123}, "song_path", "123"),
            ({"song_format": 42}, "song_format", "42"),
        ],
    )
    def test_scalars_converted(self, raw, field, expected):
        """Test quoted numbers, quoted booleans and numeric strings are accepted."""
        partial = PartialConfiguration.model_validate(raw)

        assert getattr(partial, field) == expected
        assert type(getattr(partial, field)) is type(expected)

    def test_player_scalars_converted(self):
        """Test player values given as strings are converted."""
        partial = PartialConfiguration.model_validate(
            {"player": {"fullscreen": "true", "scale": "2.5", "disable_background": "off"}}
        )

        assert partial.player.fullscreen is True
        assert partial.player.scale == 2.5
        assert partial.player.disable_background is False

    def test_integer_scale_accepted(self):
        """Test an integer scale is a valid number."""
        partial = PartialConfiguration.model_validate({"player": {"scale": 2}})

        assert partial.player.scale == 2.0
        assert partial.player.fullscreen is None
