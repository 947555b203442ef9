import pytest
import yaml

from spotmenu.core.config import (
    DEFAULT_ICONS,
    DEFAULT_KEYBINDINGS,
    Config,
    ConfigManager,
    default_config_path,
)
from spotmenu.core.errors import ConfigNotFound, ConfigurationError


class TestConfig:
    def test_defaults_are_filled(self):
        config = Config.from_dict({})
        assert config.keybindings.next_page == DEFAULT_KEYBINDINGS["next_page"]
        assert config.icons.track == DEFAULT_ICONS["track"]
        assert config.show_keybindings is False

    def test_camel_case_keys(self):
        config = Config.from_dict(
            {
                "spotify": {"clientId": "id", "clientSecret": "secret", "refreshToken": "rt"},
                "device": {"id": "dev1", "name": "Laptop"},
                "keybindings": {"addToQueue": "Alt+q"},
                "icons": {"likedTracks": "L"},
                "showKeybindings": True,
                "theme": "/themes/x.rasi",
            }
        )
        assert config.spotify.refresh_token == "rt"
        assert config.device.name == "Laptop"
        assert config.keybindings.add_to_queue == "Alt+q"
        assert config.keybindings.next_track == "Alt+n"
        assert config.icons.liked_tracks == "L"
        assert config.show_keybindings is True
        assert config.theme == "/themes/x.rasi"

    def test_to_dict_uses_camel_case(self):
        data = Config.from_dict({}).to_dict()
        assert "refreshToken" in data["spotify"]
        assert "toggleSearchType" in data["keybindings"]
        assert "showKeybindings" in data

    @pytest.mark.parametrize(
        "spotify, incomplete",
        [
            ({}, True),
            ({"clientId": "id", "clientSecret": "s"}, True),
            ({"clientId": "id", "clientSecret": "s", "refreshToken": "rt"}, False),
        ],
    )
    def test_is_incomplete(self, spotify, incomplete):
        assert Config.from_dict({"spotify": spotify}).is_incomplete() is incomplete

    def test_non_mapping_root(self):
        with pytest.raises(ConfigurationError):
            Config.from_dict(["not", "a", "mapping"])


class TestConfigManager:
    def test_missing_file(self, config_manager):
        with pytest.raises(ConfigNotFound):
            config_manager.load()

    def test_round_trip(self, config_manager, config):
        config.device.id = "dev1"
        config.device.name = "Laptop"
        config_manager.save(config)

        loaded = config_manager.load()

        assert loaded == config
        assert config_manager.path.exists()
        assert not list(config_manager.path.parent.glob("*.tmp"))

    def test_saved_file_is_private(self, config_manager, config):
        config_manager.save(config)
        assert config_manager.path.stat().st_mode & 0o777 == 0o600

    def test_saved_file_is_yaml(self, config_manager, config):
        config_manager.save(config)
        raw = yaml.safe_load(config_manager.path.read_text(encoding="utf-8"))
        assert raw["spotify"]["clientId"] == "id"

    def test_invalid_yaml(self, config_manager):
        config_manager.path.parent.mkdir(parents=True)
        config_manager.path.write_text("spotify: [unclosed", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            config_manager.load()

    def test_xdg_config_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert default_config_path() == tmp_path / "spotmenu" / "spotmenu.yaml"
        assert ConfigManager().path == tmp_path / "spotmenu" / "spotmenu.yaml"
