"""
Configuration Management

Loads and persists the YAML configuration: Spotify credentials, the selected
playback device, keybindings, icons and display settings.
"""

import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from spotmenu.core.errors import ConfigNotFound, ConfigurationError
from spotmenu.core.store import write_text_atomic

logger = logging.getLogger("ConfigManager")

CONFIG_DIR_NAME = "spotmenu"
CONFIG_FILE_NAME = "spotmenu.yaml"

# Default icon set (requires a Nerd Font)
DEFAULT_ICONS = {
    "album": "\uf524",
    "device": "\uf620",
    "liked_tracks": "\uf7d4",
    "next": "\u23ed",
    "pause": "\u23f8",
    "play": "\u25b6",
    "player": "\uf90c",
    "playlist": "\uf03a",
    "previous": "\u23ee",
    "queue": "\uf910",
    "recently_played": "\uf64f",
    "repeat_context": "\uf955",
    "repeat_off": "\uf956",
    "repeat_track": "\uf957",
    "search": "\uf422",
    "shuffle_off": "\uf99d",
    "shuffle_on": "\uf99e",
    "track": "\uf001",
}

DEFAULT_KEYBINDINGS = {
    "next_page": "Alt+Right",
    "previous_page": "Alt+Left",
    "add_to_queue": "Alt+d",
    "toggle_pause_resume": "Alt+space",
    "next_track": "Alt+n",
    "previous_track": "Alt+p",
    "toggle_repeat": "Alt+r",
    "toggle_shuffle": "Alt+z",
    "play_album": "Alt+p",
    "play_playlist": "Alt+p",
    "play_track": "Alt+t",
    "toggle_search_type": "Alt+s",
}


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _snake(name: str) -> str:
    out = []
    for char in name:
        if char.isupper():
            out.append("_")
            out.append(char.lower())
        else:
            out.append(char)
    return "".join(out)


class _Section:
    """Dataclass mixin mapping camelCase YAML keys onto snake_case fields."""

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]):
        if not isinstance(data, dict):
            data = {}
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _snake(key)
            if name in known and value is not None:
                kwargs[name] = str(value)
            else:
                logger.debug(f"Ignoring unknown config key: {key}")
        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return {_camel(k): v for k, v in asdict(self).items()}


@dataclass
class SpotifyCredentials(_Section):
    client_id: str = ""
    client_secret: str = ""
    refresh_token: str = ""


@dataclass
class Device(_Section):
    """A saved Spotify playback device."""

    id: str = ""
    name: str = ""


@dataclass
class Keybindings(_Section):
    """rofi keystrings for each logical action."""

    next_page: str = ""
    previous_page: str = ""
    add_to_queue: str = ""
    toggle_pause_resume: str = ""
    next_track: str = ""
    previous_track: str = ""
    toggle_repeat: str = ""
    toggle_shuffle: str = ""
    play_album: str = ""
    play_playlist: str = ""
    play_track: str = ""
    toggle_search_type: str = ""

    def fill_defaults(self):
        for name, default in DEFAULT_KEYBINDINGS.items():
            if not getattr(self, name):
                setattr(self, name, default)


@dataclass
class Icons(_Section):
    album: str = ""
    device: str = ""
    liked_tracks: str = ""
    next: str = ""
    pause: str = ""
    play: str = ""
    player: str = ""
    playlist: str = ""
    previous: str = ""
    queue: str = ""
    recently_played: str = ""
    repeat_context: str = ""
    repeat_off: str = ""
    repeat_track: str = ""
    search: str = ""
    shuffle_off: str = ""
    shuffle_on: str = ""
    track: str = ""

    def fill_defaults(self):
        for name, default in DEFAULT_ICONS.items():
            if not getattr(self, name):
                setattr(self, name, default)


@dataclass
class Config:
    """Application configuration."""

    spotify: SpotifyCredentials = field(default_factory=SpotifyCredentials)
    device: Device = field(default_factory=Device)
    theme: str = ""
    keybindings: Keybindings = field(default_factory=Keybindings)
    icons: Icons = field(default_factory=Icons)
    show_keybindings: bool = False

    def fill_defaults(self):
        self.keybindings.fill_defaults()
        self.icons.fill_defaults()

    def is_incomplete(self) -> bool:
        """True when setup has to run before the app can talk to Spotify."""
        return not (
            self.spotify.client_id
            and self.spotify.client_secret
            and self.spotify.refresh_token
        )

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Config":
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration root must be a mapping")
        config = cls(
            spotify=SpotifyCredentials.from_dict(data.get("spotify")),
            device=Device.from_dict(data.get("device")),
            theme=str(data.get("theme") or ""),
            keybindings=Keybindings.from_dict(data.get("keybindings")),
            icons=Icons.from_dict(data.get("icons")),
            show_keybindings=bool(data.get("showKeybindings", False)),
        )
        config.fill_defaults()
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spotify": self.spotify.to_dict(),
            "device": self.device.to_dict(),
            "theme": self.theme,
            "keybindings": self.keybindings.to_dict(),
            "icons": self.icons.to_dict(),
            "showKeybindings": self.show_keybindings,
        }


def default_config_path() -> Path:
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / CONFIG_DIR_NAME / CONFIG_FILE_NAME
    return Path.home() / ".config" / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class ConfigManager:
    """Reads and writes the configuration file."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else default_config_path()

    def load(self) -> Config:
        """Load configuration from file."""
        if not self.path.exists():
            raise ConfigNotFound(f"Config file not found: {self.path}")

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to read {self.path}: {e}") from e

        config = Config.from_dict(data)
        logger.info(f"Loaded configuration from {self.path}")
        return config

    def save(self, config: Config):
        """Save configuration to file."""
        config.fill_defaults()
        raw = yaml.safe_dump(
            config.to_dict(), allow_unicode=True, sort_keys=False
        )
        try:
            write_text_atomic(self.path, raw)
        except OSError as e:
            raise ConfigurationError(f"Failed to write {self.path}: {e}") from e
        logger.info(f"Configuration saved to {self.path}")

