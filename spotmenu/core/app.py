"""
Application context shared by every screen.
"""

from dataclasses import dataclass

from spotmenu.core.config import Config, ConfigManager
from spotmenu.core.player import Player
from spotmenu.core.spotify import SpotifyClient


@dataclass
class App:
    config: Config
    config_manager: ConfigManager
    client: SpotifyClient
    player: Player

    @classmethod
    def from_config(cls, config: Config, config_manager: ConfigManager) -> "App":
        client = SpotifyClient(
            config.spotify.refresh_token,
            config.spotify.client_id,
            config.spotify.client_secret,
        )
        return cls(
            config=config,
            config_manager=config_manager,
            client=client,
            player=Player(client, config.device.id),
        )
