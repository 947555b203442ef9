"""
Exception hierarchy for spotmenu.
"""

from typing import Optional


class SpotmenuError(Exception):
    """Base exception for spotmenu."""


class ConfigurationError(SpotmenuError):
    """The configuration file could not be read or written."""


class ConfigNotFound(ConfigurationError):
    """No configuration file exists yet; setup has to run first."""


class AuthError(SpotmenuError):
    """Token exchange with the Spotify accounts service failed."""


class SpotifyError(SpotmenuError):
    """A Web API request failed (transport error or non-success status)."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status

    def __str__(self):
        if self.status is not None:
            return f"{self.args[0]} (HTTP {self.status})"
        return self.args[0]


class LauncherProtocolError(SpotmenuError):
    """rofi exited with a status outside the selection protocol."""


class SetupCancelled(SpotmenuError):
    """The user interrupted the setup prompts."""


class FatalSessionError(SpotmenuError):
    """The session cannot continue, e.g. the player state is unreachable."""
