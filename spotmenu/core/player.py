"""
Player controller for the selected Spotify device.
"""

import logging
from enum import Enum
from typing import Optional

from spotmenu.core.spotify import SpotifyClient

logger = logging.getLogger("Player")


class RepeatState(Enum):
    """Repeat mode options, in toggle order."""

    OFF = "off"
    CONTEXT = "context"
    TRACK = "track"

    @classmethod
    def parse(cls, value: str) -> Optional["RepeatState"]:
        try:
            return cls(value)
        except ValueError:
            return None

    def next(self) -> "RepeatState":
        """Cycle off -> context -> track -> off."""
        modes = [RepeatState.OFF, RepeatState.CONTEXT, RepeatState.TRACK]
        current_idx = modes.index(self)
        return modes[(current_idx + 1) % len(modes)]


class Player:
    """Intent-level playback operations bound to one device.

    Errors from the Web API are not handled here; callers decide how to
    report them.
    """

    def __init__(self, client: SpotifyClient, device: str = ""):
        self.client = client
        self.device = device

    def play_pause(self):
        """Pause when playing, resume otherwise.

        Reads the state and then acts on it, so a change made by another
        client in between is not noticed.
        """
        state = self.client.get_player()
        if state is not None and state.is_playing:
            logger.info("Pausing playback")
            self.client.pause(self.device)
        else:
            logger.info("Resuming playback")
            self.client.play(self.device)

    def toggle_repeat(self):
        state = self.client.get_player()
        if state is None:
            return

        current = RepeatState.parse(state.repeat_state)
        target = current.next() if current else RepeatState.OFF
        logger.info(f"Repeat: {state.repeat_state} -> {target.value}")
        self.client.set_repeat_mode(self.device, target.value)

    def toggle_shuffle(self):
        state = self.client.get_player()
        if state is None:
            return

        self.client.set_shuffle_state(self.device, not state.shuffle_state)

    def play_track(self, uri: str):
        self.client.play_track(uri, self.device)

    def play_context(self, context_uri: str, offset_uri: Optional[str] = None):
        """Play an album or playlist, optionally starting at one of its tracks."""
        self.client.play_context(context_uri, self.device, offset_uri)

    def add_queue(self, uri: str):
        self.client.add_queue(uri, self.device)

    def next(self):
        self.client.next(self.device)

    def previous(self):
        self.client.previous(self.device)

    def set_device(self, device: str):
        self.device = device
