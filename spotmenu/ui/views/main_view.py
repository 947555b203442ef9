"""
Main menu: entry point of every session.

The prompt shows what is currently playing. Typing free text instead of
picking an entry searches for tracks.
"""

import logging
from typing import List, Optional

from spotmenu.core.errors import FatalSessionError, SpotifyError
from spotmenu.core.player import RepeatState
from spotmenu.ui import formatting
from spotmenu.ui.launcher import Cancelled, CustomKey, Row, Selected
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View

logger = logging.getLogger("Views")


class MainView(View):
    def __init__(self, session: Session, key: str = "main"):
        super().__init__(session, key, ignore_case=True)
        self.search_tracks_key = ""
        self.launcher.keybindings = [
            self.bind("toggle_pause_resume", "Play/Pause"),
            self.bind("next_track", "Next"),
            self.bind("previous_track", "Previous"),
            self.bind("toggle_repeat", "Repeat"),
            self.bind("toggle_shuffle", "Shuffle"),
        ]

    def set_entries(self, entries: List[View]):
        """Menu rows, one per child view; the row value is the view key."""
        self.launcher.rows = [Row(title=view.title, value=view.key) for view in entries]
        for view in entries:
            self.own(view)

    def player_status(self) -> str:
        try:
            state = self.app.client.get_player()
        except SpotifyError as e:
            self.notify(messages.GET_PLAYER_STATE_ERROR, e)
            raise FatalSessionError(messages.GET_PLAYER_STATE_ERROR) from e

        if state is None or state.item is None:
            return messages.NOTHING_PLAYING

        icons = self.icons
        status = icons.play if state.is_playing else icons.pause
        shuffle = icons.shuffle_on if state.shuffle_state else icons.shuffle_off

        repeat = icons.repeat_off
        mode = RepeatState.parse(state.repeat_state)
        if mode is RepeatState.CONTEXT:
            repeat = icons.repeat_context
        elif mode is RepeatState.TRACK:
            repeat = icons.repeat_track

        title = formatting.format_title(state.item.name, state.item.artist_name)
        return f"{status} | {title} | {shuffle} {repeat}"

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        self.launcher.prompt = self.player_status()
        outcome = self.show()

        if isinstance(outcome, Cancelled):
            return None

        if isinstance(outcome, CustomKey):
            self.control(outcome.action)
            return self.stay()

        if isinstance(outcome, Selected):
            return self.open(outcome.row)

        return self.stay()

    def control(self, action: str):
        logger.info(f"Player control: {action}")
        player = self.app.player
        if action == "toggle_pause_resume":
            self.attempt(messages.PLAY_PAUSE_ERROR, player.play_pause)
        elif action == "next_track":
            self.attempt(messages.SKIP_TRACK_ERROR, player.next)
        elif action == "previous_track":
            self.attempt(messages.PREVIOUS_TRACK_ERROR, player.previous)
        elif action == "toggle_repeat":
            self.attempt(messages.UPDATE_PLAYER_ERROR, player.toggle_repeat)
        elif action == "toggle_shuffle":
            self.attempt(messages.UPDATE_PLAYER_ERROR, player.toggle_shuffle)

    def open(self, row: Row) -> Optional[Transition]:
        if row.value and row.value in self.session.views:
            return Transition(self.session.views.get(row.value))

        if not row.title:
            return self.stay()

        # Free text
        search = self.session.views.get(self.search_tracks_key)
        search.set_parent(self)
        search.set_query(row.title)
        return Transition(search)
