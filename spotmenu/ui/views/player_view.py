"""
Player controls: play/pause with the current track, next, previous,
shuffle and repeat. Rows use pango markup to underline the active mode.
"""

from typing import List, Optional

from spotmenu.core.errors import SpotifyError
from spotmenu.core.models import PlayerState
from spotmenu.core.player import RepeatState
from spotmenu.ui.formatting import escape_markup, format_icon, format_time
from spotmenu.ui.launcher import Back, Cancelled, Row, Selected
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View

TOGGLE_PAUSE = "player_toggle_pause"
NEXT = "player_next"
PREVIOUS = "player_previous"
TOGGLE_SHUFFLE = "player_toggle_shuffle"
TOGGLE_REPEAT = "player_toggle_repeat"

REPEAT_LABELS = {
    RepeatState.OFF: "Repeat <u>off</u> context track",
    RepeatState.CONTEXT: "Repeat off <u>context</u> track",
    RepeatState.TRACK: "Repeat off context <u>track</u>",
}


class PlayerView(View):
    def __init__(self, session: Session, key: str, title: str):
        super().__init__(
            session,
            key,
            title,
            show_back=True,
            no_custom=True,
            ignore_case=True,
            markup_rows=True,
        )

    def _now_playing(self, state: PlayerState) -> str:
        icons = self.icons
        track = state.item
        status = icons.pause if state.is_playing else icons.play
        return (
            f"{status} | {icons.track} {escape_markup(track.name)}"
            f" | {escape_markup(track.artist_name)}"
            f" | {format_time(state.progress_ms)}/{format_time(track.duration_ms)}"
        )

    def build_rows(self, state: Optional[PlayerState]) -> List[Row]:
        icons = self.icons
        play_pause = format_icon(icons.player, messages.NOTHING_PLAYING)
        shuffle = format_icon(icons.shuffle_on, "Shuffle")
        repeat = format_icon(icons.repeat_context, "Repeat")

        if state is not None and state.item is not None:
            play_pause = self._now_playing(state)

            if state.shuffle_state:
                shuffle = format_icon(icons.shuffle_on, "Shuffle <u>true</u> false")
            else:
                shuffle = format_icon(icons.shuffle_off, "Shuffle true <u>false</u>")

            mode = RepeatState.parse(state.repeat_state)
            if mode is not None:
                icon = getattr(icons, f"repeat_{mode.value}")
                repeat = format_icon(icon, REPEAT_LABELS[mode])

        return [
            Row(title=play_pause, value=TOGGLE_PAUSE),
            Row(title=format_icon(icons.next, "Next"), value=NEXT),
            Row(title=format_icon(icons.previous, "Previous"), value=PREVIOUS),
            Row(title=shuffle, value=TOGGLE_SHUFFLE),
            Row(title=repeat, value=TOGGLE_REPEAT),
        ]

    def perform(self, value: str):
        player = self.app.player
        actions = {
            TOGGLE_PAUSE: player.play_pause,
            NEXT: player.next,
            PREVIOUS: player.previous,
            TOGGLE_SHUFFLE: player.toggle_shuffle,
            TOGGLE_REPEAT: player.toggle_repeat,
        }
        action = actions.get(value)
        if action is not None:
            self.attempt(messages.UPDATE_PLAYER_ERROR, action)

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        try:
            state = self.app.client.get_player()
        except SpotifyError as e:
            self.notify(messages.GET_PLAYER_STATE_ERROR, e)
            return self.back()

        self.launcher.rows = self.build_rows(state)
        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()

        if isinstance(outcome, Selected):
            self.perform(outcome.row.value)

        return self.stay()
