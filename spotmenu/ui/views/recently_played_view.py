from typing import Optional

from spotmenu.core.errors import SpotifyError
from spotmenu.ui.formatting import format_track_rows
from spotmenu.ui.launcher import Back, Cancelled, CustomKey, Selected
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View


class RecentlyPlayedView(View):
    def __init__(self, session: Session, key: str, title: str):
        super().__init__(
            session, key, title, show_back=True, no_custom=True, ignore_case=True
        )
        self.launcher.keybindings = [self.bind("add_to_queue", "Add to queue")]

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        try:
            tracks = self.app.client.get_recently_played_tracks()
        except SpotifyError as e:
            self.notify(messages.GET_RECENTLY_PLAYED_ERROR, e)
            return self.back()

        if not tracks:
            self.notify(messages.NO_RECENTLY_PLAYED)
            return self.back()

        self.launcher.rows = format_track_rows(tracks, self.icons.track)
        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()

        if isinstance(outcome, CustomKey):
            if outcome.action == "add_to_queue" and outcome.row.value:
                self.attempt(
                    messages.ADD_QUEUE_ERROR, self.app.player.add_queue, outcome.row.value
                )
            return self.stay()

        if isinstance(outcome, Selected) and outcome.row.value:
            self.attempt(
                messages.PLAY_TRACK_ERROR, self.app.player.play_track, outcome.row.value
            )
            return None

        return self.stay()
