from typing import Optional

from spotmenu.core.errors import SpotifyError
from spotmenu.ui.formatting import format_track_rows
from spotmenu.ui.launcher import Back, Cancelled
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import ActivationPayload, Session, Transition, View


class QueueView(View):
    """Read-only list of the upcoming tracks."""

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(
            session, key, title, show_back=True, no_custom=True, ignore_case=True
        )

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        try:
            tracks = self.app.client.get_queue()
        except SpotifyError as e:
            self.notify(messages.GET_QUEUE_ERROR, e)
            return self.back()

        if not tracks:
            self.notify(messages.QUEUE_EMPTY)
            return self.back()

        self.launcher.rows = format_track_rows(tracks, self.icons.track)
        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()
        return self.stay()
