from typing import List, Optional

from spotmenu.core.models import Page, Track
from spotmenu.ui.formatting import format_track_rows
from spotmenu.ui.launcher import Row
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import Session, Transition
from spotmenu.ui.views.paging import PagedView


class LikedTracksView(PagedView):
    """The user's saved tracks, ten per page."""

    fetch_error = messages.GET_TRACKS_ERROR

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(session, key, title)
        self.launcher.keybindings.append(self.bind("add_to_queue", "Add to queue"))

    def fetch(self, limit: int, offset: int) -> Page:
        return self.app.client.get_liked_tracks(limit, offset)

    def format_rows(self, items: List[Track]) -> List[Row]:
        return format_track_rows(items, self.icons.track)

    def on_select(self, row: Row) -> Optional[Transition]:
        if not row.value:
            return self.stay()
        self.attempt(messages.PLAY_TRACK_ERROR, self.app.player.play_track, row.value)
        return None

    def on_key(self, action: str, row: Row) -> Optional[Transition]:
        if action == "add_to_queue" and row.value:
            self.attempt(messages.ADD_QUEUE_ERROR, self.app.player.add_queue, row.value)
        return self.stay()
