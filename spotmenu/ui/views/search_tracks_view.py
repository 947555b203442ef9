from typing import Optional

from spotmenu.ui.formatting import format_track_rows
from spotmenu.ui.launcher import Row
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import Session, Transition
from spotmenu.ui.views.search_view import SearchResultsView


class SearchTracksView(SearchResultsView):
    def __init__(self, session: Session, key: str, title: str):
        super().__init__(session, key, title)
        self.launcher.keybindings = [
            self.bind("add_to_queue", "Add to queue"),
            self.bind("toggle_search_type", "Albums"),
        ]

    def search(self):
        tracks = self.app.client.search_tracks(self.query)
        self.launcher.rows = format_track_rows(tracks, self.icons.track)

    def on_select(self, row: Row) -> Optional[Transition]:
        if not row.value:
            return self.stay()
        self.attempt(messages.PLAY_TRACK_ERROR, self.app.player.play_track, row.value)
        return None

    def on_key(self, action: str, row: Row) -> Optional[Transition]:
        if action == "add_to_queue" and row.value:
            self.attempt(messages.ADD_QUEUE_ERROR, self.app.player.add_queue, row.value)
        return self.stay()
