from typing import List, Optional

from spotmenu.core.models import Page, Playlist
from spotmenu.ui.formatting import format_playlist_rows
from spotmenu.ui.launcher import Row
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import Session, Transition
from spotmenu.ui.views.paging import PagedView


class PlaylistsView(PagedView):
    fetch_error = messages.GET_PLAYLISTS_ERROR

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(session, key, title)
        self.launcher.keybindings.append(self.bind("play_playlist", "Play playlist"))

    def fetch(self, limit: int, offset: int) -> Page:
        return self.app.client.get_users_playlists(limit, offset)

    def format_rows(self, items: List[Playlist]) -> List[Row]:
        return format_playlist_rows(items, self.icons.playlist)

    def play(self, row: Row) -> Optional[Transition]:
        if not row.value:
            return self.stay()
        self.attempt(messages.PLAY_PLAYLIST_ERROR, self.app.player.play_context, row.value)
        return None

    def on_select(self, row: Row) -> Optional[Transition]:
        return self.play(row)

    def on_key(self, action: str, row: Row) -> Optional[Transition]:
        if action == "play_playlist":
            return self.play(row)
        return self.stay()
