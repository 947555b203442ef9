from typing import List, Optional

from spotmenu.core.models import AlbumWithTracks, Page
from spotmenu.ui.formatting import format_album_rows
from spotmenu.ui.launcher import Row
from spotmenu.ui.views import messages
from spotmenu.ui.views.album_view import AlbumView
from spotmenu.ui.views.base import Prefetched, Session, Transition
from spotmenu.ui.views.paging import PagedView


class SavedAlbumsView(PagedView):
    """Saved albums, ten per page. Selecting one opens its track list."""

    fetch_error = messages.GET_ALBUMS_ERROR

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(session, key, title)
        self.launcher.keybindings.append(self.bind("play_album", "Play album"))
        self.album_view = self.own(AlbumView(session, f"{key}.album"))

    def fetch(self, limit: int, offset: int) -> Page:
        return self.app.client.get_saved_albums(limit, offset)

    def format_rows(self, items: List[AlbumWithTracks]) -> List[Row]:
        return format_album_rows(items, self.icons.album)

    def find_album(self, uri: str) -> Optional[AlbumWithTracks]:
        for album in self.items:
            if album.uri == uri:
                return album
        return None

    def on_select(self, row: Row) -> Optional[Transition]:
        album = self.find_album(row.value)
        if album is None:
            return self.stay()
        return Transition(self.album_view, Prefetched(album))

    def on_key(self, action: str, row: Row) -> Optional[Transition]:
        if action != "play_album":
            return self.stay()
        if not row.value:
            return self.stay()
        self.attempt(messages.PLAY_ALBUM_ERROR, self.app.player.play_context, row.value)
        return None
