from typing import Optional

from spotmenu.core.spotify import uri_to_id
from spotmenu.ui.formatting import format_album_rows
from spotmenu.ui.launcher import Row
from spotmenu.ui.views.album_view import AlbumView
from spotmenu.ui.views.base import LookupKey, Session, Transition
from spotmenu.ui.views.search_view import SearchResultsView


class SearchAlbumsView(SearchResultsView):
    """Album results; selecting one fetches and opens the album."""

    def __init__(self, session: Session, key: str, title: str):
        super().__init__(session, key, title)
        self.launcher.keybindings = [self.bind("toggle_search_type", "Tracks")]
        self.album_view = self.own(AlbumView(session, f"{key}.album"))

    def search(self):
        albums = self.app.client.search_albums(self.query)
        self.launcher.rows = format_album_rows(albums, self.icons.album)

    def on_select(self, row: Row) -> Optional[Transition]:
        album_id = uri_to_id(row.value)
        if not album_id:
            return self.stay()
        return Transition(self.album_view, LookupKey(album_id))
