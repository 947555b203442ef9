"""
Track list of a single album.

Opened with the album itself (from the saved albums list) or with its id
(from search results), in which case the album is fetched first.
"""

from typing import Optional

from spotmenu.core.errors import SpotifyError
from spotmenu.core.models import AlbumWithTracks
from spotmenu.ui.formatting import format_title, format_track_rows
from spotmenu.ui.launcher import Back, Cancelled, CustomKey, Selected
from spotmenu.ui.views import messages
from spotmenu.ui.views.base import (
    ActivationPayload,
    LookupKey,
    Prefetched,
    Session,
    Transition,
    View,
)


class AlbumView(View):
    def __init__(self, session: Session, key: str):
        super().__init__(session, key, show_back=True, no_custom=True, ignore_case=True)
        self.album: Optional[AlbumWithTracks] = None
        self.launcher.keybindings = [
            self.bind("play_album", "Play album"),
            self.bind("add_to_queue", "Add to queue"),
            self.bind("play_track", "Play track"),
        ]

    def activate(self, payload: ActivationPayload) -> bool:
        """Resolve the album to show; False when there is none."""
        if isinstance(payload, Prefetched):
            self.album = payload.entity
        elif isinstance(payload, LookupKey):
            try:
                self.album = self.app.client.get_album(payload.key)
            except SpotifyError as e:
                self.notify(messages.GET_ALBUM_ERROR, e)
                return False
        return self.album is not None

    def play_album(self, offset_uri: Optional[str] = None):
        self.attempt(
            messages.PLAY_ALBUM_ERROR,
            self.app.player.play_context,
            self.album.uri,
            offset_uri,
        )

    def render(self, payload: ActivationPayload = None) -> Optional[Transition]:
        if not self.activate(payload):
            return self.back()

        album = self.album
        self.launcher.prompt = format_title(album.name, album.artist_name)
        self.launcher.rows = format_track_rows(album.tracks, self.icons.track)
        outcome = self.show()

        if isinstance(outcome, (Back, Cancelled)):
            return self.back()

        if isinstance(outcome, CustomKey):
            uri = outcome.row.value
            if outcome.action == "play_album":
                self.play_album()
                return None
            if outcome.action == "add_to_queue" and uri:
                self.attempt(messages.ADD_QUEUE_ERROR, self.app.player.add_queue, uri)
            elif outcome.action == "play_track" and uri:
                self.attempt(messages.PLAY_TRACK_ERROR, self.app.player.play_track, uri)
                return None
            return self.stay()

        if isinstance(outcome, Selected) and outcome.row.value:
            self.play_album(outcome.row.value)
            return None

        return self.stay()
