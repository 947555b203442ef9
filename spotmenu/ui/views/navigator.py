"""
Builds the views of a session and runs them.

Views are constructed first and linked afterwards: every owned child gets
its owner as parent. The search result views have no fixed parent; whoever
hands control to them sets it.
"""

import logging
from typing import Optional

from spotmenu.ui.formatting import format_icon
from spotmenu.ui.views.base import Session, Transition, View
from spotmenu.ui.views.devices_view import DevicesView
from spotmenu.ui.views.liked_tracks_view import LikedTracksView
from spotmenu.ui.views.main_view import MainView
from spotmenu.ui.views.player_view import PlayerView
from spotmenu.ui.views.playlists_view import PlaylistsView
from spotmenu.ui.views.queue_view import QueueView
from spotmenu.ui.views.recently_played_view import RecentlyPlayedView
from spotmenu.ui.views.saved_albums_view import SavedAlbumsView
from spotmenu.ui.views.search_albums_view import SearchAlbumsView
from spotmenu.ui.views.search_tracks_view import SearchTracksView
from spotmenu.ui.views.search_view import SearchView

logger = logging.getLogger("Navigator")


class Navigator:
    """Renders views one after another until one returns no transition."""

    def __init__(self, start: View):
        self.start = start
        self.steps = 0

    def run(self):
        transition: Optional[Transition] = Transition(self.start)
        while transition is not None:
            self.steps += 1
            logger.debug(f"Rendering {transition.view!r}")
            transition = transition.view.render(transition.payload)
        logger.info(f"Session ended after {self.steps} views")


def build_screens(session: Session) -> MainView:
    """Create every view of a session and link parents. Returns the main menu."""
    icons = session.app.config.icons

    main = MainView(session)
    entries = [
        PlayerView(session, "player", format_icon(icons.player, "Player")),
        SearchView(session, "search", format_icon(icons.search, "Search")),
        LikedTracksView(session, "liked_tracks", format_icon(icons.liked_tracks, "Liked Tracks")),
        SavedAlbumsView(session, "saved_albums", format_icon(icons.album, "Albums")),
        PlaylistsView(session, "playlists", format_icon(icons.playlist, "Playlists")),
        QueueView(session, "queue", format_icon(icons.queue, "Queue")),
        RecentlyPlayedView(session, "recently_played", format_icon(icons.recently_played, "Recently Played")),
        DevicesView(session, "devices", format_icon(icons.device, "Devices")),
    ]
    main.set_entries(entries)

    tracks = SearchTracksView(session, "search_tracks", format_icon(icons.track, "Tracks"))
    albums = SearchAlbumsView(session, "search_albums", format_icon(icons.album, "Albums"))
    tracks.toggle_key = albums.key
    albums.toggle_key = tracks.key
    tracks.set_parent(main)
    albums.set_parent(main)

    main.search_tracks_key = tracks.key
    session.views.get("search").results_key = tracks.key

    for view in session.views:
        for child in view.children:
            child.set_parent(view)

    logger.debug(f"Built {len(session.views)} views")
    return main


def run(session: Session):
    Navigator(build_screens(session)).run()
