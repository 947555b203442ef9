import sys

import pytest

from spotmenu.ui.views.base import Transition, View
from spotmenu.ui.views.navigator import Navigator, build_screens, run


class TestBuildScreens:
    def test_registry(self, session):
        main = build_screens(session)
        keys = {view.key for view in session.views}

        assert main.key == "main"
        assert {
            "player",
            "search",
            "liked_tracks",
            "saved_albums",
            "saved_albums.album",
            "playlists",
            "queue",
            "recently_played",
            "devices",
            "search_tracks",
            "search_albums",
            "search_albums.album",
        } <= keys

    def test_parents(self, session):
        main = build_screens(session)
        views = session.views

        assert main.parent is None
        assert views.get("devices").parent is main
        assert views.get("saved_albums.album").parent is views.get("saved_albums")
        assert views.get("search_albums.album").parent is views.get("search_albums")

    def test_duplicate_key(self, session):
        View(session, "a")
        with pytest.raises(ValueError):
            View(session, "a")
        assert len(session.views) == 1


class TestNavigator:
    def test_menu_round_trip(self, session, fake_rofi):
        main = build_screens(session)
        queue = session.views.get("queue")
        fake_rofi.push(0, queue.title).push(0, "..").push(1)

        navigator = Navigator(main)
        navigator.run()

        assert navigator.steps == 3
        assert not fake_rofi.responses

    def test_long_session_keeps_stack_flat(self, session, fake_rofi):
        main = build_screens(session)
        renders = sys.getrecursionlimit() * 2
        for _ in range(renders - 1):
            fake_rofi.push(11)
        fake_rofi.push(1)

        navigator = Navigator(main)
        navigator.run()

        assert navigator.steps == renders

    def test_stops_when_view_returns_none(self, session):
        class Once(View):
            def render(self, payload=None):
                self.seen = payload
                return None

        view = Once(session, "once")
        Navigator(view).run()
        assert view.seen is None

    def test_payload_is_delivered(self, session):
        class Counter(View):
            def render(self, payload=None):
                if payload == 3:
                    return None
                return Transition(self, (payload or 0) + 1)

        navigator = Navigator(Counter(session, "counter"))
        navigator.run()
        assert navigator.steps == 4


def test_run_quits_on_escape(session, fake_rofi):
    fake_rofi.push(1)
    run(session)
    assert len(fake_rofi.calls) == 1
