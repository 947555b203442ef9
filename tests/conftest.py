import subprocess
from typing import List, Tuple

import pytest

from spotmenu.core.app import App
from spotmenu.core.config import Config, ConfigManager
from spotmenu.core.errors import SpotifyError
from spotmenu.core.models import (
    Album,
    AlbumWithTracks,
    Artist,
    Device,
    Page,
    PlayerState,
    Playlist,
    Track,
)
from spotmenu.core.player import Player
from spotmenu.ui.launcher import Rofi
from spotmenu.ui.views.base import Session


def make_track(n: int, artist: str = "Artist") -> Track:
    return Track(
        id=f"t{n}",
        uri=f"spotify:track:t{n}",
        name=f"Track {n}",
        artists=[Artist(name=artist)],
        duration_ms=180000,
    )


def make_album(n: int, tracks: int = 3) -> AlbumWithTracks:
    return AlbumWithTracks(
        id=f"a{n}",
        uri=f"spotify:album:a{n}",
        name=f"Album {n}",
        artists=[Artist(name="Band")],
        tracks=[make_track(n * 100 + i) for i in range(tracks)],
    )


class FakeRofi:
    """Scripted stand-in for `subprocess.run` used by `Rofi`.

    Each dmenu invocation consumes one `(status, output)` response and is
    recorded with its arguments and stdin. `rofi -e` calls only record the
    message.
    """

    def __init__(self):
        self.responses: List[Tuple[int, str]] = []
        self.calls: List[dict] = []
        self.errors: List[str] = []

    def push(self, status: int, output: str = ""):
        self.responses.append((status, output))
        return self

    def __call__(self, cmd, input=None, **kwargs):
        args = list(cmd[1:])
        if args and args[0] == "-e":
            self.errors.append(args[1])
            return subprocess.CompletedProcess(cmd, 0, stdout="")

        if not self.responses:
            raise AssertionError(f"unexpected rofi call: {args}")
        status, output = self.responses.pop(0)
        lines = (input or "").split("\n")[:-1]
        self.calls.append({"args": args, "lines": lines})
        return subprocess.CompletedProcess(cmd, status, stdout=output + "\n")

    def arg(self, call: int, flag: str) -> str:
        args = self.calls[call]["args"]
        return args[args.index(flag) + 1]


class FakeClient:
    """In-memory Spotify client recording every call."""

    def __init__(self):
        self.calls: List[tuple] = []
        self.failing = set()
        self.state = None
        self.devices = [Device(id="dev1", name="Laptop"), Device(id="dev2", name="Phone")]
        self.liked = [make_track(i) for i in range(25)]
        self.albums = [make_album(i) for i in range(12)]
        self.playlists = [
            Playlist(id=f"p{i}", uri=f"spotify:playlist:p{i}", name=f"Mix {i}")
            for i in range(4)
        ]
        self.queue = [make_track(90), make_track(91)]
        self.recent = [make_track(80)]

    def _call(self, name, *args):
        self.calls.append((name, *args))
        if name in self.failing:
            raise SpotifyError(f"{name} failed", status=500)

    def called(self, name):
        return [c for c in self.calls if c[0] == name]

    def get_devices(self):
        self._call("get_devices")
        return list(self.devices)

    def get_player(self):
        self._call("get_player")
        return self.state

    def play(self, device_id):
        self._call("play", device_id)

    def pause(self, device_id):
        self._call("pause", device_id)

    def next(self, device_id):
        self._call("next", device_id)

    def previous(self, device_id):
        self._call("previous", device_id)

    def play_track(self, uri, device_id):
        self._call("play_track", uri, device_id)

    def play_context(self, context_uri, device_id, offset_uri=None):
        self._call("play_context", context_uri, device_id, offset_uri)

    def add_queue(self, uri, device_id):
        self._call("add_queue", uri, device_id)

    def set_shuffle_state(self, device_id, state):
        self._call("set_shuffle_state", device_id, state)

    def set_repeat_mode(self, device_id, state):
        self._call("set_repeat_mode", device_id, state)

    def get_queue(self):
        self._call("get_queue")
        return list(self.queue)

    def get_recently_played_tracks(self):
        self._call("get_recently_played_tracks")
        return list(self.recent)

    def _page(self, name, items, limit, offset):
        self._call(name, limit, offset)
        return Page(items=items[offset:offset + limit], total=len(items), limit=limit, offset=offset)

    def get_liked_tracks(self, limit, offset):
        return self._page("get_liked_tracks", self.liked, limit, offset)

    def get_saved_albums(self, limit, offset):
        return self._page("get_saved_albums", self.albums, limit, offset)

    def get_users_playlists(self, limit, offset):
        return self._page("get_users_playlists", self.playlists, limit, offset)

    def get_album(self, album_id):
        self._call("get_album", album_id)
        return make_album(int(album_id.lstrip("a")))

    def search_tracks(self, query, limit=10):
        self._call("search_tracks", query)
        return [make_track(i, artist=query) for i in range(3)]

    def search_albums(self, query, limit=10):
        self._call("search_albums", query)
        return [
            Album(id=f"a{i}", uri=f"spotify:album:a{i}", name=f"{query} {i}")
            for i in range(2)
        ]


@pytest.fixture
def fake_rofi():
    return FakeRofi()


@pytest.fixture
def client():
    return FakeClient()


@pytest.fixture
def config_manager(tmp_path):
    return ConfigManager(tmp_path / "spotmenu" / "spotmenu.yaml")


@pytest.fixture
def config():
    config = Config()
    config.spotify.client_id = "id"
    config.spotify.client_secret = "secret"
    config.spotify.refresh_token = "refresh"
    config.fill_defaults()
    return config


@pytest.fixture
def session(config, config_manager, client, fake_rofi):
    app = App(
        config=config,
        config_manager=config_manager,
        client=client,
        player=Player(client, "dev1"),
    )
    return Session(app=app, rofi=Rofi(runner=fake_rofi))


@pytest.fixture
def playing_state():
    return PlayerState(
        is_playing=True,
        shuffle_state=False,
        repeat_state="off",
        progress_ms=65000,
        item=make_track(1),
    )
