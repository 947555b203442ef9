import pytest

from conftest import make_track
from spotmenu.core.models import Album, Artist, Playlist
from spotmenu.ui.formatting import (
    build_rows,
    escape_markup,
    format_album_rows,
    format_icon,
    format_keybindings,
    format_playlist_rows,
    format_time,
    format_title,
    format_track_rows,
)
from spotmenu.ui.launcher import Keybinding, LauncherSession, Rofi


class TestBuildRows:
    def test_columns_are_aligned(self):
        rows = build_rows([["a", "x"], ["abcd", "y"]])
        assert rows == ["a" + " " * 13 + "x", "abcd" + " " * 10 + "y"]

    def test_long_values_are_truncated(self):
        rows = build_rows([["n" * 40, "artist"]])
        assert rows[0] == "n" * 27 + "..." + " " * 10 + "artist"

    def test_last_column_has_no_padding(self):
        assert build_rows([["a", "b"], ["a", "longer"]])[0].endswith("b")

    def test_empty(self):
        assert build_rows([]) == []


def test_format_icon():
    assert format_icon("X", "Queue") == "X Queue"
    assert format_icon("", "Queue") == "Queue"


class TestFormatTitle:
    def test_short_titles_unchanged(self):
        assert format_title("Song", "Band") == "Song | Band"

    def test_long_titles_are_shortened(self):
        assert format_title("A" * 20, "B" * 20) == "A" * 15 + "... | " + "B" * 15 + "..."

    def test_only_long_side_is_shortened(self):
        assert format_title("A" * 28, "Band") == "A" * 15 + "... | Band"

    def test_trailing_space_is_trimmed(self):
        assert format_title("Hello World Again Now", "B" * 12) == "Hello World Aga... | " + "B" * 12
        assert format_title("Hello World Ag  Now!", "B" * 12).startswith("Hello World Ag...")


@pytest.mark.parametrize(
    "ms, expected",
    [
        (0, "0:00"),
        (999, "0:00"),
        (65000, "1:05"),
        (600000, "10:00"),
        (3600000, "0:00"),
        (3725000, "2:05"),
    ],
)
def test_format_time(ms, expected):
    assert format_time(ms) == expected


def test_track_rows_use_uri_as_value():
    tracks = [make_track(1), make_track(2)]
    rows = format_track_rows(tracks, "T")

    assert [r.value for r in rows] == ["spotify:track:t1", "spotify:track:t2"]
    assert rows[0].title.startswith("T Track 1")
    assert rows[0].title.endswith("Artist")


def test_track_rows_without_artist():
    track = make_track(1)
    track.artists = []
    assert format_track_rows([track], "")[0].title == "Track 1"


def test_album_and_playlist_rows():
    album = Album(uri="spotify:album:x", name="Album", artists=[Artist(name="Band")])
    playlist = Playlist(uri="spotify:playlist:y", name="Mix")

    assert format_album_rows([album], "")[0].value == "spotify:album:x"
    assert format_playlist_rows([playlist], "P")[0].title == "P Mix"


def test_rows_can_be_found_again(fake_rofi):
    rows = format_track_rows([make_track(i) for i in range(5)], "T")
    session = LauncherSession(Rofi(runner=fake_rofi), rows=rows)

    for i, row in enumerate(rows):
        assert session.find_selection(row.title) == (row, i)


def test_format_keybindings():
    text = format_keybindings([Keybinding("next_page", "Alt+Right", "Next page"), Keybinding("add_to_queue", "Alt+d", "Add")])
    assert text == "<b>Alt+Right:</b> Next page | <b>Alt+d:</b> Add"


def test_escape_markup():
    assert escape_markup("Rock & Roll <live>") == "Rock &amp; Roll &lt;live&gt;"
