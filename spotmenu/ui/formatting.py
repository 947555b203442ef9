"""
Formatting helpers turning Spotify objects into aligned rofi rows.
"""

import html
from typing import Iterable, List, Sequence

from spotmenu.core.models import Album, Playlist, Track
from spotmenu.ui.launcher import Keybinding, Row

MAX_COLUMN_SIZE = 30
COLUMN_GAP = 10
TITLE_LIMIT = 30
TITLE_PART_LIMIT = 15
ELLIPSIS = "..."


def _column_widths(data: Sequence[Sequence[str]], maximum: int) -> List[int]:
    columns = max((len(d) for d in data), default=0)
    widths = [0] * columns
    for values in data:
        for i, value in enumerate(values):
            widths[i] = min(max(widths[i], len(value)), maximum)
    return widths


def _build_row(values: Sequence[str], widths: Sequence[int], limit: int) -> str:
    out = ""
    for i, value in enumerate(values):
        length = len(value)
        if length > limit - len(ELLIPSIS):
            length = limit
            value = value[: limit - len(ELLIPSIS)] + ELLIPSIS

        spacer = ""
        if i != len(values) - 1:
            spacer = " " * (widths[i] - length + COLUMN_GAP)

        out += value + spacer
    return out


def build_rows(data: Sequence[Sequence[str]], max_column_size: int = MAX_COLUMN_SIZE) -> List[str]:
    """Align multi-column data into fixed-width text lines."""
    widths = _column_widths(data, max_column_size)
    return [_build_row(values, widths, max_column_size) for values in data]


def format_icon(icon: str, text: str) -> str:
    if not icon:
        return text
    return f"{icon} {text}"


def _rows(columns: List[List[str]], uris: List[str], icon: str) -> List[Row]:
    return [
        Row(title=format_icon(icon, line), value=uri)
        for line, uri in zip(build_rows(columns), uris)
    ]


def _name_and_artist(name: str, artist: str) -> List[str]:
    if artist:
        return [name, artist]
    return [name]


def format_track_rows(tracks: Iterable[Track], icon: str) -> List[Row]:
    tracks = list(tracks)
    columns = [_name_and_artist(t.name, t.artist_name) for t in tracks]
    return _rows(columns, [t.uri for t in tracks], icon)


def format_album_rows(albums: Iterable[Album], icon: str) -> List[Row]:
    albums = list(albums)
    columns = [_name_and_artist(a.name, a.artist_name) for a in albums]
    return _rows(columns, [a.uri for a in albums], icon)


def format_playlist_rows(playlists: Iterable[Playlist], icon: str) -> List[Row]:
    playlists = list(playlists)
    return _rows([[p.name] for p in playlists], [p.uri for p in playlists], icon)


def _truncate(text: str, limit: int) -> str:
    if len(text) > limit:
        return text[:limit].rstrip() + ELLIPSIS
    return text


def format_title(a: str, b: str) -> str:
    """Join two strings with " | ", shortening each side if both are too long."""
    if len(a) + len(b) > TITLE_LIMIT:
        a = _truncate(a, TITLE_PART_LIMIT)
        b = _truncate(b, TITLE_PART_LIMIT)
    return f"{a} | {b}"


def format_time(ms: int) -> str:
    """Milliseconds as m:ss.

    Only the minute of the hour is shown, so an hour-long position wraps
    back to 0:00.
    """
    total_seconds = int(ms) // 1000
    minute = (total_seconds // 60) % 60
    second = total_seconds % 60
    return f"{minute}:{second:02d}"


def format_keybindings(keybindings: Iterable[Keybinding]) -> str:
    return " | ".join(f"<b>{k.key}:</b> {k.description}" for k in keybindings)


def escape_markup(text: str) -> str:
    """Escape text for rows rendered with -markup-rows (pango markup)."""
    return html.escape(text, quote=False)
