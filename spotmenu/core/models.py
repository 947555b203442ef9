"""
Spotify Web API data objects.

Only the fields the menus need are kept; everything else in the JSON
responses is ignored.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


def _items(data: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    if not data:
        return []
    return [item for item in data.get("items") or [] if item]


@dataclass
class Artist:
    id: str = ""
    uri: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Artist":
        return cls(
            id=data.get("id") or "",
            uri=data.get("uri") or "",
            name=data.get("name") or "",
        )


@dataclass
class Album:
    id: str = ""
    uri: str = ""
    name: str = ""
    artists: List[Artist] = field(default_factory=list)
    release_date: str = ""
    total_tracks: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Album":
        data = data or {}
        return cls(
            id=data.get("id") or "",
            uri=data.get("uri") or "",
            name=data.get("name") or "",
            artists=[Artist.from_dict(a) for a in data.get("artists") or []],
            release_date=data.get("release_date") or "",
            total_tracks=data.get("total_tracks") or 0,
        )

    @property
    def artist_name(self) -> str:
        return self.artists[0].name if self.artists else ""


@dataclass
class Track:
    id: str = ""
    uri: str = ""
    name: str = ""
    artists: List[Artist] = field(default_factory=list)
    album: Optional[Album] = None
    duration_ms: int = 0
    disc_number: int = 0
    track_number: int = 0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Track":
        data = data or {}
        album = data.get("album")
        return cls(
            id=data.get("id") or "",
            uri=data.get("uri") or "",
            name=data.get("name") or "",
            artists=[Artist.from_dict(a) for a in data.get("artists") or []],
            album=Album.from_dict(album) if album else None,
            duration_ms=data.get("duration_ms") or 0,
            disc_number=data.get("disc_number") or 0,
            track_number=data.get("track_number") or 0,
        )

    @property
    def artist_name(self) -> str:
        return self.artists[0].name if self.artists else ""


@dataclass
class AlbumWithTracks(Album):
    """An album as returned by `GET /albums/{id}`, tracks included."""

    tracks: List[Track] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "AlbumWithTracks":
        data = data or {}
        base = Album.from_dict(data)
        return cls(
            id=base.id,
            uri=base.uri,
            name=base.name,
            artists=base.artists,
            release_date=base.release_date,
            total_tracks=base.total_tracks,
            tracks=[Track.from_dict(t) for t in _items(data.get("tracks"))],
        )


@dataclass
class Playlist:
    id: str = ""
    uri: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Playlist":
        return cls(
            id=data.get("id") or "",
            uri=data.get("uri") or "",
            name=data.get("name") or "",
        )


@dataclass
class Device:
    id: str = ""
    name: str = ""
    volume_percent: int = 0
    is_active: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Device":
        return cls(
            id=data.get("id") or "",
            name=data.get("name") or "",
            volume_percent=data.get("volume_percent") or 0,
            is_active=bool(data.get("is_active")),
        )


@dataclass
class PlayerState:
    """Current playback state (`GET /me/player`)."""

    is_playing: bool = False
    shuffle_state: bool = False
    repeat_state: str = "off"
    progress_ms: int = 0
    item: Optional[Track] = None
    device: Optional[Device] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerState":
        item = data.get("item")
        device = data.get("device")
        return cls(
            is_playing=bool(data.get("is_playing")),
            shuffle_state=bool(data.get("shuffle_state")),
            repeat_state=data.get("repeat_state") or "off",
            progress_ms=data.get("progress_ms") or 0,
            item=Track.from_dict(item) if item else None,
            device=Device.from_dict(device) if device else None,
        )


@dataclass
class Page:
    """One page of a paginated collection endpoint."""

    items: list = field(default_factory=list)
    total: int = 0
    limit: int = 0
    offset: int = 0

    @classmethod
    def from_dict(cls, data: Dict[str, Any], parse) -> "Page":
        return cls(
            items=[parse(item) for item in _items(data)],
            total=data.get("total") or 0,
            limit=data.get("limit") or 0,
            offset=data.get("offset") or 0,
        )
