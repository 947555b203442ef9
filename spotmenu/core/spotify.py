"""
Spotify Web API client.

Thin request/response mapping for the endpoints the menus use. Every call
carries a bearer token obtained from the refresh token; a 401 drops the
cached token and retries the request exactly once.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from spotmenu.core.auth import AuthClient
from spotmenu.core.errors import AuthError, SpotifyError
from spotmenu.core.models import (
    Album,
    AlbumWithTracks,
    Device,
    Page,
    PlayerState,
    Playlist,
    Track,
)

logger = logging.getLogger("SpotifyClient")

SPOTIFY_API_BASE_URL = "https://api.spotify.com/v1"
HTTP_TIMEOUT = 10
SEARCH_LIMIT = 10


def uri_to_id(uri: str) -> str:
    """Parse the id out of a `spotify:<type>:<id>` uri."""
    parts = uri.split(":")
    if len(parts) != 3:
        return ""
    return parts[2]


def _track_of(item: Dict[str, Any]) -> Track:
    return Track.from_dict(item.get("track"))


class SpotifyClient:
    def __init__(
        self,
        refresh_token: str,
        client_id: str,
        client_secret: str,
        session: Optional[requests.Session] = None,
        auth_client: Optional[AuthClient] = None,
    ):
        self.refresh_token = refresh_token
        self.access_token = ""
        self.session = session or requests.Session()
        self.auth_client = auth_client or AuthClient(
            client_id, client_secret, session=self.session
        )

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    def _send(self, method: str, path: str, **kwargs) -> requests.Response:
        if not self.access_token:
            try:
                self.access_token = self.auth_client.request_refreshed_token(
                    self.refresh_token
                )
            except AuthError as e:
                raise SpotifyError(f"Could not refresh access token: {e}") from e

        headers = {"Authorization": f"Bearer {self.access_token}"}
        try:
            return self.session.request(
                method,
                f"{SPOTIFY_API_BASE_URL}{path}",
                headers=headers,
                timeout=HTTP_TIMEOUT,
                **kwargs,
            )
        except requests.exceptions.RequestException as e:
            raise SpotifyError(f"{method} {path} failed: {e}") from e

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        response = self._send(method, path, **kwargs)

        if response.status_code == 401:
            logger.info("Access token rejected, refreshing")
            self.access_token = ""
            response = self._send(method, path, **kwargs)

        if response.status_code >= 400:
            logger.warning(f"{method} {path} -> {response.status_code}: {response.text}")
            raise SpotifyError(f"{method} {path} failed", status=response.status_code)

        return response

    def _get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> dict:
        response = self._request("GET", path, params=params)
        try:
            return response.json()
        except ValueError as e:
            raise SpotifyError(f"GET {path} returned invalid JSON") from e

    @staticmethod
    def _device_params(device_id: str, **params) -> Dict[str, Any]:
        if device_id:
            params["device_id"] = device_id
        return params

    # ------------------------------------------------------------------
    # Player
    # ------------------------------------------------------------------

    def get_devices(self) -> List[Device]:
        data = self._get_json("/me/player/devices")
        return [Device.from_dict(d) for d in data.get("devices") or []]

    def get_player(self) -> Optional[PlayerState]:
        """Current playback state, or None when nothing is active."""
        response = self._request("GET", "/me/player")
        if response.status_code == 204 or not response.content:
            return None
        try:
            return PlayerState.from_dict(response.json())
        except ValueError as e:
            raise SpotifyError("GET /me/player returned invalid JSON") from e

    def play(self, device_id: str):
        self._request("PUT", "/me/player/play", params=self._device_params(device_id))

    def pause(self, device_id: str):
        self._request("PUT", "/me/player/pause", params=self._device_params(device_id))

    def next(self, device_id: str):
        self._request("POST", "/me/player/next", params=self._device_params(device_id))

    def previous(self, device_id: str):
        self._request(
            "POST", "/me/player/previous", params=self._device_params(device_id)
        )

    def play_track(self, uri: str, device_id: str):
        self._request(
            "PUT",
            "/me/player/play",
            params=self._device_params(device_id),
            json={"uris": [uri]},
        )

    def play_context(self, context_uri: str, device_id: str, offset_uri: Optional[str] = None):
        body: Dict[str, Any] = {"context_uri": context_uri}
        if offset_uri:
            body["offset"] = {"uri": offset_uri}
        self._request(
            "PUT", "/me/player/play", params=self._device_params(device_id), json=body
        )

    def add_queue(self, uri: str, device_id: str):
        self._request(
            "POST", "/me/player/queue", params=self._device_params(device_id, uri=uri)
        )

    def set_shuffle_state(self, device_id: str, state: bool):
        self._request(
            "PUT",
            "/me/player/shuffle",
            params=self._device_params(device_id, state="true" if state else "false"),
        )

    def set_repeat_mode(self, device_id: str, state: str):
        self._request(
            "PUT", "/me/player/repeat", params=self._device_params(device_id, state=state)
        )

    def get_queue(self) -> List[Track]:
        data = self._get_json("/me/player/queue")
        return [Track.from_dict(t) for t in data.get("queue") or [] if t]

    def get_recently_played_tracks(self) -> List[Track]:
        data = self._get_json("/me/player/recently-played")
        return [_track_of(item) for item in data.get("items") or [] if item]

    # ------------------------------------------------------------------
    # Library
    # ------------------------------------------------------------------

    def get_liked_tracks(self, limit: int, offset: int) -> Page:
        data = self._get_json("/me/tracks", {"limit": limit, "offset": offset})
        return Page.from_dict(data, _track_of)

    def get_saved_albums(self, limit: int, offset: int) -> Page:
        data = self._get_json("/me/albums", {"limit": limit, "offset": offset})
        return Page.from_dict(
            data, lambda item: AlbumWithTracks.from_dict(item.get("album"))
        )

    def get_users_playlists(self, limit: int, offset: int) -> Page:
        data = self._get_json("/me/playlists", {"limit": limit, "offset": offset})
        return Page.from_dict(data, Playlist.from_dict)

    def get_album(self, album_id: str) -> AlbumWithTracks:
        return AlbumWithTracks.from_dict(self._get_json(f"/albums/{album_id}"))

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search_tracks(self, query: str, limit: int = SEARCH_LIMIT) -> List[Track]:
        data = self.search(query, "track", limit)
        return [Track.from_dict(t) for t in (data.get("tracks") or {}).get("items") or [] if t]

    def search_albums(self, query: str, limit: int = SEARCH_LIMIT) -> List[Album]:
        data = self.search(query, "album", limit)
        return [Album.from_dict(a) for a in (data.get("albums") or {}).get("items") or [] if a]

    def search(self, query: str, search_type: str, limit: int = SEARCH_LIMIT) -> dict:
        """Raw `GET /search` response for one result type (track, album, ...)."""
        return self._get_json(
            "/search", {"q": query, "type": search_type, "limit": limit}
        )
