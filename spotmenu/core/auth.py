"""
Spotify accounts service client (authorization code flow).
"""

import logging
from typing import Optional, Sequence
from urllib.parse import urlencode

import requests

from spotmenu.core.errors import AuthError

logger = logging.getLogger("AuthClient")

SPOTIFY_AUTH_BASE_URL = "https://accounts.spotify.com"
HTTP_TIMEOUT = 10

SCOPES = (
    "user-library-read",
    "user-read-currently-playing",
    "user-read-playback-state",
    "user-read-recently-played",
    "user-library-modify",
    "user-modify-playback-state",
    "playlist-modify-private",
    "playlist-read-private",
    "playlist-modify-public",
)


class AuthClient:
    """Builds the authorize URL and exchanges codes / refresh tokens."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str = "",
        scopes: Sequence[str] = (),
        session: Optional[requests.Session] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.scopes = list(scopes)
        self.session = session or requests.Session()

    def build_auth_url(self) -> str:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
        }
        if self.scopes:
            params["scope"] = ",".join(self.scopes)
        return f"{SPOTIFY_AUTH_BASE_URL}/authorize?{urlencode(params)}"

    def get_token_pair(self, code: str) -> dict:
        """Exchange an authorization code for an access/refresh token pair."""
        return self._request_token(
            {
                "grant_type": "authorization_code",
                "code": code,
                "redirect_uri": self.redirect_uri,
            }
        )

    def request_refreshed_token(self, refresh_token: str) -> str:
        """Get a fresh access token for a refresh token."""
        payload = self._request_token(
            {"grant_type": "refresh_token", "refresh_token": refresh_token}
        )
        token = payload.get("access_token")
        if not token:
            raise AuthError("Token response missing access_token")
        return token

    def _request_token(self, data: dict) -> dict:
        data = dict(data, client_id=self.client_id, client_secret=self.client_secret)
        try:
            response = self.session.post(
                f"{SPOTIFY_AUTH_BASE_URL}/api/token",
                data=data,
                timeout=HTTP_TIMEOUT,
            )
        except requests.exceptions.RequestException as e:
            raise AuthError(f"Token request failed: {e}") from e

        if response.status_code >= 400:
            logger.error(
                f"Token request rejected: {response.status_code} - {response.text}"
            )
            raise AuthError(f"Token request rejected with HTTP {response.status_code}")

        try:
            return response.json()
        except ValueError as e:
            raise AuthError("Token response is not valid JSON") from e
