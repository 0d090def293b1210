"""Spotify-specific exceptions for error handling."""

from typing import Any, Optional


class SpotifyError(Exception):
    """Base exception for Spotify operations."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        payload: Any = None,
    ):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)


class TokenRequestError(SpotifyError):
    """Raised when the accounts token endpoint rejects or fails a grant."""

    pass


class SpotifyAPIError(SpotifyError):
    """Raised when a Web API call (playback, playlists) fails."""

    pass


class AuthorizationDeniedError(SpotifyError):
    """Raised when the OAuth callback carries no authorization code."""

    pass
