"""
Spotify provider - OAuth token grants and the Web API calls the gateway needs.
"""

from . import api, auth
from .exceptions import (
    AuthorizationDeniedError,
    SpotifyAPIError,
    SpotifyError,
    TokenRequestError,
)

__all__ = [
    "api",
    "auth",
    "AuthorizationDeniedError",
    "SpotifyAPIError",
    "SpotifyError",
    "TokenRequestError",
]
