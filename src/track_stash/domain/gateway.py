"""
Token & playlist gateway operations.

Each function takes the credential store and the Spotify settings explicitly.
Exchange and add-track raise SpotifyError subclasses for the web layer to map
to responses; refresh has no caller and only logs.
"""

from enum import Enum
from typing import Optional

from loguru import logger

from track_stash.core.config import SpotifyConfig
from track_stash.core.output import mask_token

from .credentials import CredentialStore, SessionCredential
from .spotify import api, auth
from .spotify.exceptions import (
    AuthorizationDeniedError,
    SpotifyAPIError,
    TokenRequestError,
)


class AddTrackOutcome(str, Enum):
    """Result of an add-track request that did not fail."""

    ADDED = "added"
    NOTHING_PLAYING = "nothing_playing"


def authorize_url(config: SpotifyConfig) -> str:
    """Consent URL for the /login redirect."""
    return auth.build_authorize_url(config)


def exchange_code(
    store: CredentialStore,
    config: SpotifyConfig,
    code: Optional[str],
    error: Optional[str] = None,
) -> SessionCredential:
    """Exchange the callback code and store the resulting token pair.

    Stored credentials are left untouched on any failure.

    Raises:
        AuthorizationDeniedError: Callback carried an error or no code
        TokenRequestError: Token endpoint failed
    """
    if error:
        logger.warning(f"Authorization denied by provider: {error}")
        raise AuthorizationDeniedError(f"authorization denied ({error})")
    if not code:
        logger.warning("Callback received without an authorization code")
        raise AuthorizationDeniedError("missing authorization code")

    try:
        token_data = auth.exchange_code(config, code)
    except TokenRequestError as e:
        logger.error(f"Error during token exchange: {e.payload or e}")
        raise

    credential = store.set(
        token_data["access_token"], token_data.get("refresh_token")
    )
    logger.info("Authorization successful, tokens stored")
    return credential


def refresh_access_token(store: CredentialStore, config: SpotifyConfig) -> bool:
    """Replace the stored access token using the refresh token.

    Fire-and-forget: failures are logged and the previous access token is kept.
    The refresh token is never rotated.

    Returns:
        True if a new access token was stored
    """
    credential = store.get()
    if not credential.can_refresh:
        logger.warning("No refresh token available.")
        return False

    try:
        token_data = auth.refresh_access_token(config, credential.refresh_token)
    except TokenRequestError as e:
        logger.error(f"Error refreshing token: {e.payload or e}")
        return False

    # Only the access token is replaced; a concurrent login keeps its refresh token
    store.set(token_data["access_token"])
    logger.info(f"Access token refreshed: {mask_token(token_data['access_token'])}")
    return True


def add_current_track(store: CredentialStore, config: SpotifyConfig) -> AddTrackOutcome:
    """Append the currently playing item to the configured playlist.

    Not idempotent: the same playing track is appended again on every call.

    Raises:
        SpotifyAPIError: No token is held yet, or either the playback
            lookup or the append failed
    """
    credential = store.get()
    if not credential.is_authorized:
        logger.warning("Add-track requested before authorization")
        raise SpotifyAPIError("not authorized, visit /login first")
    access_token = credential.access_token

    track_uri = api.get_currently_playing_uri(access_token)
    if not track_uri:
        logger.debug("Nothing playing, skipping playlist append")
        return AddTrackOutcome.NOTHING_PLAYING

    api.add_tracks_to_playlist(access_token, config.playlist_id, [track_uri])
    logger.info(f"Added {track_uri} to playlist {config.playlist_id}")
    return AddTrackOutcome.ADDED
