"""Playlist endpoint: append the currently playing track."""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from loguru import logger

from track_stash.core.config import Config
from track_stash.domain import gateway
from track_stash.domain.credentials import CredentialStore
from track_stash.domain.spotify.exceptions import SpotifyError

from ..deps import get_config, get_credential_store

router = APIRouter()

TRACK_ADDED_MESSAGE = "Track added to playlist!"
NOTHING_PLAYING_MESSAGE = "No song is currently playing."


@router.get("/add-track", response_class=PlainTextResponse)
def add_track(
    config: Config = Depends(get_config),
    store: CredentialStore = Depends(get_credential_store),
) -> PlainTextResponse:
    """Append the playing track to the configured playlist.

    Calling this twice while the same track plays appends it twice.
    """
    try:
        outcome = gateway.add_current_track(store, config.spotify)
    except SpotifyError as e:
        logger.error(f"Error adding track: {e.payload or e}")
        return PlainTextResponse(f"Error adding track: {e}", status_code=500)

    if outcome is gateway.AddTrackOutcome.NOTHING_PLAYING:
        return PlainTextResponse(NOTHING_PLAYING_MESSAGE)
    return PlainTextResponse(TRACK_ADDED_MESSAGE)
