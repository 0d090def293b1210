"""
Spotify Web API operations used by the gateway.

Plain functions over a bearer token; the caller owns token storage.
"""

from typing import Any, Dict, List, Optional

import requests
from loguru import logger

from .exceptions import SpotifyAPIError

# Spotify API base URL
API_BASE = "https://api.spotify.com/v1"

REQUEST_TIMEOUT = 30


def _auth_headers(access_token: Optional[str]) -> Dict[str, str]:
    return {"Authorization": f"Bearer {access_token}"}


def _raise_for_status(response: requests.Response, action: str) -> None:
    if response.ok:
        return
    try:
        payload = response.json()
    except ValueError:
        payload = response.text
    raise SpotifyAPIError(
        f"Error {action} (HTTP {response.status_code})",
        status_code=response.status_code,
        payload=payload,
    )


def get_currently_playing(access_token: Optional[str]) -> Optional[Dict[str, Any]]:
    """Fetch the item the user is currently playing.

    Returns:
        The playing item (track or episode) or None when nothing is playing

    Raises:
        SpotifyAPIError: On network failure or non-2xx status
    """
    try:
        response = requests.get(
            f"{API_BASE}/me/player/currently-playing",
            headers=_auth_headers(access_token),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise SpotifyAPIError(f"Error fetching current track: {e}") from e

    if response.status_code == 204:  # No content = nothing playing
        return None
    _raise_for_status(response, "fetching current track")

    try:
        data = response.json()
    except ValueError:
        logger.debug("Currently-playing response had no JSON body")
        return None

    item = data.get("item") if isinstance(data, dict) else None
    if not item:
        return None
    return item


def get_currently_playing_uri(access_token: Optional[str]) -> Optional[str]:
    """URI of the playing item, or None when nothing playable is reported."""
    item = get_currently_playing(access_token)
    if not item:
        return None
    return item.get("uri") or None


def add_tracks_to_playlist(
    access_token: Optional[str], playlist_id: str, uris: List[str]
) -> Dict[str, Any]:
    """Append items to a playlist.

    Returns:
        Response JSON (contains the new playlist snapshot_id)

    Raises:
        SpotifyAPIError: On network failure or non-2xx status
    """
    try:
        response = requests.post(
            f"{API_BASE}/playlists/{playlist_id}/tracks",
            json={"uris": list(uris)},
            headers=_auth_headers(access_token),
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise SpotifyAPIError(f"Error adding track: {e}") from e

    _raise_for_status(response, "adding track")
    logger.info(f"Added {len(uris)} item(s) to playlist {playlist_id}")

    try:
        return response.json()
    except ValueError:
        return {}
