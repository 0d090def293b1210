"""OAuth endpoints: consent redirect and authorization-code callback."""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, RedirectResponse

from track_stash.core.config import Config
from track_stash.domain import gateway
from track_stash.domain.credentials import CredentialStore
from track_stash.domain.spotify.exceptions import SpotifyError

from ..deps import get_config, get_credential_store

router = APIRouter()

AUTH_SUCCESS_MESSAGE = (
    "Authorization successful! You can now use the /add-track endpoint."
)


@router.get("/login")
def login(config: Config = Depends(get_config)) -> RedirectResponse:
    """Redirect the browser to the Spotify consent page."""
    return RedirectResponse(gateway.authorize_url(config.spotify), status_code=302)


@router.get("/callback", response_class=PlainTextResponse)
def callback(
    code: Optional[str] = None,
    error: Optional[str] = None,
    config: Config = Depends(get_config),
    store: CredentialStore = Depends(get_credential_store),
) -> PlainTextResponse:
    """Exchange the authorization code and keep the tokens in memory."""
    try:
        gateway.exchange_code(store, config.spotify, code, error=error)
    except SpotifyError as e:
        return PlainTextResponse(f"Error getting tokens: {e}", status_code=500)

    return PlainTextResponse(AUTH_SUCCESS_MESSAGE)
