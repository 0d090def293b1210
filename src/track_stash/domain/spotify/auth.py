"""
Spotify OAuth 2.0 authorization-code flow.

Builds the consent URL and performs the two token grants (authorization_code
and refresh_token) against the accounts service. Client credentials are sent
in the form body.
"""

from typing import Any, Dict, Iterable, Optional
from urllib.parse import urlencode

import requests
from loguru import logger

from track_stash.core.config import SpotifyConfig

from .exceptions import TokenRequestError

# Spotify OAuth URLs
AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
TOKEN_URL = "https://accounts.spotify.com/api/token"

REQUEST_TIMEOUT = 30


def build_authorize_url(
    config: SpotifyConfig, scopes: Optional[Iterable[str]] = None
) -> str:
    """Build the provider consent URL the user is redirected to."""
    scope_list = list(scopes if scopes is not None else config.scopes)
    params = {
        "client_id": config.client_id,
        "response_type": "code",
        "redirect_uri": config.redirect_uri,
        "scope": " ".join(s.strip() for s in scope_list if s.strip()),
    }
    return f"{AUTHORIZE_URL}?{urlencode(params)}"


def exchange_code(config: SpotifyConfig, code: str) -> Dict[str, Any]:
    """Exchange an authorization code for an access/refresh token pair.

    Args:
        config: Spotify application settings
        code: One-time code from the OAuth callback

    Returns:
        Token response JSON (access_token, refresh_token, expires_in, ...)

    Raises:
        TokenRequestError: On network failure, non-2xx status or a body
            without an access token
    """
    logger.debug("Exchanging authorization code for tokens")
    return _post_token_form(
        {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": config.redirect_uri,
            "client_id": config.client_id,
            "client_secret": config.client_secret,
        }
    )


def refresh_access_token(config: SpotifyConfig, refresh_token: str) -> Dict[str, Any]:
    """Obtain a new access token with the stored refresh token.

    Raises:
        TokenRequestError: On network failure, non-2xx status or a body
            without an access token
    """
    logger.debug("Requesting refreshed access token")
    return _post_token_form(
        {
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
            "client_id": config.client_id,
            "client_secret": config.client_secret,
        }
    )


def _error_payload(response: requests.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _post_token_form(form: Dict[str, Any]) -> Dict[str, Any]:
    data = {k: str(v) for k, v in form.items() if v is not None}

    try:
        response = requests.post(
            TOKEN_URL,
            data=data,
            headers={"Content-Type": "application/x-www-form-urlencoded"},
            timeout=REQUEST_TIMEOUT,
        )
    except requests.RequestException as e:
        raise TokenRequestError(f"Spotify token request failed: {e}") from e

    if not response.ok:
        payload = _error_payload(response)
        raise TokenRequestError(
            f"Spotify token request failed (HTTP {response.status_code})",
            status_code=response.status_code,
            payload=payload,
        )

    try:
        token_data = response.json()
    except ValueError as e:
        raise TokenRequestError(
            "Spotify token response was not JSON",
            status_code=response.status_code,
            payload=response.text,
        ) from e

    if not isinstance(token_data, dict) or not token_data.get("access_token"):
        raise TokenRequestError(
            "Spotify token response did not contain an access token",
            status_code=response.status_code,
            payload=token_data,
        )

    return token_data
