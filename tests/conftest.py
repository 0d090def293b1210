"""Shared fixtures for domain and core tests."""

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from track_stash.core.config import SpotifyConfig


def build_response(
    status_code: int = 200, json_body: Any = None, text: str = ""
) -> MagicMock:
    """Stand-in for requests.Response with the attributes our code reads."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.text = text
    if json_body is None:
        response.json.side_effect = ValueError("No JSON body")
    else:
        response.json.return_value = json_body
    return response


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    return build_response


@pytest.fixture
def spotify_config() -> SpotifyConfig:
    return SpotifyConfig(
        client_id="client-123",
        client_secret="secret-456",
        redirect_uri="http://localhost:3000/callback",
        playlist_id="playlist-789",
    )
