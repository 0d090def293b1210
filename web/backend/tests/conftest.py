"""Pytest configuration for backend tests.

The app is exercised without its lifespan: config and the credential store
are injected through dependency overrides, so no refresher thread runs.
"""

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from track_stash.core.config import Config, SpotifyConfig
from track_stash.domain.credentials import CredentialStore
from web.backend.deps import get_config, get_credential_store
from web.backend.main import app


def _build_response(status_code: int = 200, json_body: Any = None, text: str = "") -> MagicMock:
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
    return _build_response


@pytest.fixture
def test_config() -> Config:
    return Config(
        spotify=SpotifyConfig(
            client_id="client-123",
            client_secret="secret-456",
            redirect_uri="http://localhost:3000/callback",
            playlist_id="playlist-789",
        )
    )


@pytest.fixture
def store() -> CredentialStore:
    return CredentialStore()


@pytest.fixture
def client(test_config: Config, store: CredentialStore):
    app.dependency_overrides[get_config] = lambda: test_config
    app.dependency_overrides[get_credential_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
