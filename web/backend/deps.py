from fastapi import Request

from track_stash.core.config import Config, load_config
from track_stash.domain.credentials import CredentialStore


def get_config(request: Request) -> Config:
    """FastAPI dependency for configuration (loaded once per app)."""
    config = getattr(request.app.state, "config", None)
    if config is None:
        config = load_config()
        request.app.state.config = config
    return config


def get_credential_store(request: Request) -> CredentialStore:
    """FastAPI dependency for the process-wide credential store."""
    store = getattr(request.app.state, "credentials", None)
    if store is None:
        store = CredentialStore()
        request.app.state.credentials = store
    return store
