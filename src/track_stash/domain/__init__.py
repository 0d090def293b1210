"""Domain layer - credential state, Spotify calls and gateway operations."""

from .credentials import CredentialStore, SessionCredential
from .gateway import AddTrackOutcome
from .refresher import TokenRefresher

__all__ = [
    "AddTrackOutcome",
    "CredentialStore",
    "SessionCredential",
    "TokenRefresher",
]
