"""
In-memory session credential for the authorized Spotify user.

One store per process, created at startup and handed to both the HTTP
handlers and the refresh worker. Nothing is written to disk.
"""

import threading
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SessionCredential:
    """Access/refresh token pair. Both unset until the first exchange."""

    access_token: Optional[str] = None
    refresh_token: Optional[str] = None

    @property
    def is_authorized(self) -> bool:
        return bool(self.access_token)

    @property
    def can_refresh(self) -> bool:
        return bool(self.refresh_token)


class CredentialStore:
    """Holds the single SessionCredential, replaced as a whole value."""

    def __init__(self, credential: Optional[SessionCredential] = None):
        self._credential = credential or SessionCredential()
        self._lock = threading.Lock()

    def get(self) -> SessionCredential:
        """Snapshot of the current token pair."""
        with self._lock:
            return self._credential

    def set(
        self, access_token: str, refresh_token: Optional[str] = None
    ) -> SessionCredential:
        """Replace the stored pair.

        A missing refresh token keeps the one already held; once set it is
        never cleared.
        """
        with self._lock:
            self._credential = SessionCredential(
                access_token=access_token,
                refresh_token=refresh_token or self._credential.refresh_token,
            )
            return self._credential

    @property
    def is_authorized(self) -> bool:
        return self.get().is_authorized
