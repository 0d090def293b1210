"""Background worker that refreshes the access token on a fixed interval."""

import threading
from typing import Callable, Optional

from loguru import logger

from track_stash.core.config import SpotifyConfig

from . import gateway
from .credentials import CredentialStore


class TokenRefresher:
    """Daemon thread that calls the refresh grant every `interval` seconds.

    The first refresh happens one full interval after start(). The thread is
    the only writer of refreshed access tokens; it has no HTTP entry point.
    """

    def __init__(
        self,
        store: CredentialStore,
        config: SpotifyConfig,
        interval: float,
        refresh: Optional[Callable[[CredentialStore, SpotifyConfig], bool]] = None,
    ):
        if interval <= 0:
            raise ValueError(f"Refresh interval must be positive, got {interval}")
        self.store = store
        self.config = config
        self.interval = interval
        self._refresh = refresh or gateway.refresh_access_token
        self._stop_event = threading.Event()
        self.thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def start(self) -> None:
        """Start the refresh loop in a background thread."""
        if self.running:
            return

        self._stop_event.clear()
        self.thread = threading.Thread(
            target=self._run, name="token-refresher", daemon=True
        )
        self.thread.start()
        logger.info(f"Token refresher started (every {self.interval:.0f}s)")

    def stop(self, timeout: float = 2.0) -> None:
        """Signal the loop to exit and wait for the thread."""
        self._stop_event.set()
        if self.thread and self.thread.is_alive():
            self.thread.join(timeout=timeout)
        self.thread = None
        logger.debug("Token refresher stopped")

    def _run(self) -> None:
        # wait() returns True only when stop() was called
        while not self._stop_event.wait(self.interval):
            try:
                self._refresh(self.store, self.config)
            except Exception:
                logger.exception("Unexpected error in token refresher")
