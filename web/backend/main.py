from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from loguru import logger

from track_stash.core.config import load_config
from track_stash.domain.credentials import CredentialStore
from track_stash.domain.refresher import TokenRefresher
from web.backend.deps import get_credential_store
from web.backend.schemas import HealthResponse


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the single credential store and run the refresh worker."""
    config = getattr(app.state, "config", None) or load_config()
    app.state.config = config

    for name in config.missing_fields():
        logger.warning(f"{name} is not set; Spotify calls will fail until it is")

    app.state.credentials = CredentialStore()
    refresher = TokenRefresher(
        app.state.credentials,
        config.spotify,
        interval=config.server.refresh_interval_seconds,
    )
    refresher.start()
    logger.info(f"Server running at http://localhost:{config.server.port}")
    try:
        yield
    finally:
        refresher.stop()


app = FastAPI(title="Track Stash", version="1.0.0", lifespan=lifespan)

# Include routers
from web.backend.routers import auth, playlist

app.include_router(auth.router, tags=["auth"])
app.include_router(playlist.router, tags=["playlist"])


@app.get("/health", response_model=HealthResponse)
async def health_check(
    store: CredentialStore = Depends(get_credential_store),
) -> HealthResponse:
    return HealthResponse(status="healthy", authorized=store.is_authorized)
