"""
Configuration management for Track Stash
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from loguru import logger

# Spotify API scopes needed to read playback and modify playlists
DEFAULT_SCOPES = [
    "playlist-modify-private",
    "playlist-modify-public",
    "user-read-playback-state",
]

DEFAULT_PORT = 3000
DEFAULT_REFRESH_INTERVAL_SECONDS = 55 * 60


@dataclass
class SpotifyConfig:
    """Configuration for the Spotify OAuth application."""

    client_id: str = ""
    client_secret: str = ""
    redirect_uri: str = ""
    playlist_id: str = ""
    scopes: List[str] = field(default_factory=lambda: list(DEFAULT_SCOPES))


@dataclass
class ServerConfig:
    """Configuration for the HTTP server and background refresh."""

    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    refresh_interval_seconds: int = DEFAULT_REFRESH_INTERVAL_SECONDS


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = None  # No file sink unless set
    console_output: bool = True


@dataclass
class Config:
    """Main configuration object."""

    spotify: SpotifyConfig = field(default_factory=SpotifyConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def missing_fields(self) -> List[str]:
        """Return the environment names of required settings that are empty."""
        required = {
            "CLIENT_ID": self.spotify.client_id,
            "CLIENT_SECRET": self.spotify.client_secret,
            "REDIRECT_URI": self.spotify.redirect_uri,
            "PLAYLIST_ID": self.spotify.playlist_id,
        }
        return [name for name, value in required.items() if not value]


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "track-stash"
    return Path.home() / ".config" / "track-stash"


def _find_project_config() -> Optional[Path]:
    """Find config.toml next to pyproject.toml when running from a checkout."""
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            return config_path if config_path.exists() else None
    return None


def get_config_path() -> Path:
    """Get the TOML configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/track-stash (or ~/.config/track-stash)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(
            f"Environment variable {name} must be an integer, got {raw!r}"
        ) from None


def _parse_scopes(value: Any) -> List[str]:
    """Accept a TOML list or a space-separated string of scopes."""
    if isinstance(value, str):
        return value.split()
    return [str(s).strip() for s in value if str(s).strip()]


def _apply_toml(config: Config, toml_data: Dict[str, Any]) -> None:
    if "spotify" in toml_data:
        spotify_data = toml_data["spotify"]
        config.spotify = SpotifyConfig(
            client_id=spotify_data.get("client_id", config.spotify.client_id),
            client_secret=spotify_data.get(
                "client_secret", config.spotify.client_secret
            ),
            redirect_uri=spotify_data.get("redirect_uri", config.spotify.redirect_uri),
            playlist_id=spotify_data.get("playlist_id", config.spotify.playlist_id),
            scopes=_parse_scopes(spotify_data.get("scopes", config.spotify.scopes)),
        )

    if "server" in toml_data:
        server_data = toml_data["server"]
        config.server = ServerConfig(
            host=server_data.get("host", config.server.host),
            port=int(server_data.get("port", config.server.port)),
            refresh_interval_seconds=int(
                server_data.get(
                    "refresh_interval_seconds", config.server.refresh_interval_seconds
                )
            ),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )


def _apply_env(config: Config) -> None:
    """Environment variables take precedence over TOML values."""
    spotify_env = {
        "client_id": "CLIENT_ID",
        "client_secret": "CLIENT_SECRET",
        "redirect_uri": "REDIRECT_URI",
        "playlist_id": "PLAYLIST_ID",
    }
    for attr, name in spotify_env.items():
        value = os.environ.get(name)
        if value:
            setattr(config.spotify, attr, value)

    host = os.environ.get("HOST")
    if host:
        config.server.host = host
    config.server.port = _env_int("PORT", config.server.port)
    config.server.refresh_interval_seconds = _env_int(
        "REFRESH_INTERVAL_SECONDS", config.server.refresh_interval_seconds
    )

    level = os.environ.get("LOG_LEVEL")
    if level:
        config.logging.level = level.upper()
    log_file = os.environ.get("LOG_FILE")
    if log_file:
        config.logging.log_file = str(Path(log_file).expanduser())


def load_config(config_path: Optional[Path] = None) -> Config:
    """Load configuration from .env, an optional config.toml and the environment.

    Precedence (highest first): process environment, .env files, config.toml,
    dataclass defaults.
    """
    from dotenv import load_dotenv

    # Existing environment variables are never overridden by .env files
    load_dotenv(Path.cwd() / ".env")
    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config = Config()

    path = config_path or get_config_path()
    if path.exists():
        try:
            with open(path, "rb") as f:
                toml_data = tomllib.load(f)
            _apply_toml(config, toml_data)
        except (tomllib.TOMLDecodeError, OSError, ValueError) as e:
            logger.warning(f"Error loading configuration from {path}: {e}")
            logger.warning("Using default configuration.")
            config = Config()

    _apply_env(config)
    return config
