"""Core infrastructure layer - configuration and logging output.

The core layer has no dependencies on the domain or web layers.
"""

from .config import (
    Config,
    LoggingConfig,
    ServerConfig,
    SpotifyConfig,
    get_config_dir,
    get_config_path,
    load_config,
)
from .output import mask_token, setup_loguru

__all__ = [
    "Config",
    "LoggingConfig",
    "ServerConfig",
    "SpotifyConfig",
    "get_config_dir",
    "get_config_path",
    "load_config",
    "mask_token",
    "setup_loguru",
]
