"""
Track Stash CLI - starts the gateway web server.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from loguru import logger

from track_stash.core.config import load_config
from track_stash.core.output import setup_loguru


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="track-stash",
        description="Add the Spotify track you are listening to to a playlist.",
    )
    parser.add_argument("--host", help="Interface to bind (default: HOST or 0.0.0.0)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: PORT or 3000)")
    parser.add_argument("--config", type=Path, help="Path to a config.toml file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Override the configured log level",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ValueError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    if args.host:
        config.server.host = args.host
    if args.port:
        config.server.port = args.port
    if args.log_level:
        config.logging.level = args.log_level

    setup_loguru(
        level=config.logging.level,
        log_file=Path(config.logging.log_file) if config.logging.log_file else None,
        console_output=config.logging.console_output,
    )

    import uvicorn

    from web.backend.main import app

    app.state.config = config
    logger.debug(f"Starting uvicorn on {config.server.host}:{config.server.port}")
    uvicorn.run(app, host=config.server.host, port=config.server.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
