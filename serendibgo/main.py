from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import DEFAULT_CONFIG_PATH, load_config
from .exceptions import ConfigError, ListenError
from .server import create_server

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("serendibgo")


def configure_logging(debug: bool = False) -> None:
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="serendibgo", description="Run the serendibgo HTTP server.")
    parser.add_argument(
        "config",
        nargs="?",
        default=DEFAULT_CONFIG_PATH,
        help=f"path to the JSON configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()

    try:
        config = load_config(args.config)
    except ConfigError as e:
        logger.error("Error loading configuration: %s", e.message)
        return 1

    if config.is_development:
        configure_logging(debug=True)
    logger.info("Loaded configuration from %s (env=%s)", args.config, config.env or "-")

    server = create_server(config)
    try:
        server.serve()
    except ListenError as e:
        logger.error("Error starting server: %s", e.message)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0
