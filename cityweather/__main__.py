"""Run the weather page server: ``python -m cityweather``."""

from __future__ import annotations

import argparse
import logging
import sys

from aiohttp import web

from .config import load_config
from .errors import ConfigError
from .logs import setup_logging
from .web import create_app

_LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cityweather",
        description="Serve a page that looks up the current weather for a city.",
    )
    parser.add_argument(
        "--config",
        help="YAML config file; must set api_key unless CITYWEATHER_API_KEY is set",
    )
    parser.add_argument("--host", help="interface to bind (overrides config)")
    parser.add_argument("--port", type=int, help="port to listen on (overrides config)")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.debug else logging.INFO)

    try:
        config = load_config(args.config)
    except ConfigError as err:
        _LOGGER.error("%s", err)
        return 2

    host = args.host or config.host
    port = args.port or config.port
    web.run_app(create_app(config), host=host, port=port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
