"""Command line entry point: ``tapcount`` / ``python -m tapcount``."""

import argparse
import logging
from pathlib import Path

import uvicorn

from .app import create_app
from .config import AppConfig, parse_port
from .log import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tapcount",
        description="Serve the click counter page and its JSON API.",
    )
    parser.add_argument("--host", help="Interface to bind (env: HOST)")
    parser.add_argument("--port", type=parse_port, help="Port to listen on (env: PORT, default 3000)")
    parser.add_argument("--data-path", type=Path, help="Counter file (env: TAPCOUNT_DATA_PATH)")
    return parser


def load_config(argv=None) -> AppConfig:
    args = build_parser().parse_args(argv)
    config = AppConfig.from_env()
    if args.host:
        config.host = args.host
    if args.port:
        config.port = args.port
    if args.data_path:
        config.data_path = args.data_path
    return config


def main(argv=None):
    config = load_config(argv)
    setup_logging(config.logging)

    app = create_app(config)
    logger.info(f"Server running on http://localhost:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == "__main__":
    main()
