"""Nimm server entry point.

Usage:
    python -m nimm [--host HOST] [--port PORT]

Settings come from `NIMM_*` environment variables (optionally from a `.env`
file in the working directory); command-line flags win over both.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from nimm.settings import Settings

logger = logging.getLogger("nimm.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="nimm", description="Serve Nim games to terminal clients")
    parser.add_argument("--host", help="Address to listen on (default: NIMM_HOST or 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: NIMM_PORT or 2222)")
    return parser


def load_settings(argv: list[str] | None = None) -> Settings:
    args = build_parser().parse_args(argv)

    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)

    settings = Settings.from_env()
    if args.host:
        settings = replace(settings, host=args.host)
    if args.port is not None:
        settings = replace(settings, port=args.port)
    settings.validate()
    return settings


def main(argv: list[str] | None = None) -> None:
    try:
        settings = load_settings(argv)
    except ValueError as e:
        logging.basicConfig(level=logging.ERROR)
        logger.critical("%s", e)
        sys.exit(2)

    # Imported late so logging picks up the level from the loaded settings.
    from nimm.main import app

    config = uvicorn.Config(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
    )
    server = uvicorn.Server(config)

    logger.info("Starting server on %s:%d", settings.host, settings.port)
    try:
        server.run()
    except OSError as e:
        logger.critical("could not start listener on %s:%d: %s", settings.host, settings.port, e)
        sys.exit(1)

    if not server.started:
        logger.critical("listener on %s:%d never started", settings.host, settings.port)
        sys.exit(1)
    logger.info("Stopped server")
