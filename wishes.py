"""
wishes.py - Friendship Day ASCII greeting cards over HTTP.

Usage:
    python wishes.py                      # Start with settings from the environment / .env
    python wishes.py --port 8080          # Custom port
    python wishes.py --host 127.0.0.1     # Bind to loopback only

Home page: http://localhost:6054 (default)
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

load_dotenv(Path(__file__).parent / ".env", override=True)

from core.config import Settings, settings
from web.server import create_app

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger("wishes")


def configure_logging(config: Settings) -> None:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if config.log_file:
        try:
            handlers.append(logging.FileHandler(config.log_file))
        except PermissionError:
            print(
                f"WARNING: Cannot write to {config.log_file} (permission denied), "
                "logging to stdout only.",
                file=sys.stderr,
            )
    logging.basicConfig(level=config.log_level, format=LOG_FORMAT, handlers=handlers)


def serve(config: Settings) -> None:
    """Run the server until interrupted."""
    app = create_app(config)
    server = uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
            access_log=config.access_log,
        )
    )

    logger.info("Server starting on %s:%d", config.host, config.port)
    # Bind failures are logged by uvicorn, which then exits with status 1
    server.run()
    logger.info("Server stopped")


def main():
    parser = argparse.ArgumentParser(description="Friendship Day greeting card server")
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Interface to bind (default: {settings.host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to listen on (default: {settings.port})",
    )
    args = parser.parse_args()

    config = replace(settings, host=args.host, port=args.port)
    configure_logging(config)
    serve(config)


if __name__ == "__main__":
    main()
