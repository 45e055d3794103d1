#!/usr/bin/env python3
"""
CLI for running the Event Planning Platform API.

Usage:
    # Serve on SERVER_HOST/SERVER_PORT from the environment
    python -m planner_api.cli.serve

    # Override the listener
    python -m planner_api.cli.serve --host 0.0.0.0 --port 8000 --reload
"""

import argparse
import logging

import uvicorn

from planner_api.config import configure_logging, get_settings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Run the Event Planning Platform API server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--host",
        default=settings.server_host,
        help=f"Interface to bind (default: {settings.server_host})",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=settings.server_port,
        help=f"Port to listen on (default: {settings.server_port})",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Reload on code changes (development only)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and start uvicorn."""
    settings = get_settings()
    configure_logging(settings)
    args = build_parser().parse_args(argv)

    logger.info(
        "Event Planning Platform API starting | url=http://%s:%d environment=%s",
        args.host,
        args.port,
        settings.environment,
    )
    logger.info("Health check: http://%s:%d/api/health", args.host, args.port)

    uvicorn.run(
        "planner_api.index:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
