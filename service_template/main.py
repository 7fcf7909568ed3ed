#!/usr/bin/env python3
"""
Run one of the template services.

Usage:
    service-template
    service-template backend --port 9000
    service-template template-1 --log-level debug
"""

import argparse
import logging
import sys

import uvicorn

from .api import create_app
from .config import settings
from .services import SERVICES, UnknownServiceError, get_service

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="service-template",
        description="Run a template HTTP service",
    )
    parser.add_argument(
        "service",
        nargs="?",
        default=settings.service,
        help=f"Service to run ({', '.join(SERVICES)}; default: {settings.service})",
    )
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port (default: the service's port)")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the selected service in the foreground."""
    args = build_parser().parse_args(argv)

    try:
        config = get_service(args.service)
    except UnknownServiceError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    run_settings = settings.model_copy(update={"log_level": args.log_level})
    app = create_app(config, run_settings)
    port = args.port or config.port

    logger.info("%s listening on %s:%d", config.name, args.host, port)

    # Bind failures are fatal: uvicorn logs them and exits non-zero.
    uvicorn.run(
        app,
        host=args.host,
        port=port,
        log_level=args.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
