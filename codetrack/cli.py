"""Command line entry point."""

import argparse
import logging
import os
import sys
from collections.abc import Sequence

logger = logging.getLogger("codetrack.cli")

COMMANDS = ("serve", "init-db")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    args = list(sys.argv[1:] if argv is None else argv)
    # "serve" is implied when no subcommand is given
    if not args or args[0] not in (*COMMANDS, "-h", "--help"):
        args.insert(0, "serve")

    parser = argparse.ArgumentParser(
        prog="codetrack",
        description="Simple, open-source, self-hosted analytics for your code habits",
    )
    subparsers = parser.add_subparsers(dest="command")

    init_parser = subparsers.add_parser("init-db", help="Create the database tables and exit")
    serve_parser = subparsers.add_parser("serve", help="Start the HTTP API")

    for sub in (init_parser, serve_parser):
        sub.add_argument("--database-url", default=None, help="SQLAlchemy database URL")
        sub.add_argument("--log-level", default=None, help="Logging level (default: INFO)")

    serve_parser.add_argument("--host", default=None, help="Bind address for the API")
    serve_parser.add_argument("--port", type=int, default=None, help="Port for the API")

    return parser.parse_args(args)


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for CLI usage."""
    args = _parse_args(argv)

    # Settings are read once on first import, so the environment is set beforehand
    if args.database_url:
        os.environ["CODETRACK_DATABASE_URL"] = args.database_url

    from codetrack.config import get_settings
    from codetrack.logging_config import configure_logging

    settings = get_settings()
    log_level = args.log_level or settings.log_level
    configure_logging(log_level)

    from codetrack.database import init_db

    init_db()

    if args.command == "init-db":
        logger.info("Database initialisation complete")
        return

    import uvicorn

    from codetrack.main import app

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info(f"Listening for requests on {host}:{port}")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())


if __name__ == "__main__":
    main()
