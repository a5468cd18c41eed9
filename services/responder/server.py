"""Command-line entrypoint that binds the listener and serves forever."""

from __future__ import annotations

import argparse
import logging

import uvicorn

from services.responder.app import create_app
from services.responder.config import get_settings
from services.responder.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Serve the HTTP responder.")
    parser.add_argument("--host", default=settings.host, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.port, help="Bind port")
    parser.add_argument("--log-level", default=settings.log_level)
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings().model_copy(
        update={
            "host": args.host,
            "port": args.port,
            "log_level": args.log_level.upper(),
        }
    )
    setup_logging(settings.log_level, settings.log_format)

    app = create_app(settings)
    logger.info("Server starting on http://%s:%s", settings.host, settings.port)

    # uvicorn binds once; any failed startup exits the process with status 1.
    try:
        uvicorn.run(
            app,
            host=settings.host,
            port=settings.port,
            log_level=uvicorn_log_level(settings.log_level),
            log_config=None,
            access_log=False,
        )
    except SystemExit as exc:
        if not exc.code:
            raise
        logger.error("Could not serve on %s:%s", settings.host, settings.port)
        raise SystemExit(1) from exc


def uvicorn_log_level(level: str) -> str:
    """Level for uvicorn's own loggers, never below WARNING."""
    if logging.getLevelName(level.upper()) in (logging.DEBUG, logging.INFO):
        return "warning"
    return level.lower()


if __name__ == "__main__":
    main()
