"""Run the API with uvicorn: ``python -m arun_api``."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import uvicorn
from loguru import logger

from .config import DEFAULT_PORT, Settings, get_settings


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the arun API.")
    parser.add_argument("--host", default=None, help="Bind address (defaults to HOST or 0.0.0.0).")
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (defaults to API_ARUN_GG_PORT or 3000).",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL, e.g. DEBUG.")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes.")
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    logger.remove()
    logger.add(sys.stderr, level=level.upper())


def resolve_port(settings: Settings, override: Optional[int] = None) -> int:
    if override is not None:
        return override
    if settings.port is not None:
        return settings.port
    logger.warning("No value provided for API_ARUN_GG_PORT. Defaulting to :{}", DEFAULT_PORT)
    return DEFAULT_PORT


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    settings = get_settings()
    level = args.log_level or settings.effective_log_level
    configure_logging(level)

    host = args.host or settings.host
    port = resolve_port(settings, args.port)
    logger.info("Listening on {}:{}", host, port)
    uvicorn.run(
        "arun_api.main:app",
        host=host,
        port=port,
        reload=args.reload,
        log_level=level.lower(),
    )


if __name__ == "__main__":  # pragma: no cover - manual entrypoint
    main()
