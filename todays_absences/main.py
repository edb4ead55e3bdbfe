"""Entrypoint for posting today's absences via `python -m todays_absences.main`."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from datetime import date, datetime
from typing import Optional, Sequence

import uvicorn

from .api import create_app
from .bob_client import BobApiError
from .config import Settings, load_settings
from .service import create_service
from .slack_client import SlackWebhookError

logger = logging.getLogger("todays_absences")


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError as exc:
        raise argparse.ArgumentTypeError("Invalid date format. Use YYYY-MM-DD") from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todays-absences",
        description="Post today's absences and holidays from Bob to Slack.",
    )
    parser.add_argument("--env-file", default=os.getenv("TODAYS_ABSENCES_ENV"))
    parser.add_argument("--date", type=_parse_date, default=None, help="day to report, YYYY-MM-DD")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the message JSON instead of posting it",
    )
    subparsers = parser.add_subparsers(dest="command")
    serve = subparsers.add_parser("serve", help="run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0")
    serve.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, handlers=[logging.StreamHandler()])


async def report(settings: Settings, day: date, dry_run: bool = False) -> dict:
    service = create_service(settings)
    try:
        if dry_run:
            message = await service.build_message(day)
        else:
            message = await service.post_absences(day)
    finally:
        await service.close()
    return message.to_json()


def serve(settings: Settings, host: str, port: int) -> None:
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.env_file)
    configure_logging(settings.log_level)

    if args.command == "serve":
        serve(settings, args.host, args.port)
        return 0

    day = args.date or date.today()
    try:
        message = asyncio.run(report(settings, day, dry_run=args.dry_run))
    except (BobApiError, SlackWebhookError) as exc:
        logger.error("Failed to report absences for %s: %s", day.isoformat(), exc)
        return 1

    if args.dry_run:
        print(json.dumps(message, indent=2))
    return 0


def main() -> None:  # pragma: no cover
    sys.exit(run())


if __name__ == "__main__":  # pragma: no cover
    main()
