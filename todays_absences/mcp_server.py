"""MCP server exposing the absence report as tools."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, datetime
from typing import Optional

from mcp.server.fastmcp import FastMCP

from .config import load_settings
from .service import AbsenceService, absence_to_dict, create_service

_service: Optional[AbsenceService] = None


@asynccontextmanager
async def _lifespan(_server: FastMCP) -> AsyncIterator[dict]:
    try:
        yield {}
    finally:
        await close_service()


mcp = FastMCP("todays-absences", lifespan=_lifespan)


def _get_service() -> AbsenceService:
    global _service
    if _service is None:
        _service = create_service(load_settings())
    return _service


async def close_service() -> None:
    """Close the shared HTTP clients; the next tool call opens new ones."""

    global _service
    if _service is not None:
        service, _service = _service, None
        await service.close()


def _ensure_date(day_str: Optional[str] = None) -> date:
    if not day_str:
        return date.today()
    return datetime.strptime(day_str, "%Y-%m-%d").date()


@mcp.tool()
async def get_absences(date: Optional[str] = None) -> dict:
    """Return who is absent on the date (YYYY-MM-DD, default today) and for how long."""

    day = _ensure_date(date)
    service = _get_service()
    absences = await service.get_absences(day)
    return {
        "date": day.isoformat(),
        "absences": [absence_to_dict(a, service.log) for a in absences],
    }


@mcp.tool()
async def get_absence_message(date: Optional[str] = None) -> dict:
    """Return the Slack message that would be posted for the date."""

    day = _ensure_date(date)
    message = await _get_service().build_message(day)
    return message.to_json()


def run() -> None:
    mcp.run()


if __name__ == "__main__":  # pragma: no cover
    run()


__all__ = ["mcp", "get_absences", "get_absence_message", "close_service", "run"]
