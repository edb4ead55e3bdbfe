"""Classify how much of an absence falls on a given day."""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union

from .models import AbsenceDuration, AbsenceRecord, DayPart, Days, PartOfDay, Unknown

logger = logging.getLogger("todays_absences")

LogSink = Callable[[str], None]

# A day-part that failed to parse is carried as its raw string.
ParsedDayPart = Union[DayPart, str]


def to_day_part(raw: str) -> ParsedDayPart:
    try:
        return DayPart(raw)
    except ValueError:
        return raw


def _parse_date(raw: str) -> date | str:
    try:
        return date.fromisoformat(raw)
    except (TypeError, ValueError):
        return f"Unable to parse date {raw!r}"


def _first_error(*parts: ParsedDayPart) -> Optional[str]:
    for part in parts:
        if not isinstance(part, DayPart):
            return part
    return None


def get_duration(today: date, absence: AbsenceRecord, log: LogSink | None = None) -> AbsenceDuration:
    """Return the duration of ``absence`` as seen from ``today``.

    The result is always one of ``Days``, ``PartOfDay`` or ``Unknown``;
    malformed dates and day-parts never raise.
    """

    log = log or logger.warning
    start_part = to_day_part(absence.start_portion)
    end_part = to_day_part(absence.end_portion)
    start_date = _parse_date(absence.start_date)
    end_date = _parse_date(absence.end_date)

    if isinstance(end_date, str):
        return Unknown(end_date)
    if isinstance(start_date, str):
        return Unknown(start_date)

    if today == end_date:
        if start_part is DayPart.ALL_DAY:
            return Days(Decimal(1))
        if isinstance(start_part, DayPart):
            return PartOfDay(start_part)
        return Unknown(start_part)

    if today == start_date:
        if start_part is DayPart.AFTERNOON:
            return PartOfDay(DayPart.AFTERNOON)
        error = _first_error(start_part, end_part)
        if (start_part, end_part) == (DayPart.AFTERNOON, DayPart.MORNING):
            offset = Decimal("0.0")
        elif (start_part, end_part) == (DayPart.AFTERNOON, DayPart.ALL_DAY):
            offset = Decimal("0.5")
        elif error is not None:
            log(f"Unknown part of day {error}")
            offset = Decimal("1.0")
        else:
            offset = Decimal("1.0")
        return Days(Decimal((end_date - today).days) + offset)

    # middle of the absence
    if end_part is DayPart.MORNING:
        offset = Decimal("0.5")
    elif not isinstance(end_part, DayPart):
        log(f"Unknown part of day {end_part}")
        offset = Decimal("1.0")
    else:
        offset = Decimal("1.0")
    return Days(Decimal((end_date - today).days) + offset)


def describe_duration(duration: AbsenceDuration, log: LogSink | None = None) -> str:
    """Human readable text for a duration; unknown reasons go to ``log``."""

    if isinstance(duration, Days):
        text = f"{duration.days.normalize():f}"
        return f"{text} day" if duration.days == 1 else f"{text} days"
    if isinstance(duration, PartOfDay):
        if duration.part is DayPart.MORNING:
            return "Part-day (AM)"
        if duration.part is DayPart.AFTERNOON:
            return "Part-day (PM)"
        return "All day"
    (log or logger.warning)(duration.reason)
    return "Unknown duration"


__all__ = ["LogSink", "to_day_part", "get_duration", "describe_duration"]
