"""Core orchestration logic for Today's Absences."""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import Any, Dict, List, Union

from .bob_client import BobApiError, BobClient
from .config import DEFAULT_SQUAD_FIELD, Settings
from .duration import LogSink, describe_duration, get_duration
from .message import Message, build_message
from .models import (
    Absence,
    AbsencePolicy,
    AbsenceRecord,
    Department,
    Employee,
    EmployeeDetailsResponse,
    EmployeeWorkDetails,
)
from .slack_client import SlackWebhookClient

logger = logging.getLogger("todays_absences")

DetailsResult = Union[EmployeeDetailsResponse, Exception]


def work_details(
    details: DetailsResult,
    log: LogSink,
    squad_field: str = DEFAULT_SQUAD_FIELD,
) -> EmployeeWorkDetails:
    """Map a details lookup onto department and squad, defaulting on failure."""

    if isinstance(details, Exception):
        log(str(details))
        return EmployeeWorkDetails()
    squad = details.custom.get(squad_field)
    return EmployeeWorkDetails(
        department=Department.create(details.department),
        squad=str(squad) if squad else None,
    )


def to_absence(
    record: AbsenceRecord,
    details: DetailsResult,
    today: date,
    log: LogSink,
    squad_field: str = DEFAULT_SQUAD_FIELD,
) -> Absence:
    employee_details = work_details(details, log, squad_field)
    return Absence(
        employee=Employee(
            id=record.employee_id,
            display_name=record.employee_display_name,
            department=employee_details.department,
            squad=employee_details.squad,
        ),
        policy=AbsencePolicy.create(record.policy_type_display_name),
        duration=get_duration(today, record, log),
    )


def absence_to_dict(absence: Absence, log: LogSink | None = None) -> Dict[str, Any]:
    return {
        "employee_id": absence.employee.id,
        "display_name": absence.employee.display_name,
        "department": absence.employee.department.value,
        "squad": absence.employee.squad,
        "policy": absence.policy.label,
        "duration": describe_duration(absence.duration, log),
    }


class AbsenceService:
    """Fetches today's absences from Bob and posts the summary to Slack."""

    def __init__(
        self,
        settings: Settings,
        bob: BobClient,
        slack: SlackWebhookClient,
        log: LogSink | None = None,
    ) -> None:
        self.settings = settings
        self.bob = bob
        self.slack = slack
        self.log = log or logger.warning

    async def _employee_details(self, employee_id: str) -> DetailsResult:
        try:
            return await self.bob.fetch_employee_details(employee_id)
        except BobApiError as exc:
            return exc

    async def get_absences(self, today: date) -> List[Absence]:
        """Return the assembled absences for ``today``.

        A failure to fetch the absence list propagates; a failed employee
        lookup only degrades that employee to the ``Other`` department.
        """

        response = await self.bob.fetch_absences(today)
        records = list(response.outs)
        logger.info("Fetched %d absences for %s", len(records), today.isoformat())
        details = await asyncio.gather(
            *(self._employee_details(record.employee_id) for record in records)
        )
        return [
            to_absence(record, detail, today, self.log, self.settings.squad_field)
            for record, detail in zip(records, details)
        ]

    async def build_message(self, today: date) -> Message:
        absences = await self.get_absences(today)
        return build_message(absences, self.log)

    async def post_absences(self, today: date) -> Message:
        message = await self.build_message(today)
        await self.slack.post_message(message.to_json())
        logger.info("Posted absences for %s", today.isoformat())
        return message

    async def close(self) -> None:
        await self.bob.close()
        await self.slack.close()


def create_service(settings: Settings, log: LogSink | None = None) -> AbsenceService:
    bob = BobClient(settings.bob_api_token, settings.bob_api_base, timeout=settings.http_timeout)
    slack = SlackWebhookClient(settings.slack_webhook_url, timeout=settings.http_timeout)
    return AbsenceService(settings, bob, slack, log)


__all__ = [
    "AbsenceService",
    "work_details",
    "to_absence",
    "absence_to_dict",
    "create_service",
]
