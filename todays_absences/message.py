"""Render assembled absences into a Slack attachment message."""

from __future__ import annotations

import unicodedata
from dataclasses import asdict, dataclass, field
from itertools import groupby
from typing import Any, Iterable, List

from .duration import LogSink, describe_duration
from .models import Absence

FALLBACK = "Today's absences and holidays, from Bob"
COLOR = "#34495e"
PRETEXT = "Today's Absences and Holidays, from <https://app.hibob.com|Bob>"
TEXT = "Sorted by Department, then by first name within departments"


@dataclass(slots=True)
class AttachmentField:
    title: str
    value: str


@dataclass(slots=True)
class Attachment:
    fallback: str = FALLBACK
    color: str = COLOR
    pretext: str = PRETEXT
    text: str = TEXT
    fields: List[AttachmentField] = field(default_factory=list)


@dataclass(slots=True)
class Message:
    attachments: List[Attachment]

    def to_json(self) -> dict[str, Any]:
        return asdict(self)


def remove_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def absence_line(absence: Absence, log: LogSink | None = None) -> str:
    """``Name *(Squad)* - Policy - Duration``; the squad is omitted when unset."""

    name = remove_accents(absence.employee.display_name)
    if absence.employee.squad:
        name = f"{name} *({absence.employee.squad})*"
    return f"{name} - {absence.policy.label} - {describe_duration(absence.duration, log)}"


def _department_name(absence: Absence) -> str:
    return absence.employee.department.value


def department_fields(absences: Iterable[Absence], log: LogSink | None = None) -> List[AttachmentField]:
    fields: List[AttachmentField] = []
    ordered = sorted(absences, key=_department_name)
    for department, group in groupby(ordered, key=_department_name):
        members = sorted(
            group,
            key=lambda a: (a.employee.first_name, a.employee.display_name, a.policy.label),
        )
        fields.append(
            AttachmentField(
                title=department,
                value="\n".join(absence_line(a, log) for a in members),
            )
        )
    return fields


def build_message(absences: Iterable[Absence], log: LogSink | None = None) -> Message:
    return Message(attachments=[Attachment(fields=department_fields(absences, log))])


__all__ = [
    "AttachmentField",
    "Attachment",
    "Message",
    "remove_accents",
    "absence_line",
    "department_fields",
    "build_message",
]
