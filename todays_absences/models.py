"""Dataclasses representing Bob payloads and the absence domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Union


# region Bob response DTOs
@dataclass(frozen=True, slots=True)
class AbsenceRecord:
    """One entry of Bob's "out today" list."""

    employee_id: str
    employee_display_name: str
    policy_type_display_name: str
    start_date: str
    end_date: str
    start_portion: str
    end_portion: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "AbsenceRecord":
        return cls(
            employee_id=str(data["employeeId"]),
            employee_display_name=data.get("employeeDisplayName") or "",
            policy_type_display_name=data.get("policyTypeDisplayName") or "",
            start_date=data.get("startDate") or "",
            end_date=data.get("endDate") or "",
            start_portion=data.get("startPortion") or "",
            end_portion=data.get("endPortion") or "",
        )


@dataclass(frozen=True, slots=True)
class AbsencesResponse:
    outs: tuple[AbsenceRecord, ...] = ()

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "AbsencesResponse":
        return cls(outs=tuple(AbsenceRecord.from_json(item) for item in data.get("outs") or []))


@dataclass(frozen=True, slots=True)
class EmployeeDetailsResponse:
    """The `work` section of a Bob employee record."""

    department: str
    custom: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "EmployeeDetailsResponse":
        work = data.get("work") or {}
        custom = work.get("custom")
        return cls(
            department=str(work.get("department") or ""),
            custom=dict(custom) if isinstance(custom, dict) else {},
        )


# endregion


# region Domain
class Department(str, Enum):
    COMMERCIAL = "Commercial"
    CORPORATE = "Corporate"
    MARKETING = "Marketing"
    PRODUCT = "Product"
    TECH = "Tech"
    OTHER = "Other"

    @classmethod
    def create(cls, raw: str) -> "Department":
        try:
            return cls(raw)
        except ValueError:
            return cls.OTHER


class AbsencePolicy(Enum):
    """Bob policy types; the value pairs the raw name with the display label."""

    HOLIDAY = ("Holiday", "Holiday")
    WORKING_FROM_HOME = ("WFH", "WFH")
    SICK = ("Sick", "Sick Leave")
    APPOINTMENT = ("Appointment", "Appointment")
    COMPASSIONATE_LEAVE = ("Compassionate Leave", "Compassionate Leave")
    UNPAID_LEAVE = ("Unpaid Leave", "Unpaid Leave")
    CONFERENCE = ("Conference", "Conference")
    TRAINING = ("Training", "Training")
    VOLUNTEERING = ("Volunteering", "Volunteering")
    PATERNITY_LEAVE = ("Paternity Leave", "Paternity Leave")
    MATERNITY_LEAVE = ("Maternity Leave", "Maternity Leave")
    OTHER = ("Other", "Other")

    @property
    def raw(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @classmethod
    def create(cls, raw: str) -> "AbsencePolicy":
        for policy in cls:
            if policy.raw == raw:
                return policy
        return cls.OTHER


class DayPart(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"
    ALL_DAY = "all_day"


@dataclass(frozen=True, slots=True)
class Days:
    days: Decimal


@dataclass(frozen=True, slots=True)
class PartOfDay:
    part: DayPart


@dataclass(frozen=True, slots=True)
class Unknown:
    reason: str


AbsenceDuration = Union[Days, PartOfDay, Unknown]


@dataclass(frozen=True, slots=True)
class Employee:
    id: str
    display_name: str
    department: Department = Department.OTHER
    squad: Optional[str] = None

    @property
    def first_name(self) -> str:
        parts = self.display_name.split()
        return parts[0] if parts else ""


@dataclass(frozen=True, slots=True)
class EmployeeWorkDetails:
    department: Department = Department.OTHER
    squad: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Absence:
    employee: Employee
    policy: AbsencePolicy
    duration: AbsenceDuration


# endregion


__all__ = [
    "AbsenceRecord",
    "AbsencesResponse",
    "EmployeeDetailsResponse",
    "Department",
    "AbsencePolicy",
    "DayPart",
    "Days",
    "PartOfDay",
    "Unknown",
    "AbsenceDuration",
    "Employee",
    "EmployeeWorkDetails",
    "Absence",
]
