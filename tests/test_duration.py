from datetime import date
from decimal import Decimal

import pytest

from todays_absences.duration import describe_duration, get_duration, to_day_part
from todays_absences.models import DayPart, Days, PartOfDay, Unknown


def test_to_day_part_known_values():
    assert to_day_part("morning") is DayPart.MORNING
    assert to_day_part("afternoon") is DayPart.AFTERNOON
    assert to_day_part("all_day") is DayPart.ALL_DAY


def test_to_day_part_is_case_sensitive():
    """Unrecognised day-parts are carried as their raw string."""
    assert to_day_part("Morning") == "Morning"
    assert not isinstance(to_day_part("Morning"), DayPart)


def test_single_all_day_absence(make_record):
    record = make_record(start_date="2024-01-01", end_date="2024-01-01")
    assert get_duration(date(2024, 1, 1), record) == Days(Decimal(1))


@pytest.mark.parametrize("portion, part", [("morning", DayPart.MORNING), ("afternoon", DayPart.AFTERNOON)])
def test_last_day_uses_start_part(make_record, portion, part):
    record = make_record(start_portion=portion, end_portion=portion)
    assert get_duration(date(2024, 1, 1), record) == PartOfDay(part)


def test_last_day_with_unknown_start_part(make_record):
    record = make_record(start_portion="noon")
    assert get_duration(date(2024, 1, 1), record) == Unknown("noon")


@pytest.mark.parametrize("end_portion", ["morning", "afternoon", "all_day", "noon"])
def test_first_day_afternoon_start_is_half_day(make_record, end_portion):
    record = make_record(
        start_date="2024-01-01",
        end_date="2024-01-03",
        start_portion="afternoon",
        end_portion=end_portion,
    )
    assert get_duration(date(2024, 1, 1), record) == PartOfDay(DayPart.AFTERNOON)


def test_first_day_of_multi_day_absence(make_record):
    record = make_record(start_date="2024-01-01", end_date="2024-01-03")
    assert get_duration(date(2024, 1, 1), record) == Days(Decimal(3))


def test_first_day_unknown_part_defaults_to_full_day(make_record):
    logs = []
    record = make_record(
        start_date="2024-01-01",
        end_date="2024-01-03",
        start_portion="morning",
        end_portion="noon",
    )
    assert get_duration(date(2024, 1, 1), record, logs.append) == Days(Decimal(3))
    assert logs == ["Unknown part of day noon"]


def test_middle_day_with_morning_end(make_record):
    record = make_record(
        start_date="2024-01-01",
        end_date="2024-01-03",
        start_portion="afternoon",
        end_portion="morning",
    )
    assert get_duration(date(2024, 1, 2), record) == Days(Decimal("1.5"))


def test_middle_day_with_all_day_end(make_record):
    record = make_record(start_date="2024-01-01", end_date="2024-01-05")
    assert get_duration(date(2024, 1, 2), record) == Days(Decimal(4))


def test_middle_day_unknown_end_part_is_logged(make_record):
    logs = []
    record = make_record(start_date="2024-01-01", end_date="2024-01-03", end_portion="evening")
    assert get_duration(date(2024, 1, 2), record, logs.append) == Days(Decimal(2))
    assert logs == ["Unknown part of day evening"]


def test_final_day_of_range_with_afternoon_start(make_record):
    record = make_record(
        start_date="2024-01-01",
        end_date="2024-01-03",
        start_portion="afternoon",
        end_portion="morning",
    )
    assert get_duration(date(2024, 1, 3), record) == PartOfDay(DayPart.AFTERNOON)


@pytest.mark.parametrize("field", ["start_date", "end_date"])
def test_unparseable_date_is_unknown(make_record, field):
    record = make_record(**{field: "01/02/2024"})
    result = get_duration(date(2024, 1, 1), record)
    assert isinstance(result, Unknown)
    assert "01/02/2024" in result.reason


@pytest.mark.parametrize("start_portion", ["morning", "afternoon", "all_day", "", "noon"])
@pytest.mark.parametrize("end_portion", ["morning", "afternoon", "all_day", "", "noon"])
@pytest.mark.parametrize("today", [date(2024, 1, 1), date(2024, 1, 2), date(2024, 1, 3)])
def test_classification_is_total(make_record, start_portion, end_portion, today):
    record = make_record(
        start_date="2024-01-01",
        end_date="2024-01-03",
        start_portion=start_portion,
        end_portion=end_portion,
    )
    result = get_duration(today, record, lambda _message: None)
    assert isinstance(result, (Days, PartOfDay, Unknown))


@pytest.mark.parametrize(
    "duration, text",
    [
        (Days(Decimal(1)), "1 day"),
        (Days(Decimal("1.0")), "1 day"),
        (Days(Decimal("1.5")), "1.5 days"),
        (Days(Decimal("3.0")), "3 days"),
        (Days(Decimal("10.0")), "10 days"),
        (PartOfDay(DayPart.MORNING), "Part-day (AM)"),
        (PartOfDay(DayPart.AFTERNOON), "Part-day (PM)"),
        (PartOfDay(DayPart.ALL_DAY), "All day"),
    ],
)
def test_describe_duration(duration, text):
    assert describe_duration(duration) == text


def test_describe_unknown_duration_logs_reason():
    logs = []
    assert describe_duration(Unknown("noon"), logs.append) == "Unknown duration"
    assert logs == ["noon"]


def test_end_date_error_reported_when_both_dates_fail(make_record):
    record = make_record(start_date="start?", end_date="end?")
    assert get_duration(date(2024, 1, 1), record) == Unknown("Unable to parse date 'end?'")
