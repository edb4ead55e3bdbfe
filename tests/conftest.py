import pytest

from todays_absences.config import Settings
from todays_absences.models import AbsenceRecord


@pytest.fixture
def settings():
    return Settings(
        bob_api_token="bob-token",
        slack_webhook_url="https://hooks.slack.test/services/T000/B000/XXX",
        api_key="secret",
    )


@pytest.fixture
def make_record():
    def _make(
        employee_id="E1",
        name="Bugs Bunny",
        policy="Holiday",
        start_date="2024-01-01",
        end_date="2024-01-01",
        start_portion="all_day",
        end_portion="all_day",
    ):
        return AbsenceRecord(
            employee_id=employee_id,
            employee_display_name=name,
            policy_type_display_name=policy,
            start_date=start_date,
            end_date=end_date,
            start_portion=start_portion,
            end_portion=end_portion,
        )

    return _make
