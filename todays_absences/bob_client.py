"""HTTP client for the Bob (HiBob) HR API."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

import httpx

from .config import DEFAULT_BOB_API_BASE
from .models import AbsencesResponse, EmployeeDetailsResponse


class BobApiError(RuntimeError):
    """Raised when Bob cannot be reached or returns an error response."""

    def __init__(self, path: str, error: str) -> None:
        super().__init__(f"Bob API error for {path}: {error}")
        self.path = path
        self.error = error


class BobClient:
    """Async wrapper around the two Bob endpoints the report needs."""

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BOB_API_BASE,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers={
                "Authorization": token,
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise BobApiError(path, str(exc) or type(exc).__name__) from exc
        if response.is_error:
            raise BobApiError(path, f"HTTP {response.status_code}")
        try:
            data = response.json()
        except ValueError as exc:
            raise BobApiError(path, "response was not valid JSON") from exc
        if not isinstance(data, dict):
            raise BobApiError(path, "unexpected response payload")
        return data

    async def fetch_absences(self, day: date) -> AbsencesResponse:
        """Return everyone who is out on ``day``."""

        path = "timeoff/outtoday"
        data = await self._get_json(path, params={"today": day.isoformat()})
        try:
            return AbsencesResponse.from_json(data)
        except (KeyError, TypeError, AttributeError) as exc:
            raise BobApiError(path, f"malformed absence list: {exc}") from exc

    async def fetch_employee_details(self, employee_id: str) -> EmployeeDetailsResponse:
        path = f"people/{employee_id}"
        data = await self._get_json(path)
        try:
            return EmployeeDetailsResponse.from_json(data)
        except (TypeError, AttributeError, ValueError) as exc:
            raise BobApiError(path, f"malformed employee details: {exc}") from exc


__all__ = ["BobClient", "BobApiError"]
