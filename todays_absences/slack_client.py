"""HTTP client for posting messages to a Slack incoming webhook."""

from __future__ import annotations

from typing import Any, Optional

import httpx


class SlackWebhookError(RuntimeError):
    """Raised when the webhook rejects a message."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"Slack webhook error {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class SlackWebhookClient:
    def __init__(
        self,
        webhook_url: str,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._webhook_url = webhook_url
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    async def close(self) -> None:
        await self._client.aclose()

    async def post_message(self, message: dict[str, Any]) -> None:
        try:
            response = await self._client.post(self._webhook_url, json=message)
        except httpx.HTTPError as exc:
            raise SlackWebhookError(0, str(exc) or type(exc).__name__) from exc
        if response.is_error:
            raise SlackWebhookError(response.status_code, response.text)


__all__ = ["SlackWebhookClient", "SlackWebhookError"]
