"""Configuration helpers for Today's Absences."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BOB_API_BASE = "https://api.hibob.com/v1"
DEFAULT_SQUAD_FIELD = "squad_5Gqot"


@dataclass(slots=True)
class Settings:
    """Runtime configuration values loaded from environment variables."""

    bob_api_token: str
    slack_webhook_url: str
    bob_api_base: str = DEFAULT_BOB_API_BASE
    squad_field: str = DEFAULT_SQUAD_FIELD
    api_key: Optional[str] = None
    http_timeout: float = 10.0
    log_level: str = "INFO"


def load_settings(env_file: str | None = None) -> Settings:
    """Load settings from the environment, optionally from a specific file."""

    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    bob_token = os.getenv("BOB_API_TOKEN")
    webhook_url = os.getenv("SLACK_WEBHOOK_URL")

    if not bob_token:
        raise RuntimeError("BOB_API_TOKEN must be configured")
    if not webhook_url:
        raise RuntimeError("SLACK_WEBHOOK_URL must be configured")

    return Settings(
        bob_api_token=bob_token,
        slack_webhook_url=webhook_url,
        bob_api_base=os.getenv("BOB_API_BASE", DEFAULT_BOB_API_BASE).rstrip("/"),
        squad_field=os.getenv("BOB_SQUAD_FIELD", DEFAULT_SQUAD_FIELD),
        api_key=os.getenv("API_KEY") or None,
        http_timeout=float(os.getenv("HTTP_TIMEOUT", "10")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


__all__ = ["Settings", "load_settings", "DEFAULT_BOB_API_BASE", "DEFAULT_SQUAD_FIELD"]
