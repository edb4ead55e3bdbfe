"""FastAPI application exposing the absence report over HTTP."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from fastapi import Depends, FastAPI, Header, HTTPException, status

from .bob_client import BobApiError
from .config import Settings, load_settings
from .service import AbsenceService, absence_to_dict, create_service
from .slack_client import SlackWebhookError


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[AbsenceService] = None,
) -> FastAPI:
    settings = settings or load_settings()
    service = service or create_service(settings)

    async def verify_api_key(x_api_key: Optional[str] = Header(None, alias="X-API-Key")) -> None:
        if not settings.api_key:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="API key is not configured",
            )
        if x_api_key != settings.api_key:
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="invalid api key")

    def date_dependency(date_param: Optional[str] = None) -> date:
        if not date_param:
            return date.today()
        try:
            return datetime.strptime(date_param, "%Y-%m-%d").date()
        except ValueError as exc:
            raise HTTPException(status_code=400, detail="Invalid date format. Use YYYY-MM-DD") from exc

    app = FastAPI(title="Today's Absences API", version="1.0.0")

    @app.on_event("shutdown")
    async def shutdown_event() -> None:  # pragma: no cover - io bound
        await service.close()

    def get_service() -> AbsenceService:
        return service

    @app.get("/healthz")
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/api/absences")
    async def get_absences(
        day: date = Depends(date_dependency),
        _: None = Depends(verify_api_key),
        svc: AbsenceService = Depends(get_service),
    ) -> dict[str, object]:
        try:
            absences = await svc.get_absences(day)
        except BobApiError as exc:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
        return {
            "date": day.isoformat(),
            "absences": [absence_to_dict(a, svc.log) for a in absences],
        }

    @app.get("/api/message")
    async def preview_message(
        day: date = Depends(date_dependency),
        _: None = Depends(verify_api_key),
        svc: AbsenceService = Depends(get_service),
    ) -> dict[str, object]:
        try:
            message = await svc.build_message(day)
        except BobApiError as exc:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
        return message.to_json()

    @app.post("/api/message")
    async def post_message(
        day: date = Depends(date_dependency),
        _: None = Depends(verify_api_key),
        svc: AbsenceService = Depends(get_service),
    ) -> dict[str, object]:
        try:
            message = await svc.post_absences(day)
        except (BobApiError, SlackWebhookError) as exc:
            raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
        return {"date": day.isoformat(), "posted": True, "message": message.to_json()}

    return app


__all__ = ["create_app"]
