"""
Routes de l'API timeline.

- GET  /api/timeline/status?malId=   : disponibilité d'une timeline
- POST /api/timeline/refresh         : régénère une timeline
- POST /api/timeline/batch           : génère plusieurs timelines
- GET  /api/timeline/{mal_id}        : timeline complète d'un anime

Les timelines sont recalculées à chaque requête.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from ...config import Settings
from ...core.exceptions import TimelineError
from ...services.timeline import TimelineService
from ..deps import get_settings, get_timeline_service
from ..errors import error_payload, success_payload, timeline_error_response

router = APIRouter()

ServiceDep = Annotated[TimelineService, Depends(get_timeline_service)]


class RefreshRequest(BaseModel):
    """Corps de POST /refresh : {"malId": n} ("mal_id" accepté)."""

    model_config = ConfigDict(populate_by_name=True)

    mal_id: int = Field(gt=0, alias="malId")


class BatchRequest(BaseModel):
    """Corps de POST /batch : {"malIds": [...]} ("mal_ids" accepté)."""

    model_config = ConfigDict(populate_by_name=True)

    mal_ids: list[int] = Field(min_length=1, alias="malIds")


def _invalid_id_response(message: str = "Invalid MAL ID") -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content=error_payload("ValidationError", message, "VALIDATION_ERROR"),
    )


@router.get("/status")
def timeline_status(
    mal_id: Annotated[int, Query(alias="malId")], service: ServiceDep
):
    """Indique si une timeline peut être générée, avec ses compteurs."""
    if mal_id <= 0:
        return _invalid_id_response(
            "malId query parameter is required and must be a positive integer"
        )
    status = service.get_timeline_status(mal_id)
    return success_payload(
        {"malId": mal_id, "status": status.to_dict()},
        f"Timeline status retrieved for MAL ID {mal_id}",
    )


@router.post("/refresh")
def refresh_timeline(body: RefreshRequest, service: ServiceDep):
    """Régénère la timeline d'un anime."""
    try:
        timeline = service.refresh_timeline(body.mal_id)
    except TimelineError as e:
        logger.warning(f"POST /api/timeline/refresh : {e}")
        return timeline_error_response(e)
    return success_payload(
        {"timeline": timeline.to_dict()},
        f"Timeline refreshed for MAL ID {body.mal_id}",
    )


@router.post("/batch")
def batch_timelines(
    body: BatchRequest,
    service: ServiceDep,
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Génère les timelines de plusieurs animes ; les échecs sont rapportés par ID."""
    if len(body.mal_ids) > settings.batch_max_size:
        return _invalid_id_response(
            f"At most {settings.batch_max_size} MAL IDs per batch"
        )
    if any(mal_id <= 0 for mal_id in body.mal_ids):
        return _invalid_id_response("malIds must all be positive integers")

    result = service.batch_get_timelines(body.mal_ids)
    return success_payload(
        result.to_dict(),
        f"Batch processed: {len(result.successful)} successful, {len(result.failed)} failed",
    )


@router.get("/{mal_id}")
def get_timeline(mal_id: int, service: ServiceDep):
    """Timeline chronologique complète d'un anime."""
    if mal_id <= 0:
        return _invalid_id_response()
    try:
        timeline = service.get_timeline(mal_id)
    except TimelineError as e:
        logger.warning(f"GET /api/timeline/{mal_id} : {e}")
        return timeline_error_response(e)
    return success_payload(
        {"timeline": timeline.to_dict()},
        f"Timeline generated for MAL ID {mal_id}",
    )
