"""
Format des réponses de l'API timeline.

Toutes les réponses portent success et timestamp ; les erreurs portent
en plus error, message et code.
"""

from datetime import datetime, timezone
from typing import Any

from fastapi.responses import JSONResponse
from loguru import logger

from ..core.exceptions import TimelineNotFoundError

# Le détail des erreurs internes reste dans les logs
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred while processing the timeline"


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success_payload(data: dict[str, Any], message: str) -> dict[str, Any]:
    """Corps JSON d'une réponse réussie."""
    return {
        "success": True,
        "data": data,
        "message": message,
        "timestamp": _timestamp(),
    }


def error_payload(error: str, message: str, code: str) -> dict[str, Any]:
    """Corps JSON d'une réponse en erreur."""
    return {
        "success": False,
        "error": error,
        "message": message,
        "code": code,
        "timestamp": _timestamp(),
    }


def timeline_error_response(exc: Exception) -> JSONResponse:
    """
    Traduit une exception de génération en réponse HTTP.

    TimelineNotFoundError donne 404, toute autre erreur 500.
    """
    if isinstance(exc, TimelineNotFoundError):
        return JSONResponse(
            status_code=404,
            content=error_payload(
                "NotFound",
                "The requested anime or timeline could not be found",
                "NOT_FOUND",
            ),
        )
    logger.error(f"Erreur interne timeline : {exc}")
    return JSONResponse(
        status_code=500,
        content=error_payload(
            "InternalServerError",
            INTERNAL_ERROR_MESSAGE,
            "INTERNAL_SERVER_ERROR",
        ),
    )
