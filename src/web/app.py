"""
Application FastAPI d'AnimeChrono.

Initialise l'application web avec le Container DI, installe les
gestionnaires d'erreurs JSON et monte les routes de l'API timeline.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..container import Container
from .errors import error_payload
from .routes.timeline import router as timeline_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage."""
    container = Container()
    container.database.init()
    app.state.container = container
    yield


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Requête invalide : 400 au format d'erreur de l'API."""
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in exc.errors()
    )
    return JSONResponse(
        status_code=400,
        content=error_payload("ValidationError", details, "VALIDATION_ERROR"),
    )


def create_app() -> FastAPI:
    """Construit l'application FastAPI."""
    application = FastAPI(title="AnimeChrono", lifespan=lifespan)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.include_router(timeline_router, prefix="/api/timeline")
    return application


app = create_app()
