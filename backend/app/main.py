"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from app.config import get_settings
from app.db.session import SessionLocal
from app.routers import provider_types, providers
from app.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)
settings = get_settings()


def _warm_backend_state() -> None:
    """Prime the DB connection pool at process start."""

    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
    except Exception:
        logger.exception("Backend warm-up failed; continuing without startup pre-warm.")


@asynccontextmanager
async def lifespan(_: FastAPI):
    _warm_backend_state()
    yield


app = FastAPI(title=settings.app_name, version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(provider_types.router, tags=["provider-types"])
app.include_router(providers.router, tags=["providers"])


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Report store failures as 503 so they differ from an empty result."""

    logger.exception(
        "provider_store.failure method=%s path=%s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    payload = ErrorResponse(detail="Provider store unavailable")
    return JSONResponse(status_code=503, content=payload.model_dump())


@app.get("/health")
def health() -> dict[str, str]:
    """Simple health check endpoint."""

    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
