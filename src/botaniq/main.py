import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import IntegrityError

from botaniq.api.middleware.body_limit import FORM_OVERHEAD_BYTES, RequestSizeLimitMiddleware
from botaniq.api.middleware.error_handler import (
    handle_botaniq_error,
    handle_generic_error,
    handle_integrity_error,
    handle_validation_error,
)
from botaniq.api.middleware.logging import RequestLoggingMiddleware
from botaniq.api.routes import router
from botaniq.config import settings
from botaniq.core.exceptions import BotaniqError
from botaniq.core.logging import setup_logging
from botaniq.db.session import async_engine

logger = logging.getLogger(__name__)

CORS_ALLOWED_HEADERS = [
    "cache-control",
    "x-requested-with",
    "authorization",
    "content-type",
    "ngrok-skip-browser-warning",
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting Botaniq API", extra={"path": str(settings.upload_path)})
    yield
    await async_engine.dispose()


def create_app() -> FastAPI:
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title="Botaniq API",
        description="Plant care backend: accounts, profiles, plant catalog and garden management",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    # Innermost: refuse oversized profile uploads before the form is parsed.
    app.add_middleware(
        RequestSizeLimitMiddleware,
        max_bytes=settings.upload_max_bytes + FORM_OVERHEAD_BYTES,
        path_prefix="/users/",
    )
    # Turns unhandled exceptions into the SYS_001 response, inside CORS.
    app.add_middleware(RequestLoggingMiddleware)
    # Added last so it wraps the middleware above and every response they produce.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=CORS_ALLOWED_HEADERS,
        max_age=settings.cors_max_age,
    )

    # Register exception handlers (order matters - most specific first)
    app.add_exception_handler(BotaniqError, handle_botaniq_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    # Fallback for failures outside the request logging middleware.
    app.add_exception_handler(Exception, handle_generic_error)

    # Uploaded avatars, served as plain files without directory listing.
    upload_path = settings.upload_path
    upload_path.mkdir(parents=True, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=str(upload_path)), name="uploads")

    app.include_router(router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("botaniq.main:app", host=settings.host, port=settings.port)
