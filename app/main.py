from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from typing import Optional
import logging
import random
import time

from app.core.config import Settings, settings as default_settings
from app.core.errors import ErrorKind, ShortenerError, UNEXPECTED_ERROR_MESSAGE
from app.core.logging_config import configure_logging
from app.db.Connection import database
from app.db.Models import models
from app.db.repository import MappingRepository
from app.services.alias_allocator import AliasAllocator
from app.services.shortener import URLService
from app.api import shortener

logger = logging.getLogger("app")


def create_app(
    settings: Optional[Settings] = None,
    engine=None,
    rng: Optional[random.Random] = None,
) -> FastAPI:
    """Build the application with its collaborators wired explicitly.

    ``engine`` and ``rng`` exist so tests can supply an in-memory database
    and a seeded generator; production uses ``settings.DATABASE_URL`` and
    ``random.SystemRandom``.
    """
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    engine = engine if engine is not None else database.build_engine(settings.DATABASE_URL)
    session_factory = database.build_session_factory(engine)
    repository = MappingRepository(session_factory)
    allocator = AliasAllocator(repository.exists, rng=rng or random.SystemRandom())
    service = URLService(repository, allocator, settings.BASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
        models.Base.metadata.create_all(bind=engine)
        logger.info("Database models initialized/checked.")
        yield
        logger.info("Shutting down gracefully...")
        engine.dispose()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="URL shortening service",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.service = service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOWED_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        try:
            response = await call_next(request)
            status_code = response.status_code
            return response
        finally:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                "%s %s -> %s (%.1f ms)",
                request.method, request.url.path, status_code, elapsed_ms
            )

    @app.exception_handler(ShortenerError)
    async def shortener_error_handler(request: Request, exc: ShortenerError):
        if exc.status_code >= 500:
            logger.error(f"{exc.kind.value}: {exc.message}")
        else:
            logger.warning(f"{exc.kind.value}: {exc.to_body()}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_body())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = {}
        for err in exc.errors():
            loc = err.get("loc") or ()
            field = next((p for p in reversed(loc) if isinstance(p, str)), "body")
            errors.setdefault(field, err.get("msg", "Invalid value"))
        logger.warning(f"Validation error: {errors}")
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=errors)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        error = ShortenerError(ErrorKind.UNEXPECTED, UNEXPECTED_ERROR_MESSAGE)
        return JSONResponse(status_code=error.status_code, content=error.to_body())

    # registered before the router so /health is not taken for an alias
    @app.get("/health", tags=["health"])
    def health_check():
        db_ok = database.verify_database_connection(engine)
        return {
            "status": "healthy" if db_ok else "degraded",
            "service": "url-shortener",
            "database": "ok" if db_ok else "unavailable",
        }

    app.include_router(shortener.router, prefix="")

    return app


def run():
    import uvicorn

    uvicorn.run(
        "app.main:create_app",
        factory=True,
        host=default_settings.HOST,
        port=default_settings.PORT,
    )


if __name__ == "__main__":
    run()
