import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from prediction_diary.domain.exceptions import (DiaryException,
                                                ResourceNotFoundException,
                                                ValidationException)
from prediction_diary.infrastructure.config.settings import (Settings,
                                                             get_settings)
from prediction_diary.infrastructure.exceptions import RepositoryException
from prediction_diary.presentation.api.dependencies import (AppContext,
                                                            build_app_context)
from prediction_diary.presentation.api.v1.routes import posts, users
from prediction_diary.presentation.middleware.correlation import \
    CorrelationIDMiddleware
from prediction_diary.shared.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for application initialization and cleanup"""
    setup_logging(app.state.settings)

    context: AppContext = app.state.context
    await context.repository_provider.startup()
    logger.info(
        "Storage backend ready: %s", type(context.repository_provider).__name__
    )

    yield

    await context.repository_provider.shutdown()


async def diary_exception_handler(request: Request, exc: DiaryException) -> JSONResponse:
    """Map use case failures to HTTP responses"""
    if isinstance(exc, ResourceNotFoundException):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ValidationException):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, RepositoryException):
        logger.error(
            "Storage failure on %s %s: %s (%s)",
            request.method,
            request.url.path,
            exc.details,
            exc.reason,
        )
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=exc.to_dict())


def create_app(settings: Settings | None = None, context: AppContext | None = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.context = context or build_app_context(settings)

    app.add_exception_handler(DiaryException, diary_exception_handler)
    app.add_middleware(CorrelationIDMiddleware)

    app.include_router(users.router, tags=["users"])
    app.include_router(posts.router, tags=["posts"])

    @app.get("/")
    async def root():
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "status": "running",
        }

    @app.get("/health")
    async def health_check(request: Request):
        """
        Health check endpoint for load balancers and monitoring.

        Returns:
        - 200 OK if the storage backend answers
        - 503 Service Unavailable otherwise
        """
        checks: dict[str, Any] = {"api": True, "storage": False}
        try:
            checks["storage"] = await request.app.state.context.repository_provider.ping()
        except Exception as e:
            checks["error"] = str(e)

        if checks["storage"]:
            return {"status": "healthy", "checks": checks}
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "unhealthy", "checks": checks},
        )

    return app


app = create_app()
