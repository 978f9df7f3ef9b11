"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from health_tracker.api.admin import router as admin_router
from health_tracker.api.body_records import router as body_records_router
from health_tracker.api.dashboard import router as dashboard_router
from health_tracker.api.diaries import router as diaries_router
from health_tracker.api.exercises import router as exercises_router
from health_tracker.api.meals import router as meals_router
from health_tracker.api.users import router as users_router
from health_tracker.app_logging import configure_logging
from health_tracker.containers import AppContainer
from health_tracker.domain.errors import ForbiddenError, NotFoundError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Health Tracker")
    app.state.container = container

    for router in (
        meals_router,
        exercises_router,
        body_records_router,
        diaries_router,
        dashboard_router,
        users_router,
        admin_router,
    ):
        app.include_router(router)

    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
        )

    @app.exception_handler(ForbiddenError)
    async def forbidden(request: Request, exc: ForbiddenError) -> JSONResponse:
        logger.warning(
            "Rejected access to another user's record",
            extra={"path": request.url.path, "entity_type": exc.entity_type},
        )
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN, content={"detail": str(exc)}
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
