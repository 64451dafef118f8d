"""
Day Planner timeline - application entry point.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from day_planner import __version__
from day_planner.core.config import get_settings
from day_planner.core.logger import setup_logger

logger = setup_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Day Planner Timeline",
        description="Drag-to-reschedule preview for day planner timelines",
        version=__version__,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from day_planner.api import timeline

    app.include_router(timeline.router, prefix="/api", tags=["timeline"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "version": __version__,
        }

    logger.info(f"Day Planner Timeline ready in {settings.ENVIRONMENT} mode")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "day_planner.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
