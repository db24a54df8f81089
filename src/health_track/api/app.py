"""FastAPI application factory."""

from fastapi import FastAPI

from health_track.api.calculators import router as calculators_router
from health_track.api.users import router as users_router
from health_track.app_logging import configure_logging
from health_track.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    app = FastAPI(title="HealthTrack")
    app.state.container = container

    app.include_router(calculators_router)
    app.include_router(users_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
