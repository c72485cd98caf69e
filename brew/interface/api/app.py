"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from brew.config import Settings
from brew.interface.api.routes import dates, health, matches, swipes, users, wallet
from brew.util.di.container import create_container, setup_di
from brew.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production start_app.py does it.

    Args:
        container: DI container to use. Defaults to the production container.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Brew API",
        description="Matchmaking, coffee dates and wallet settlement for Brew",
        version="0.1.0",
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.api.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    app_instance.include_router(health.router)
    app_instance.include_router(users.router)
    app_instance.include_router(swipes.router)
    app_instance.include_router(matches.router)
    app_instance.include_router(dates.router)
    app_instance.include_router(wallet.router)

    return app_instance


# Create app instance for uvicorn
app = create_app()
