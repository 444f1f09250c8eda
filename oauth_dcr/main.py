# oauth_dcr/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from oauth_dcr.adapters.configuration.config import Settings, settings
from oauth_dcr.application.ports.outbound import IClientRepository
from oauth_dcr.application.use_cases.client_registration_use_cases import ClientRegistrationService

# ─── UNIQUE LOGGING CONFIGURATION ─────────────────────────────────────────────────
level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────


def build_clients_store(app_settings: Settings):
    """
    Build the client store selected by CLIENT_STORE.

    Returns:
        Tuple (store, engine); engine is None for the in-memory store
    """
    if app_settings.CLIENT_STORE == "database":
        from oauth_dcr.adapters.outbound.persistence.database import build_engine, build_session_factory
        from oauth_dcr.adapters.outbound.persistence.repositories import SQLAlchemyClientRepository

        engine = build_engine(app_settings.DATABASE_URL, echo=app_settings.DATABASE_ECHO)
        return SQLAlchemyClientRepository(build_session_factory(engine)), engine

    from oauth_dcr.adapters.outbound.persistence.repositories import InMemoryClientRepository

    logger.warning("Using in-memory client store: registrations are lost on restart")
    return InMemoryClientRepository(), None


def create_app(app_settings: Settings = settings, clients_store: Optional[IClientRepository] = None) -> FastAPI:
    """
    Create the FastAPI application.

    Args:
        app_settings: Settings to build the application from
        clients_store: Client store to use instead of the one selected by CLIENT_STORE

    Raises:
        RegistrationConfigurationException: If the store cannot register clients
    """
    engine = None
    if clients_store is None:
        clients_store, engine = build_clients_store(app_settings)

    # Fails here, before the endpoint is ever exposed
    registration_service = ClientRegistrationService(
        clients_store,
        client_secret_expiry_seconds=app_settings.CLIENT_SECRET_EXPIRY_SECONDS,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Async context manager to handle startup and shutdown events.
        """
        # Startup
        logger.info("Application starting up...")
        if engine is not None:
            from oauth_dcr.adapters.outbound.persistence.database import init_models

            # Create database tables if they don't exist
            await init_models(engine)

        yield

        # Shutdown
        logger.info("Application shutting down...")
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title="OAuth DCR",
        description="OAuth 2.0 Dynamic Client Registration",
        version="1.0.0",
        debug=app_settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.registration_service = registration_service

    # Middlewares
    from oauth_dcr.shared.middleware import AsyncExceptionMiddleware, AsyncRequestLoggingMiddleware

    app.add_middleware(AsyncRequestLoggingMiddleware, environment=app_settings.ENVIRONMENT)
    app.add_middleware(AsyncExceptionMiddleware)
    # Registration must be reachable from web-based clients
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    from oauth_dcr.adapters.inbound.api.v1.router import api_router

    app.include_router(api_router)

    @app.get("/", include_in_schema=False)
    async def redirect_to_docs():
        return RedirectResponse(url="/docs")

    @app.get("/health", tags=["Health"])
    async def health_check():
        return {"status": "healthy"}

    return app


app = create_app()
