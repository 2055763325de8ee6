import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradins_api.api.middleware import ErrorHandlerMiddleware
from tradins_api.api.routers.health import router as health_router
from tradins_api.infrastructure.storage import find_postgres_url_problem
from tradins_api.shared.config import Settings, settings
from tradins_api.shared.config.container import ApplicationContainer
from tradins_api.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def create_app(
    app_settings: Settings = settings,
    container: ApplicationContainer | None = None,
) -> FastAPI:
    """Build and configure the FastAPI application instance."""
    app_container = container or ApplicationContainer(app_settings)

    @asynccontextmanager
    async def app_lifespan(app: FastAPI):
        """Configure logging, check storage configuration and announce startup/shutdown."""
        configure_logging(app_settings.log_level)
        logger.info(
            "app_startup name=%s env=%s policy=%s",
            app_settings.app_name,
            app_settings.app_env,
            app_settings.health_storage_failure_policy,
        )
        url_problem = find_postgres_url_problem(app_settings)
        if url_problem is not None:
            logger.warning("storage_config_warning detail=%s", url_problem)
        try:
            yield
        finally:
            logger.info("app_shutdown name=%s", app_settings.app_name)

    app = FastAPI(
        title=app_settings.app_name,
        debug=app_settings.app_debug,
        version=app_settings.app_version,
        lifespan=app_lifespan,
    )
    app.state.container = app_container
    if app_settings.cors_allowed_origins_list:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=app_settings.cors_allowed_origins_list,
            allow_credentials=True,
            allow_methods=["GET"],
            allow_headers=["*"],
        )
    app.add_middleware(ErrorHandlerMiddleware)
    app.include_router(health_router, prefix=app_settings.api_prefix.rstrip("/"))
    return app
