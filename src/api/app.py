import logging
from typing import Optional
import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.error import register_error_handlers
from src.api.middleware import LoggingMiddleware
from src.api.routes import invoices, leads, messages, telegram
from src.depends import ServiceContainer, build_services

logger = logging.getLogger(__name__)


def init_sentry(config) -> None:
    sentry_sdk.init(
        dsn=config.DSN_SENTRY,
        environment=config.SENTRY_ENVIRONMENT,
        traces_sample_rate=0.0,
    )
    logger.info(f"Sentry enabled for environment {config.SENTRY_ENVIRONMENT}")


def create_app(config, services: Optional[ServiceContainer] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        config: ApplicationConfig (or any object with the same attributes)
        services: Collaborators to use; built from config when omitted

    Returns:
        Configured FastAPI app
    """
    logging.basicConfig(
        level=getattr(logging, str(config.LOG_LEVEL).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        init_sentry(config)

    app = FastAPI(title="Lead Desk API", version="0.1.0")
    app.state.services = services or build_services(config)

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=config.CORS_ALLOW_CREDENTIALS,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["Content-Disposition", "X-Invoice-Id", "X-Email-Sent"],
        )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        app.add_middleware(LoggingMiddleware)

    register_error_handlers(app)

    for module in (invoices, leads, messages, telegram):
        app.include_router(module.router, prefix=config.API_PREFIX)

    @app.get(f"{config.API_PREFIX}/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
