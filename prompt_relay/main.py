"""
FastAPI application entry point for the prompt relay.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from prompt_relay.api.errors import setup_error_handlers
from prompt_relay.api.routes import router
from prompt_relay.application.ports import TextGeneratorPort
from prompt_relay.infra.config.logging_config import get_logger, setup_logging
from prompt_relay.infra.config.settings import Settings, get_settings
from prompt_relay.infra.llm import build_generator
from prompt_relay.infra.middleware.request_context import RequestContextMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    settings: Settings = app.state.settings
    logger = get_logger("app")
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        environment=settings.environment,
        provider=settings.llm_provider,
        model=settings.gemini_model,
        port=settings.port,
    )

    yield

    logger.info("app.shutdown", app_name=settings.app_name)


def create_app(
    settings: Optional[Settings] = None,
    generator: Optional[TextGeneratorPort] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        settings: Configuration; read from the environment when omitted.
        generator: Remote text generator; built from ``settings`` when omitted.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)

    app = FastAPI(
        title=settings.app_name,
        description="Relays templated prompts to a Gemini model",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.generator = generator or build_generator(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)
    app.include_router(router)

    return app


def run() -> None:
    """Start uvicorn on the configured host and port."""
    import uvicorn

    settings = get_settings()
    app = create_app(settings)
    get_logger("app").info(f"Server running on port {settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
