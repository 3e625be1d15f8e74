"""FastAPI application factory"""

import logging
import time
from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from sqlmodel import SQLModel

import src.domain  # noqa: F401  registers every table on SQLModel.metadata
from src.api.error import register_error_handlers
from src.api.routes import financial, reports, resources
from src.depends import create_engine, create_session_factory

logger = logging.getLogger(__name__)


def configure_logging(level: str):
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        logging.basicConfig(
            level=level.upper(),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    else:
        root_logger.setLevel(level.upper())


def create_app(config) -> FastAPI:
    configure_logging(config.LOG_LEVEL)

    if config.ENABLE_SENTRY and config.DSN_SENTRY:
        sentry_sdk.init(dsn=config.DSN_SENTRY, environment=config.SENTRY_ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        engine = create_engine(config)
        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)

        if config.CREATE_TABLES_ON_STARTUP:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Application startup complete")

        try:
            yield
        finally:
            await engine.dispose()
            logger.info("Application shutdown complete")

    app = FastAPI(title="Project Management Service", lifespan=lifespan)
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=config.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if config.ENABLE_LOGGING_MIDDLEWARE:
        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            started = time.perf_counter()
            response = await call_next(request)
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.info(
                f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f}ms)"
            )
            return response

    register_error_handlers(app)

    for router in resources.routers:
        app.include_router(router, prefix=config.API_PREFIX)
    app.include_router(financial.router, prefix=config.API_PREFIX)
    app.include_router(reports.router, prefix=config.API_PREFIX)

    @app.get("/health")
    async def health():
        return {"status": "OK"}

    return app
