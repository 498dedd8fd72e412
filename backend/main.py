from fastapi import FastAPI, Request
from contextlib import asynccontextmanager
from api import users
from config.app_config import AppConfig, load_config
from constants import ApiPaths, LogConfig, ServerConfig
from init_db import init_database
from utils.logging_utils import (
    StructuredLogger,
    clear_logging_context,
    configure_logging,
    reset_logging,
    set_logging_context,
)
from typing import Optional
import logging
import uuid

logger = logging.getLogger(__name__)
request_logger = StructuredLogger("user_records.requests")


def create_app(engine=None, config: Optional[AppConfig] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Logging is configured when the app starts, however it is served, and
    the handlers are detached again on shutdown.

    Args:
        engine: Engine whose tables are created at startup (defaults to the
            engine configured in database.py)
        config: Runtime configuration (defaults to load_config() at startup)

    Returns:
        FastAPI application with the user routes mounted under /api/v1
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app_config = config or load_config()
        log_file = configure_logging(app_config.log_level, app_config.log_dir)
        if log_file:
            logger.info(f"Logging initialized: {log_file}")

        init_database(engine)
        logger.info(f"{ServerConfig.SERVICE_NAME} {ServerConfig.VERSION} ready")
        try:
            yield
        finally:
            logger.info(f"{ServerConfig.SERVICE_NAME} shutting down")
            reset_logging()

    app = FastAPI(title=ServerConfig.SERVICE_NAME, version=ServerConfig.VERSION, lifespan=lifespan)

    @app.middleware("http")
    async def request_context(request: Request, call_next):
        """Tag every log line of a request with its request id."""
        request_id = request.headers.get(LogConfig.REQUEST_ID_HEADER) or uuid.uuid4().hex
        set_logging_context(request_id=request_id, path=request.url.path)
        try:
            response = await call_next(request)
            response.headers[LogConfig.REQUEST_ID_HEADER] = request_id
            request_logger.info(
                f"{request.method} {request.url.path} -> {response.status_code}",
                extra={"status_code": response.status_code}
            )
            return response
        finally:
            clear_logging_context()

    app.include_router(users.router, prefix=ApiPaths.V1_PREFIX)

    @app.get(ApiPaths.HEALTH)
    def health_check():
        """Health check endpoint"""
        return {
            "status": "ok",
            "service": ServerConfig.SERVICE_NAME,
            "version": ServerConfig.VERSION
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    config = load_config()
    app = create_app(config=config)
    logger.info(f"🚀 Starting {ServerConfig.SERVICE_NAME} on http://{config.host}:{config.port}...")
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)
