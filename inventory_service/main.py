import logging
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI

from inventory_service.api.api import api_router
from inventory_service.core.config import Settings, get_settings
from inventory_service.core.errors import install_error_handlers
from inventory_service.core.logging_config import configure_logging, install_request_logging, set_request_logs_enabled
from inventory_service.db.init_db import init_db
from inventory_service.db.session import create_engine, create_session_factory
from inventory_service.services.file_store import FileStore

LOG = logging.getLogger(__name__)


def load_api_description(path: str | Path) -> dict[str, Any]:
    """Load the static swagger.yaml rendered under /docs."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        LOG.warning("api description not found path=%s", path)
        return {"openapi": "3.0.0", "info": {"title": "Inventory API", "version": "1.0.0"}, "paths": {}}
    return data or {}


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; the engine, session factory and file store live on app.state."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    engine = create_engine(settings)
    file_store = FileStore(settings.CACHE_DIR)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = create_session_factory(engine)
    app.state.file_store = file_store
    app.state.api_description = load_api_description(settings.SWAGGER_FILE)

    set_request_logs_enabled(settings.REQUEST_LOGS_ENABLED)
    install_request_logging(app)
    install_error_handlers(app)
    app.include_router(api_router)

    @app.on_event("startup")
    async def _prepare_storage():
        file_store.ensure_directory()
        LOG.info("cache directory ready path=%s", file_store.root.resolve())
        if settings.INIT_DB:
            await init_db(engine)

    @app.on_event("startup")
    async def _log_ready():
        LOG.info("Server running at http://%s:%s", settings.SERVER_HOST, settings.SERVER_PORT)

    @app.on_event("shutdown")
    async def _dispose_engine():
        await engine.dispose()
        LOG.info("database engine disposed")

    return app


def build_app() -> FastAPI:
    """uvicorn factory: configure logging from settings, then build the app."""
    settings = get_settings()
    configure_logging(settings)
    return create_app(settings)
