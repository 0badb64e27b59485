from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .db.dal import RateStore
from .db.migrate import apply_migrations
from .db.pool import ConnectionPool
from .db.seed import load_seed_file, seed_rates
from .routers import health, rates, conversion
from .services.directory import RateDirectory

logger = logging.getLogger("rate_directory")


def create_app(
    settings_override: Settings | None = None, store: RateStore | None = None
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment (e.g., temp DB). Falls back to cached get_settings().
    store: inject a ready store (tests use failing doubles); by default one is
    built over a ConnectionPool sized from settings.
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)

    # Ensure database schema (idempotent) so test-injected fresh DBs have tables
    try:
        apply_migrations(settings.db_path)  # type: ignore[arg-type]
        if settings.seed_file is not None:
            seed_rates(settings.db_path, load_seed_file(settings.seed_file))  # type: ignore[arg-type]
    except Exception:
        # Failing to init DB is fatal; re-raise after logging
        logger.exception("failed to prepare database on startup")
        raise

    if store is None:
        pool = ConnectionPool(
            settings.db_path,  # type: ignore[arg-type]
            size=settings.pool_size,
            timeout=settings.pool_timeout_seconds,
        )
        store = RateStore(pool)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("rate directory started (db=%s)", settings.db_path)
        yield
        store.close()
        logger.info("rate directory stopped")

    app = FastAPI(
        title=settings.app_name,
        debug=settings.debug,
        version=settings.version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store
    app.state.directory = RateDirectory(store)

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(errors.RateDirectoryError, errors.directory_error_handler)
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(rates.router)
    app.include_router(conversion.router)

    index_file = settings.static_dir / "index.html" if settings.static_dir else None

    @app.get("/", include_in_schema=False)
    async def root():
        if index_file is not None and index_file.is_file():
            return FileResponse(index_file)
        return {"message": settings.app_name, "version": settings.version}

    return app
