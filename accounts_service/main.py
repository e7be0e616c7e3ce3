import time
import structlog
from fastapi import FastAPI, Request
from sqlalchemy import text

from .config import Settings, settings as default_settings
from .infrastructure.db import build_engine, build_session_factory
from .infrastructure.logging_config import configure_logging
from .infrastructure.metrics import (
    metrics_endpoint,
    http_requests_total,
    http_request_duration_seconds
)
from .infrastructure.models import Base
from .infrastructure.security import PasswordHasher
from .interfaces.http.errors import install_error_handlers
from .interfaces.http.routers import auth as auth_router
from .interfaces.http.routers import users as users_router

logger = structlog.get_logger()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(title="Accounts Service", version="0.1.0")
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)
    app.state.hasher = PasswordHasher(settings.PASSWORD_SCHEMES)

    @app.middleware("http")
    async def observe_requests(request: Request, call_next):
        start_time = time.time()
        method = request.method
        path = request.url.path

        response = await call_next(request)

        duration = time.time() - start_time
        status_code = response.status_code
        http_requests_total.labels(method=method, endpoint=path, status=status_code).inc()
        http_request_duration_seconds.labels(method=method, endpoint=path).observe(duration)
        logger.info(
            "http_request",
            method=method,
            path=path,
            status_code=status_code,
            duration_ms=round(duration * 1000, 2)
        )
        return response

    @app.on_event("startup")
    def on_startup():
        logger.info("Starting accounts service", version="0.1.0")
        if settings.CREATE_SCHEMA:
            Base.metadata.create_all(bind=engine)
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection established")

    @app.on_event("shutdown")
    def on_shutdown():
        engine.dispose()

    @app.get("/health")
    def health():
        return {"status": "ok"}

    @app.get("/metrics")
    def metrics():
        return metrics_endpoint()

    install_error_handlers(app)
    app.include_router(auth_router.router)
    app.include_router(users_router.router)
    return app


app = create_app()
