"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager
from importlib.metadata import PackageNotFoundError, version

from fastapi import FastAPI

from admin.presentation import router as admin_router
from iam.presentation import router as iam_router
from infrastructure.database.dependencies import close_database_connections
from infrastructure.logging import configure_logging
from infrastructure.settings import get_auth_settings, get_settings
from shared_kernel.middleware import register_exception_handlers

API_PREFIX = "/api/v1/admin"


def _package_version() -> str:
    try:
        return version("firmdesk-api")
    except PackageNotFoundError:
        return "0.0.0+local"


settings = get_settings()
# Fails fast when production still carries the development token secret
get_auth_settings()
configure_logging(
    level=settings.log_level,
    service=settings.app_name,
    environment=settings.environment,
)


@asynccontextmanager
async def firmdesk_lifespan(app: FastAPI):
    """Application lifespan context.

    Database engines are created lazily on first use and disposed on
    shutdown.
    """
    yield
    await close_database_connections()


app = FastAPI(
    title=settings.app_name,
    description="Multi-tenant business management API",
    version=_package_version(),
    debug=settings.debug,
    lifespan=firmdesk_lifespan,
)

register_exception_handlers(app)

app.include_router(iam_router, prefix=API_PREFIX)
app.include_router(admin_router, prefix=API_PREFIX)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
