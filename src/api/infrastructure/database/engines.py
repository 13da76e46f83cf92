"""Async SQLAlchemy engines for the admin API.

Two engines share one PostgreSQL database. The write engine serves the
POST, PUT and DELETE routes. The read engine serves the GET routes and
opens its transactions READ ONLY, so a read can never mutate tenant data.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

if TYPE_CHECKING:
    from infrastructure.observability import ConnectionProbe
    from infrastructure.settings import DatabaseSettings

__all__ = [
    "EngineRole",
    "build_async_url",
    "create_engine",
]


class EngineRole(StrEnum):
    """Which side of the read/write split an engine serves."""

    READ = "read"
    WRITE = "write"


def _execution_options(role: EngineRole) -> dict[str, Any]:
    if role is EngineRole.READ:
        return {"postgresql_readonly": True}
    return {}


def create_engine(
    role: EngineRole,
    settings: DatabaseSettings,
    probe: ConnectionProbe,
) -> AsyncEngine:
    """Create the engine for ``role`` and report it to ``probe``.

    The pool keeps ``pool_min_connections`` open and grows up to
    ``pool_max_connections`` under load.
    """
    engine = create_async_engine(
        build_async_url(settings),
        pool_size=settings.pool_min_connections,
        max_overflow=settings.pool_max_connections - settings.pool_min_connections,
        pool_pre_ping=True,
        echo=settings.echo,
        execution_options=_execution_options(role),
    )
    probe.engine_created(
        role=role.value,
        host=settings.host,
        database=settings.database,
        pool_size=settings.pool_max_connections,
    )
    return engine


def build_async_url(settings: DatabaseSettings) -> str:
    """Render the asyncpg URL with percent-encoded credentials.

    Alembic's ``env.py`` reuses this so migrations hit the same database
    as the application.
    """
    url = URL.create(
        drivername="postgresql+asyncpg",
        username=settings.username,
        password=settings.password.get_secret_value(),
        host=settings.host,
        port=settings.port,
        database=settings.database,
    )
    return url.render_as_string(hide_password=False)
