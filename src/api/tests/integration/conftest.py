"""Integration test fixtures.

These fixtures require a running PostgreSQL instance reachable through the
``FIRMDESK_DB_*`` environment variables. Tests are skipped when it is not.
The schema is created from the ORM metadata and dropped afterwards.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
from jose import jwt
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import admin.infrastructure.models  # noqa: F401
from iam.infrastructure.models import PermissionModel, RoleModel, TenantModel, UserModel
from infrastructure.database.dependencies import (
    close_database_connections,
    get_write_engine,
)
from infrastructure.database.models import Base
from shared_kernel.authorization import Permission, RoleSlug

TEST_SECRET = "integration-test-secret"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@dataclass(frozen=True)
class Seed:
    """Ids of the rows every integration test starts with."""

    tenant_id: int
    other_tenant_id: int
    admin_user_id: int
    clerk_user_id: int
    super_admin_user_id: int


def _bearer(user_id: int) -> dict[str, str]:
    claims = {
        "id": user_id,
        "exp": datetime.now(timezone.utc) + timedelta(minutes=5),
    }
    token = jwt.encode(claims, TEST_SECRET, algorithm="HS256")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def token_for():
    """Build the Authorization header of a user, signed with the test secret."""
    return _bearer


@pytest.fixture(autouse=True)
def production_settings(monkeypatch):
    """Enforce authorization and sign tokens with the test secret."""
    from iam.dependencies.access import get_enforcement_policy
    from iam.dependencies.authentication import get_jwt_validator
    from infrastructure.settings import get_auth_settings, get_settings

    monkeypatch.setenv("FIRMDESK_ENVIRONMENT", "production")
    monkeypatch.delenv("FIRMDESK_ENFORCE_AUTHORIZATION", raising=False)
    monkeypatch.setenv("FIRMDESK_AUTH_SECRET_KEY", TEST_SECRET)

    caches = (get_settings, get_auth_settings, get_jwt_validator, get_enforcement_policy)
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


async def _seed(session: AsyncSession) -> Seed:
    acme = TenantModel(name="Acme Trading", name_ar="أكمي للتجارة")
    globex = TenantModel(name="Globex")
    session.add_all([acme, globex])
    await session.flush()

    permissions = {code: PermissionModel(code=code.value) for code in Permission}
    session.add_all(permissions.values())

    admin_role = RoleModel(
        tenant_id=acme.id,
        name="Administrator",
        slug="tenant_admin",
        permissions=list(permissions.values()),
    )
    clerk_role = RoleModel(
        tenant_id=acme.id,
        name="Clerk",
        slug="clerk",
        permissions=[permissions[Permission.VIEW_PRODUCTS]],
    )
    super_role = RoleModel(
        tenant_id=globex.id,
        name="Platform Admin",
        slug=RoleSlug.SUPER_ADMIN.value,
        permissions=list(permissions.values()),
    )
    session.add_all([admin_role, clerk_role, super_role])
    await session.flush()

    admin = UserModel(tenant_id=acme.id, email="admin@acme.test", role_id=admin_role.id)
    clerk = UserModel(tenant_id=acme.id, email="clerk@acme.test", role_id=clerk_role.id)
    root = UserModel(tenant_id=globex.id, email="root@globex.test", role_id=super_role.id)
    session.add_all([admin, clerk, root])
    await session.flush()

    return Seed(
        tenant_id=acme.id,
        other_tenant_id=globex.id,
        admin_user_id=admin.id,
        clerk_user_id=clerk.id,
        super_admin_user_id=root.id,
    )


@pytest_asyncio.fixture
async def seed() -> AsyncGenerator[Seed, None]:
    """Fresh schema with two tenants, their roles and users."""
    engine = get_write_engine()
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, DBAPIError) as e:
        await close_database_connections()
        pytest.skip(f"PostgreSQL is not available: {e}")

    async with async_sessionmaker(engine, expire_on_commit=False)() as session:
        seeded = await _seed(session)
        await session.commit()

    yield seeded

    engine = get_write_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await close_database_connections()


@pytest_asyncio.fixture
async def client(seed) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client driving the application through its lifespan."""
    from main import app

    async with LifespanManager(app):
        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
