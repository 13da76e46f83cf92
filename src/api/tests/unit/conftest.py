"""Unit test fixtures with mocked dependencies."""

import pytest

from shared_kernel.authorization import EnforcementPolicy, Identity, Permission
from shared_kernel.authorization.types import RoleSlug


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )


@pytest.fixture
def tenant_admin() -> Identity:
    """Identity of an admin of tenant 1 holding every admin permission."""
    return Identity.create(
        user_id=10,
        tenant_id=1,
        roles=["tenant_admin"],
        permissions=[p.value for p in Permission],
        email="admin@tenant-one.test",
    )


@pytest.fixture
def super_admin() -> Identity:
    """Identity of a super-admin whose home tenant is 99."""
    return Identity.create(
        user_id=1,
        tenant_id=99,
        roles=[RoleSlug.SUPER_ADMIN.value],
        permissions=[p.value for p in Permission],
    )


@pytest.fixture
def enforcing_policy() -> EnforcementPolicy:
    return EnforcementPolicy.enforcing()
