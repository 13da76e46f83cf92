"""Fixtures for admin route tests.

Routes run against a bare FastAPI app with the shared error handlers,
an enforcing access guard and mocked repositories.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from admin.dependencies.branch import get_branch_reader, get_branch_repository
from admin.dependencies.customer import get_customer_reader, get_customer_repository
from admin.dependencies.product import get_product_reader, get_product_repository
from admin.ports import ICustomerRepository, IBranchRepository, IProductRepository
from iam.dependencies.access import AccessGuard, get_access_guard
from iam.dependencies.identity import get_identity
from shared_kernel.authorization import EnforcementPolicy, Identity
from shared_kernel.authorization.observability import AuthorizationProbe
from shared_kernel.middleware import register_exception_handlers


class Caller:
    """Identity presented by the test client; tests may replace it."""

    def __init__(self, identity: Identity | None):
        self.identity = identity


@pytest.fixture
def caller(tenant_admin) -> Caller:
    return Caller(tenant_admin)


@pytest.fixture
def authorization_probe() -> MagicMock:
    return MagicMock(spec=AuthorizationProbe)


@pytest.fixture
def policy() -> EnforcementPolicy:
    return EnforcementPolicy.enforcing()


@pytest.fixture
def branch_repository() -> AsyncMock:
    return AsyncMock(spec=IBranchRepository)


@pytest.fixture
def product_repository() -> AsyncMock:
    return AsyncMock(spec=IProductRepository)


@pytest.fixture
def customer_repository() -> AsyncMock:
    return AsyncMock(spec=ICustomerRepository)


@pytest.fixture
def test_client(
    caller,
    authorization_probe,
    policy,
    branch_repository,
    product_repository,
    customer_repository,
) -> TestClient:
    from admin.presentation import router

    app = FastAPI()
    register_exception_handlers(app)

    guard = AccessGuard(policy=policy, probe=authorization_probe)
    app.dependency_overrides[get_identity] = lambda: caller.identity
    app.dependency_overrides[get_access_guard] = lambda: guard
    app.dependency_overrides[get_branch_repository] = lambda: branch_repository
    app.dependency_overrides[get_branch_reader] = lambda: branch_repository
    app.dependency_overrides[get_product_repository] = lambda: product_repository
    app.dependency_overrides[get_product_reader] = lambda: product_repository
    app.dependency_overrides[get_customer_repository] = lambda: customer_repository
    app.dependency_overrides[get_customer_reader] = lambda: customer_repository

    app.include_router(router)
    return TestClient(app)


@pytest.fixture
def limited_identity() -> Identity:
    """Identity of tenant 1 with no admin permissions."""
    return Identity.create(user_id=20, tenant_id=1, roles=["cashier"], permissions=[])
