"""Unit tests for the AccessGuard request dependency."""

from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from iam.dependencies.access import AccessGuard, get_enforcement_policy
from shared_kernel.authorization import EnforcementPolicy, Identity, Permission
from shared_kernel.authorization.observability import AuthorizationProbe
from shared_kernel.i18n import Language


@pytest.fixture
def probe() -> MagicMock:
    return MagicMock(spec=AuthorizationProbe)


@pytest.fixture
def guard(probe, enforcing_policy) -> AccessGuard:
    return AccessGuard(policy=enforcing_policy, probe=probe)


@pytest.fixture
def permissive_guard(probe) -> AccessGuard:
    return AccessGuard(policy=EnforcementPolicy.permissive(), probe=probe)


@pytest.fixture
def viewer() -> Identity:
    """Identity of tenant 1 that may only view branches."""
    return Identity.create(
        user_id=7, tenant_id=1, roles=["viewer"], permissions=["view_branches"]
    )


class TestRequirePermission:
    """Tests for AccessGuard.require_permission."""

    def test_granted(self, guard, probe, viewer):
        assert guard.require_permission(viewer, Permission.VIEW_BRANCHES) is True

        probe.permission_checked.assert_called_once_with(
            user_id="7",
            permission=Permission.VIEW_BRANCHES,
            granted=True,
            enforced=True,
        )
        probe.access_denied.assert_not_called()

    def test_denied_raises_401(self, guard, probe, viewer):
        with pytest.raises(HTTPException) as exc_info:
            guard.require_permission(viewer, Permission.CREATE_BRANCH)

        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Unauthorized access."
        probe.access_denied.assert_called_once_with(
            user_id="7", reason="permission", permission=Permission.CREATE_BRANCH
        )

    def test_anonymous_is_denied(self, guard, probe):
        with pytest.raises(HTTPException):
            guard.require_permission(None, Permission.VIEW_BRANCHES)

        assert probe.permission_checked.call_args.kwargs["user_id"] is None

    def test_denial_message_is_localized(self, guard, viewer):
        with pytest.raises(HTTPException) as exc_info:
            guard.require_permission(viewer, Permission.CREATE_BRANCH, Language.AR)

        assert exc_info.value.detail == "دخول غير مصرح به."

    def test_permissive_policy_reports_without_raising(
        self, permissive_guard, probe, viewer
    ):
        assert permissive_guard.require_permission(viewer, "create_branch") is False

        probe.permission_checked.assert_called_once_with(
            user_id="7", permission="create_branch", granted=False, enforced=False
        )
        probe.access_denied.assert_not_called()


class TestRequireTenantAccess:
    """Tests for AccessGuard.require_tenant_access."""

    def test_own_tenant(self, guard, probe, tenant_admin):
        assert guard.require_tenant_access(tenant_admin, "1") is True

        probe.tenant_access_checked.assert_called_once_with(
            user_id="10",
            tenant_id="1",
            granted=True,
            enforced=True,
            via_super_admin=False,
        )

    def test_foreign_tenant_raises_401(self, guard, probe, tenant_admin):
        with pytest.raises(HTTPException) as exc_info:
            guard.require_tenant_access(tenant_admin, 2)

        assert exc_info.value.status_code == 401
        probe.access_denied.assert_called_once_with(
            user_id="10", reason="tenant", tenant_id=2
        )

    def test_super_admin_cross_tenant_is_flagged(self, guard, probe, super_admin):
        assert guard.require_tenant_access(super_admin, 5) is True

        assert probe.tenant_access_checked.call_args.kwargs["via_super_admin"] is True

    def test_super_admin_in_home_tenant_is_not_flagged(
        self, guard, probe, super_admin
    ):
        guard.require_tenant_access(super_admin, "99")

        assert probe.tenant_access_checked.call_args.kwargs["via_super_admin"] is False

    def test_permissive_policy_allows_foreign_tenant(
        self, permissive_guard, probe, tenant_admin
    ):
        assert permissive_guard.require_tenant_access(tenant_admin, 2) is False
        probe.access_denied.assert_not_called()


class TestRequire:
    """Tests for the combined permission-then-tenant check."""

    def test_permission_denial_skips_tenant_check(
        self, permissive_guard, probe, viewer
    ):
        assert permissive_guard.require(viewer, "create_branch", 1) is False

        probe.tenant_access_checked.assert_not_called()

    def test_both_checks_pass(self, guard, probe, viewer):
        assert guard.require(viewer, Permission.VIEW_BRANCHES, 1) is True

        probe.permission_checked.assert_called_once()
        probe.tenant_access_checked.assert_called_once()

    def test_tenant_denial_after_permission(self, guard, probe, viewer):
        with pytest.raises(HTTPException):
            guard.require(viewer, Permission.VIEW_BRANCHES, 3)

        assert probe.access_denied.call_args.kwargs["reason"] == "tenant"


class TestGetEnforcementPolicy:
    """Tests for the settings-derived enforcement policy."""

    @pytest.fixture(autouse=True)
    def clear_caches(self):
        from infrastructure.settings import get_settings

        get_settings.cache_clear()
        get_enforcement_policy.cache_clear()
        yield
        get_settings.cache_clear()
        get_enforcement_policy.cache_clear()

    def test_production_enforces(self, monkeypatch):
        monkeypatch.setenv("FIRMDESK_ENVIRONMENT", "production")
        monkeypatch.delenv("FIRMDESK_ENFORCE_AUTHORIZATION", raising=False)

        assert get_enforcement_policy().enforce is True

    def test_development_does_not_enforce(self, monkeypatch):
        monkeypatch.setenv("FIRMDESK_ENVIRONMENT", "development")
        monkeypatch.delenv("FIRMDESK_ENFORCE_AUTHORIZATION", raising=False)

        assert get_enforcement_policy().enforce is False

    def test_override_wins(self, monkeypatch):
        monkeypatch.setenv("FIRMDESK_ENVIRONMENT", "development")
        monkeypatch.setenv("FIRMDESK_ENFORCE_AUTHORIZATION", "true")

        assert get_enforcement_policy().enforce is True
