"""Access guard dependency.

Wraps the pure permission and tenant decisions for use in request
handlers. Decisions are always evaluated and reported; whether a denial
rejects the request is governed by the EnforcementPolicy.

Handlers must check the permission first and the tenant second:

    guard.require_permission(identity, Permission.CREATE_PRODUCT, language)
    ...validate payload...
    guard.require_tenant_access(identity, payload["tenant_id"], language)
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any

from fastapi import Depends, HTTPException, Request, status

from infrastructure.settings import get_settings
from shared_kernel.authorization import (
    EnforcementPolicy,
    Identity,
    has_permission,
    has_tenant_access,
    normalize_tenant_id,
)
from shared_kernel.authorization.observability import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)
from shared_kernel.i18n import Language, MessageCatalog
from shared_kernel.middleware import get_language
from shared_kernel.observability_context import ObservationContext

ACCESS_MESSAGES = MessageCatalog(
    {
        Language.EN: {"unauthorized": "Unauthorized access."},
        Language.AR: {"unauthorized": "دخول غير مصرح به."},
    }
)


class AccessGuard:
    """Request-level permission and tenant checks."""

    def __init__(self, policy: EnforcementPolicy, probe: AuthorizationProbe):
        self._policy = policy
        self._probe = probe

    @property
    def policy(self) -> EnforcementPolicy:
        return self._policy

    def _deny(self, language: Language) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=ACCESS_MESSAGES.get("unauthorized", language),
        )

    def require_permission(
        self,
        identity: Identity | None,
        permission: str,
        language: Language = Language.EN,
    ) -> bool:
        """Check ``permission``; raise 401 on denial when enforcing.

        Returns:
            The decision, for callers running with enforcement off.

        Raises:
            HTTPException 401: If denied and the policy enforces.
        """
        granted = has_permission(identity, permission)
        user_id = identity.user_id if identity else None
        self._probe.permission_checked(
            user_id=user_id,
            permission=permission,
            granted=granted,
            enforced=self._policy.enforce,
        )
        if not granted and self._policy.enforce:
            self._probe.access_denied(
                user_id=user_id, reason="permission", permission=permission
            )
            raise self._deny(language)
        return granted

    def require_tenant_access(
        self,
        identity: Identity | None,
        tenant_id: Any,
        language: Language = Language.EN,
    ) -> bool:
        """Check access to ``tenant_id``; raise 401 on denial when enforcing.

        Returns:
            The decision, for callers running with enforcement off.

        Raises:
            HTTPException 401: If denied and the policy enforces.
        """
        granted = has_tenant_access(identity, tenant_id)
        user_id = identity.user_id if identity else None
        via_super_admin = (
            granted
            and identity is not None
            and identity.is_super_admin
            and normalize_tenant_id(identity.tenant_id) != normalize_tenant_id(tenant_id)
        )
        self._probe.tenant_access_checked(
            user_id=user_id,
            tenant_id=tenant_id,
            granted=granted,
            enforced=self._policy.enforce,
            via_super_admin=via_super_admin,
        )
        if not granted and self._policy.enforce:
            self._probe.access_denied(
                user_id=user_id, reason="tenant", tenant_id=tenant_id
            )
            raise self._deny(language)
        return granted

    def require(
        self,
        identity: Identity | None,
        permission: str,
        tenant_id: Any,
        language: Language = Language.EN,
    ) -> bool:
        """Check permission, then tenant access.

        A permission denial short-circuits before the tenant is looked at.
        """
        if not self.require_permission(identity, permission, language):
            return False
        return self.require_tenant_access(identity, tenant_id, language)


@lru_cache
def get_enforcement_policy() -> EnforcementPolicy:
    """Get the enforcement policy derived from settings (cached)."""
    settings = get_settings()
    return EnforcementPolicy.for_environment(
        settings.environment,
        override=settings.enforce_authorization,
    )


def get_authorization_probe(
    request: Request,
    language: Annotated[Language, Depends(get_language)],
) -> AuthorizationProbe:
    """Get AuthorizationProbe bound to the current request.

    The X-Request-ID header, when present, correlates the decisions of
    one request in the logs.
    """
    context = ObservationContext(
        request_id=request.headers.get("x-request-id"),
        language=language.value,
    )
    return DefaultAuthorizationProbe().with_context(context)


def get_access_guard(
    policy: Annotated[EnforcementPolicy, Depends(get_enforcement_policy)],
    probe: Annotated[AuthorizationProbe, Depends(get_authorization_probe)],
) -> AccessGuard:
    """Get AccessGuard for the current request."""
    return AccessGuard(policy=policy, probe=probe)
