"""Domain probe for authorization decisions.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to permission and tenant access checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthorizationProbe(Protocol):
    """Domain probe for authorization decisions."""

    def permission_checked(
        self,
        user_id: str | None,
        permission: str,
        granted: bool,
        enforced: bool,
    ) -> None:
        """Record that a permission was checked."""
        ...

    def tenant_access_checked(
        self,
        user_id: str | None,
        tenant_id: Any,
        granted: bool,
        enforced: bool,
        via_super_admin: bool = False,
    ) -> None:
        """Record that tenant access was checked."""
        ...

    def access_denied(
        self,
        user_id: str | None,
        reason: str,
        permission: str | None = None,
        tenant_id: Any = None,
    ) -> None:
        """Record that a request was rejected by an enforced check."""
        ...

    def with_context(self, context: ObservationContext) -> AuthorizationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthorizationProbe:
    """Default implementation of AuthorizationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultAuthorizationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthorizationProbe(logger=self._logger, context=context)

    def permission_checked(
        self,
        user_id: str | None,
        permission: str,
        granted: bool,
        enforced: bool,
    ) -> None:
        """Record that a permission was checked."""
        self._logger.debug(
            "authorization_permission_checked",
            subject=user_id,
            permission=permission,
            granted=granted,
            enforced=enforced,
            **self._get_context_kwargs(),
        )

    def tenant_access_checked(
        self,
        user_id: str | None,
        tenant_id: Any,
        granted: bool,
        enforced: bool,
        via_super_admin: bool = False,
    ) -> None:
        """Record that tenant access was checked."""
        self._logger.debug(
            "authorization_tenant_access_checked",
            subject=user_id,
            requested_tenant_id=str(tenant_id) if tenant_id is not None else None,
            granted=granted,
            enforced=enforced,
            via_super_admin=via_super_admin,
            **self._get_context_kwargs(),
        )

    def access_denied(
        self,
        user_id: str | None,
        reason: str,
        permission: str | None = None,
        tenant_id: Any = None,
    ) -> None:
        """Record that a request was rejected by an enforced check."""
        self._logger.warning(
            "authorization_access_denied",
            subject=user_id,
            reason=reason,
            permission=permission,
            requested_tenant_id=str(tenant_id) if tenant_id is not None else None,
            **self._get_context_kwargs(),
        )
