"""Domain probe for IAM repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to identity loading and role queries.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class IdentityRepositoryProbe(Protocol):
    """Domain probe for identity loading.

    Records domain events while building a request Identity from the
    user, role and permission tables.
    """

    def identity_loaded(
        self, user_id: str, tenant_id: str, role_count: int, permission_count: int
    ) -> None:
        """Record that an identity was loaded."""
        ...

    def user_not_found(self, user_id: str) -> None:
        """Record that no user matched the id."""
        ...

    def user_inactive(self, user_id: str, status: str) -> None:
        """Record that the user exists but is not active."""
        ...

    def with_context(self, context: ObservationContext) -> IdentityRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class RoleRepositoryProbe(Protocol):
    """Domain probe for role repository operations."""

    def roles_listed(self, tenant_id: str, count: int) -> None:
        """Record that the roles of a tenant were listed."""
        ...

    def with_context(self, context: ObservationContext) -> RoleRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultIdentityRepositoryProbe:
    """Default implementation of IdentityRepositoryProbe using structlog."""

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

    def with_context(
        self, context: ObservationContext
    ) -> DefaultIdentityRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultIdentityRepositoryProbe(logger=self._logger, context=context)

    def identity_loaded(
        self, user_id: str, tenant_id: str, role_count: int, permission_count: int
    ) -> None:
        """Record that an identity was loaded."""
        self._logger.debug(
            "identity_loaded",
            user_id=user_id,
            home_tenant_id=tenant_id,
            role_count=role_count,
            permission_count=permission_count,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, user_id: str) -> None:
        """Record that no user matched the id."""
        self._logger.info(
            "identity_user_not_found",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_inactive(self, user_id: str, status: str) -> None:
        """Record that the user exists but is not active."""
        self._logger.info(
            "identity_user_inactive",
            user_id=user_id,
            status=status,
            **self._get_context_kwargs(),
        )


class DefaultRoleRepositoryProbe:
    """Default implementation of RoleRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultRoleRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultRoleRepositoryProbe(logger=self._logger, context=context)

    def roles_listed(self, tenant_id: str, count: int) -> None:
        """Record that the roles of a tenant were listed."""
        self._logger.debug(
            "roles_listed",
            requested_tenant_id=tenant_id,
            count=count,
            **self._get_context_kwargs(),
        )
