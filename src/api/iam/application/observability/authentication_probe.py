"""Protocol for authentication observability.

Defines the interface for domain probes that capture identity resolution
events for the get_identity dependency.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthenticationProbe(Protocol):
    """Domain probe for authentication operations."""

    def identity_resolved(self, user_id: str, tenant_id: str) -> None:
        """Record that the request identity was resolved."""
        ...

    def anonymous_request(self) -> None:
        """Record a request without credentials."""
        ...

    def authentication_failed(self, reason: str) -> None:
        """Record that presented credentials could not be used."""
        ...

    def with_context(self, context: ObservationContext) -> AuthenticationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAuthenticationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthenticationProbe(logger=self._logger, context=context)

    def identity_resolved(self, user_id: str, tenant_id: str) -> None:
        """Record that the request identity was resolved."""
        self._logger.debug(
            "identity_resolved",
            user_id=user_id,
            home_tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def anonymous_request(self) -> None:
        """Record a request without credentials."""
        self._logger.debug(
            "anonymous_request",
            **self._get_context_kwargs(),
        )

    def authentication_failed(self, reason: str) -> None:
        """Record that presented credentials could not be used."""
        self._logger.warning(
            "authentication_failed",
            reason=reason,
            **self._get_context_kwargs(),
        )
