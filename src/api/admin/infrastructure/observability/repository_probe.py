"""Domain probe for admin repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events on tenant-owned records (branches, products,
customers). The ``resource`` argument names the table family.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AdminRepositoryProbe(Protocol):
    """Domain probe for tenant-owned record storage."""

    def record_created(self, resource: str, tenant_id: int, record_id: int) -> None:
        """Record that a row was inserted."""
        ...

    def record_updated(self, resource: str, tenant_id: int, record_id: int) -> None:
        """Record that a row was rewritten."""
        ...

    def duplicate_rejected(self, resource: str, tenant_id: int, key: str) -> None:
        """Record that a write was refused by a uniqueness rule."""
        ...

    def records_listed(
        self, resource: str, tenant_id: int, count: int, page: int
    ) -> None:
        """Record that a page of rows was listed."""
        ...

    def records_deleted(
        self, resource: str, tenant_id: int, requested: int, deleted: int
    ) -> None:
        """Record a bulk delete."""
        ...

    def with_context(self, context: ObservationContext) -> AdminRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAdminRepositoryProbe:
    """Default implementation of AdminRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAdminRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultAdminRepositoryProbe(logger=self._logger, context=context)

    def record_created(self, resource: str, tenant_id: int, record_id: int) -> None:
        self._logger.info(
            f"{resource}_created",
            tenant_id=tenant_id,
            record_id=record_id,
            **self._get_context_kwargs(),
        )

    def record_updated(self, resource: str, tenant_id: int, record_id: int) -> None:
        self._logger.info(
            f"{resource}_updated",
            tenant_id=tenant_id,
            record_id=record_id,
            **self._get_context_kwargs(),
        )

    def duplicate_rejected(self, resource: str, tenant_id: int, key: str) -> None:
        self._logger.info(
            f"{resource}_duplicate_rejected",
            tenant_id=tenant_id,
            key=key,
            **self._get_context_kwargs(),
        )

    def records_listed(
        self, resource: str, tenant_id: int, count: int, page: int
    ) -> None:
        self._logger.debug(
            f"{resource}_listed",
            tenant_id=tenant_id,
            count=count,
            page=page,
            **self._get_context_kwargs(),
        )

    def records_deleted(
        self, resource: str, tenant_id: int, requested: int, deleted: int
    ) -> None:
        self._logger.info(
            f"{resource}_deleted",
            tenant_id=tenant_id,
            requested=requested,
            deleted=deleted,
            **self._get_context_kwargs(),
        )
