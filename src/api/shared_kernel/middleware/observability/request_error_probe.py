"""Domain probe for request-level failures.

Following Domain-Oriented Observability patterns, this probe captures
errors that escape route handlers and request bodies that cannot be
parsed at all.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class RequestErrorProbe(Protocol):
    """Domain probe for request failures."""

    def unhandled_error(self, method: str, path: str, error: Exception) -> None:
        """Record an exception that no handler dealt with."""
        ...

    def malformed_request(self, path: str, error_count: int) -> None:
        """Record a request body that failed schema parsing."""
        ...

    def with_context(self, context: ObservationContext) -> RequestErrorProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultRequestErrorProbe:
    """Default implementation of RequestErrorProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRequestErrorProbe:
        return DefaultRequestErrorProbe(logger=self._logger, context=context)

    def unhandled_error(self, method: str, path: str, error: Exception) -> None:
        self._logger.error(
            "request_unhandled_error",
            method=method,
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            exc_info=error,
            **self._get_context_kwargs(),
        )

    def malformed_request(self, path: str, error_count: int) -> None:
        self._logger.info(
            "request_malformed",
            path=path,
            error_count=error_count,
            **self._get_context_kwargs(),
        )
