"""Observability for shared middleware operations."""

from shared_kernel.middleware.observability.request_error_probe import (
    DefaultRequestErrorProbe,
    RequestErrorProbe,
)

__all__ = [
    "DefaultRequestErrorProbe",
    "RequestErrorProbe",
]
