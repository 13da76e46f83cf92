"""Domain-Oriented Observability for admin infrastructure."""

from admin.infrastructure.observability.repository_probe import (
    AdminRepositoryProbe,
    DefaultAdminRepositoryProbe,
)

__all__ = [
    "AdminRepositoryProbe",
    "DefaultAdminRepositoryProbe",
]
