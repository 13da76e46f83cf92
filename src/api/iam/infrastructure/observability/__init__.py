"""Domain-Oriented Observability for IAM infrastructure.

Probes for repository operations following Domain-Oriented Observability patterns.
"""

from iam.infrastructure.observability.repository_probe import (
    DefaultIdentityRepositoryProbe,
    DefaultRoleRepositoryProbe,
    IdentityRepositoryProbe,
    RoleRepositoryProbe,
)

__all__ = [
    "DefaultIdentityRepositoryProbe",
    "DefaultRoleRepositoryProbe",
    "IdentityRepositoryProbe",
    "RoleRepositoryProbe",
]
