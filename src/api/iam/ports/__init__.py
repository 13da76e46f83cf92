"""Ports (interfaces) for IAM bounded context.

Ports define the contracts for repositories without specifying
implementation details.
"""

from iam.ports.repositories import IIdentityRepository, IRoleRepository

__all__ = [
    "IIdentityRepository",
    "IRoleRepository",
]
