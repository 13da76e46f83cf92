"""Domain-Oriented Observability for IAM application layer."""

from iam.application.observability.authentication_probe import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)

__all__ = [
    "AuthenticationProbe",
    "DefaultAuthenticationProbe",
]
