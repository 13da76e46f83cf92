"""Authorization enforcement policy.

Whether a denied permission or tenant check actually rejects a request is
deployment policy, decided once at startup and passed to the request
handlers. The decisions themselves are always computed.
"""

from __future__ import annotations

from dataclasses import dataclass

PRODUCTION_ENVIRONMENT = "production"


@dataclass(frozen=True)
class EnforcementPolicy:
    """Whether authorization denials are enforced.

    Attributes:
        enforce: Reject requests whose permission or tenant check fails.
    """

    enforce: bool

    @classmethod
    def enforcing(cls) -> EnforcementPolicy:
        return cls(enforce=True)

    @classmethod
    def permissive(cls) -> EnforcementPolicy:
        return cls(enforce=False)

    @classmethod
    def for_environment(
        cls,
        environment: str,
        override: bool | None = None,
    ) -> EnforcementPolicy:
        """Enforce in production unless explicitly overridden."""
        if override is not None:
            return cls(enforce=override)
        return cls(enforce=environment.strip().lower() == PRODUCTION_ENVIRONMENT)
