"""Authentication dependencies: bearer scheme, JWT validator and probe."""

from functools import lru_cache

from fastapi.security import HTTPBearer

from iam.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from infrastructure.settings import get_auth_settings
from shared_kernel.auth import JWTValidator
from shared_kernel.auth.observability import DefaultJWTValidatorProbe

# auto_error=False: a missing token resolves to an anonymous request, which
# the access guard then denies when enforcement is on.
bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache
def get_jwt_validator() -> JWTValidator:
    """Get cached JWT validator.

    Returns:
        JWTValidator instance configured from auth settings.
    """
    settings = get_auth_settings()
    return JWTValidator(
        secret_key=settings.secret_key.get_secret_value(),
        probe=DefaultJWTValidatorProbe(),
        algorithm=settings.algorithm,
        user_id_claim=settings.user_id_claim,
    )


def get_authentication_probe() -> AuthenticationProbe:
    """Get AuthenticationProbe instance.

    Returns:
        DefaultAuthenticationProbe instance for observability
    """
    return DefaultAuthenticationProbe()
