"""Identity resolution dependency.

Resolves the acting Identity of a request: validates the bearer token,
then loads the user's tenant, role slug and permission codes. Any problem
with the credentials yields ``None`` rather than an error; the access
guard decides what an anonymous request may do.

Usage in FastAPI routes:
    @router.get("/example")
    async def example(
        identity: Annotated[Identity | None, Depends(get_identity)],
    ):
        ...
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from iam.application.observability import AuthenticationProbe
from iam.dependencies.authentication import (
    bearer_scheme,
    get_authentication_probe,
    get_jwt_validator,
)
from iam.infrastructure.identity_repository import IdentityRepository
from iam.ports.repositories import IIdentityRepository
from infrastructure.database.dependencies import get_read_session
from shared_kernel.auth import InvalidTokenError, JWTValidator
from shared_kernel.authorization import Identity


def get_identity_repository(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> IIdentityRepository:
    """Get IdentityRepository instance.

    Args:
        session: Read session for the role/permission lookup

    Returns:
        IdentityRepository instance
    """
    return IdentityRepository(session=session)


async def get_identity(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None, Depends(bearer_scheme)
    ],
    validator: Annotated[JWTValidator, Depends(get_jwt_validator)],
    repository: Annotated[IIdentityRepository, Depends(get_identity_repository)],
    probe: Annotated[AuthenticationProbe, Depends(get_authentication_probe)],
) -> Identity | None:
    """Resolve the Identity of the current request.

    Args:
        credentials: Bearer credentials, if any
        validator: JWT validator
        repository: Identity repository
        probe: Authentication probe for observability

    Returns:
        The Identity, or None for anonymous or unusable credentials
    """
    if credentials is None:
        probe.anonymous_request()
        return None

    try:
        claims = validator.validate_token(credentials.credentials)
    except InvalidTokenError as e:
        probe.authentication_failed(reason=str(e))
        return None

    try:
        user_id = int(claims.user_id)
    except ValueError:
        probe.authentication_failed(reason="Non-numeric user id claim")
        return None

    identity = await repository.load(user_id)
    if identity is None:
        probe.authentication_failed(reason="Unknown or inactive user")
        return None

    probe.identity_resolved(
        user_id=identity.user_id,
        tenant_id=str(identity.tenant_id),
    )
    return identity
