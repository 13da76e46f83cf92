"""Role repository dependency."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from iam.infrastructure.role_repository import RoleRepository
from iam.ports.repositories import IRoleRepository
from infrastructure.database.dependencies import get_read_session


def get_role_repository(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> IRoleRepository:
    """Get RoleRepository instance.

    Args:
        session: Read session

    Returns:
        RoleRepository instance
    """
    return RoleRepository(session=session)
