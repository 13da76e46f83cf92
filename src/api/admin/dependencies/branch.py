"""Branch repository dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from admin.infrastructure.branch_repository import BranchRepository
from admin.ports.repositories import IBranchRepository
from infrastructure.database.dependencies import get_read_session, get_write_session


def get_branch_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> IBranchRepository:
    """Get BranchRepository bound to a write session.

    Used by create and delete routes; the session commits when the
    handler returns.
    """
    return BranchRepository(session=session)


def get_branch_reader(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> IBranchRepository:
    """Get BranchRepository bound to a read session, for list routes."""
    return BranchRepository(session=session)
