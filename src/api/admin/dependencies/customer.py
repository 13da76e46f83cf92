"""Customer repository dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from admin.infrastructure.customer_repository import CustomerRepository
from admin.ports.repositories import ICustomerRepository
from infrastructure.database.dependencies import get_read_session, get_write_session


def get_customer_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> ICustomerRepository:
    """Get CustomerRepository bound to a write session.

    Used by create and delete routes; the session commits when the
    handler returns.
    """
    return CustomerRepository(session=session)


def get_customer_reader(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> ICustomerRepository:
    """Get CustomerRepository bound to a read session, for list routes."""
    return CustomerRepository(session=session)
