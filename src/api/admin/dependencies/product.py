"""Product repository dependencies."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from admin.infrastructure.product_repository import ProductRepository
from admin.ports.repositories import IProductRepository
from infrastructure.database.dependencies import get_read_session, get_write_session


def get_product_repository(
    session: Annotated[AsyncSession, Depends(get_write_session)],
) -> IProductRepository:
    """Get ProductRepository bound to a write session.

    Used by create and delete routes; the session commits when the
    handler returns.
    """
    return ProductRepository(session=session)


def get_product_reader(
    session: Annotated[AsyncSession, Depends(get_read_session)],
) -> IProductRepository:
    """Get ProductRepository bound to a read session, for list routes."""
    return ProductRepository(session=session)
