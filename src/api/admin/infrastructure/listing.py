"""Tenant-scoped paging shared by the admin repositories."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from sqlalchemy import delete, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from admin.ports.repositories import ListQuery, Page, SortOrder


async def fetch_page(
    session: AsyncSession,
    model: Any,
    tenant_id: int,
    query: ListQuery,
    search_columns: Sequence[Any],
    sort_columns: Mapping[str, Any],
) -> Page:
    """Load one page of ``model`` rows owned by ``tenant_id``.

    Search is a case-insensitive substring match over ``search_columns``.
    ``query.sort_by`` is looked up in ``sort_columns``; unknown names sort by
    ``created_at``. Ties are broken by id so pages are stable.
    """
    conditions = [model.tenant_id == tenant_id]
    if query.search:
        conditions.append(
            or_(
                *(
                    column.icontains(query.search, autoescape=True)
                    for column in search_columns
                )
            )
        )

    count_stmt = select(func.count()).select_from(model).where(*conditions)
    count = (await session.execute(count_stmt)).scalar_one()

    column = sort_columns.get(query.sort_by, model.created_at)
    ordering = column.asc() if query.sort_order is SortOrder.ASC else column.desc()
    stmt = (
        select(model)
        .where(*conditions)
        .order_by(ordering, model.id)
        .limit(query.page_size)
        .offset(query.offset)
    )
    result = await session.execute(stmt)
    items = list(result.scalars().unique().all())

    return Page(items=items, count=count, page=query.page, page_size=query.page_size)


async def delete_owned(
    session: AsyncSession,
    model: Any,
    tenant_id: int,
    ids: Sequence[int],
) -> int:
    """Delete the rows of ``model`` in ``ids`` that belong to ``tenant_id``.

    Returns:
        Number of rows deleted
    """
    owned_stmt = select(model.id).where(model.tenant_id == tenant_id, model.id.in_(ids))
    owned = list((await session.execute(owned_stmt)).scalars().all())
    if not owned:
        return 0

    await session.execute(
        delete(model).where(model.tenant_id == tenant_id, model.id.in_(owned))
    )
    return len(owned)
