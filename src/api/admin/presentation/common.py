"""Request parsing shared by the admin routes.

Covers the parts every tenant-owned resource handles the same way:
the ``tenant_id`` argument, list paging parameters, bulk-delete id lists
and the paginated response envelope.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Generic, Iterable, Mapping, TypeVar

from fastapi import HTTPException, Query, status
from pydantic import BaseModel, ConfigDict, Field

from admin.ports.repositories import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_SORT_COLUMN,
    MAX_PAGE_SIZE,
    ListQuery,
    Page,
    SortOrder,
)
from shared_kernel.authorization import normalize_tenant_id
from shared_kernel.i18n import LabelTable, Language, MessageCatalog

T = TypeVar("T")

# Primary and foreign keys are BIGINT columns
MAX_KEY = 2**63 - 1

RANGE_MESSAGES = MessageCatalog(
    {
        Language.EN: {"out_of_range": lambda label: f"{label} is out of range."},
        Language.AR: {"out_of_range": lambda label: f"{label} خارج النطاق المسموح."},
    }
)


def bad_request(catalog: MessageCatalog, key: str, language: Language) -> HTTPException:
    """Build a 400 carrying a localized message from ``catalog``."""
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=catalog.get(key, language),
    )


def ensure_tenant_given(
    tenant_id: Any, catalog: MessageCatalog, language: Language
) -> None:
    """Reject a request that names no tenant at all.

    Raises:
        HTTPException: 400 with the catalog's ``tenant_required`` message
    """
    if tenant_id is None or tenant_id == "":
        raise bad_request(catalog, "tenant_required", language)


def _fits_key(value: int) -> bool:
    return -MAX_KEY - 1 <= value <= MAX_KEY


def tenant_key(tenant_id: Any, catalog: MessageCatalog, language: Language) -> int:
    """Convert an authorized tenant id to the integer primary key.

    Tenant keys are integers in storage; an id that only compares as a
    string (for example ``"acme"``) cannot select any rows.

    Raises:
        HTTPException: 400 with the catalog's ``tenant_required`` message
    """
    key = normalize_tenant_id(tenant_id)
    if not isinstance(key, int) or not _fits_key(key):
        raise bad_request(catalog, "tenant_required", language)
    return key


def coerce_ids(raw: Iterable[Any]) -> list[int]:
    """Keep the entries of ``raw`` that denote integer ids."""
    ids: list[int] = []
    for value in raw:
        if isinstance(value, bool):
            continue
        if isinstance(value, int):
            ids.append(value)
        elif isinstance(value, float) and value.is_integer():
            ids.append(int(value))
        elif isinstance(value, str) and value.strip().isdecimal():
            try:
                ids.append(int(value.strip()))
            except ValueError:
                # Longer than the interpreter's int conversion limit
                continue
    return [id_ for id_ in ids if _fits_key(id_)]


def delete_ids(
    body: Mapping[str, Any],
    field: str,
    catalog: MessageCatalog,
    language: Language,
) -> list[int]:
    """Read the id list of a bulk-delete body.

    Raises:
        HTTPException: 400 ``missing_ids`` when the list is absent or empty,
            400 ``invalid_ids`` when no entry is an integer id
    """
    raw = body.get(field)
    if not isinstance(raw, list) or not raw:
        raise bad_request(catalog, "missing_ids", language)

    ids = coerce_ids(raw)
    if not ids:
        raise bad_request(catalog, "invalid_ids", language)
    return ids


def text(payload: Mapping[str, Any], field: str) -> str | None:
    """Optional text column value; empty strings are stored as NULL."""
    value = payload.get(field)
    if value is None or value == "":
        return None
    return str(value).strip()


def number(payload: Mapping[str, Any], field: str) -> Decimal | None:
    """Optional numeric column value from an already validated payload."""
    value = payload.get(field)
    if value is None or value == "":
        return None
    return Decimal(str(value).strip())


def out_of_range(
    payload: Mapping[str, Any],
    columns: Mapping[str, tuple[int, int]],
    labels: LabelTable,
    language: Language,
) -> dict[str, str]:
    """Field errors for validated numbers their NUMERIC column cannot hold.

    ``columns`` maps a field to the ``(precision, scale)`` of its column.
    Values are compared after rounding to the column scale, as PostgreSQL
    rounds before checking precision.
    """
    errors: dict[str, str] = {}
    for field, (precision, scale) in columns.items():
        value = number(payload, field)
        if value is None:
            continue
        bound = Decimal(10) ** (precision - scale)
        # Checked before quantize, which fails beyond the context precision
        if abs(value) >= bound:
            too_large = True
        else:
            too_large = abs(value.quantize(Decimal(1).scaleb(-scale))) >= bound
        if too_large:
            errors[field] = RANGE_MESSAGES.get(
                "out_of_range", language, labels(field, language)
            )
    return errors


def list_query(
    page: Annotated[int, Query(ge=1)] = 1,
    page_size: Annotated[
        int, Query(alias="pageSize", ge=1, le=MAX_PAGE_SIZE)
    ] = DEFAULT_PAGE_SIZE,
    search: Annotated[str, Query()] = "",
    sort_by: Annotated[str, Query(alias="sortBy")] = DEFAULT_SORT_COLUMN,
    sort_order: Annotated[str, Query(alias="sortOrder")] = SortOrder.DESC.value,
) -> ListQuery:
    """Collect list parameters from the query string (FastAPI dependency)."""
    return ListQuery(
        page=page,
        page_size=page_size,
        search=search.strip(),
        sort_by=sort_by,
        sort_order=SortOrder.parse(sort_order),
    )


class PageResponse(BaseModel, Generic[T]):
    """Paginated list envelope: ``{count, page, pageSize, totalPages, data}``."""

    model_config = ConfigDict(populate_by_name=True)

    count: int = Field(..., description="Total matching rows")
    page: int = Field(..., description="1-based page index")
    page_size: int = Field(..., alias="pageSize", description="Rows per page")
    total_pages: int = Field(..., alias="totalPages", description="Number of pages")
    data: list[T] = Field(default_factory=list)

    @classmethod
    def build(cls, page: Page, items: list[T]) -> PageResponse[T]:
        return cls(
            count=page.count,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            data=items,
        )


class MessageResponse(BaseModel):
    """Localized confirmation message."""

    message: str
