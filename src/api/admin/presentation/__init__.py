"""Admin presentation layer.

One package per tenant-owned resource, each with its rules, response
models and routes.
"""

from __future__ import annotations

from fastapi import APIRouter

from admin.presentation.branches.routes import router as branches_router
from admin.presentation.customers.routes import router as customers_router
from admin.presentation.products.routes import router as products_router

router = APIRouter(tags=["admin"])

router.include_router(branches_router)
router.include_router(products_router)
router.include_router(customers_router)

__all__ = ["router"]
