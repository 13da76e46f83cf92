"""IAM presentation layer - aggregate-based organization.

Organizes presentation concerns by aggregate. Each aggregate package
contains its own routes and models.
"""

from __future__ import annotations

from fastapi import APIRouter

from iam.presentation.roles.routes import router as roles_router

# Access checks are made per-endpoint through AccessGuard, not at the
# router level, so each handler controls the order of its checks.
router = APIRouter(tags=["iam"])

router.include_router(roles_router)

__all__ = ["router"]
