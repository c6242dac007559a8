"""HTTP routes."""

from fastapi import APIRouter

from mayastory.api import auth, health
from mayastory.core.config import settings

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix=settings.API_PREFIX, tags=["auth"])
