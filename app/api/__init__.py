"""API module."""

from fastapi import APIRouter

from app.api import docs, routes

router = APIRouter()
router.include_router(docs.router)
router.include_router(routes.router)

__all__ = [
    "router",
]
