"""API route registrations."""

from fastapi import APIRouter

from . import health, misc, weekday


def get_api_router() -> APIRouter:
    router = APIRouter()
    router.include_router(health.router, prefix="/health", tags=["health"])
    router.include_router(weekday.router, tags=["weekday"])
    router.include_router(misc.router, tags=["misc"])
    return router


__all__ = ["get_api_router"]
