"""API module."""

from fastapi import APIRouter

from wayfinder.api import admin, court, court_admin, department, head_admin, routes

router = APIRouter()
router.include_router(routes.router)
router.include_router(court.router)
router.include_router(admin.router)
router.include_router(head_admin.router)
router.include_router(department.router)
router.include_router(department.public_router)
router.include_router(court_admin.router)

__all__ = ["router"]
