"""Main router for API v1."""

from fastapi import APIRouter

from md2resume.api.v1 import deploy, health, history, status, templates, upload

router = APIRouter(prefix="/v1")

# Include sub-routers
router.include_router(health.router, tags=["health"])
router.include_router(status.router, tags=["pinme"])
router.include_router(upload.router, tags=["upload"])
router.include_router(deploy.router, tags=["deploy"])
router.include_router(history.router, prefix="/history", tags=["history"])
router.include_router(templates.router, prefix="/templates", tags=["templates"])
