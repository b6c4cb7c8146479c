"""FastAPI API endpoints under /api.

Endpoint groups: settings (health + app settings), catalog (topics, ideas,
badges, levels), project (create / read / reset / overview), lessons (the
active lesson session), workshop (the active script builder session).

Mutating lesson and workshop calls return the session snapshot plus the
events raised by that call.
"""

from fastapi import APIRouter

from .catalog import router as catalog_router
from .lessons import router as lessons_router
from .project import router as project_router
from .settings import router as settings_router
from .workshop import router as workshop_router

router = APIRouter()
router.include_router(settings_router)
router.include_router(catalog_router)
router.include_router(project_router)
router.include_router(lessons_router)
router.include_router(workshop_router)
