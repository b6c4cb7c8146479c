"""Project endpoints: create, read, reset, overview."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from grundrechte_podcast import storage
from grundrechte_podcast.progress import new_project, overview

from .models import CreateProject

router = APIRouter()


@router.get("/project")
async def get_project():
    """Get the stored project."""
    project = storage.project_store().load()
    if project is None:
        raise HTTPException(404, "No project")
    return project.to_json_dict()


@router.post("/project", status_code=201)
async def create_project(body: CreateProject):
    """Start a new project for a team and topic (replaces any existing one)."""
    try:
        project = new_project(body.team_name, body.topic_id)
    except ValidationError:
        raise HTTPException(400, f"Unknown topic: {body.topic_id}")
    except ValueError as e:
        raise HTTPException(400, str(e))
    storage.drop_lesson()
    storage.drop_workshop()
    storage.project_store().save(project)
    return project.to_json_dict()


@router.delete("/project")
async def reset_project():
    """Discard the project and any open sessions."""
    storage.drop_lesson()
    storage.drop_workshop()
    if not storage.project_store().clear():
        raise HTTPException(404, "No project")
    return {"ok": True}


@router.get("/project/overview")
async def project_overview():
    """Dashboard data: level, badges, lesson flags, script progress."""
    project = storage.project_store().load()
    if project is None:
        raise HTTPException(404, "No project")
    return overview(project, storage.get_config())
