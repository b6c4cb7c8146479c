"""Lesson endpoints: one active lesson session at a time."""

from fastapi import APIRouter, HTTPException

from grundrechte_podcast import storage
from grundrechte_podcast.events import Event
from grundrechte_podcast.lesson import LessonSession, LessonStateError
from grundrechte_podcast.progress import LESSON_KINDS, complete_lesson, lesson_topic

from .models import AnswerBody, StartLesson

router = APIRouter()


def _current() -> LessonSession:
    session = storage.get_lesson()
    if session is None:
        raise HTTPException(404, "No active lesson")
    return session


def _response(session: LessonSession, events: list[Event]) -> dict:
    return {**session.snapshot(), "events": [e.model_dump() for e in events]}


@router.post("/lessons", status_code=201)
async def start_lesson(body: StartLesson):
    """Open a lesson (intro mission, lesson A or lesson B) for the stored project."""
    store = storage.project_store()
    project = store.load()
    if project is None:
        raise HTTPException(404, "No project")
    kind = body.kind

    def on_complete(points: int) -> None:
        latest = store.load() or project
        store.save(complete_lesson(latest, kind, points))

    session = LessonSession(
        project,
        lesson_topic(project, kind),
        LESSON_KINDS[kind]["mode"],
        on_complete=on_complete,
    )
    storage.set_lesson(session)
    # Workshop baseline is stale once lesson points land
    storage.drop_workshop()
    return _response(session, [])


@router.get("/lessons/current")
async def get_lesson():
    """Current lesson state."""
    return _response(_current(), [])


@router.post("/lessons/current/start")
async def begin_quiz():
    """Leave the intro story."""
    session = _current()
    try:
        session.start()
    except LessonStateError as e:
        raise HTTPException(409, str(e))
    return _response(session, [])


@router.post("/lessons/current/answer")
async def answer(body: AnswerBody):
    """Answer the current item (ignored if it is already answered)."""
    session = _current()
    try:
        session.answer(body.choice)
    except LessonStateError as e:
        raise HTTPException(409, str(e))
    except (IndexError, ValueError) as e:
        raise HTTPException(400, str(e))
    return _response(session, [])


@router.post("/lessons/current/next")
async def next_item():
    """Advance past the answered item."""
    session = _current()
    try:
        session.next()
    except LessonStateError as e:
        raise HTTPException(409, str(e))
    return _response(session, [])


@router.post("/lessons/current/finish")
async def finish_lesson():
    """Report points to the project and end the lesson."""
    session = _current()
    events: list[Event] = []
    session.on_event = events.append
    try:
        session.finish()
    except LessonStateError as e:
        raise HTTPException(409, str(e))
    result = _response(session, events)
    storage.drop_lesson()
    # An open workshop still holds the pre-lesson score split
    storage.drop_workshop()
    project = storage.project_store().load()
    result["project"] = project.to_json_dict() if project else None
    return result


@router.delete("/lessons/current")
async def exit_lesson():
    """Leave the lesson without reporting points."""
    if not storage.drop_lesson():
        raise HTTPException(404, "No active lesson")
    return {"ok": True}
