"""Workshop endpoints: the active script builder session.

Every edit commits the project to storage through the session's on_commit.
"""

from fastapi import APIRouter, HTTPException

from grundrechte_podcast import catalog, storage
from grundrechte_podcast.events import Event
from grundrechte_podcast.workshop import ScriptBuilderSession

from .models import EditText, InsertBody, SelectCard, SpeakerBody

router = APIRouter()


def _current() -> ScriptBuilderSession:
    session = storage.get_workshop()
    if session is None:
        raise HTTPException(404, "No active workshop")
    return session


def _response(session: ScriptBuilderSession, events: list[Event]) -> dict:
    return {**session.snapshot(), "events": [e.model_dump() for e in events]}


def _collect(session: ScriptBuilderSession) -> list[Event]:
    events: list[Event] = []
    session.on_event = events.append
    return events


@router.post("/workshop", status_code=201)
async def open_workshop():
    """Open the script builder for the stored project."""
    store = storage.project_store()
    project = store.load()
    if project is None:
        raise HTTPException(404, "No project")
    config = storage.get_config()
    session = ScriptBuilderSession(
        project,
        catalog.get_topic(project.topic_id),
        on_commit=store.save,
        magic_extend_min_words=config["magic_extend_min_words"],
    )
    storage.set_workshop(session)
    return _response(session, [])


@router.get("/workshop")
async def get_workshop():
    """Current workshop state."""
    return _response(_current(), [])


@router.put("/workshop/active")
async def select_card(body: SelectCard):
    """Focus another card."""
    session = _current()
    try:
        session.select_card(body.index)
    except IndexError:
        raise HTTPException(404, "Card not found")
    return _response(session, [])


@router.put("/workshop/text")
async def edit_text(body: EditText):
    """Replace the active card's text."""
    session = _current()
    events = _collect(session)
    session.edit_text(body.text)
    return _response(session, events)


@router.post("/workshop/insert")
async def insert(body: InsertBody):
    """Insert a snippet (sentence starter, idea, glossary word) at the cursor."""
    session = _current()
    events = _collect(session)
    try:
        cursor = session.insert(body.snippet, body.start, body.end)
    except IndexError as e:
        raise HTTPException(400, str(e))
    return {**_response(session, events), "cursor": cursor}


@router.post("/workshop/speaker")
async def insert_speaker(body: SpeakerBody):
    """Insert a speaker label on a new line."""
    session = _current()
    events = _collect(session)
    try:
        cursor = session.insert_speaker(body.speaker, body.position)
    except (IndexError, ValueError) as e:
        raise HTTPException(400, str(e))
    return {**_response(session, events), "cursor": cursor}


@router.get("/workshop/suggestion")
async def suggestion():
    """A random fitting sentence for the active card, or null."""
    return {"suggestion": _current().suggestion()}


@router.post("/workshop/extend")
async def extend():
    """Append an auto-suggestion to the active card."""
    session = _current()
    if not session.can_extend():
        raise HTTPException(409, "Nothing to extend")
    events = _collect(session)
    added = session.extend()
    return {**_response(session, events), "added": added}


@router.post("/workshop/dismiss")
async def dismiss():
    """Clear the score flash and badge toast."""
    session = _current()
    session.clear_flash()
    session.dismiss_toast()
    return _response(session, [])


@router.delete("/workshop")
async def close_workshop():
    """Leave the workshop."""
    if not storage.drop_workshop():
        raise HTTPException(404, "No active workshop")
    return {"ok": True}
