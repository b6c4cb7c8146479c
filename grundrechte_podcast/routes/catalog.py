"""Read-only content endpoints: topics, writing ideas, badges, levels."""

from fastapi import APIRouter, HTTPException

from grundrechte_podcast import catalog
from grundrechte_podcast.badges import BADGES
from grundrechte_podcast.metrics import LEVELS
from grundrechte_podcast.models import CARD_TYPES

router = APIRouter()


@router.get("/topics")
async def list_topics():
    """List topic summaries."""
    return [topic.summary() for topic in catalog.list_topics()]


@router.get("/topics/{topic_id}")
async def get_topic(topic_id: str):
    """Get a full topic (lesson, ideas, sentence starters, word bank)."""
    try:
        topic = catalog.get_topic(topic_id)
    except KeyError:
        raise HTTPException(404, "Topic not found")
    return topic.model_dump(by_alias=True)


@router.get("/topics/{topic_id}/ideas/{card_type}")
async def get_ideas(topic_id: str, card_type: str):
    """Writing ideas for one card type of a topic."""
    try:
        topic = catalog.get_topic(topic_id)
    except KeyError:
        raise HTTPException(404, "Topic not found")
    if card_type not in CARD_TYPES:
        raise HTTPException(404, "Card type not found")
    return catalog.get_content_ideas(topic, card_type).model_dump()


@router.get("/badges")
async def list_badges():
    """Badge catalog."""
    return [badge.model_dump() for badge in BADGES]


@router.get("/levels")
async def list_levels():
    """Score level ladder."""
    return [level.model_dump(by_alias=True) for level in LEVELS]
