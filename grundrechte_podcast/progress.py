"""Project-level operations: creation, lesson completion, overview.

Every function returns a new Project; the input is never mutated.

Lesson kinds:
  intro     general Grundgesetz mission, basics mode → introCompleted, law_expert
  lesson_a  topic lesson, basics mode               → lessonA_Done,    knowledge_starter
  lesson_b  topic lesson, pro mode                  → lessonB_Done,    knowledge_pro
"""

import logging
from datetime import datetime, timezone
from typing import Any

from . import catalog
from .badges import get_badge
from .metrics import current_level, next_level, reading_time, total_words
from .models import Project, Topic
from .scoring import score_breakdown, used_words

logger = logging.getLogger(__name__)

LESSON_KINDS: dict[str, dict[str, str]] = {
    "intro": {"mode": "basics", "flag": "intro_completed", "badge": "law_expert"},
    "lesson_a": {"mode": "basics", "flag": "lesson_a_done", "badge": "knowledge_starter"},
    "lesson_b": {"mode": "pro", "flag": "lesson_b_done", "badge": "knowledge_pro"},
}


def new_project(team_name: str, topic_id: str) -> Project:
    """Create a project with an empty template script and no progress."""
    name = team_name.strip()
    if not name:
        raise ValueError("Team name must not be empty")
    project = Project(
        team_name=name,
        topic_id=topic_id,
        script=catalog.new_script(),
        date_created=datetime.now(timezone.utc).isoformat(),
    )
    logger.info(f"Created project for team '{name}' on topic {topic_id}")
    return project


def lesson_topic(project: Project, kind: str) -> Topic:
    """Topic content a lesson kind runs on."""
    if kind not in LESSON_KINDS:
        raise KeyError(f"Unknown lesson kind: {kind}")
    if kind == "intro":
        return catalog.general_intro_topic(project.topic_id)
    return catalog.get_topic(project.topic_id)


def complete_lesson(project: Project, kind: str, points: int) -> Project:
    """Add lesson points, set the completion flag and unlock the lesson badge."""
    lesson = LESSON_KINDS[kind]
    badges = list(project.unlocked_badges)
    if lesson["badge"] not in badges:
        badges.append(lesson["badge"])
    logger.info(f"Lesson {kind} completed with {points} points")
    return project.model_copy(update={
        lesson["flag"]: True,
        "score": project.score + points,
        "unlocked_badges": badges,
    })


def overview(project: Project, config: dict[str, Any] | None = None) -> dict[str, Any]:
    """Dashboard summary: level, badges, lesson flags, script progress."""
    config = config or {}
    topic = catalog.get_topic(project.topic_id)
    target = config.get("target_minutes", {"min": 3, "max": 5})
    level = current_level(project.score)
    upcoming = next_level(project.score)
    words = total_words(project.script)
    return {
        "team_name": project.team_name,
        "topic": topic.summary(),
        "score": project.score,
        "level": level.model_dump(by_alias=True),
        "next_level": upcoming.model_dump(by_alias=True) if upcoming else None,
        "badges": [
            badge.model_dump()
            for badge in (get_badge(b) for b in project.unlocked_badges)
            if badge is not None
        ],
        "lessons": {
            "intro": project.intro_completed,
            "lesson_a": project.lesson_a_done,
            "lesson_b": project.lesson_b_done,
        },
        "script": {
            "words": words,
            "breakdown": score_breakdown(project.script, topic.word_bank).model_dump(),
            "used_words": [w.word for w in used_words(project.script, topic.word_bank)],
            "reading_time": reading_time(
                words,
                words_per_minute=config.get("words_per_minute", 75),
                target_minutes=(target["min"], target["max"]),
            ).model_dump(),
        },
    }
