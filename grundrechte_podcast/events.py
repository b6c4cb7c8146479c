"""Outbound notifications emitted by lesson and workshop sessions.

Presentation, audio and haptics react to these; sessions never wait on them.
"""

from typing import Callable, Literal, Union

from pydantic import BaseModel


class LessonCompleted(BaseModel):
    kind: Literal["lesson_completed"] = "lesson_completed"
    points: int


class BadgeUnlocked(BaseModel):
    kind: Literal["badge_unlocked"] = "badge_unlocked"
    badge_id: str


class ScoreChanged(BaseModel):
    kind: Literal["score_changed"] = "score_changed"
    score: int
    delta: int


Event = Union[LessonCompleted, BadgeUnlocked, ScoreChanged]

EventListener = Callable[[Event], None]
