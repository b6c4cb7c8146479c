"""Pydantic request models for API endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, NonNegativeInt, PositiveInt, StrictInt
from pydantic.alias_generators import to_camel


class CreateProject(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    team_name: str
    topic_id: str


class StartLesson(BaseModel):
    kind: Literal["intro", "lesson_a", "lesson_b"]


class AnswerBody(BaseModel):
    choice: StrictInt | Literal["yes", "no", "depends"]


class SelectCard(BaseModel):
    index: int


class EditText(BaseModel):
    text: str


class InsertBody(BaseModel):
    snippet: str
    start: int | None = None
    end: int | None = None


class SpeakerBody(BaseModel):
    speaker: str
    position: int | None = None


class TargetMinutes(BaseModel):
    min: NonNegativeInt | None = None
    max: PositiveInt | None = None


class UpdateSettings(BaseModel):
    words_per_minute: PositiveInt | None = None
    target_minutes: TargetMinutes | None = None
    score_flash_ms: NonNegativeInt | None = None
    badge_toast_ms: NonNegativeInt | None = None
    lesson_auto_advance_ms: NonNegativeInt | None = None
    magic_extend_min_words: NonNegativeInt | None = None
