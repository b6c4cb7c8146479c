"""Core domain models.

All sessions, scoring functions and storage operate on these types.
Pydantic is used for validation and serialisation at every data boundary.
Persisted and API field names are camelCase (``teamName``, ``lessonA_Done``),
attribute names are snake_case.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

TopicId = Literal["art1", "art2", "art3", "art5", "art16a"]

CardType = Literal["hook", "intro", "explanation", "example", "boundary", "tip", "outro"]

CheckAnswer = Literal["yes", "no", "depends"]

LessonMode = Literal["basics", "pro"]

TOPIC_IDS: tuple[str, ...] = ("art1", "art2", "art3", "art5", "art16a")

CARD_TYPES: tuple[str, ...] = ("hook", "intro", "explanation", "example", "boundary", "tip", "outro")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Script ──────────────────────────────────────────────


class ScriptCard(CamelModel):
    """One section of the podcast script. Only ``text`` changes after creation."""

    type: CardType
    title: str
    text: str = ""
    min_words: int = Field(ge=0)


class Project(CamelModel):
    """One team's podcast effort, persisted as a single record."""

    team_name: str
    topic_id: TopicId
    script: list[ScriptCard]
    date_created: str
    score: int = Field(default=0, ge=0)
    unlocked_badges: list[str] = Field(default_factory=list)
    intro_completed: bool = False
    lesson_a_done: bool = Field(default=False, alias="lessonA_Done")
    lesson_b_done: bool = Field(default=False, alias="lessonB_Done")

    @field_validator("unlocked_badges")
    @classmethod
    def _unique_badges(cls, value: list[str]) -> list[str]:
        return list(dict.fromkeys(value))

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)


# ── Topic catalog ───────────────────────────────────────


class QuizQuestion(CamelModel):
    id: str
    question: str
    options: list[str]
    correct_index: int
    explanation: str


class CaseCard(CamelModel):
    """Applied scenario with multiple-choice options."""

    id: str
    title: str
    scenario: str
    question: str
    options: list[str]
    correct_index: int
    explanation: str


class CheckCard(CamelModel):
    """A "Darf ich das?" statement answered with yes / no / depends."""

    id: str
    statement: str
    answer: CheckAnswer
    explanation: str


class TopicLesson(CamelModel):
    intro_story: str = ""
    quizzes: list[QuizQuestion] = Field(default_factory=list)
    cases: list[CaseCard] = Field(default_factory=list)
    checks: list[CheckCard] = Field(default_factory=list)


class WordDef(CamelModel):
    word: str
    definition: str


class StarterOption(CamelModel):
    label: str
    fragment: str
    suggestions: list[str] = Field(default_factory=list)


class Topic(CamelModel):
    """One constitutional right with its lesson and writing aids."""

    id: TopicId
    title: str
    simple_title: str
    article_ref: str
    icon: str
    description: str
    lesson: TopicLesson
    mini_explain: list[str] = Field(default_factory=list)
    key_sentence: str = ""
    example_ideas: list[str] = Field(default_factory=list)
    boundary_ideas: list[str] = Field(default_factory=list)
    school_tips: list[str] = Field(default_factory=list)
    sentence_starters: dict[CardType, list[StarterOption]] = Field(default_factory=dict)
    word_bank: list[WordDef] = Field(default_factory=list)

    def summary(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "simpleTitle": self.simple_title,
            "articleRef": self.article_ref,
            "icon": self.icon,
            "description": self.description,
        }


class ContentIdeas(CamelModel):
    title: str
    items: list[str] = Field(default_factory=list)
