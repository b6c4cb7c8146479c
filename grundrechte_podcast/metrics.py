"""Word/text metrics, reading time, and score levels.

Word count ignores speaker labels ("Sprecher A:" … "Sprecher E:", any case)
so that the label buttons in the editor never inflate a card's count.

Reading time (time tracker in the editor):
  seconds = words / words_per_minute * 60
  status  short  < 3 min, target 3–5 min, long > 5 min
  percent fill of a 6-minute bar, capped at 100

Levels are a fixed ladder over the project score; the current level is the
highest one whose minimum is ≤ score.
"""

from __future__ import annotations

import re
from typing import Iterable

from pydantic import BaseModel, Field

from .models import ScriptCard

SPEAKER_LABEL = re.compile(r"Sprecher\s+[A-E]:", re.IGNORECASE)

DEFAULT_WORDS_PER_MINUTE = 75
DEFAULT_TARGET_MINUTES = (3, 5)
TRACKER_BAR_MINUTES = 6


def word_count(text: str | None) -> int:
    """Count whitespace-separated words, ignoring speaker labels."""
    if not text:
        return 0
    clean = SPEAKER_LABEL.sub("", text).strip()
    return len(clean.split()) if clean else 0


def total_words(cards: Iterable[ScriptCard]) -> int:
    return sum(word_count(card.text) for card in cards)


def is_complete(card: ScriptCard) -> bool:
    return word_count(card.text) >= card.min_words


# ── Reading time ────────────────────────────────────────


class ReadingTime(BaseModel):
    seconds: int
    minutes: float
    status: str  # "short" | "target" | "long"
    percent: float


def reading_time(
    words: int,
    words_per_minute: int = DEFAULT_WORDS_PER_MINUTE,
    target_minutes: tuple[int, int] = DEFAULT_TARGET_MINUTES,
) -> ReadingTime:
    """Estimate how long the script takes to read aloud."""
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")
    minutes = words / words_per_minute
    low, high = target_minutes
    if minutes < low:
        status = "short"
    elif minutes <= high:
        status = "target"
    else:
        status = "long"
    return ReadingTime(
        seconds=round(minutes * 60),
        minutes=round(minutes, 2),
        status=status,
        percent=min(100.0, round(minutes / TRACKER_BAR_MINUTES * 100, 1)),
    )


# ── Levels ──────────────────────────────────────────────


class Level(BaseModel):
    min_score: int = Field(alias="min")
    title: str
    icon: str


LEVELS: list[Level] = [
    Level(min=0, title="Reporter-Neuling", icon="🎤"),
    Level(min=100, title="Wort-Entdecker", icon="🔎"),
    Level(min=300, title="Fakten-Sammler", icon="📚"),
    Level(min=600, title="Grundrechte-Experte", icon="⭐"),
    Level(min=1000, title="Chefredakteur", icon="👑"),
]


def current_level(score: int) -> Level:
    for level in reversed(LEVELS):
        if score >= level.min_score:
            return level
    return LEVELS[0]


def next_level(score: int) -> Level | None:
    """Return the first level not yet reached, or None at the top."""
    for level in LEVELS:
        if level.min_score > score:
            return level
    return None
