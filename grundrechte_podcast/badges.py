"""Badge catalog and evaluator.

Badges are static; each id maps to a pure predicate over a project snapshot.
Conditions look at flags and script only, never at the score:
  law_expert         intro mission done
  knowledge_starter  lesson A done
  knowledge_pro      lesson B done
  word_acrobat       ≥ 100 words in the whole script
  radio_star         every card reaches its minimum (and the script is not empty)

Unlocking is monotonic: an unlocked badge is never evaluated or removed again.
"""

from typing import Callable, Iterable

from pydantic import BaseModel

from .metrics import is_complete, total_words
from .models import Project

WORD_ACROBAT_WORDS = 100


class Badge(BaseModel):
    id: str
    title: str
    description: str
    icon: str
    color: str


BADGES: list[Badge] = [
    Badge(
        id="law_expert",
        title="Gesetzes-Hüter",
        description="Du weißt, was das Grundgesetz ist!",
        icon="📜",
        color="bg-orange-100 text-orange-600 border-orange-200",
    ),
    Badge(
        id="knowledge_starter",
        title="Wissens-Starter",
        description="Das Basis-Wissen gemeistert!",
        icon="💡",
        color="bg-yellow-100 text-yellow-600 border-yellow-200",
    ),
    Badge(
        id="knowledge_pro",
        title="Grundrechte-Profi",
        description="Den Profi-Check bestanden!",
        icon="🎓",
        color="bg-indigo-100 text-indigo-600 border-indigo-200",
    ),
    Badge(
        id="word_acrobat",
        title="Wort-Akrobat",
        description="Über 100 Wörter im Skript!",
        icon="🎪",
        color="bg-purple-100 text-purple-600 border-purple-200",
    ),
    Badge(
        id="radio_star",
        title="Radio Star",
        description="Alle Teile des Skripts sind fertig!",
        icon="🎙️",
        color="bg-green-100 text-green-600 border-green-200",
    ),
]

BADGE_CONDITIONS: dict[str, Callable[[Project], bool]] = {
    "law_expert": lambda p: p.intro_completed,
    "knowledge_starter": lambda p: p.lesson_a_done,
    "knowledge_pro": lambda p: p.lesson_b_done,
    "word_acrobat": lambda p: total_words(p.script) >= WORD_ACROBAT_WORDS,
    "radio_star": lambda p: len(p.script) > 0 and all(is_complete(c) for c in p.script),
}


def get_badge(badge_id: str) -> Badge | None:
    for badge in BADGES:
        if badge.id == badge_id:
            return badge
    return None


def evaluate_badges(project: Project, currently_unlocked: Iterable[str]) -> list[str]:
    """Return ids of badges whose condition now holds but are not yet unlocked.

    Result is in catalog order. Calling again with the returned ids added to
    ``currently_unlocked`` yields an empty list.
    """
    unlocked = set(currently_unlocked)
    return [
        badge.id
        for badge in BADGES
        if badge.id not in unlocked and BADGE_CONDITIONS[badge.id](project)
    ]
