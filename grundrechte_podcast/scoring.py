"""Script score calculator.

  score = 2 × total words
        + 50 × completed cards      (word count ≥ card.min_words)
        + 30 × glossary words used  (each word-bank entry at most once)

A word-bank entry counts as used when its word occurs, case-insensitively, as
a plain substring anywhere in the script text ("Recht" matches inside
"Gerechtigkeit"). Card texts are joined with newlines so a multi-word entry
never matches across two cards.

Adding text never lowers any component, so the score only drops when text is
actually removed.
"""

from typing import Iterable

from pydantic import BaseModel

from .metrics import is_complete, total_words
from .models import ScriptCard, WordDef

WORD_POINTS = 2
CARD_POINTS = 50
GLOSSARY_POINTS = 30


class ScoreBreakdown(BaseModel):
    words: int
    completed_cards: int
    glossary_words: int
    total: int


def script_text(cards: Iterable[ScriptCard]) -> str:
    return "\n".join(card.text for card in cards).lower()


def used_words(cards: list[ScriptCard], word_bank: list[WordDef]) -> list[WordDef]:
    """Word-bank entries present in the script, first occurrence per word."""
    text = script_text(cards)
    seen: set[str] = set()
    used = []
    for entry in word_bank:
        key = entry.word.lower()
        if not key or key in seen:
            continue
        if key in text:
            seen.add(key)
            used.append(entry)
    return used


def score_breakdown(cards: list[ScriptCard], word_bank: list[WordDef]) -> ScoreBreakdown:
    words = total_words(cards)
    completed = sum(1 for card in cards if is_complete(card))
    glossary = len(used_words(cards, word_bank))
    return ScoreBreakdown(
        words=words,
        completed_cards=completed,
        glossary_words=glossary,
        total=WORD_POINTS * words + CARD_POINTS * completed + GLOSSARY_POINTS * glossary,
    )


def script_score(cards: list[ScriptCard], word_bank: list[WordDef]) -> int:
    return score_breakdown(cards, word_bank).total
