"""Script builder session (the "Werkstatt").

On open the session splits the stored project score into a lesson part and a
script part:

  base_score = max(0, project.score - script_score(project.script))

so that later edits only ever replace the script part. Each text edit:
  1. updates the active card in the local script copy
  2. recomputes the script score
  3. total = base_score + script score
  4. records the gain for the score flash (0 when the score did not rise)
  5. evaluates badges against the edited project, unlocks new ones
  6. commits (script, total, badges) through ``on_commit``, once per edit

Focusing another card never recomputes anything. Timers for the score flash
and badge toast belong to the caller; clear_flash() / dismiss_toast() reset
the transient values.
"""

import logging
import random
from typing import Any, Callable

from . import catalog
from .badges import evaluate_badges, get_badge
from .events import BadgeUnlocked, EventListener, ScoreChanged
from .metrics import is_complete, total_words, word_count
from .models import Project, ScriptCard, Topic
from .scoring import script_score, used_words

logger = logging.getLogger(__name__)

SPEAKERS = ("A", "B", "C", "D", "E")
MAGIC_EXTEND_MIN_WORDS = 5


def insert_text(text: str, snippet: str, start: int | None = None, end: int | None = None) -> tuple[str, int]:
    """Replace text[start:end] with snippet, spacing it off a preceding word.

    Returns the new text and the cursor position right after the snippet.
    Without a selection the snippet goes to the end.
    """
    if start is None:
        start = len(text)
    if end is None:
        end = start
    if not 0 <= start <= end <= len(text):
        raise IndexError(f"Selection {start}:{end} outside text of length {len(text)}")
    prefix = ""
    if start > 0 and text[start - 1] not in (" ", "\n"):
        prefix = " "
    new_text = text[:start] + prefix + snippet + text[end:]
    return new_text, start + len(prefix) + len(snippet)


class ScriptBuilderSession:
    def __init__(
        self,
        project: Project,
        topic: Topic,
        on_commit: Callable[[Project], None] | None = None,
        on_event: EventListener | None = None,
        magic_extend_min_words: int = MAGIC_EXTEND_MIN_WORDS,
    ) -> None:
        self._project = project.model_copy(deep=True)
        self.topic = topic
        self.on_commit = on_commit
        self.on_event = on_event
        self.magic_extend_min_words = magic_extend_min_words
        self.cards: list[ScriptCard] = self._project.script or catalog.new_script()
        self.active_index = 0
        initial = script_score(self.cards, topic.word_bank)
        self.base_score = max(0, self._project.score - initial)
        self.score = self.base_score + initial
        self.unlocked_badges: list[str] = list(self._project.unlocked_badges)
        self.last_delta = 0
        self.toast: str | None = None
        self.closed = False

    @property
    def project(self) -> Project:
        """Last committed project value (a copy)."""
        return self._project.model_copy(deep=True)

    @property
    def active_card(self) -> ScriptCard:
        return self.cards[self.active_index]

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("Workshop session is closed")

    def _emit(self, event) -> None:
        if self.on_event is not None:
            self.on_event(event)

    def select_card(self, index: int) -> None:
        self._check_open()
        if not 0 <= index < len(self.cards):
            raise IndexError(f"Card index {index} out of range")
        self.active_index = index

    def edit_text(self, text: str) -> Project:
        """Replace the active card's text and commit the result."""
        self._check_open()
        cards = [card.model_copy() for card in self.cards]
        cards[self.active_index] = cards[self.active_index].model_copy(update={"text": text})
        self.cards = cards

        new_total = self.base_score + script_score(cards, self.topic.word_bank)
        previous = self.score
        self.score = new_total
        self.last_delta = max(0, new_total - previous)
        if new_total != previous:
            self._emit(ScoreChanged(score=new_total, delta=new_total - previous))

        snapshot = self._project.model_copy(update={"script": cards})
        for badge_id in evaluate_badges(snapshot, self.unlocked_badges):
            self.unlocked_badges.append(badge_id)
            self.toast = badge_id
            logger.info(f"Badge unlocked: {badge_id}")
            self._emit(BadgeUnlocked(badge_id=badge_id))

        self._project = self._project.model_copy(update={
            "script": cards,
            "score": new_total,
            "unlocked_badges": list(self.unlocked_badges),
        })
        logger.debug(f"Script committed: score={new_total} delta={new_total - previous}")
        if self.on_commit is not None:
            self.on_commit(self.project)
        return self.project

    def insert(self, snippet: str, start: int | None = None, end: int | None = None) -> int:
        """Insert a snippet into the active card. Returns the new cursor position."""
        new_text, cursor = insert_text(self.active_card.text, snippet, start, end)
        self.edit_text(new_text)
        return cursor

    def insert_speaker(self, speaker: str, position: int | None = None) -> int:
        if speaker not in SPEAKERS:
            raise ValueError(f"Speaker must be one of {SPEAKERS}")
        return self.insert(f"\nSprecher {speaker}: ", position)

    def suggestion(self, rng: random.Random | None = None) -> str | None:
        return catalog.get_auto_suggestion(self.active_card, self.topic, self._project.team_name, rng)

    def can_extend(self) -> bool:
        """Magic extend is offered for started but still short cards."""
        card = self.active_card
        words = word_count(card.text)
        if words >= card.min_words or words <= self.magic_extend_min_words:
            return False
        return bool(catalog.suggestion_pool(card, self.topic, self._project.team_name))

    def extend(self, rng: random.Random | None = None) -> str | None:
        """Append an auto-suggestion to the active card. Returns the added sentence."""
        self._check_open()
        sentence = self.suggestion(rng)
        if sentence is None:
            return None
        text = self.active_card.text
        separator = " " if text and not text.endswith((" ", "\n")) else ""
        self.edit_text(text + separator + sentence)
        return sentence

    def clear_flash(self) -> None:
        self.last_delta = 0

    def dismiss_toast(self) -> None:
        self.toast = None

    def close(self) -> None:
        self.closed = True

    def snapshot(self) -> dict[str, Any]:
        toast = get_badge(self.toast) if self.toast else None
        return {
            "team_name": self._project.team_name,
            "topic": self.topic.summary(),
            "active_index": self.active_index,
            "cards": [
                {
                    **card.model_dump(by_alias=True),
                    "words": word_count(card.text),
                    "complete": is_complete(card),
                }
                for card in self.cards
            ],
            "total_words": total_words(self.cards),
            "base_score": self.base_score,
            "score": self.score,
            "last_delta": self.last_delta,
            "unlocked_badges": list(self.unlocked_badges),
            "toast": toast.model_dump() if toast else None,
            "used_words": [w.word for w in used_words(self.cards, self.topic.word_bank)],
            "ideas": catalog.get_content_ideas(self.topic, self.active_card.type).model_dump(),
            "can_extend": self.can_extend(),
        }
