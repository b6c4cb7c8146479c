"""Lesson state machine.

Steps:
  basics  intro → quiz → finished
  pro     cases → checks → finished

Each item step walks a fixed list. Per item: answer once (later answers on
the same item are ignored), which reveals the explanation; then next(),
which resets the selection and moves on, or into the following step once the
list is exhausted. Empty lists are skipped, so a lesson without items goes
straight to finished.

Points (session only, the project score is untouched until completion):
  correct quiz +10, correct case +20, correct check +10, wrong answers +0,
  completion bonus +50 on finish().
finish() reports the total once through ``on_complete``.
"""

import logging
from typing import Any, Callable

from .events import EventListener, LessonCompleted
from .models import LessonMode, Project, Topic

logger = logging.getLogger(__name__)

ITEM_POINTS = {"quiz": 10, "cases": 20, "checks": 10}
COMPLETION_BONUS = 50
CHECK_ANSWERS = ("yes", "no", "depends")

NEXT_STEP = {"intro": "quiz", "quiz": "finished", "cases": "checks", "checks": "finished"}


class LessonStateError(RuntimeError):
    """Action not allowed in the lesson's current step."""


class LessonSession:
    def __init__(
        self,
        project: Project,
        topic: Topic,
        mode: LessonMode,
        on_complete: Callable[[int], None] | None = None,
        on_event: EventListener | None = None,
    ) -> None:
        if mode not in ("basics", "pro"):
            raise ValueError(f"Unknown lesson mode: {mode}")
        self.project = project.model_copy(deep=True)
        self.topic = topic
        self.mode = mode
        self.on_complete = on_complete
        self.on_event = on_event
        self.index = 0
        self.selected: int | str | None = None
        self.show_explanation = False
        self.session_score = 0
        self.completed = False
        self.closed = False
        self.step = "intro"
        if mode == "pro":
            self._enter("cases")

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def items(self) -> list:
        lesson = self.topic.lesson
        if self.step == "quiz":
            return lesson.quizzes
        if self.step == "cases":
            return lesson.cases
        if self.step == "checks":
            return lesson.checks
        return []

    @property
    def current_item(self):
        items = self.items
        return items[self.index] if items else None

    @property
    def is_correct(self) -> bool | None:
        if self.selected is None:
            return None
        item = self.current_item
        if self.step == "checks":
            return self.selected == item.answer
        return self.selected == item.correct_index

    @property
    def displayed_score(self) -> int:
        return self.project.score + self.session_score

    @property
    def total_points(self) -> int:
        """Points reported on completion: session score plus bonus."""
        return self.session_score + COMPLETION_BONUS

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def _check_open(self) -> None:
        if self.closed:
            raise RuntimeError("Lesson session is closed")

    def _enter(self, step: str) -> None:
        self.step = step
        self.index = 0
        self.selected = None
        self.show_explanation = False
        if step in ITEM_POINTS and not self.items:
            self._enter(NEXT_STEP[step])

    def start(self) -> None:
        """Leave the intro story and begin the quiz."""
        self._check_open()
        if self.step != "intro":
            raise LessonStateError(f"Cannot start from step '{self.step}'")
        self._enter(NEXT_STEP["intro"])

    def answer(self, choice: int | str) -> bool:
        """Select an option (quiz/cases) or yes/no/depends (checks).

        Returns whether the recorded answer is correct. A second answer on the
        same item changes nothing and returns the first answer's result.
        """
        self._check_open()
        if self.step not in ITEM_POINTS:
            raise LessonStateError(f"No question to answer in step '{self.step}'")
        if self.selected is not None:
            return bool(self.is_correct)
        item = self.current_item
        if self.step == "checks":
            if choice not in CHECK_ANSWERS:
                raise ValueError(f"Check answer must be one of {CHECK_ANSWERS}, got {choice!r}")
        elif not isinstance(choice, int) or isinstance(choice, bool) or not 0 <= choice < len(item.options):
            raise IndexError(f"Option {choice!r} out of range")
        self.selected = choice
        self.show_explanation = True
        correct = bool(self.is_correct)
        if correct:
            self.session_score += ITEM_POINTS[self.step]
        return correct

    def next(self) -> None:
        """Move past the answered item."""
        self._check_open()
        if self.step not in ITEM_POINTS:
            raise LessonStateError(f"Nothing to advance in step '{self.step}'")
        if self.selected is None:
            raise LessonStateError("Answer the current item first")
        self.selected = None
        self.show_explanation = False
        if self.index < len(self.items) - 1:
            self.index += 1
        else:
            self._enter(NEXT_STEP[self.step])

    def finish(self) -> int | None:
        """Report session points plus bonus once. Returns None if already reported."""
        self._check_open()
        if self.step != "finished":
            raise LessonStateError(f"Lesson not finished (step '{self.step}')")
        if self.completed:
            return None
        self.completed = True
        total = self.total_points
        logger.info(f"Lesson ({self.mode}) on {self.topic.id} finished: {total} points")
        if self.on_complete is not None:
            self.on_complete(total)
        if self.on_event is not None:
            self.on_event(LessonCompleted(points=total))
        return total

    def close(self) -> None:
        self.closed = True

    def snapshot(self) -> dict[str, Any]:
        item = self.current_item
        return {
            "mode": self.mode,
            "topic": self.topic.summary(),
            "step": self.step,
            "intro_story": self.topic.lesson.intro_story if self.step == "intro" else None,
            "index": self.index,
            "count": len(self.items),
            "item": item.model_dump(by_alias=True) if item is not None else None,
            "selected": self.selected,
            "show_explanation": self.show_explanation,
            "correct": self.is_correct,
            "session_score": self.session_score,
            "displayed_score": self.displayed_score,
            "total_points": self.total_points if self.step == "finished" else None,
            "completed": self.completed,
        }
