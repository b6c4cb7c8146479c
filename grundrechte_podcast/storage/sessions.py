"""Active transient sessions (one lesson, one workshop; single user).

Sessions are never persisted. Replacing or dropping a session closes it so
that late callbacks cannot touch state after the view is gone.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..lesson import LessonSession
    from ..workshop import ScriptBuilderSession

_lesson: "LessonSession | None" = None
_workshop: "ScriptBuilderSession | None" = None


def get_lesson() -> "LessonSession | None":
    return _lesson


def set_lesson(session: "LessonSession") -> None:
    global _lesson
    if _lesson is not None:
        _lesson.close()
    _lesson = session


def drop_lesson() -> bool:
    global _lesson
    if _lesson is None:
        return False
    _lesson.close()
    _lesson = None
    return True


def get_workshop() -> "ScriptBuilderSession | None":
    return _workshop


def set_workshop(session: "ScriptBuilderSession") -> None:
    global _workshop
    if _workshop is not None:
        _workshop.close()
    _workshop = session


def drop_workshop() -> bool:
    global _workshop
    if _workshop is None:
        return False
    _workshop.close()
    _workshop = None
    return True


def reset() -> None:
    drop_lesson()
    drop_workshop()
