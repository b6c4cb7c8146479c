"""File-based JSON storage.

Data layout:
  data/
    project.json   The single project record (team, topic, script, score,
                   badges, lesson flags)
    config.json    App settings (reading pace, length target, UI timings)
  presets/
    topics.json         Content for the 5 rights (lessons, ideas, word banks)
    general-intro.json  The general Grundgesetz lesson

Config: get_config() returns defaults merged with stored values.
update_config() applies partial updates; target_minutes is merged
bound-by-bound, scalars are overwritten, unknown keys are dropped.

Lesson and workshop sessions are transient and live in memory only
(see sessions.py); init_storage() drops them.
"""

# Re-export all public symbols so `from grundrechte_podcast import storage` keeps working.

from .core import (  # noqa: F401
    data_dir,
    init_storage,
    presets_dir,
)

from .project import (  # noqa: F401
    ProjectStore,
    project_store,
)

from .config import (  # noqa: F401
    get_config,
    update_config,
)

from .sessions import (  # noqa: F401
    drop_lesson,
    drop_workshop,
    get_lesson,
    get_workshop,
    set_lesson,
    set_workshop,
)
