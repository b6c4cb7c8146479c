"""Project Store: the single persisted project record.

    {data_dir}/project.json   ← the Project value, camelCase keys

An unreadable record (bad JSON, wrong shape, script not a list of cards) is
treated as "no project": it is logged, deleted, and load() returns None.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..models import Project
from .core import data_dir

logger = logging.getLogger(__name__)

PROJECT_FILE = "project.json"


class ProjectStore:
    def __init__(self, base_path: Path) -> None:
        self._path = base_path / PROJECT_FILE
        base_path.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Project | None:
        if not self._path.is_file():
            return None
        try:
            return Project.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (ValidationError, json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning(f"Discarding unreadable project record: {e}")
            self._path.unlink(missing_ok=True)
            return None

    def save(self, project: Project) -> None:
        self._path.write_text(
            project.model_dump_json(by_alias=True, indent=2), encoding="utf-8"
        )

    def clear(self) -> bool:
        """Delete the record. Returns False if there was none."""
        if not self._path.is_file():
            return False
        self._path.unlink()
        logger.info("Project reset")
        return True


def project_store() -> ProjectStore:
    return ProjectStore(data_dir())
