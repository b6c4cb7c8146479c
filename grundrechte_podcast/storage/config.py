"""App settings (reading pace, podcast length target, UI feedback timings)."""

import json
from pathlib import Path
from typing import Any

from .core import data_dir

_CONFIG_DEFAULTS: dict[str, Any] = {
    "words_per_minute": 75,
    "target_minutes": {"min": 3, "max": 5},
    "score_flash_ms": 1000,
    "badge_toast_ms": 4000,
    "lesson_auto_advance_ms": 2000,
    "magic_extend_min_words": 5,
}

_SCALAR_KEYS = (
    "words_per_minute",
    "score_flash_ms",
    "badge_toast_ms",
    "lesson_auto_advance_ms",
    "magic_extend_min_words",
)


def _config_path() -> Path:
    return data_dir() / "config.json"


def _merge(config: dict[str, Any], fields: dict[str, Any]) -> None:
    for key in _SCALAR_KEYS:
        if key in fields:
            config[key] = fields[key]
    if isinstance(fields.get("target_minutes"), dict):
        for bound in ("min", "max"):
            if bound in fields["target_minutes"]:
                config["target_minutes"][bound] = fields["target_minutes"][bound]


def get_config() -> dict[str, Any]:
    """Read config, returning defaults merged with stored values."""
    config: dict[str, Any] = json.loads(json.dumps(_CONFIG_DEFAULTS))
    path = _config_path()
    if path.is_file():
        _merge(config, json.loads(path.read_text()))
    return config


def update_config(fields: dict[str, Any]) -> dict[str, Any]:
    """Merge fields into config and persist. Unknown keys are ignored. Returns full config."""
    config = get_config()
    _merge(config, fields)
    _config_path().write_text(json.dumps(config, indent=2))
    return config
