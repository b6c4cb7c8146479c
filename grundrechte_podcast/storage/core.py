"""Storage initialization and path helpers."""

from pathlib import Path

_data_dir: Path | None = None
_presets_dir: Path | None = None


def init_storage(data_dir: Path, presets_dir: Path | None = None) -> None:
    global _data_dir, _presets_dir
    from .. import catalog as _catalog_mod
    from . import sessions as _sessions_mod

    _data_dir = data_dir
    _data_dir.mkdir(parents=True, exist_ok=True)
    if presets_dir is None:
        presets_dir = Path(__file__).parent.parent.parent / "presets"
    _presets_dir = presets_dir
    _catalog_mod.reset_cache()
    _sessions_mod.reset()


def data_dir() -> Path:
    assert _data_dir is not None, "Call init_storage() before using storage"
    return _data_dir


def presets_dir() -> Path:
    assert _presets_dir is not None, "Call init_storage() before using storage"
    return _presets_dir
