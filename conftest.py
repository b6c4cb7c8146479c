import shutil
from pathlib import Path

import pytest

from grundrechte_podcast import storage

TEST_DATA_DIR = Path("data-tests")
PRESETS_DIR = Path(__file__).parent / "presets"


@pytest.fixture(autouse=True)
def clean_test_data():
    """Wipe and re-init data-tests/ before every test."""
    if TEST_DATA_DIR.exists():
        shutil.rmtree(TEST_DATA_DIR)
    storage.init_storage(TEST_DATA_DIR, presets_dir=PRESETS_DIR)
    yield
    # data-tests/ is kept after the run


@pytest.fixture
def client():
    """API client bound to data-tests/."""
    from fastapi.testclient import TestClient

    from grundrechte_podcast.app import create_app

    return TestClient(create_app(TEST_DATA_DIR))
