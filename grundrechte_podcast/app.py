import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from grundrechte_podcast import storage
from grundrechte_podcast.routes import router

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def create_app(data_dir: Path | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))
    storage.init_storage(resolved)

    app = FastAPI(title="Grundrechte-Podcast Studio")
    app.include_router(router, prefix="/api")
    return app


app = create_app()
