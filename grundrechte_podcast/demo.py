"""Create a demo project for development/testing."""

from grundrechte_podcast import catalog, storage
from grundrechte_podcast.progress import complete_lesson, new_project
from grundrechte_podcast.workshop import ScriptBuilderSession

DEMO_TEAM = "Die Füchse"
DEMO_TOPIC = "art1"

DEMO_SCRIPT = {
    "hook": "Sprecher A: Stell dir vor, jemand lacht dich aus. Wie fühlt sich das an? "
    "Heute geht es um Respekt.",
    "intro": "Sprecher B: Hallo, hier sind die Füchse aus der 3b. In unserer heutigen "
    "Sendung geht es um die Menschenwürde.",
}


def create_demo_data() -> None:
    """Replace the stored project with a demo project: intro mission done, script started."""
    store = storage.project_store()
    store.clear()
    project = new_project(DEMO_TEAM, DEMO_TOPIC)
    # 3 of 5 intro quiz questions right, plus the completion bonus
    project = complete_lesson(project, "intro", 30 + 50)
    store.save(project)

    session = ScriptBuilderSession(project, catalog.get_topic(DEMO_TOPIC), on_commit=store.save)
    for index, card in enumerate(session.cards):
        if card.type in DEMO_SCRIPT:
            session.select_card(index)
            session.edit_text(DEMO_SCRIPT[card.type])
    session.close()
