"""Content catalog: topics, script template, writing ideas, auto-suggestions.

Topic content lives in presets/topics.json (5 rights) and
presets/general-intro.json (the Grundgesetz basics lesson). Both are read
once and cached until init_storage() resets the cache.

The general-intro topic is a virtual topic: the selected topic's fields with
the general lesson, title and icon laid over it.

Auto-suggestion pool for a card:
  1. sentences built for the card type from the topic (and team name)
  2. every sentence starter fragment joined with each of its suggestions
Candidates whose first 15 characters already occur in the card text
(case-insensitive) are dropped; one of the rest is picked at random.
"""

import json
import random

from .models import (
    CARD_TYPES,
    ContentIdeas,
    ScriptCard,
    Topic,
    TopicLesson,
)
from .storage.core import presets_dir

SCRIPT_TEMPLATE: list[tuple[str, str, int]] = [
    ("hook", "Der Hinhörer (Hook)", 10),
    ("intro", "Begrüßung & Thema", 15),
    ("explanation", "Erklärung: Was bedeutet das?", 25),
    ("example", "Beispiel aus dem Alltag", 20),
    ("boundary", "Die Grenze / Regel", 15),
    ("tip", "Unser Tipp", 15),
    ("outro", "Verabschiedung", 10),
]

GENERAL_INTRO_TITLE = "Das Grundgesetz"
GENERAL_INTRO_ICON = "📜"

SUGGESTION_PREFIX_LEN = 15

_topics: dict[str, Topic] | None = None
_general_intro: TopicLesson | None = None


def reset_cache() -> None:
    global _topics, _general_intro
    _topics = None
    _general_intro = None


def new_script() -> list[ScriptCard]:
    """Fresh script: one empty card per template slot, in template order."""
    return [
        ScriptCard(type=card_type, title=title, text="", min_words=min_words)
        for card_type, title, min_words in SCRIPT_TEMPLATE
    ]


def _load_topics() -> dict[str, Topic]:
    global _topics
    if _topics is not None:
        return _topics
    raw = json.loads((presets_dir() / "topics.json").read_text(encoding="utf-8"))
    _topics = {topic_id: Topic.model_validate(data) for topic_id, data in raw.items()}
    return _topics


def _load_general_intro() -> TopicLesson:
    global _general_intro
    if _general_intro is None:
        raw = json.loads((presets_dir() / "general-intro.json").read_text(encoding="utf-8"))
        _general_intro = TopicLesson.model_validate(raw)
    return _general_intro


def list_topics() -> list[Topic]:
    return list(_load_topics().values())


def get_topic(topic_id: str) -> Topic:
    """Return a topic by id. Raises KeyError for unknown ids."""
    topics = _load_topics()
    if topic_id not in topics:
        raise KeyError(f"Unknown topic: {topic_id}")
    return topics[topic_id]


def general_intro_topic(topic_id: str) -> Topic:
    """The selected topic with the general Grundgesetz lesson laid over it."""
    base = get_topic(topic_id)
    return base.model_copy(update={
        "simple_title": GENERAL_INTRO_TITLE,
        "icon": GENERAL_INTRO_ICON,
        "lesson": _load_general_intro(),
    })


# ── Writing ideas ───────────────────────────────────────


def get_content_ideas(topic: Topic, card_type: str) -> ContentIdeas:
    """Title and suggestion list shown in the "Ideen" tab for a card type."""
    if card_type == "explanation":
        return ContentIdeas(title=f"Erklärung: {topic.simple_title}", items=list(topic.mini_explain))
    if card_type == "example":
        return ContentIdeas(title="Ideen für Beispiele", items=list(topic.example_ideas))
    if card_type == "boundary":
        return ContentIdeas(title="Wann ist die Grenze erreicht?", items=list(topic.boundary_ideas))
    if card_type == "tip":
        return ContentIdeas(title="Tipps für die Klasse", items=list(topic.school_tips))
    if card_type == "hook":
        return ContentIdeas(title="Ideen für den Einstieg", items=[
            "Starte mit einem lauten Geräusch!",
            "Stelle eine Frage an die Zuhörer.",
            "Erzähle ein kurzes Rätsel.",
            "Mach ein kleines Rollenspiel.",
        ])
    if card_type == "intro":
        return ContentIdeas(title="Ideen für die Begrüßung", items=[
            f"Sagt eure Namen und: Wir sind das Team {topic.simple_title}!",
            "Sagt, aus welcher Klasse ihr kommt.",
            "Macht Musik am Anfang.",
            "Erklärt kurz, was ein Grundrecht überhaupt ist.",
        ])
    if card_type == "outro":
        return ContentIdeas(title="Ideen für den Schluss", items=[
            "Bedankt euch fürs Zuhören.",
            "Spielt ein Lied zum Schluss.",
            "Wünscht allen einen schönen Tag.",
            "Wiederholt nochmal den wichtigsten Satz.",
        ])
    return ContentIdeas(title="Allgemeine Ideen", items=[])


def _card_sentences(card_type: str, topic: Topic, team_name: str) -> list[str]:
    name = topic.simple_title
    team = team_name.strip()
    if card_type == "hook":
        return [
            f"Habt ihr schon mal etwas über {name} gehört?",
            f"Heute wird es spannend, denn es geht um {name}!",
        ]
    if card_type == "intro":
        sentences = [
            f"Heute geht es in unserem Podcast um {name}.",
            f"Das steht im Grundgesetz in {topic.article_ref}.",
        ]
        if team:
            sentences.insert(0, f"Hallo und herzlich willkommen, wir sind {team}!")
        return sentences
    if card_type == "explanation":
        return [s for s in [*topic.mini_explain, topic.key_sentence] if s]
    if card_type == "example":
        return list(topic.example_ideas)
    if card_type == "boundary":
        return list(topic.boundary_ideas)
    if card_type == "tip":
        return list(topic.school_tips)
    if card_type == "outro":
        sentences = [f"Das war unser Podcast über {name}."]
        if team:
            sentences.append(f"Tschüss und bis zum nächsten Mal, euer Team {team}!")
        return sentences
    return []


def suggestion_pool(card: ScriptCard, topic: Topic, team_name: str) -> list[str]:
    """All candidates not yet (nearly) present in the card text, in stable order."""
    if card.type not in CARD_TYPES:
        return []
    starters = topic.sentence_starters.get(card.type, [])
    pool = _card_sentences(card.type, topic, team_name)
    pool += [starter.fragment + suggestion for starter in starters for suggestion in starter.suggestions]
    existing = card.text.lower()
    return [
        candidate for candidate in pool
        if candidate[:SUGGESTION_PREFIX_LEN].lower() not in existing
    ]


def get_auto_suggestion(
    card: ScriptCard, topic: Topic, team_name: str, rng: random.Random | None = None
) -> str | None:
    """Pick one fitting sentence for the card, or None when nothing is left."""
    available = suggestion_pool(card, topic, team_name)
    if not available:
        return None
    return (rng or random).choice(available)
