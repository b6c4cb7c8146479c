"""Shared builders for tests that should not depend on preset content."""

from grundrechte_podcast.catalog import new_script
from grundrechte_podcast.models import (
    CaseCard,
    CheckCard,
    Project,
    QuizQuestion,
    StarterOption,
    Topic,
    TopicLesson,
    WordDef,
)

WORD_BANK = [
    WordDef(word="Respekt", definition="Andere freundlich behandeln."),
    WordDef(word="Recht", definition="Etwas, das dir zusteht."),
    WordDef(word="fair", definition="Gerecht spielen."),
]


def make_project(**fields) -> Project:
    data = {
        "team_name": "Die Füchse",
        "topic_id": "art1",
        "script": new_script(),
        "date_created": "2026-01-01T00:00:00+00:00",
    }
    data.update(fields)
    return Project(**data)


def make_topic(quizzes: int = 2, cases: int = 2, checks: int = 2) -> Topic:
    lesson = TopicLesson(
        intro_story="Es war einmal ein Grundrecht.",
        quizzes=[
            QuizQuestion(id=f"q{i}", question=f"Frage {i}?", options=["a", "b", "c"],
                         correct_index=1, explanation="Weil b.")
            for i in range(quizzes)
        ],
        cases=[
            CaseCard(id=f"c{i}", title=f"Fall {i}", scenario="Szene", question="Okay?",
                     options=["ja", "nein"], correct_index=0, explanation="Darum.")
            for i in range(cases)
        ],
        checks=[
            CheckCard(id=f"ch{i}", statement="Darf ich das?", answer="no", explanation="Nein.")
            for i in range(checks)
        ],
    )
    return Topic(
        id="art1",
        title="Art. 1 GG",
        simple_title="Menschenwürde",
        article_ref="Art. 1",
        icon="👑",
        description="Jeder Mensch ist wertvoll.",
        lesson=lesson,
        mini_explain=["Würde bedeutet: Jeder Mensch ist wertvoll."],
        key_sentence="Würde heißt: Jeder Mensch ist wertvoll.",
        example_ideas=["Jemand wird ausgelacht wegen Kleidung."],
        boundary_ideas=["Bloßstellen ist verboten."],
        school_tips=["Wir sagen laut Stopp!"],
        sentence_starters={
            "hook": [StarterOption(label="Frage", fragment="Hand aufs Herz: ",
                                   suggestions=["Wer kennt das?", "Wer war schon mal traurig?"])],
        },
        word_bank=list(WORD_BANK),
    )


def ten_words() -> str:
    return "eins zwei drei vier fünf sechs sieben acht neun zehn"
