import random

import pytest

from grundrechte_podcast import catalog
from grundrechte_podcast.models import TOPIC_IDS, ScriptCard


# ── template ────────────────────────────────────────────


def test_new_script_follows_template():
    script = catalog.new_script()
    assert [c.type for c in script] == [
        "hook", "intro", "explanation", "example", "boundary", "tip", "outro",
    ]
    assert [c.min_words for c in script] == [10, 15, 25, 20, 15, 15, 10]
    assert all(c.text == "" for c in script)


def test_new_script_is_fresh():
    first = catalog.new_script()
    first[0].text = "geändert"
    assert catalog.new_script()[0].text == ""


# ── topics ──────────────────────────────────────────────


def test_all_topics_loaded():
    assert sorted(t.id for t in catalog.list_topics()) == sorted(TOPIC_IDS)


def test_get_topic():
    topic = catalog.get_topic("art1")
    assert topic.simple_title == "Menschenwürde"
    assert len(topic.lesson.quizzes) == 6
    assert len(topic.lesson.cases) == 5
    assert [c.answer for c in topic.lesson.checks] == ["depends", "no", "yes", "no"]
    assert "Respekt" in [w.word for w in topic.word_bank]


def test_get_topic_unknown():
    with pytest.raises(KeyError):
        catalog.get_topic("art99")


def test_every_topic_has_lesson_content():
    for topic in catalog.list_topics():
        assert topic.lesson.quizzes
        assert topic.word_bank
        for quiz in topic.lesson.quizzes:
            assert 0 <= quiz.correct_index < len(quiz.options)
        for case in topic.lesson.cases:
            assert 0 <= case.correct_index < len(case.options)


def test_general_intro_overlay():
    topic = catalog.general_intro_topic("art1")
    assert topic.simple_title == "Das Grundgesetz"
    assert topic.icon == "📜"
    assert len(topic.lesson.quizzes) == 5
    assert topic.word_bank == catalog.get_topic("art1").word_bank
    assert catalog.get_topic("art1").simple_title == "Menschenwürde"


# ── ideas and suggestions ───────────────────────────────


def test_content_ideas_from_topic():
    topic = catalog.get_topic("art1")
    ideas = catalog.get_content_ideas(topic, "example")
    assert ideas.title == "Ideen für Beispiele"
    assert ideas.items == topic.example_ideas
    assert catalog.get_content_ideas(topic, "explanation").title == "Erklärung: Menschenwürde"


def test_content_ideas_fixed_lists():
    topic = catalog.get_topic("art2")
    assert len(catalog.get_content_ideas(topic, "outro").items) == 4


def test_suggestion_pool_uses_team_name():
    topic = catalog.get_topic("art1")
    card = ScriptCard(type="intro", title="Intro", min_words=15)
    pool = catalog.suggestion_pool(card, topic, "Die Füchse")
    assert "Hallo und herzlich willkommen, wir sind Die Füchse!" in pool
    assert not any("willkommen, wir sind" in s for s in catalog.suggestion_pool(card, topic, "  "))


def test_suggestion_pool_skips_present_sentences():
    topic = catalog.get_topic("art1")
    card = ScriptCard(type="outro", title="Outro", min_words=10,
                      text="das war unser podcast über menschenwürde.")
    assert "Das war unser Podcast über Menschenwürde." not in catalog.suggestion_pool(card, topic, "")


def test_auto_suggestion_none_when_exhausted():
    topic = catalog.get_topic("art1").model_copy(update={"sentence_starters": {}, "school_tips": []})
    card = ScriptCard(type="tip", title="Tipp", min_words=15)
    assert catalog.get_auto_suggestion(card, topic, "Team", random.Random(0)) is None


def test_auto_suggestion_from_pool():
    topic = catalog.get_topic("art3")
    card = ScriptCard(type="hook", title="Hook", min_words=10)
    pool = catalog.suggestion_pool(card, topic, "Team")
    assert catalog.get_auto_suggestion(card, topic, "Team", random.Random(3)) in pool
