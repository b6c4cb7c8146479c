import pytest


@pytest.fixture
def project(client):
    res = client.post("/api/project", json={"teamName": "Die Füchse", "topicId": "art1"})
    assert res.status_code == 201
    return res.json()


# ── settings and catalog ────────────────────────────────


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


def test_settings_patch(client):
    res = client.patch("/api/settings", json={"words_per_minute": 100})
    assert res.json()["words_per_minute"] == 100
    assert client.get("/api/settings").json()["words_per_minute"] == 100


def test_settings_reject_bad_values(client, project):
    assert client.patch("/api/settings", json={"words_per_minute": 0}).status_code == 422
    assert client.patch("/api/settings", json={"target_minutes": {"max": "lang"}}).status_code == 422
    assert client.patch("/api/settings", json={"badge_toast_ms": -1}).status_code == 422
    assert client.get("/api/settings").json()["words_per_minute"] == 75
    assert client.get("/api/project/overview").status_code == 200


def test_settings_partial_target(client):
    data = client.patch("/api/settings", json={"target_minutes": {"max": 6}}).json()
    assert data["target_minutes"] == {"min": 3, "max": 6}


def test_topics(client):
    topics = client.get("/api/topics").json()
    assert len(topics) == 5
    assert {"id", "simpleTitle", "icon"} <= set(topics[0])


def test_topic_detail(client):
    data = client.get("/api/topics/art1").json()
    assert data["simpleTitle"] == "Menschenwürde"
    assert data["lesson"]["quizzes"][0]["correctIndex"] == 1
    assert client.get("/api/topics/art9").status_code == 404


def test_ideas(client):
    assert client.get("/api/topics/art1/ideas/tip").json()["title"] == "Tipps für die Klasse"
    assert client.get("/api/topics/art1/ideas/chorus").status_code == 404


def test_badges_and_levels(client):
    assert len(client.get("/api/badges").json()) == 5
    assert client.get("/api/levels").json()[1]["min"] == 100


# ── project ─────────────────────────────────────────────


def test_no_project(client):
    assert client.get("/api/project").status_code == 404
    assert client.get("/api/project/overview").status_code == 404
    assert client.delete("/api/project").status_code == 404
    assert client.post("/api/workshop").status_code == 404
    assert client.post("/api/lessons", json={"kind": "intro"}).status_code == 404


def test_create_project(client, project):
    assert project["teamName"] == "Die Füchse"
    assert project["score"] == 0
    assert client.get("/api/project").json()["topicId"] == "art1"


def test_create_project_invalid(client):
    assert client.post("/api/project", json={"teamName": " ", "topicId": "art1"}).status_code == 400
    assert client.post("/api/project", json={"teamName": "Team", "topicId": "art9"}).status_code == 400


def test_reset_project(client, project):
    client.post("/api/workshop")
    assert client.delete("/api/project").json() == {"ok": True}
    assert client.get("/api/project").status_code == 404
    assert client.get("/api/workshop").status_code == 404


def test_overview(client, project):
    data = client.get("/api/project/overview").json()
    assert data["level"]["title"] == "Reporter-Neuling"
    assert data["script"]["reading_time"]["status"] == "short"


# ── lessons ─────────────────────────────────────────────


def test_lesson_flow_errors(client, project):
    assert client.get("/api/lessons/current").status_code == 404
    lesson = client.post("/api/lessons", json={"kind": "lesson_a"}).json()
    assert lesson["step"] == "intro"
    assert client.post("/api/lessons/current/answer", json={"choice": 0}).status_code == 409
    assert client.post("/api/lessons/current/finish").status_code == 409
    client.post("/api/lessons/current/start")
    assert client.post("/api/lessons/current/answer", json={"choice": 9}).status_code == 400
    assert client.post("/api/lessons/current/next").status_code == 409


def test_unknown_lesson_kind(client, project):
    assert client.post("/api/lessons", json={"kind": "lesson_c"}).status_code == 422


def test_boolean_answer_rejected(client, project):
    client.post("/api/lessons", json={"kind": "lesson_a"})
    client.post("/api/lessons/current/start")
    assert client.post("/api/lessons/current/answer", json={"choice": True}).status_code == 422
    assert client.get("/api/lessons/current").json()["selected"] is None


def test_pro_lesson_all_correct(client, project):
    lesson = client.post("/api/lessons", json={"kind": "lesson_b"}).json()
    assert lesson["step"] == "cases"
    for choice in [1, 0, 0, 1, 0]:
        client.post("/api/lessons/current/answer", json={"choice": choice})
        client.post("/api/lessons/current/next")
    for choice in ["depends", "no", "yes", "no"]:
        client.post("/api/lessons/current/answer", json={"choice": choice})
        lesson = client.post("/api/lessons/current/next").json()
    assert lesson["step"] == "finished"
    assert lesson["session_score"] == 140
    result = client.post("/api/lessons/current/finish").json()
    assert result["events"] == [{"kind": "lesson_completed", "points": 190}]
    assert result["project"]["score"] == 190
    assert result["project"]["lessonB_Done"] is True
    assert result["project"]["unlockedBadges"] == ["knowledge_pro"]
    assert client.get("/api/lessons/current").status_code == 404


def test_exit_lesson_keeps_project(client, project):
    client.post("/api/lessons", json={"kind": "intro"})
    assert client.delete("/api/lessons/current").json() == {"ok": True}
    assert client.get("/api/project").json()["score"] == 0
    assert client.delete("/api/lessons/current").status_code == 404


def test_starting_lesson_closes_workshop(client, project):
    client.post("/api/workshop")
    client.post("/api/lessons", json={"kind": "intro"})
    assert client.get("/api/workshop").status_code == 404


def test_finishing_lesson_closes_workshop(client, project):
    client.post("/api/lessons", json={"kind": "intro"})
    client.post("/api/lessons/current/start")
    client.post("/api/workshop")
    for choice in [1, 0, 2, 0, 0]:
        client.post("/api/lessons/current/answer", json={"choice": choice})
        client.post("/api/lessons/current/next")
    assert client.post("/api/lessons/current/finish").json()["project"]["score"] == 80

    assert client.put("/api/workshop/text", json={"text": "Hallo"}).status_code == 404
    stored = client.get("/api/project").json()
    assert stored["score"] == 80
    assert stored["introCompleted"] is True
    assert stored["unlockedBadges"] == ["law_expert"]

    client.post("/api/workshop")
    data = client.put("/api/workshop/text", json={"text": "Hallo"}).json()
    assert data["score"] == 82
    assert client.get("/api/project").json()["unlockedBadges"] == ["law_expert"]


# ── workshop ────────────────────────────────────────────


def test_workshop_edit_persists(client, project):
    ws = client.post("/api/workshop")
    assert ws.status_code == 201
    assert ws.json()["base_score"] == 0
    data = client.put("/api/workshop/text", json={"text": "eins zwei drei"}).json()
    assert data["score"] == 6
    assert data["events"] == [{"kind": "score_changed", "score": 6, "delta": 6}]
    assert client.get("/api/project").json()["script"][0]["text"] == "eins zwei drei"


def test_workshop_select(client, project):
    client.post("/api/workshop")
    assert client.put("/api/workshop/active", json={"index": 2}).json()["active_index"] == 2
    assert client.put("/api/workshop/active", json={"index": 7}).status_code == 404


def test_workshop_insert_and_speaker(client, project):
    client.post("/api/workshop")
    data = client.post("/api/workshop/insert", json={"snippet": "Hallo"}).json()
    assert data["cursor"] == 5
    data = client.post("/api/workshop/speaker", json={"speaker": "A"}).json()
    assert data["cards"][0]["text"] == "Hallo \nSprecher A: "
    assert data["cards"][0]["words"] == 1
    assert client.post("/api/workshop/speaker", json={"speaker": "X"}).status_code == 400
    assert client.post("/api/workshop/insert", json={"snippet": "x", "start": 99}).status_code == 400


def test_workshop_extend(client, project):
    client.post("/api/workshop")
    assert client.post("/api/workshop/extend").status_code == 409
    client.put("/api/workshop/text", json={"text": "eins zwei drei vier fünf sechs"})
    data = client.post("/api/workshop/extend").json()
    assert data["added"]
    assert data["cards"][0]["text"].startswith("eins zwei drei vier fünf sechs ")


def test_workshop_suggestion(client, project):
    client.post("/api/workshop")
    assert client.get("/api/workshop/suggestion").json()["suggestion"]


def test_workshop_badge_toast(client, project):
    client.post("/api/workshop")
    data = client.put("/api/workshop/text", json={"text": " ".join(["wort"] * 100)}).json()
    assert {"kind": "badge_unlocked", "badge_id": "word_acrobat"} in data["events"]
    assert data["toast"]["id"] == "word_acrobat"
    data = client.post("/api/workshop/dismiss").json()
    assert data["toast"] is None
    assert data["last_delta"] == 0


def test_close_workshop(client, project):
    client.post("/api/workshop")
    assert client.delete("/api/workshop").json() == {"ok": True}
    assert client.delete("/api/workshop").status_code == 404
