from __future__ import annotations

import spelling_quiz.app as app_module
from spelling_quiz.bank.loader import BankLoadError, EmptyBankError


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_bank_starts_with_defaults(client):
    payload = client.get("/api/bank").json()
    assert payload["size"] == 12
    assert {"clue": "Feline pet", "answer": "cat"} in payload["items"]


def test_quiz_flow_grades_then_closes(client):
    client.post("/api/bank/text", json={"text": "cat\tFeline pet\ndog\tMan's best friend"})

    started = client.post("/api/quiz", json={"count": 5, "actions": ["Strike"]})
    assert started.status_code == 200
    data = started.json()
    assert data["title"] == "Spelling Quiz"
    assert len(data["questions"]) == 2
    assert [q["action"] for q in data["questions"]] == ["Strike", ""]

    answers = {"Feline pet": "cot", "Man's best friend": "dog"}
    typed = [answers[q["clue"]] for q in data["questions"]]
    graded = client.post(f"/api/quiz/{data['quiz_id']}/submit", json={"answers": typed})
    assert graded.status_code == 200
    report = graded.json()
    assert report["closed"] is False
    assert report["total_mistakes"] == 1
    assert sorted(report["rolls"]) == [5, 6]

    closed = client.post(f"/api/quiz/{data['quiz_id']}/submit", json={"answers": []})
    assert closed.json() == {"ok": True, "closed": True, "rolls": report["rolls"]}

    gone = client.post(f"/api/quiz/{data['quiz_id']}/submit", json={"answers": []})
    assert gone.status_code == 404


def test_quiz_with_input_assist(client):
    data = client.post("/api/quiz", json={"count": 1, "input_assist": True}).json()
    assert data["title"] == "Spelling Quiz - VNKeys in effect"
    assert data["input_assist"]["requested"] is True
    assert data["input_assist"]["script"] == app_module.settings.input_assist_script
    assert data["input_assist"]["field_attribute"] == "data-vnkeys"


def test_grade_endpoint(client):
    payload = client.post("/api/grade", json={"correct": "don't", "user_input": "dont"}).json()
    assert payload["mistakes"] == 1
    assert payload["roll"] == 5
    assert payload["highlight_html"] == "don<span class=\"mistake\">&#x27;</span>t"


def test_bank_text_with_no_valid_lines_is_rejected(client):
    resp = client.post("/api/bank/text", json={"text": "no tabs here"})
    assert resp.status_code == 400
    assert client.get("/api/bank").json()["size"] == 12


def test_bank_replace_json_records(client):
    resp = client.put(
        "/api/bank",
        json={"records": [{"clue": "Red fruit", "answer": "apple"}, {"clue": "", "answer": "x"}]},
    )
    assert resp.json()["loaded"] == 1
    assert client.get("/api/bank").json()["items"] == [{"clue": "Red fruit", "answer": "apple"}]

    rejected = client.put("/api/bank", json={"records": [{"clue": " ", "answer": " "}]})
    assert rejected.status_code == 400


def test_bank_load_maps_errors(client, monkeypatch):
    async def fail_fetch(bank, url, **_kwargs):
        raise BankLoadError("HTTP 500")

    async def empty_fetch(bank, url, **_kwargs):
        raise EmptyBankError("Parsed 0 valid lines (needs answer<TAB>clue).")

    async def good_fetch(bank, url, **_kwargs):
        return bank.replace([{"clue": "Frozen water", "answer": "ice"}])

    assert client.post("/api/bank/load", json={}).status_code == 400

    monkeypatch.setattr(app_module, "load_bank_from_url", fail_fetch)
    assert client.post("/api/bank/load", json={"url": "https://example.test/a.tsv"}).status_code == 502

    monkeypatch.setattr(app_module, "load_bank_from_url", empty_fetch)
    assert client.post("/api/bank/load", json={"url": "https://example.test/a.tsv"}).status_code == 400

    monkeypatch.setattr(app_module, "load_bank_from_url", good_fetch)
    loaded = client.post("/api/bank/load", json={"url": "https://example.test/a.tsv"})
    assert loaded.json() == {"ok": True, "loaded": 1}


def test_bank_load_with_malformed_url_is_a_bad_gateway(client):
    resp = client.post("/api/bank/load", json={"url": "http://[::1"})
    assert resp.status_code == 502
    assert client.get("/api/bank").json()["size"] == 12


def test_open_quizzes_are_capped(client, monkeypatch):
    monkeypatch.setattr(app_module, "MAX_OPEN_QUIZZES", 3)
    quiz_ids = [client.post("/api/quiz", json={"count": 1}).json()["quiz_id"] for _ in range(5)]

    assert list(app_module.sessions) == quiz_ids[2:]
    evicted = client.post(f"/api/quiz/{quiz_ids[0]}/submit", json={"answers": ["cat"]})
    assert evicted.status_code == 404
    kept = client.post(f"/api/quiz/{quiz_ids[-1]}/submit", json={"answers": ["cat"]})
    assert kept.status_code == 200
