"""
Tests for the FastAPI endpoints.
"""

from truthlens.services.scoring import NO_FLAGS_EXPLANATION


def test_analyze_empty_content(client):
    r = client.post("/api/analyze", json={"contentKind": "text", "content": ""})
    assert r.status_code == 200
    data = r.json()
    assert data["verdict"] == "Unclear / Needs Review"
    assert data["confidence"] == 50
    assert data["signals"] == ["too-short"]
    assert len(data["recommendedActions"]) == 4
    assert r.headers["Cache-Control"].startswith("no-store")


def test_analyze_authority_and_unsourced_claim(client):
    r = client.post(
        "/api/analyze",
        json={"contentKind": "text", "content": "The CDC says so, according to our sources."},
    )
    data = r.json()
    assert data["confidence"] == 60
    assert data["verdict"] == "Likely Real"
    assert data["signals"] == ["no-sources", "authoritative-sources"]


def test_analyze_missing_or_non_string_content_is_not_an_error(client):
    r1 = client.post("/api/analyze", json={"contentKind": "image"})
    r2 = client.post("/api/analyze", json={"type": "url", "content": 42})
    assert r1.status_code == 200
    assert r2.status_code == 200
    assert r1.json()["signals"] == ["too-short"]
    assert r2.json()["signals"] == ["too-short"]


def test_analyze_rejects_unknown_content_kind(client):
    r = client.post("/api/analyze", json={"contentKind": "audio", "content": "some words here"})
    assert r.status_code == 422


def test_clean_text_gets_fallback_explanation(client):
    r = client.post("/api/analyze", json={"content": "The museum extended its opening hours."})
    assert r.json()["explanation"] == [NO_FLAGS_EXPLANATION]


def test_history_records_analyses(client):
    client.post("/api/analyze", json={"content": "first claim to check"})
    client.post("/api/analyze", json={"contentKind": "url", "content": "https://example.org/a"})
    r = client.get("/api/history")
    assert r.status_code == 200
    entries = r.json()
    assert len(entries) == 2
    assert entries[0]["query"] == {"contentKind": "url", "content": "https://example.org/a"}
    assert entries[1]["query"]["content"] == "first claim to check"
    assert "recommendedActions" in entries[0]["result"]


def test_history_is_bounded(client):
    for i in range(12):
        client.post("/api/analyze", json={"content": f"claim number {i}"})
    entries = client.get("/api/history").json()
    assert len(entries) == 10
    assert entries[0]["query"]["content"] == "claim number 11"


def test_clear_history(client):
    client.post("/api/analyze", json={"content": "a claim worth checking"})
    r = client.delete("/api/history")
    assert r.status_code == 204
    assert client.get("/api/history").json() == []


def test_batch_preserves_order(client):
    r = client.post(
        "/api/analyze/batch",
        json={
            "requests": [
                {"content": ""},
                {"content": "Watch this deepfake of the mayor right now"},
                {"content": "The NYT reported the budget vote today."},
            ]
        },
    )
    assert r.status_code == 200
    data = r.json()
    assert "generatedAt" in data
    assert [item["confidence"] for item in data["results"]] == [50, 25, 75]
    assert client.get("/api/history").json() == []


def test_batch_rejects_empty_list(client):
    r = client.post("/api/analyze/batch", json={"requests": []})
    assert r.status_code == 422


def test_short_report(client):
    r = client.post("/api/report", json={"content": "Shocking news, you won't believe it"})
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/plain")
    lines = r.text.split("\n")
    assert lines[0] == "Claim: Shocking news, you won't believe it"
    assert lines[1] == "Verdict: Unclear / Needs Review (50%)"
    assert lines[2] == "Actions:"
    assert len(lines) == 7
    assert all(line.startswith("- ") for line in lines[3:])


def test_health_and_build(client):
    assert client.get("/health").json() == {"status": "ok"}
    r = client.get("/__build")
    assert "build_id" in r.json()
    assert r.headers["Pragma"] == "no-cache"
