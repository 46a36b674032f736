from __future__ import annotations

from fastapi.testclient import TestClient

from api.main import create_app
from core.services.export import EXPORT_COLUMNS
from core.services.templates import TemplateConfigurationError


def _client() -> TestClient:
    return TestClient(create_app())


def _payload(**overrides):
    payload = {
        "name": "First Training Block",
        "start_date": "2024-03-20",
        "exercises": [
            {"name": "Squat", "input_value": 315, "training_max_percentage": 0.85},
            {"name": "Bench Press", "input_value": 225, "training_max_percentage": 0.85},
            {"name": "Deadlift", "input_value": 405, "training_max_percentage": 0.85},
            {"name": "Press", "input_value": 135, "training_max_percentage": 0.85},
        ],
        "week_progression": "5/3/1",
        "leader_cycles": {"count": 2, "progression_type": "5s_pro", "supplemental_template": "SSL"},
        "anchor_cycles": {"count": 1, "progression_type": "traditional", "supplemental_template": "FSL"},
        "seventh_week_strategy": {"after_leader": "deload", "after_anchor": "tm_test"},
    }
    payload.update(overrides)
    return payload


def test_health_and_request_id_header():
    client = _client()
    resp = client.get("/api/v1/health", headers={"X-Request-ID": "req-42"})
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}
    assert resp.headers["X-Request-ID"] == "req-42"


def test_request_id_generated_when_missing():
    resp = _client().get("/api/v1/health")
    assert len(resp.headers["X-Request-ID"]) == 32


def test_templates_catalog():
    resp = _client().get("/api/v1/templates")
    assert resp.status_code == 200
    body = resp.json()
    assert set(body) == {"main_work", "supplemental", "seventh_week"}
    assert len(body["supplemental"]["FSL"]) == 3


def test_generate_training_block():
    resp = _client().post("/api/v1/training-blocks", json=_payload())
    assert resp.status_code == 200
    body = resp.json()
    assert body["name"] == "First Training Block"
    assert len(body["leader_cycles"]) == 2
    assert len(body["anchor_cycles"]) == 1
    assert body["seventh_week"]["protocol"] == "deload"
    assert body["final_seventh_week"]["protocol"] == "tm_test"
    assert len(body["schedule"]) == 11
    assert body["schedule"][-1]["label"] == "Final TM Test Week"

    squat = body["leader_cycles"][0]["weeks"][0]["exercises"][0]
    assert squat["name"] == "Squat"
    assert squat["training_max"] == 267.75
    assert squat["sets"][0] == {
        "type": "standard",
        "percentage": 0.65,
        "weight": 170,
        "reps": 5,
        "min_reps": None,
        "max_reps": None,
        "display": "5×170 lbs (65%)",
    }
    assert len(squat["sets"]) == 8

    final_squat = body["final_seventh_week"]["exercises"][0]
    assert final_squat["sets"][-1]["type"] == "rep_range"
    assert final_squat["sets"][-1]["min_reps"] == 3


def test_generate_rejects_bbb_anchor():
    payload = _payload(anchor_cycles={"count": 1, "progression_type": "traditional", "supplemental_template": "BBB"})
    resp = _client().post("/api/v1/training-blocks", json=payload)
    assert resp.status_code == 422


def test_generate_rejects_empty_exercises():
    resp = _client().post("/api/v1/training-blocks", json=_payload(exercises=[]))
    assert resp.status_code == 422


def test_engine_configuration_error_maps_to_400(monkeypatch):
    def _raise(config):
        raise TemplateConfigurationError("BBB (Boring But Big) can only be used as a leader template, not as an anchor.")

    monkeypatch.setattr("api.routes.create_training_block", _raise)
    resp = _client().post("/api/v1/training-blocks", json=_payload())
    assert resp.status_code == 400
    assert "leader template" in resp.json()["detail"]


def test_export_csv():
    resp = _client().post("/api/v1/training-blocks/export", json=_payload())
    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/csv")
    assert 'filename="First_Training_Block.csv"' in resp.headers["content-disposition"]
    lines = resp.text.splitlines()
    assert lines[0] == ",".join(EXPORT_COLUMNS)
    assert len(lines) == 45


def test_extract_training_maxes():
    rows = [
        EXPORT_COLUMNS,
        ["Week 10", "2024-05-22", "Press", "124.75 lbs", ""],
        ["Final TM Test Week", "2024-05-29", "Press", "129.75 lbs", ""],
        ["Final TM Test Week", "2024-05-29", "Squat", "297.75 lbs", ""],
    ]
    resp = _client().post("/api/v1/training-maxes/extract", json={"rows": rows})
    assert resp.status_code == 200
    assert resp.json() == {"training_maxes": {"Press": 129, "Squat": 297}}


def test_extract_training_maxes_without_final_week():
    rows = [["Week 1", "2024-03-20", "Press", "114.75 lbs", ""]]
    resp = _client().post("/api/v1/training-maxes/extract", json={"rows": rows})
    assert resp.status_code == 404
