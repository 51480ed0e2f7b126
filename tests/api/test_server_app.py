from fastapi.testclient import TestClient

from bindshift.server.main import create_app
from tests.helpers._samples import build_registry


client = TestClient(create_app(build_registry()))


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"


def test_kinds_lists_registered_names() -> None:
    response = client.get("/api/v1/kinds")
    assert response.status_code == 200
    assert response.json() == {"kinds": ["record", "sample"]}


def test_validate_valid_payload() -> None:
    response = client.post("/api/v1/validate/sample", json={"f1": "ok", "f2": 5})
    assert response.status_code == 200
    assert response.json() == {"valid": True, "object_name": "sample", "errors": []}


def test_validate_reports_single_error() -> None:
    response = client.post("/api/v1/validate/sample", json={"f1": "not ok", "f2": 15})
    assert response.status_code == 200
    body = response.json()
    assert body["valid"] is False
    assert body["errors"] == [
        {"code": "invalid", "field": "f2", "message": "f2 got 15, expected 10 or less"},
    ]


def test_validate_reports_multiple_errors() -> None:
    response = client.post("/api/v1/validate/Sample", json={"f1": "not ok at all", "f2": 15})
    assert response.status_code == 200
    messages = {error["message"] for error in response.json()["errors"]}
    assert messages == {
        "f1 has size 13, expected 10 or less",
        "f2 got 15, expected 10 or less",
    }


def test_validate_reports_global_errors_without_field() -> None:
    response = client.post("/api/v1/validate/sample", json={"f1": "5", "f2": 5})
    assert response.status_code == 200
    assert response.json()["errors"] == [
        {"code": "invalid", "field": None, "message": "f1 must differ from f2"},
    ]


def test_strict_mode_answers_422_with_detail_list() -> None:
    response = client.post(
        "/api/v1/validate/sample",
        params={"strict": "true"},
        json={"f1": "not ok at all", "f2": 15},
    )
    assert response.status_code == 422
    assert response.json()["detail"] == [
        {"loc": ["body", "f1"], "msg": "f1 has size 13, expected 10 or less", "type": "invalid"},
        {"loc": ["body", "f2"], "msg": "f2 got 15, expected 10 or less", "type": "invalid"},
    ]


def test_strict_mode_passes_valid_payload() -> None:
    response = client.post("/api/v1/validate/sample", params={"strict": "true"}, json={"f1": "ok", "f2": 5})
    assert response.status_code == 200
    assert response.json()["valid"] is True


def test_unknown_kind_is_404() -> None:
    response = client.post("/api/v1/validate/unknown", json={"f1": "ok", "f2": 5})
    assert response.status_code == 404
    assert "unknown" in response.json()["detail"]


def test_malformed_payload_is_422() -> None:
    response = client.post("/api/v1/validate/sample", json={"f1": "ok"})
    assert response.status_code == 422
    locs = [error["loc"] for error in response.json()["detail"]]
    assert ["f2"] in locs or ["body", "f2"] in locs


def test_dataclass_candidate_is_built_from_payload() -> None:
    response = client.post("/api/v1/validate/record", json={"f1": "not ok", "f2": 15})
    assert response.status_code == 200
    assert response.json()["object_name"] == "record"
    assert [error["message"] for error in response.json()["errors"]] == ["f2 got 15, expected 10 or less"]


def test_mistyped_dataclass_payload_is_422() -> None:
    response = client.post("/api/v1/validate/record", json={"f1": "ok", "f2": "abc"})
    assert response.status_code == 422
    locs = [error["loc"] for error in response.json()["detail"]]
    assert ["f2"] in locs


def test_dataclass_payload_missing_field_is_422() -> None:
    response = client.post("/api/v1/validate/record", json={"f1": "ok"})
    assert response.status_code == 422
