"""Tests for the HTTP API."""
import pytest
from fastapi.testclient import TestClient

from trusslayout.api.main import app


@pytest.fixture
def client():
    return TestClient(app)


def block_member_json():
    return {
        "name": "W1",
        "geometry": [
            {"x": 0, "y": 0},
            {"x": 4, "y": 0},
            {"x": 4, "y": 2},
            {"x": 0, "y": 2},
        ],
        "thickness": 1.5,
    }


class TestHealthAndRules:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_rules(self, client):
        response = client.get("/api/rules")
        assert response.status_code == 200
        ids = [r["id"] for r in response.json()]
        assert "bearing.perimeter" in ids
        assert "truss.corner_jacks" in ids


class TestLayout:

    def test_default_layout(self, client):
        response = client.post("/api/layout", json={})
        assert response.status_code == 200
        body = response.json()
        assert body["rule_count"] == 7
        assert body["plan"]["stats"]["truss_envelopes"] == 56
        assert body["plan"]["truss_envelopes"][0]["justification"] == "back"

    def test_custom_params(self, client):
        response = client.post("/api/layout", json={"params": {"building_length": 480}})
        assert response.status_code == 200
        assert response.json()["plan"]["stats"]["commons"] == 12

    def test_invalid_params(self, client):
        response = client.post("/api/layout", json={"params": {"girder_offset": 10}})
        assert response.status_code == 422


class TestTransform:

    def test_transform_member(self, client):
        response = client.post("/api/members/transform", json={
            "member": block_member_json(),
            "placement": {
                "left_point": {"x": 84, "y": 0},
                "right_point": {"x": 84, "y": 288},
                "elevation": 96,
            },
        })
        assert response.status_code == 200
        vertices = response.json()["vertices"]
        assert len(vertices) == 8
        assert vertices[1]["x"] == pytest.approx(84)
        assert vertices[1]["y"] == pytest.approx(4)
        assert vertices[1]["z"] == pytest.approx(96)

    def test_degenerate_placement(self, client):
        response = client.post("/api/members/transform", json={
            "member": block_member_json(),
            "placement": {
                "left_point": {"x": 1, "y": 1},
                "right_point": {"x": 1, "y": 1},
            },
        })
        assert response.status_code == 422
        assert "coincident" in response.json()["detail"]


class TestVisualize:

    def test_visualize(self, client):
        response = client.post("/api/visualize", json={
            "trusses": [{"id": "d1", "name": "A01", "members": [block_member_json()]}],
            "truss_envelopes": [
                {
                    "name": "1",
                    "left_point": {"x": 84, "y": -24},
                    "right_point": {"x": 84, "y": 312},
                    "justification": "back",
                    "thickness": 1.5,
                    "elevation": 96,
                    "component_design_id": "d1",
                },
                {
                    "name": "2",
                    "left_point": {"x": 108, "y": -24},
                    "right_point": {"x": 108, "y": 312},
                    "justification": "back",
                    "thickness": 1.5,
                },
            ],
        })
        assert response.status_code == 200
        body = response.json()
        assert len(body["design"]) == 1
        assert [g["envelope_name"] for g in body["layout"]] == ["1"]

    def test_unknown_design(self, client):
        response = client.post("/api/visualize", json={
            "trusses": [],
            "truss_envelopes": [{
                "name": "1",
                "left_point": {"x": 0, "y": 0},
                "right_point": {"x": 1, "y": 0},
                "justification": "front",
                "thickness": 1.5,
                "component_design_id": "missing",
            }],
        })
        assert response.status_code == 422
