"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from iconopt.main import app
from tests.conftest import ANIMATED_SVG, GRADIENT_SVG, SQUARE_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["plugins_registered"] == 21


def test_plugins():
    response = client.get("/api/plugins")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 21
    assert data[0]["stage"] == "cleanup"
    assert data[-1] == {
        "name": "cleanupIds",
        "stage": "ids",
        "tags": [],
        "description": "Remove unused ids",
    }


def test_plugins_by_stage():
    response = client.get("/api/plugins", params={"stage": "shapes"})
    assert response.status_code == 200
    data = response.json()
    assert [p["name"] for p in data] == [
        "convertEllipseToCircle",
        "convertShapeToPath",
        "fixZ",
        "removeHiddenElems",
        "reusePaths",
    ]
    assert all(p["tags"] == ["shapes"] for p in data)


def test_plugins_unknown_stage():
    response = client.get("/api/plugins", params={"stage": "nope"})
    assert response.status_code == 422


def test_plugin_info():
    response = client.get("/api/plugins/removeUselessStrokeAndFill")
    assert response.status_code == 200
    data = response.json()
    assert data["stage"] == "styles"
    assert data["tags"] == ["static"]


def test_plugin_info_unknown():
    response = client.get("/api/plugins/noSuchPlugin")
    assert response.status_code == 404


def test_optimize_square():
    response = client.post("/api/optimize", json={"svg": SQUARE_SVG})
    assert response.status_code == 200
    data = response.json()
    assert 'd="M2 2h20v20H2z"' in data["svg"]
    assert data["stats"]["paths_closed"] == 1
    assert data["plugins_failed"] == 0
    assert data["plugins_run"] >= 15
    assert data["processing_time_ms"] >= 0


def test_optimize_keep_ids():
    response = client.post("/api/optimize", json={"svg": GRADIENT_SVG, "cleanup_ids": False})
    assert response.status_code == 200
    assert 'id="grad"' in response.json()["svg"]


def test_optimize_id_prefix():
    response = client.post("/api/optimize", json={"svg": GRADIENT_SVG, "cleanup_ids": "logo"})
    assert response.status_code == 200
    assert 'id="logo0"' in response.json()["svg"]


def test_optimize_animated():
    response = client.post("/api/optimize", json={"svg": ANIMATED_SVG})
    assert response.status_code == 200
    assert 'd="M0 0L10 0L10 10L0 0"' in response.json()["svg"]


def test_optimize_custom_plugins():
    response = client.post("/api/optimize", json={"svg": SQUARE_SVG, "plugins": ["fixZ"]})
    assert response.status_code == 200
    assert response.json()["plugins_run"] == 1


def test_optimize_invalid_svg():
    response = client.post("/api/optimize", json={"svg": "<not-svg"})
    assert response.status_code == 422
    assert "Invalid SVG" in response.json()["detail"]


def test_optimize_unknown_plugin():
    response = client.post("/api/optimize", json={"svg": SQUARE_SVG, "plugins": ["nope"]})
    assert response.status_code == 422
    assert "nope" in response.json()["detail"]


def test_normalize_path():
    response = client.post("/api/path/normalize", json={"d": "M0 0L10 0L10 10L0 0"})
    assert response.status_code == 200
    data = response.json()
    assert data == {"d": "M0 0 10 0 10 10z", "commands": 4, "closed": 1}


def test_normalize_path_nothing_to_close():
    response = client.post("/api/path/normalize", json={"d": "M0 0C5 5 10 5 0 0"})
    assert response.status_code == 200
    data = response.json()
    assert data["closed"] == 0
    assert data["d"] == "M0 0C5 5 10 5 0 0"


def test_optimize_xlink_title():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
        '<defs><path id="p" d="M0 0h4v4H0z"/></defs>'
        '<use xlink:href="#p" xlink:title="square"/></svg>'
    )
    response = client.post("/api/optimize", json={"svg": svg})
    assert response.status_code == 200
    assert 'xlink:title="square"' in response.json()["svg"]
