"""Tests for the browser app API."""

import importlib

import pytest

pytest.importorskip("fastapi")

from fastapi.testclient import TestClient  # noqa: E402

from forestviz import ConfigError, ForestvizConfig  # noqa: E402
import forestviz.server.app as app_module  # noqa: E402
from forestviz.server import create_app  # noqa: E402


@pytest.fixture()
def client() -> TestClient:
    return TestClient(create_app(config=ForestvizConfig()))


def _submit(client, nodes="", edges="", starting_node=""):
    return client.post(
        "/api/graph",
        json={"nodes": nodes, "edges": edges, "starting_node": starting_node},
    )


class TestIndexPage:
    def test_serves_form(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/html")
        assert "GRAPH GENERATOR" in resp.text
        assert "Number of Unique Forests: 0" in resp.text


class TestGraphApi:
    def test_initial_state_empty(self, client):
        data = client.get("/api/graph").json()
        assert data["forest_count"] == 0
        assert data["state"] == {"nodes": [], "edges": [], "starting_node": None}

    def test_submit_example(self, client):
        resp = _submit(client, "2,6,7,1,5,3,9", "2-7,3-5,1-9,9-6", "1")
        assert resp.status_code == 200
        data = resp.json()

        assert data["forest_count"] == 3
        assert data["notifications"] == []
        assert data["state"]["nodes"] == [2, 6, 7, 1, 5, 3, 9]
        assert data["state"]["edges"][0] == {"source": 2, "destination": 7}
        assert data["state"]["starting_node"] == 1
        assert data["scene"]["caption"] == "Number of Unique Forests: 3"
        assert data["svg"].startswith("<svg")

    def test_invalid_nodes_keep_previous_state(self, client):
        _submit(client, "1,2,3", "1-2")
        data = _submit(client, "1,a,3", "1-2").json()

        assert data["state"]["nodes"] == [1, 2, 3]
        assert data["forest_count"] == 2
        assert data["notifications"] == [
            {
                "kind": "InvalidNodeList",
                "message": "Please enter only numbers separated by commas for nodes.",
                "level": "error",
            }
        ]

    def test_invalid_starting_node(self, client):
        data = _submit(client, "1,2", "", "x").json()
        assert data["state"]["starting_node"] is None
        assert [n["kind"] for n in data["notifications"]] == ["InvalidStartingNode"]

    def test_state_persists_between_requests(self, client):
        _submit(client, "1,2,3", "1-2,2-3")
        data = client.get("/api/graph").json()
        assert data["forest_count"] == 1

    def test_decimal_nodes(self, client):
        data = _submit(client, "1.5,2").json()
        assert data["state"]["nodes"] == [1.5, 2]

    def test_reset(self, client):
        _submit(client, "1,2,3")
        data = client.delete("/api/graph").json()
        assert data["forest_count"] == 0
        assert data["state"]["nodes"] == []

    def test_rejects_non_string_fields(self, client):
        resp = client.post("/api/graph", json={"nodes": 123})
        assert resp.status_code == 422


class TestCreateApp:
    @pytest.fixture()
    def bad_project(self, tmp_path, monkeypatch):
        (tmp_path / "pyproject.toml").write_text("[tool.forestviz]\npalette = ['red']\n")
        monkeypatch.chdir(tmp_path)

    def test_import_reads_no_config(self, bad_project):
        module = importlib.reload(app_module)
        assert not hasattr(module, "app")

    def test_explicit_config_skips_project_file(self, bad_project):
        client = TestClient(app_module.create_app(config=ForestvizConfig()))
        assert client.get("/api/graph").status_code == 200

    def test_project_config_loaded_on_creation(self, bad_project):
        with pytest.raises(ConfigError):
            app_module.create_app()
