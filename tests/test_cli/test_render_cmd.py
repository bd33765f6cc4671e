"""Tests for the render CLI command."""

from __future__ import annotations

import json

import pytest

typer = pytest.importorskip("typer")

from typer.testing import CliRunner  # noqa: E402

from forestviz.cli import create_app  # noqa: E402

runner_cli = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path, monkeypatch):
    # Keep the CLI from reading this repository's pyproject.toml.
    (tmp_path / "pyproject.toml").write_text("[project]\nname = 'test'\n")
    monkeypatch.chdir(tmp_path)


def _render(*args):
    return runner_cli.invoke(create_app(), ["render", *args])


class TestRender:
    def test_prints_components(self):
        result = _render("--nodes", "2,6,7,1,5,3,9", "--edges", "2-7,3-5,1-9,9-6")
        assert result.exit_code == 0, result.output
        assert "Graph: 7 nodes | 4 edges" in result.output
        assert "6, 9, 1" in result.output
        assert "Number of Unique Forests: 3" in result.output

    def test_starting_node_outside_graph(self):
        result = _render("-n", "1,2,3", "-s", "5")
        assert result.exit_code == 0
        assert "Starting node: 5 (not in node list)" in result.output

    def test_invalid_nodes_exit_1(self):
        result = _render("--nodes", "1,a,3")
        assert result.exit_code == 1
        assert "Error:" in result.output

    def test_invalid_start_exit_1(self):
        result = _render("--nodes", "1", "--start", "x")
        assert result.exit_code == 1

    def test_malformed_edges_dropped(self):
        result = _render("--nodes", "1,2,3,4", "--edges", "1-2,x-y,3-4", "--json")
        data = json.loads(result.output)
        assert data["state"]["edges"] == [
            {"source": 1, "destination": 2},
            {"source": 3, "destination": 4},
        ]

    def test_json(self):
        result = _render("--nodes", "1,2,3", "--edges", "1-2", "--json")
        assert result.exit_code == 0
        document = json.loads(result.output)
        assert document["scene"]["forestCount"] == 2
        assert document["state"]["nodes"] == [1, 2, 3]

    def test_writes_html(self, tmp_path):
        out = tmp_path / "graph.html"
        result = _render("--nodes", "1,2", "--edges", "1-2", "--output", str(out))
        assert result.exit_code == 0
        assert out.read_text().startswith("<!DOCTYPE html>")

    def test_writes_svg(self, tmp_path):
        out = tmp_path / "graph.svg"
        result = _render("--nodes", "1,2", "--output", str(out), "--svg")
        assert result.exit_code == 0
        assert out.read_text().startswith("<svg")


    def test_json_to_file(self, tmp_path):
        out = tmp_path / "graph.json"
        result = _render("--nodes", "1,2", "--json", "--output", str(out))
        assert result.exit_code == 0
        assert json.loads(out.read_text())["scene"]["forestCount"] == 2

    def test_svg_without_output_rejected(self):
        result = _render("--nodes", "1,2", "--svg")
        assert result.exit_code == 1
        assert "--svg needs --output" in result.output

    def test_svg_with_json_rejected(self, tmp_path):
        result = _render("--nodes", "1,2", "--svg", "--json", "--output", str(tmp_path / "g.svg"))
        assert result.exit_code == 1


class TestServe:
    def test_runs_app_factory(self, monkeypatch):
        uvicorn = pytest.importorskip("uvicorn")
        calls = []
        monkeypatch.setattr(uvicorn, "run", lambda target, **kwargs: calls.append((target, kwargs)))

        result = runner_cli.invoke(create_app(), ["serve", "--port", "9001"])

        assert result.exit_code == 0, result.output
        target, kwargs = calls[0]
        assert target == "forestviz.server.app:create_app"
        assert kwargs["factory"] is True
        assert kwargs["port"] == 9001
