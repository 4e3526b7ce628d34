"""
Tests for the REST API routes.

Uses FastAPI TestClient against a temporary todo.txt file.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from fastapi.testclient import TestClient

from todotxt.api.app import create_app


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_todo(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text(
        "(A) Pay rent +home due:first\n"
        "x Buy eggs @shopping @home\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def todo_path(tmp_path):
    return _make_todo(tmp_path)


@pytest.fixture
def client(todo_path):
    return TestClient(create_app(todo_path))


# ---------------------------------------------------------------------------
# Line endpoints
# ---------------------------------------------------------------------------

class TestLineRoutes:
    def test_parse(self, client):
        resp = client.post("/api/parse", json={"line": "(B) Write some code +rust @work due:tomorrow"})
        assert resp.status_code == 200
        assert resp.json() == {
            "is_complete": False,
            "priority": "B",
            "description": "Write some code",
            "projects": ["rust"],
            "contexts": ["work"],
            "attributes": [["due", "tomorrow"]],
        }

    def test_parse_empty_line(self, client):
        resp = client.post("/api/parse", json={"line": ""})
        assert resp.status_code == 200
        assert resp.json()["description"] == ""

    def test_format(self, client):
        resp = client.post(
            "/api/format",
            json={
                "is_complete": True,
                "priority": "C",
                "description": "Take out the trash",
                "contexts": ["home"],
                "attributes": [["day", "wednesdays"]],
            },
        )
        assert resp.status_code == 200
        assert resp.json() == {"line": "x (C) Take out the trash @home day:wednesdays"}

    def test_format_strict_rejects(self, client):
        resp = client.post("/api/format?strict=true", json={"description": "Call +mom"})
        assert resp.status_code == 422

    def test_format_lenient(self, client):
        resp = client.post("/api/format", json={"description": "Call +mom"})
        assert resp.status_code == 200
        assert resp.json() == {"line": "Call +mom"}

    def test_validate(self, client):
        resp = client.post("/api/validate", json={"line": "(AB) not a priority"})
        assert resp.status_code == 200
        body = resp.json()
        assert body["valid"] is True
        assert body["task"]["description"] == "(AB) not a priority"


# ---------------------------------------------------------------------------
# File endpoints
# ---------------------------------------------------------------------------

class TestTodoRoutes:
    def test_list(self, client):
        resp = client.get("/api/todo")
        assert resp.status_code == 200
        assert [t["line"] for t in resp.json()] == [
            "(A) Pay rent +home due:first",
            "x Buy eggs @shopping @home",
        ]

    def test_list_missing_file(self, client, tmp_path):
        resp = client.get("/api/todo", params={"file_path": str(tmp_path / "missing.txt")})
        assert resp.status_code == 404

    def test_list_without_any_file(self):
        resp = TestClient(create_app()).get("/api/todo")
        assert resp.status_code == 400

    def test_add(self, client, todo_path):
        resp = client.post("/api/todo", json={"line": "Call mom +family"})
        assert resp.status_code == 201
        assert resp.json()["index"] == 2
        assert todo_path.read_text(encoding="utf-8").endswith("Call mom +family\n")

    def test_add_to_other_file(self, client, tmp_path):
        other = tmp_path / "other.txt"
        resp = client.post("/api/todo", json={"line": "Elsewhere", "file_path": str(other)})
        assert resp.status_code == 201
        assert other.read_text(encoding="utf-8") == "Elsewhere\n"

    def test_add_blank_line(self, client, todo_path):
        before = todo_path.read_text(encoding="utf-8")
        resp = client.post("/api/todo", json={"line": "   "})
        assert resp.status_code == 400
        assert todo_path.read_text(encoding="utf-8") == before

    def test_add_marker_only_line(self, client, todo_path):
        before = todo_path.read_text(encoding="utf-8")
        resp = client.post("/api/todo", json={"line": "x "})
        assert resp.status_code == 400
        assert todo_path.read_text(encoding="utf-8") == before

    def test_update(self, client):
        resp = client.patch("/api/todo/0", json={"is_complete": True})
        assert resp.status_code == 200
        assert resp.json()["line"] == "x (A) Pay rent +home due:first"

    def test_update_out_of_range(self, client):
        resp = client.patch("/api/todo/5", json={"is_complete": True})
        assert resp.status_code == 404

    def test_update_bad_priority(self, client):
        resp = client.patch("/api/todo/0", json={"priority": "ZZ"})
        assert resp.status_code == 400

    def test_update_missing_file(self, client, tmp_path):
        resp = client.patch(
            "/api/todo/0",
            params={"file_path": str(tmp_path / "missing.txt")},
            json={"is_complete": True},
        )
        assert resp.status_code == 404
