"""
Tests for the Typer CLI wiring
"""
from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from adapters.http_client import HEADER_AUTHORIZATION, build_async_client
from cli import doctor as cli_doctor
from cli import main as cli_main
from core import config

runner = CliRunner()


@pytest.fixture
def cli_backend(backend, monkeypatch):
    """Route every CLI request to the fake backend."""

    def fake_builder(settings=None, *, session=None, **kwargs):
        return build_async_client(settings, session=session, transport=backend.transport)

    monkeypatch.setattr(cli_main, "build_async_client", fake_builder)
    monkeypatch.setattr(cli_doctor, "build_async_client", fake_builder)
    monkeypatch.setattr(cli_main, "setup_logger", lambda *args, **kwargs: None)
    monkeypatch.setenv("TASKIE_BASE_URL", "https://taskie.test")
    monkeypatch.delenv("TASKIE_TOKEN", raising=False)
    return backend


class TestTaskCommands:

    def test_list_prints_open_tasks(self, cli_backend):
        cli_backend.on(
            "GET",
            "/api/note",
            json={"notes": [{"id": "1", "title": "Buy milk"}, {"id": "2", "title": "Done", "isCompleted": True}]},
        )

        result = runner.invoke(cli_main.app, ["--token", "tok", "tasks", "list"])

        assert result.exit_code == 0
        assert "Buy milk" in result.output
        assert "Done" not in result.output
        assert cli_backend.requests[0].headers[HEADER_AUTHORIZATION] == "tok"

    def test_list_failure_exits_with_error(self, cli_backend):
        cli_backend.on("GET", "/api/note", json={"notes": []})

        result = runner.invoke(cli_main.app, ["tasks", "list"])

        assert result.exit_code == 1
        assert "No data available" in result.output
        assert HEADER_AUTHORIZATION not in cli_backend.requests[0].headers

    def test_list_exports_json(self, cli_backend, tmp_path):
        cli_backend.on("GET", "/api/note", json={"notes": [{"id": 5, "title": "Ship"}]})
        output = tmp_path / "out" / "tasks.json"

        result = runner.invoke(cli_main.app, ["tasks", "list", "--json", str(output)])

        assert result.exit_code == 0
        payload = json.loads(output.read_text(encoding="utf-8"))
        assert payload["notes"][0]["id"] == "5"
        assert payload["notes"][0]["isCompleted"] is False

    def test_add_complete_delete(self, cli_backend):
        cli_backend.on("POST", "/api/note", json={"id": "9", "title": "New"})
        cli_backend.on("POST", "/api/note/complete", json={"message": "Completed"})
        cli_backend.on("DELETE", "/api/note", json={"message": "Deleted"})

        added = runner.invoke(cli_main.app, ["tasks", "add", "New", "--priority", "3"])
        completed = runner.invoke(cli_main.app, ["tasks", "complete", "9"])
        deleted = runner.invoke(cli_main.app, ["tasks", "delete", "9"])

        assert added.exit_code == 0 and "9" in added.output
        assert completed.exit_code == 0 and "Completed" in completed.output
        assert deleted.exit_code == 0 and "Deleted" in deleted.output
        assert json.loads(cli_backend.requests[0].content)["taskPriority"] == 3


class TestSessionCommands:

    def test_login_prints_token(self, cli_backend):
        cli_backend.on("POST", "/api/login", json={"token": "new-token"})

        result = runner.invoke(cli_main.app, ["login", "a@b.com", "--password", "pw"])

        assert result.exit_code == 0
        assert "TASKIE_TOKEN=new-token" in result.output

    def test_profile_panel(self, cli_backend):
        cli_backend.on("GET", "/api/note", json={"notes": [{"id": 1}, {"id": 2}]})
        cli_backend.on("GET", "/api/user/profile", json={"email": "a@b.com", "name": "Ada"})

        result = runner.invoke(cli_main.app, ["--token", "tok", "profile"])

        assert result.exit_code == 0
        assert "Ada" in result.output
        assert "Open tasks: 2" in result.output

    def test_register_sends_name(self, cli_backend):
        cli_backend.on("POST", "/api/register", json={"message": "User created"})

        result = runner.invoke(
            cli_main.app, ["register", "a@b.com", "--name", "Ada", "--password", "pw"]
        )

        assert result.exit_code == 0
        assert "User created" in result.output
        sent = json.loads(cli_backend.requests[0].content)
        assert sent == {"email": "a@b.com", "password": "pw", "name": "Ada"}

    def test_register_failure_exits_with_error(self, cli_backend):
        cli_backend.on("POST", "/api/register", status=409, json={"error": "exists"})

        result = runner.invoke(cli_main.app, ["register", "a@b.com", "--password", "pw"])

        assert result.exit_code == 1
        assert "HTTP 409" in result.output


class TestDoctorCommands:

    def test_run_reports_connectivity_and_endpoints(self, cli_backend):
        cli_backend.on("GET", "/", json={"status": "up"})

        result = runner.invoke(cli_main.app, ["--token", "tok", "doctor", "run"])

        assert result.exit_code == 0
        assert "Taskie Doctor" in result.output
        assert "HTTP 200" in result.output
        assert "complete_task" in result.output
        assert HEADER_AUTHORIZATION not in cli_backend.requests[0].headers

    def test_run_flags_missing_token(self, cli_backend):
        cli_backend.on("GET", "/", status=503, content=b"down")

        result = runner.invoke(cli_main.app, ["doctor", "run"])

        assert result.exit_code == 0
        assert "OPTIONAL" in result.output
        assert "HTTP 503" in result.output

    def test_setup_server_writes_user_env(self, cli_backend, tmp_path, monkeypatch):
        env_path = tmp_path / "taskie" / ".env"
        monkeypatch.setattr(config, "get_user_env_file", lambda: env_path)

        result = runner.invoke(
            cli_main.app, ["doctor", "setup-server"], input="http://localhost:9000/\n"
        )

        assert result.exit_code == 0
        assert "TASKIE_BASE_URL=http://localhost:9000" in env_path.read_text(encoding="utf-8").splitlines()

    def test_setup_server_rejects_bad_scheme(self, cli_backend, tmp_path, monkeypatch):
        env_path = tmp_path / "taskie" / ".env"
        monkeypatch.setattr(config, "get_user_env_file", lambda: env_path)

        result = runner.invoke(cli_main.app, ["doctor", "setup-server"], input="ftp://nope\n")

        assert result.exit_code != 0
        assert not env_path.exists()
