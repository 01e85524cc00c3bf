"""Tests for CLI commands.

These tests verify command registration and run commands against a
mocked server.
"""

import json

import pytest
import responses

from shishutsukan.runner.main import create_cli, main

BASE_URL = "http://shishutsukan.test:8000"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("SHISHUTSUKAN_URL", raising=False)
    monkeypatch.delenv("SHISHUTSUKAN_TIMEOUT", raising=False)


class TestCLICommandRegistry:
    """Tests for CLI command registration."""

    def test_all_commands_registered(self):
        parser = create_cli()

        subparsers_action = None
        for action in parser._actions:
            if action.dest == "command":
                subparsers_action = action
                break

        assert subparsers_action is not None
        commands = list(subparsers_action.choices.keys())
        assert "expenses" in commands
        assert "genres" in commands
        assert "init-config" in commands

    def test_expense_add_arguments(self):
        parser = create_cli()
        args = parser.parse_args(
            ["expenses", "add", "--date", "2025-01-15", "--genre", "食費", "--amount", "1000"]
        )
        assert args.command == "expenses"
        assert args.action == "add"
        assert args.amount == 1000

    def test_genre_delete_requires_int(self):
        parser = create_cli()
        with pytest.raises(SystemExit):
            parser.parse_args(["genres", "delete", "seven"])

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestCLICommands:
    """Tests running commands end to end."""

    @responses.activate
    def test_expenses_list(self, tmp_path, capsys, sample_expenses):
        responses.add(responses.GET, f"{BASE_URL}/expenses", json=sample_expenses, status=200)

        code = main(["-c", str(tmp_path / "none.yaml"), "--url", BASE_URL, "expenses", "list"])

        out = capsys.readouterr().out
        assert code == 0
        assert "食費" in out
        assert "2 expense(s)" in out

    @responses.activate
    def test_expenses_add(self, tmp_path, capsys):
        responses.add(responses.POST, f"{BASE_URL}/expenses", json={"message": "ok"}, status=200)

        code = main(
            [
                "-c", str(tmp_path / "none.yaml"),
                "--url", BASE_URL,
                "expenses", "add",
                "--date", "2025-01-15", "--genre", "食費", "--amount", "1000",
            ]
        )

        assert code == 0
        assert json.loads(responses.calls[0].request.body)["genre"] == "食費"
        assert "ok" in capsys.readouterr().out

    @responses.activate
    def test_url_from_env(self, tmp_path, monkeypatch):
        monkeypatch.setenv("SHISHUTSUKAN_URL", BASE_URL)
        responses.add(responses.GET, f"{BASE_URL}/genres", json=[], status=200)

        assert main(["-c", str(tmp_path / "none.yaml"), "genres", "list"]) == 0

    @responses.activate
    def test_server_error_exit_code(self, tmp_path, capsys):
        responses.add(
            responses.DELETE, f"{BASE_URL}/genres/7", json={"error": "genre in use"}, status=200
        )

        code = main(["-c", str(tmp_path / "none.yaml"), "--url", BASE_URL, "genres", "delete", "7"])

        assert code == 1
        assert "genre in use" in capsys.readouterr().err

    @pytest.mark.parametrize("content", ["client: [unclosed\n", "- a\n- b\n"])
    def test_bad_config_file(self, tmp_path, capsys, content):
        path = tmp_path / "config.yaml"
        path.write_text(content, encoding="utf-8")

        code = main(["-c", str(path), "genres", "list"])

        assert code == 1
        assert "Failed to load config" in capsys.readouterr().err

    def test_invalid_url_rejected(self, tmp_path, capsys):
        code = main(["-c", str(tmp_path / "none.yaml"), "--url", "localhost", "genres", "list"])

        assert code == 1
        assert "base_url" in capsys.readouterr().err

    def test_init_config(self, tmp_path):
        path = tmp_path / "config.yaml"

        assert main(["-c", str(path), "init-config"]) == 0
        assert path.exists()
        assert main(["-c", str(path), "init-config"]) == 1
