"""Tests for the interactive convert command."""

from __future__ import annotations

from typing import Any

import pytest
from click.testing import CliRunner

from valuecast.cli import cli


class TestConsoleMode:
    def test_scenario_integer_as_float64(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="1\ninteger\n42\nfloat64\n")
        assert result.exit_code == 0
        assert "Select the input/output mode" in result.output
        assert result.output.endswith("Float64: 42.0\n")

    def test_mode_by_name(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="console\nbool\nFalse\ntext\n")
        assert result.exit_code == 0
        assert result.output.endswith("Text: false\n")

    def test_boolean_as_integer_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="1\nboolean\nTRUE\ninteger\n")
        assert result.exit_code == 1
        assert "conversion from Boolean to Integer is not permitted" in result.output

    def test_unknown_source_type_stops_prompting(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="1\nintegerr\n42\ntext\n")
        assert result.exit_code == 1
        assert "'integerr' is not a valid type" in result.output
        assert "Enter the value" not in result.output

    def test_config_changes_prompt_suffix(self, cli_runner: CliRunner, tmp_path: Any) -> None:
        (tmp_path / "valuecast.toml").write_text('[console]\nprompt_suffix = " > "\n')
        result = cli_runner.invoke(cli, ["convert"], input="1\ntext\nhi\ntext\n")
        assert result.exit_code == 0
        assert "Enter the value > " in result.output


class TestDialogMode:
    def test_dialog_backend_is_injected(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        answers = iter(["float64", "2.5", "text"])
        shown: list[str] = []
        monkeypatch.setattr(
            "valuecast.backends.dialog._tk_ask", lambda title, prompt: next(answers)
        )
        monkeypatch.setattr(
            "valuecast.backends.dialog._tk_show_info", lambda title, msg: shown.append(msg)
        )
        result = cli_runner.invoke(cli, ["convert"], input="2\n")
        assert result.exit_code == 0
        assert shown == ["Text: 2.5"]

    def test_cancelled_dialog_fails_parse(
        self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        answers = iter(["integer", None])
        errors: list[str] = []
        monkeypatch.setattr(
            "valuecast.backends.dialog._tk_ask", lambda title, prompt: next(answers)
        )
        monkeypatch.setattr(
            "valuecast.backends.dialog._tk_show_error", lambda title, msg: errors.append(msg)
        )
        result = cli_runner.invoke(cli, ["convert"], input="2\n")
        assert result.exit_code == 1
        assert errors == ["Error: value '' does not match declared source type Integer"]


class TestSelection:
    def test_invalid_option(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="3\n")
        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_json_mode_moves_conversation_to_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "convert"], input="1\ninteger\n42\nfloat64\n"
        )
        assert result.exit_code == 0
        assert '"value": "42.0"' in result.output
