"""Tests for the console backend."""

import click
from click.testing import CliRunner

from valuecast.backends.console import ConsoleInput, ConsoleOutput
from valuecast.domain.types import PrimitiveType


def _command(callback: object) -> click.Command:
    return click.Command("probe", callback=callback)  # type: ignore[arg-type]


class TestConsoleInput:
    def test_returns_entered_line(self, cli_runner: CliRunner) -> None:
        seen: list[str] = []
        cmd = _command(lambda: seen.append(ConsoleInput().request_text("Type")))
        result = cli_runner.invoke(cmd, input="integer\n")
        assert result.exit_code == 0
        assert seen == ["integer"]
        assert "Type: " in result.output

    def test_reprompts_until_non_empty(self, cli_runner: CliRunner) -> None:
        seen: list[str] = []
        cmd = _command(lambda: seen.append(ConsoleInput(suffix="> ").request_text("Value")))
        result = cli_runner.invoke(cmd, input="\n\n42\n")
        assert result.exit_code == 0
        assert seen == ["42"]
        assert result.output.count("Value> ") == 3


class TestConsoleOutput:
    def test_display_labels_value(self, cli_runner: CliRunner) -> None:
        cmd = _command(lambda: ConsoleOutput().display(PrimitiveType.FLOAT64, "42.0"))
        result = cli_runner.invoke(cmd)
        assert result.exit_code == 0
        assert result.output == "Float64: 42.0\n"

    def test_markup_in_value_is_literal(self, cli_runner: CliRunner) -> None:
        cmd = _command(lambda: ConsoleOutput().display(PrimitiveType.TEXT, "[bold]x[/bold]"))
        result = cli_runner.invoke(cmd)
        assert result.output == "Text: [bold]x[/bold]\n"

    def test_report_error(self, cli_runner: CliRunner) -> None:
        cmd = _command(lambda: ConsoleOutput().report_error("nope"))
        result = cli_runner.invoke(cmd)
        assert "Error: nope" in result.output
        assert "\x1b" not in result.output
