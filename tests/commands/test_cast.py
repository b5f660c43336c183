"""Tests for the cast command (non-interactive conversion)."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from valuecast.cli import cli


class TestCastCommand:
    def test_integer_as_float64(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cast", "integer", "42", "float64"])
        assert result.exit_code == 0
        assert result.output == "Float64: 42.0\n"

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["int", "007", "string"], "Text: 7\n"),
            (["text", "TRUE", "boolean"], "Boolean: true\n"),
            (["double", "0.1", "float"], "Float32: 0.1\n"),
            (["float", "0.1", "double"], "Float64: 0.10000000149011612\n"),
            (["integer", "--", "-7", "text"], "Text: -7\n"),
        ],
    )
    def test_conversions(self, cli_runner: CliRunner, args: list[str], expected: str) -> None:
        result = cli_runner.invoke(cli, ["cast", *args])
        assert result.exit_code == 0
        assert result.output == expected

    def test_incompatible(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cast", "boolean", "TRUE", "integer"])
        assert result.exit_code == 1
        assert "Error: conversion from Boolean to Integer is not permitted" in result.output
        assert "Integer:" not in result.output

    def test_text_not_a_boolean_literal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cast", "text", "hello", "boolean"])
        assert result.exit_code == 1
        assert "Error: 'hello' is not a valid Boolean literal" in result.output

    def test_invalid_source_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cast", "integerr", "42", "text"])
        assert result.exit_code == 1
        assert "'integerr' is not a valid type" in result.output

    def test_json_mode(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "cast", "integer", "42", "float64"])
        assert result.exit_code == 0
        payload = result.output[result.output.index("{") :]
        data = json.loads(payload)
        assert data["ok"] is True
        assert data["data"]["value"] == "42.0"

    def test_json_mode_failure(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "cast", "integer", "x", "text"])
        assert result.exit_code == 1
        data = json.loads(result.output[result.output.index("{") :])
        assert data["error"]["code"] == "PARSE_ERROR"

    def test_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cast", "--help"])
        assert result.exit_code == 0
        assert "SOURCE VALUE TARGET" in result.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["cast", "--examples"])
        assert result.exit_code == 0
        assert "valuecast cast integer 42 float64" in result.output
