"""Shared pytest fixtures and test doubles for valuecast tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from valuecast.domain.types import PrimitiveType


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Run every test from an empty directory with no config env vars."""
    for name in (
        "VALUECAST_CONFIG",
        "VALUECAST_VERBOSE",
        "VALUECAST_JSON_OUTPUT",
        "VALUECAST_QUIET",
        "VALUECAST_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield


class RecordingOutput:
    """OutputPort double that records everything it is asked to present."""

    def __init__(self) -> None:
        self.displayed: list[tuple[PrimitiveType, str]] = []
        self.errors: list[str] = []

    def display(self, kind: PrimitiveType, text: str) -> None:
        self.displayed.append((kind, text))

    def report_error(self, message: str) -> None:
        self.errors.append(message)


@pytest.fixture
def recorder() -> RecordingOutput:
    return RecordingOutput()
