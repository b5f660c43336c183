"""Tests for backend selection and the collaborator protocols."""

import pytest

from valuecast.backends.base import (
    BACKENDS,
    BackendOptions,
    InputPort,
    OutputPort,
    UnknownBackendError,
    select_backend,
    selection_prompt,
)
from valuecast.backends.console import ConsoleInput, ConsoleOutput
from valuecast.backends.dialog import DialogInput, DialogOutput
from valuecast.backends.scripted import ScriptedInput


class TestSelectBackend:
    @pytest.mark.parametrize(
        "choice,name",
        [("1", "console"), ("2", "dialog"), ("Console", "console"), (" dialog ", "dialog")],
    )
    def test_known_choices(self, choice: str, name: str) -> None:
        assert select_backend(choice).name == name

    @pytest.mark.parametrize("choice", ["", "3", "gui", "0"])
    def test_unknown_choice(self, choice: str) -> None:
        with pytest.raises(UnknownBackendError) as excinfo:
            select_backend(choice)
        assert excinfo.value.choice == choice

    def test_prompt_lists_every_backend(self) -> None:
        prompt = selection_prompt()
        for backend in BACKENDS:
            assert f"{backend.choice}. {backend.label}" in prompt


class TestFactories:
    def test_console_pair(self) -> None:
        reader, writer = select_backend("console").create(BackendOptions(err=True))
        assert isinstance(reader, ConsoleInput)
        assert isinstance(writer, ConsoleOutput)

    def test_dialog_pair_does_not_open_windows(self) -> None:
        reader, writer = select_backend("dialog").create(BackendOptions(dialog_title="T"))
        assert isinstance(reader, DialogInput)
        assert isinstance(writer, DialogOutput)


def test_implementations_satisfy_protocols() -> None:
    for reader in (ConsoleInput(), DialogInput(ask=lambda t, p: ""), ScriptedInput([])):
        assert isinstance(reader, InputPort)
    for writer in (ConsoleOutput(), DialogOutput(show_info=print, show_error=print)):
        assert isinstance(writer, OutputPort)
