"""Collaborator protocols and the backend registry.

Two interactive backends ship with valuecast:

- ``console`` (choice ``1``): terminal prompts and Rich-rendered lines.
- ``dialog`` (choice ``2``): modal Tk dialogs.

Implementations are imported lazily so that selecting the console backend
never loads tkinter.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from valuecast.domain.types import PrimitiveType


@runtime_checkable
class InputPort(Protocol):
    """Source of raw text for the conversion flow."""

    def request_text(self, prompt: str) -> str:
        """Return the text the user supplied for *prompt*.

        A cancelled request yields the empty string.
        """
        ...


@runtime_checkable
class OutputPort(Protocol):
    """Sink for the rendered value and for error reports."""

    def display(self, kind: PrimitiveType, text: str) -> None:
        """Present *text* labeled with *kind* (``Label: text``)."""
        ...

    def report_error(self, message: str) -> None:
        """Present a terminal error for the current run."""
        ...


@dataclass(frozen=True)
class BackendOptions:
    """Presentation settings shared by all backends.

    Attributes:
        err: Route prompts and output to stderr (``--json`` mode).
        prompt_suffix: Appended to console prompts.
        dialog_title: Window title for modal dialogs.
        color: Allow ANSI styles when writing to a terminal.
    """

    err: bool = False
    prompt_suffix: str = ": "
    dialog_title: str = "valuecast"
    color: bool = True


BackendFactory = Callable[[BackendOptions], "tuple[InputPort, OutputPort]"]


@dataclass(frozen=True)
class Backend:
    """A named reader/writer pair factory."""

    name: str
    choice: str
    label: str
    factory: BackendFactory

    def create(self, options: BackendOptions | None = None) -> tuple[InputPort, OutputPort]:
        """Instantiate the reader/writer pair."""
        return self.factory(options or BackendOptions())


class UnknownBackendError(ValueError):
    """The startup selection names no backend."""

    def __init__(self, choice: str) -> None:
        super().__init__(f"Invalid option: {choice!r}")
        self.choice = choice


def _console_factory(options: BackendOptions) -> tuple[InputPort, OutputPort]:
    from valuecast.backends.console import ConsoleInput, ConsoleOutput

    return (
        ConsoleInput(suffix=options.prompt_suffix, err=options.err),
        ConsoleOutput(err=options.err, color=options.color),
    )


def _dialog_factory(options: BackendOptions) -> tuple[InputPort, OutputPort]:
    from valuecast.backends.dialog import DialogInput, DialogOutput

    return DialogInput(title=options.dialog_title), DialogOutput(title=options.dialog_title)


BACKENDS: tuple[Backend, ...] = (
    Backend(name="console", choice="1", label="Console", factory=_console_factory),
    Backend(name="dialog", choice="2", label="Dialog", factory=_dialog_factory),
)


def selection_prompt() -> str:
    """The startup prompt listing every backend."""
    lines = ["Select the input/output mode:"]
    lines.extend(f"  {b.choice}. {b.label}" for b in BACKENDS)
    return "\n".join(lines) + "\nChoice"


def select_backend(choice: str) -> Backend:
    """Resolve a startup selection by number or name (case-insensitive).

    Raises:
        UnknownBackendError: If *choice* matches no backend.
    """
    normalized = choice.strip().lower()
    for backend in BACKENDS:
        if normalized in (backend.choice, backend.name):
            return backend
    raise UnknownBackendError(choice)
