"""Console backend — click prompts in, Rich-rendered lines out.

Output is rendered into a StringIO-backed Rich Console and then written
with ``click.echo``, so Click's test runner captures it and non-TTY streams
receive plain text.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import click
from rich.text import Text

from valuecast.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from valuecast.domain.types import PrimitiveType

logger = logging.getLogger(__name__)


class ConsoleInput:
    """Reads lines from the terminal.

    ``click.prompt`` re-asks until a non-empty line is entered, so this
    reader never returns the empty string.
    """

    def __init__(self, *, suffix: str = ": ", err: bool = False) -> None:
        self._suffix = suffix
        self._err = err

    def request_text(self, prompt: str) -> str:
        value: str = click.prompt(prompt, prompt_suffix=self._suffix, err=self._err)
        logger.debug("Console input received for %r", prompt)
        return value


class ConsoleOutput:
    """Writes ``Label: value`` lines and ``Error: ...`` reports."""

    def __init__(self, *, err: bool = False, color: bool = True) -> None:
        self._err = err
        self._color = color

    def display(self, kind: PrimitiveType, text: str) -> None:
        line = Text()
        line.append(f"{kind.label}:", style=style_for_type(kind))
        line.append(f" {text}")
        self._write(line)

    def report_error(self, message: str) -> None:
        line = Text()
        line.append("Error:", style="vc.error")
        line.append(f" {message}")
        # Errors always go to stderr; the exit code carries the failure.
        self._write(line, err=True)

    def _write(self, line: Text, *, err: bool | None = None) -> None:
        stream_err = self._err if err is None else err
        stream = sys.stderr if stream_err else sys.stdout
        styled = self._color and stream.isatty()
        console = create_console(no_color=not styled, force_terminal=styled)
        console.print(line, soft_wrap=True)
        click.echo(get_output(console), nl=False, err=stream_err)
