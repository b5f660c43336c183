"""Rich Console factory and theme for valuecast output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

VC_THEME = Theme(
    {
        "vc.ok": "bold green",
        "vc.error": "bold red",
        "vc.op": "bold cyan",
        "vc.key": "dim",
        "vc.allowed": "green",
        "vc.denied": "dim red",
        "vc.type.text": "bold white",
        "vc.type.integer": "bold blue",
        "vc.type.float32": "bold magenta",
        "vc.type.float64": "bold magenta",
        "vc.type.boolean": "bold yellow",
    }
)


def create_console(
    *,
    no_color: bool = False,
    width: int | None = None,
    force_terminal: bool | None = None,
) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
        force_terminal: Emit styles even though the buffer is not a TTY.
    """
    return Console(
        file=StringIO(),
        theme=VC_THEME,
        no_color=no_color,
        force_terminal=force_terminal,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_type(type_name: str) -> str:
    """Return the Rich style name for a primitive type value."""
    style = f"vc.type.{type_name}"
    return style if style in VC_THEME.styles else ""
