"""Dialog backend — modal Tk dialogs for input and output.

tkinter is imported on first use only.  Both classes accept the dialog
callables as constructor arguments so the flow can run headless.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from valuecast.domain.types import PrimitiveType

logger = logging.getLogger(__name__)

AskFn = Callable[[str, str], "str | None"]
ShowFn = Callable[[str, str], None]


def _tk_ask(title: str, prompt: str) -> str | None:
    import tkinter
    from tkinter import simpledialog

    root = tkinter.Tk()
    root.withdraw()
    try:
        return simpledialog.askstring(title, prompt, parent=root)
    finally:
        root.destroy()


def _tk_show_info(title: str, message: str) -> None:
    import tkinter
    from tkinter import messagebox

    root = tkinter.Tk()
    root.withdraw()
    try:
        messagebox.showinfo(title, message, parent=root)
    finally:
        root.destroy()


def _tk_show_error(title: str, message: str) -> None:
    import tkinter
    from tkinter import messagebox

    root = tkinter.Tk()
    root.withdraw()
    try:
        messagebox.showerror(title, message, parent=root)
    finally:
        root.destroy()


class DialogInput:
    """Asks for each value in a modal input dialog.

    Cancelling the dialog returns the empty string.
    """

    def __init__(self, *, title: str = "valuecast", ask: AskFn | None = None) -> None:
        self._title = title
        self._ask = ask or _tk_ask

    def request_text(self, prompt: str) -> str:
        answer = self._ask(self._title, prompt)
        if answer is None:
            logger.debug("Dialog cancelled for %r", prompt)
            return ""
        return answer


class DialogOutput:
    """Shows the rendered value, or the error, in a message box."""

    def __init__(
        self,
        *,
        title: str = "valuecast",
        show_info: ShowFn | None = None,
        show_error: ShowFn | None = None,
    ) -> None:
        self._title = title
        self._show_info = show_info or _tk_show_info
        self._show_error = show_error or _tk_show_error

    def display(self, kind: PrimitiveType, text: str) -> None:
        self._show_info(self._title, f"{kind.label}: {text}")

    def report_error(self, message: str) -> None:
        self._show_error(self._title, f"Error: {message}")
