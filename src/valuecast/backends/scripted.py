"""Scripted input — answers supplied up front, for non-interactive runs."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterable

logger = logging.getLogger(__name__)


class ScriptedInput:
    """Returns pre-supplied answers in order, ignoring the prompt text.

    Once the answers run out every further request yields the empty string.
    ``prompts`` records every prompt that was issued.
    """

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers: deque[str] = deque(answers)
        self.prompts: list[str] = []

    def request_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._answers:
            logger.debug("Scripted input exhausted at %r", prompt)
            return ""
        return self._answers.popleft()
