"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valuecast.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel


class ConsoleConfig(BaseModel):
    """[console] section."""

    model_config = {"frozen": True}

    prompt_suffix: str = ": "


class DialogConfig(BaseModel):
    """[dialog] section."""

    model_config = {"frozen": True}

    title: str = "valuecast"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    color: bool = True

