"""Tests for ScriptedInput."""

from valuecast.backends.scripted import ScriptedInput


def test_answers_in_order_then_empty() -> None:
    reader = ScriptedInput(["integer", "42"])
    assert reader.request_text("a") == "integer"
    assert reader.request_text("b") == "42"
    assert reader.request_text("c") == ""
    assert reader.prompts == ["a", "b", "c"]
