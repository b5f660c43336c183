"""Tests for CompatibilityService."""

from valuecast.services.compatibility import CompatibilityService


class TestDescribe:
    def test_rows_follow_table(self) -> None:
        result = CompatibilityService().describe()
        assert result.ok is True
        assert result.op == "matrix"
        assert result.data["types"] == ["text", "integer", "float32", "float64", "boolean"]
        rows = {row["source"]: row["targets"] for row in result.data["rows"]}
        assert rows["text"] == ["text", "integer", "float32", "float64", "boolean"]
        assert rows["integer"] == ["integer", "text", "float32", "float64"]
        assert rows["float32"] == ["float32", "text", "float64"]
        assert rows["float64"] == ["float64", "text", "float32"]
        assert rows["boolean"] == ["boolean", "text"]


class TestCheck:
    def test_allowed(self) -> None:
        result = CompatibilityService().check("int", "DOUBLE")
        assert result.ok is True
        assert result.data == {"source": "integer", "target": "float64", "allowed": True}

    def test_disallowed(self) -> None:
        result = CompatibilityService().check("boolean", "integer")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INCOMPATIBLE_CONVERSION"

    def test_invalid_type(self) -> None:
        result = CompatibilityService().check("boolean", "nope")
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "INVALID_TYPE"
        assert result.error.detail == {"token": "nope"}
