"""Tests for pydantic error translation."""

from sls_to_typespec.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)


class TestTranslatePydanticError:
    """Tests for translate_pydantic_error."""

    def test_missing_field_translation(self) -> None:
        """Should translate missing field error."""
        error = {"type": "missing", "msg": "Field required", "loc": ("method",)}

        result = translate_pydantic_error(error)  # type: ignore[arg-type]

        assert "required" in result.lower()

    def test_extra_field_translation(self) -> None:
        """Should translate extra forbidden field error."""
        error = {
            "type": "extra_forbidden",
            "msg": "Extra inputs are not permitted",
            "loc": ("custom", "typespecGenerator", "titel"),
        }

        result = translate_pydantic_error(error)  # type: ignore[arg-type]

        assert "not allowed" in result.lower()

    def test_literal_error_with_context(self) -> None:
        """Should include expected values for literal error."""
        error = {
            "type": "literal_error",
            "msg": "Input should be '3.0.0' or '3.1.0'",
            "loc": ("openapiVersion",),
            "ctx": {"expected": "'3.0.0' or '3.1.0'"},
        }

        result = translate_pydantic_error(error)  # type: ignore[arg-type]

        assert "'3.0.0' or '3.1.0'" in result

    def test_unknown_error_uses_fallback(self) -> None:
        """Should fall back to the pydantic message."""
        error = {"type": "something_new", "msg": "Original message", "loc": ("x",), "ctx": None}

        result = translate_pydantic_error(error)  # type: ignore[arg-type]

        assert result == "Original message"


class TestFormatPydanticLocation:
    """Tests for format_pydantic_location."""

    def test_nested_location(self) -> None:
        """Should join names with dots and indices with brackets."""
        result = format_pydantic_location(("functions", "hello", "events", 0, "http"))

        assert result == "functions.hello.events[0].http"

    def test_empty_location(self) -> None:
        """Should format an empty location as an empty string."""
        assert format_pydantic_location(()) == ""


class TestGetSuggestionForError:
    """Tests for get_suggestion_for_error."""

    def test_generator_options_suggestion(self) -> None:
        """Should point at custom.typespecGenerator keys."""
        error = {
            "type": "extra_forbidden",
            "msg": "Extra inputs are not permitted",
            "loc": ("titel",),
        }

        suggestion = get_suggestion_for_error(error)  # type: ignore[arg-type]

        assert suggestion is not None
        assert "typespecGenerator" in suggestion

    def test_missing_field_suggestion(self) -> None:
        """Should suggest adding the field."""
        error = {"type": "missing", "msg": "Field required", "loc": ("functions", "a", "method")}

        suggestion = get_suggestion_for_error(error)  # type: ignore[arg-type]

        assert suggestion == "Add the required field to your YAML"

    def test_no_suggestion(self) -> None:
        """Should return None for errors without a suggestion."""
        error = {"type": "string_type", "msg": "Input should be a string", "loc": ("path",)}

        assert get_suggestion_for_error(error) is None  # type: ignore[arg-type]
