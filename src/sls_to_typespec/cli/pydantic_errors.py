"""Translate Pydantic errors to user-friendly messages."""

from __future__ import annotations

from pydantic_core import ErrorDetails

# Translation map for Pydantic error types
ERROR_TRANSLATIONS: dict[str, str] = {
    "missing": "This field is required but was not provided",
    "extra_forbidden": "This field is not allowed in this context",
    "string_type": "Must be a string",
    "bool_type": "Must be true or false",
    "list_type": "Must be a list",
    "dict_type": "Must be an object/dictionary",
    "model_type": "Must be an object/dictionary",
    "literal_error": "Must be one of the allowed values",
    "enum": "Must be one of the allowed values",
    "string_pattern_mismatch": "Does not match the required pattern",
}


def translate_pydantic_error(error: ErrorDetails) -> str:
    """Translate a Pydantic error to a user-friendly message.

    Args:
    ----
        error: The Pydantic error details.

    Returns:
    -------
        User-friendly error message.

    """
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    if error_type in ("literal_error", "enum"):
        return f"Must be one of: {ctx.get('expected', 'unknown')}"

    if error_type == "string_pattern_mismatch":
        return f"Does not match pattern: {ctx.get('pattern', '')}"

    return ERROR_TRANSLATIONS.get(error_type, error["msg"])


def format_pydantic_location(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as ``functions.getUser.events[0]``."""
    parts: list[str] = []
    for part in loc:
        if isinstance(part, int):
            parts.append(f"[{part}]")
        else:
            if parts:
                parts.append(".")
            parts.append(str(part))

    return "".join(parts)


def get_suggestion_for_error(error: ErrorDetails) -> str | None:
    """Get a suggestion for how to fix the error, if there is one."""
    ctx = error.get("ctx") or {}

    # Only the generator options forbid unknown keys
    suggestions: dict[str, str] = {
        "missing": "Add the required field to your YAML",
        "extra_forbidden": (
            "Check custom.typespecGenerator for typos. Known keys: title, namespace, "
            "description, version, openapiVersion, arrayResponseMode"
        ),
        "literal_error": f"Use one of the allowed values: {ctx.get('expected', '')}",
        "enum": f"Use one of the allowed values: {ctx.get('expected', '')}",
        "string_pattern_mismatch": "Namespaces are dot-separated identifiers like 'Users.Api'",
    }

    return suggestions.get(error["type"])
