"""CLI module for sls-to-typespec."""

from sls_to_typespec.cli.exception_handler import handle_exceptions
from sls_to_typespec.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)

__all__ = [
    "handle_exceptions",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
