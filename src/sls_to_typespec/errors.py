"""Error types raised by the TypeSpec generation pipeline."""

from __future__ import annotations


class TypeSpecGeneratorError(Exception):
    """Base class for all generation errors."""


class DuplicateKeyError(TypeSpecGeneratorError):
    """A key was registered twice in a Registry."""

    def __init__(self, key: str) -> None:
        """Initialize DuplicateKeyError.

        Args:
        ----
            key: The key that was already present.

        """
        self.key = key
        super().__init__(f'Registry already contains key "{key}"')


class SchemaError(TypeSpecGeneratorError):
    """A JSON Schema node cannot be converted to a TypeSpec type."""


class NotImplementedSchemaError(SchemaError):
    """A JSON Schema construct is valid but not supported yet (e.g. non-object allOf)."""


class ConfigError(TypeSpecGeneratorError):
    """The serverless configuration of a function is inconsistent."""

    def __init__(self, function_name: str, message: str) -> None:
        """Initialize ConfigError.

        Args:
        ----
            function_name: Name of the offending function.
            message: What is wrong with it.

        """
        self.function_name = function_name
        super().__init__(f'Function "{function_name}" {message}')
