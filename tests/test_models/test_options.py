"""Tests for generator options."""

import pytest
from pydantic import ValidationError

from sls_to_typespec.models import ArrayResponseMode, GeneratorOptions, ServerlessConfig


class TestGeneratorOptions:
    """Tests for GeneratorOptions."""

    def test_defaults(self) -> None:
        """Should use the documented defaults."""
        options = GeneratorOptions()

        assert options.title == "Generated API"
        assert options.namespace == "GeneratedApi"
        assert options.description is None
        assert options.version == "1.0.0"
        assert options.openapi_version == "3.1.0"
        assert options.array_response_mode is ArrayResponseMode.ALIAS

    def test_camel_case_aliases(self) -> None:
        """Should accept the camelCase keys used in serverless.yml."""
        options = GeneratorOptions.model_validate(
            {"openapiVersion": "3.0.0", "arrayResponseMode": "element"}
        )

        assert options.openapi_version == "3.0.0"
        assert options.array_response_mode is ArrayResponseMode.ELEMENT

    def test_unknown_key_rejected(self) -> None:
        """Should reject typos."""
        with pytest.raises(ValidationError):
            GeneratorOptions.model_validate({"titel": "Oops"})

    def test_invalid_namespace_rejected(self) -> None:
        """Should reject namespaces that are not dotted identifiers."""
        with pytest.raises(ValidationError):
            GeneratorOptions(namespace="my-api")

    def test_dotted_namespace_accepted(self) -> None:
        """Should accept dotted namespaces."""
        assert GeneratorOptions(namespace="Users.Api").namespace == "Users.Api"

    def test_unsupported_openapi_version_rejected(self) -> None:
        """Should only accept OpenAPI 3.0.0 or 3.1.0."""
        with pytest.raises(ValidationError):
            GeneratorOptions.model_validate({"openapiVersion": "2.0"})


class TestFromConfig:
    """Tests for GeneratorOptions.from_config."""

    def test_without_custom_section(self) -> None:
        """Should fall back to defaults."""
        options = GeneratorOptions.from_config(ServerlessConfig())

        assert options == GeneratorOptions()

    def test_reads_custom_section(self) -> None:
        """Should read custom.typespecGenerator."""
        config = ServerlessConfig.model_validate(
            {
                "custom": {
                    "typespecGenerator": {
                        "title": "Users API",
                        "namespace": "UsersApi",
                        "openapiVersion": "3.0.0",
                    },
                },
            }
        )

        options = GeneratorOptions.from_config(config)

        assert options.title == "Users API"
        assert options.namespace == "UsersApi"
        assert options.openapi_version == "3.0.0"

    def test_overrides_take_precedence(self) -> None:
        """Should let explicit overrides win and ignore None overrides."""
        config = ServerlessConfig.model_validate(
            {"custom": {"typespecGenerator": {"title": "Users API", "namespace": "UsersApi"}}}
        )

        options = GeneratorOptions.from_config(
            config,
            title="Override",
            namespace=None,
            array_response_mode=ArrayResponseMode.ELEMENT,
        )

        assert options.title == "Override"
        assert options.namespace == "UsersApi"
        assert options.array_response_mode is ArrayResponseMode.ELEMENT

    def test_invalid_custom_section_raises(self) -> None:
        """Should surface typos in custom.typespecGenerator."""
        config = ServerlessConfig.model_validate(
            {"custom": {"typespecGenerator": {"namepsace": "Oops"}}}
        )

        with pytest.raises(ValidationError):
            GeneratorOptions.from_config(config)
