"""Generator options (title, namespace, OpenAPI settings)."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from sls_to_typespec.models.serverless import ServerlessConfig

DEFAULT_TITLE = "Generated API"
DEFAULT_NAMESPACE = "GeneratedApi"
DEFAULT_VERSION = "1.0.0"
DEFAULT_OPENAPI_VERSION = "3.1.0"


class ArrayResponseMode(str, Enum):
    """How an untitled array response whose items carry a title is declared."""

    # alias <ItemsTitle> = <items>[]; the response references <ItemsTitle>
    ALIAS = "alias"
    # model <ItemsTitle> { ... }; the response body is <ItemsTitle>[]
    ELEMENT = "element"


class GeneratorOptions(BaseModel):
    """Options controlling the generated TypeSpec project.

    Example:
    -------
        ```yaml
        custom:
          typespecGenerator:
            title: Users API
            namespace: UsersApi
            openapiVersion: "3.0.0"
        ```

    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    title: Annotated[str, Field(default=DEFAULT_TITLE, description="Service title")]
    namespace: Annotated[
        str,
        Field(
            default=DEFAULT_NAMESPACE,
            pattern=r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$",
            description="TypeSpec namespace of the service",
        ),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Service description (emitted as @doc)"),
    ]
    version: Annotated[str, Field(default=DEFAULT_VERSION, description="API version")]
    openapi_version: Annotated[
        Literal["3.0.0", "3.1.0"],
        Field(
            default=DEFAULT_OPENAPI_VERSION,
            alias="openapiVersion",
            description="OpenAPI version emitted by @typespec/openapi3",
        ),
    ]
    array_response_mode: Annotated[
        ArrayResponseMode,
        Field(
            default=ArrayResponseMode.ALIAS,
            alias="arrayResponseMode",
            description="Declaration style for array responses with titled items",
        ),
    ]

    @classmethod
    def from_config(cls, config: ServerlessConfig, **overrides: Any) -> GeneratorOptions:
        """Build options from ``custom.typespecGenerator`` plus explicit overrides.

        Overrides whose value is None are ignored so that unset CLI flags
        keep the configured value.
        """
        data: dict[str, Any] = {}
        if config.custom is not None and config.custom.typespec_generator:
            data.update(config.custom.typespec_generator)
        for key, value in overrides.items():
            if value is None:
                continue
            field = cls.model_fields.get(key)
            data[field.alias or key if field else key] = value
        return cls.model_validate(data)
