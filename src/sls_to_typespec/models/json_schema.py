"""Model for the subset of JSON Schema understood by the generator."""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field


class JSONSchema(BaseModel):
    """A JSON Schema node as found in request/response models.

    Only the keywords below drive conversion; any other keyword is kept
    as extra data and ignored.

    Example:
    -------
        ```yaml
        type: object
        title: User
        properties:
          id:
            type: string
            description: Unique user id
          tags:
            type: array
            items:
              type: string
        required: [id]
        ```

    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    type: Annotated[
        str | list[str] | None,
        Field(
            default=None,
            description="object, array, string, integer, number, boolean or null",
        ),
    ]
    title: Annotated[
        str | None,
        Field(
            default=None,
            description="Name used when the schema is declared as a model",
        ),
    ]
    description: Annotated[
        str | None,
        Field(default=None, description="Human-readable description"),
    ]
    format: Annotated[
        str | None,
        Field(default=None, description="Format hint for primitive types (e.g. date-time)"),
    ]
    properties: Annotated[
        dict[str, JSONSchema] | None,
        Field(default=None, description="Object properties in declaration order"),
    ]
    required: Annotated[
        list[str] | bool | None,
        Field(default=None, description="Names of required properties"),
    ]
    items: Annotated[
        JSONSchema | list[JSONSchema] | None,
        Field(default=None, description="Element schema for arrays"),
    ]
    all_of: Annotated[
        list[JSONSchema] | None,
        Field(default=None, alias="allOf", description="Object schemas to merge"),
    ]
    one_of: Annotated[
        list[JSONSchema] | None,
        Field(default=None, alias="oneOf", description="Alternative schemas (union)"),
    ]

    @property
    def required_names(self) -> list[str]:
        """Required property names; non-list values (draft-3 booleans) count as none."""
        if isinstance(self.required, list):
            return list(self.required)
        return []


JSONSchema.model_rebuild()
