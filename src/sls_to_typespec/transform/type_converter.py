"""Convert JSON Schema nodes to IR property types."""

from __future__ import annotations

from dataclasses import replace

from sls_to_typespec.errors import NotImplementedSchemaError, SchemaError
from sls_to_typespec.ir.types import (
    ArrayType,
    FormatType,
    PrimitiveType,
    PropIR,
    PropsType,
    PropType,
    UnionType,
)
from sls_to_typespec.ir.typespec import AliasIR, ModelIR
from sls_to_typespec.models.json_schema import JSONSchema

# Mapping from JSON Schema primitive types to TypeSpec primitives
JSON_TYPE_TO_PRIMITIVE: dict[str, PrimitiveType] = {
    "string": PrimitiveType.STRING,
    "integer": PrimitiveType.NUMERIC,
    "number": PrimitiveType.NUMERIC,
    "boolean": PrimitiveType.BOOLEAN,
    "null": PrimitiveType.NULL,
}


def is_object_schema(schema: JSONSchema) -> bool:
    """Check whether a schema converts to an object shape.

    A schema with ``allOf`` is an object shape whatever its ``type``.
    """
    return schema.type == "object" or schema.all_of is not None


def convert_type(schema: JSONSchema) -> PropType:
    """Convert a JSON Schema node to a property type.

    Args:
    ----
        schema: The JSON Schema node.

    Returns:
    -------
        The property type.

    Raises:
    ------
        SchemaError: For an unknown or missing ``type`` or malformed ``items``.
        NotImplementedSchemaError: For an ``allOf`` branch that is not an object.

    """
    if schema.one_of is not None:
        return UnionType(tuple(convert_type(branch) for branch in schema.one_of))

    if is_object_schema(schema):
        return PropsType(extract_props(schema))

    if schema.type == "array":
        return build_array_type(schema)

    primitive = JSON_TYPE_TO_PRIMITIVE.get(schema.type) if isinstance(schema.type, str) else None
    if primitive is None:
        msg = f"Unknown type: {schema.type}"
        raise SchemaError(msg)

    if schema.format:
        return FormatType(format=schema.format, type=primitive)

    return primitive


def build_array_type(schema: JSONSchema) -> ArrayType:
    """Convert an array schema to an ArrayType.

    Raises
    ------
        SchemaError: If ``items`` is missing or a list of schemas.

    """
    if schema.items is None or isinstance(schema.items, list):
        msg = "Array 'items' must be a single schema object"
        raise SchemaError(msg)
    return ArrayType(convert_type(schema.items))


def extract_props(schema: JSONSchema) -> dict[str, PropIR]:
    """Extract the fields of an object schema.

    ``allOf`` takes precedence over sibling ``properties``.

    Args:
    ----
        schema: An object schema (``type: object`` or ``allOf``).

    Returns:
    -------
        Field name -> property, in declaration order.

    """
    if schema.all_of is not None:
        return merge_all_of(schema.all_of)

    required = set(schema.required_names)
    props: dict[str, PropIR] = {}

    for name, definition in (schema.properties or {}).items():
        props[name] = PropIR(
            type=convert_type(definition),
            required=name in required,
            description=definition.description,
        )

    return props


def merge_all_of(branches: list[JSONSchema]) -> dict[str, PropIR]:
    """Merge ``allOf`` object branches into one set of fields.

    Later branches replace same-named fields entirely. A field required
    by any branch is required in the result.

    Raises
    ------
        NotImplementedSchemaError: If a branch is not ``type: object``.

    """
    required: set[str] = set()
    props: dict[str, PropIR] = {}

    for branch in branches:
        if branch.type != "object":
            msg = f"Unsupported schema type in allOf: {branch.type}"
            raise NotImplementedSchemaError(msg)
        required.update(branch.required_names)
        props.update(extract_props(branch))

    for name in required:
        if name in props and not props[name].required:
            props[name] = replace(props[name], required=True)

    return props


def json_schema_to_typespec_ir(schema: JSONSchema, name: str) -> AliasIR | ModelIR:
    """Convert a named schema to a model, or to an alias for arrays.

    Args:
    ----
        schema: The JSON schema.
        name: Name of the model or alias.

    Returns:
    -------
        ModelIR for object schemas, AliasIR for array schemas.

    Raises:
    ------
        SchemaError: For any other schema type.

    """
    if is_object_schema(schema):
        return ModelIR(name=name, props=extract_props(schema))

    if schema.type == "array":
        return AliasIR(name=name, type=build_array_type(schema))

    msg = f"Unsupported schema type: {schema.type}"
    raise SchemaError(msg)
