"""IR models for property types.

A property type is a closed set of variants:

- PrimitiveType: string, numeric, boolean, null
- RefType: reference to a named model or alias
- UnionType: ordered alternatives
- ArrayType: array of one element type
- FormatType: primitive with a format hint (emitted as @format)
- PropsType: anonymous object shape (field name -> PropIR)

Consumers dispatch with isinstance and raise on anything else.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PrimitiveType(Enum):
    """Primitive TypeSpec types."""

    STRING = "string"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    NULL = "null"


@dataclass(frozen=True)
class RefType:
    """Reference to a named type."""

    name: str


@dataclass(frozen=True)
class UnionType:
    """Union of alternatives, in source order (no deduplication)."""

    types: tuple[PropType, ...]


@dataclass(frozen=True)
class ArrayType:
    """Array of a single element type."""

    item: PropType


@dataclass(frozen=True)
class FormatType:
    """Primitive type annotated with a format (e.g. date-time, email)."""

    format: str
    type: PropType


@dataclass(frozen=True)
class PropsType:
    """Anonymous object shape.

    Attributes
    ----------
        props: Field name -> property, in source property order.

    """

    props: dict[str, PropIR] = field(default_factory=dict)


@dataclass(frozen=True)
class PropIR:
    """A property of an object shape, or an operation parameter.

    Attributes
    ----------
        type: The property type.
        required: False renders the property as optional (``name?:``).
        description: Optional documentation (emitted as @doc).

    """

    type: PropType
    required: bool
    description: str | None = None


PropType = PrimitiveType | RefType | UnionType | ArrayType | FormatType | PropsType
