"""Render TypeSpec IR as TypeSpec source text.

The output is already formatted (two-space indentation, one field per
line) so it can be compared byte for byte without running the TypeSpec
formatter.
"""

from __future__ import annotations

import json
import re

from sls_to_typespec.ir.types import (
    ArrayType,
    FormatType,
    PrimitiveType,
    PropIR,
    PropsType,
    PropType,
    RefType,
    UnionType,
)
from sls_to_typespec.ir.typespec import (
    AliasIR,
    HttpResponseIR,
    ModelIR,
    OperationIR,
    TypeSpecIR,
    is_http_responses,
)
from sls_to_typespec.models.options import GeneratorOptions

HTTP_LIBRARY = "@typespec/http"
INDENT = "  "

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class TypeSpecEmitter:
    """Emit a complete main.tsp from a list of TypeSpec IR declarations.

    Usage:
        emitter = TypeSpecEmitter(GeneratorOptions(title="Users API"))
        text = emitter.emit(ir_list)
    """

    def __init__(self, options: GeneratorOptions | None = None) -> None:
        """Initialize the emitter.

        Args:
        ----
            options: Title, namespace and description of the service.
                Defaults to GeneratorOptions().

        """
        self.options = options or GeneratorOptions()

    def emit(self, ir_list: list[TypeSpecIR]) -> str:
        """Emit the service envelope followed by every declaration."""
        lines = [
            f"import {_quote(HTTP_LIBRARY)};",
            "",
            "using Http;",
            "",
        ]
        if self.options.description:
            lines.append(_doc(self.options.description))
        lines.append(f"@service(#{{ title: {_quote(self.options.title)} }})")
        lines.append(f"namespace {self.options.namespace};")
        lines.append("")

        for ir in ir_list:
            lines.append(emit_ir(ir))
            lines.append("")

        return "\n".join(lines)


def emit_ir(ir: TypeSpecIR) -> str:
    """Emit a single declaration."""
    if isinstance(ir, ModelIR):
        return emit_model(ir)
    if isinstance(ir, AliasIR):
        return emit_alias(ir)
    if isinstance(ir, OperationIR):
        return emit_operation(ir)

    msg = f"Unknown IR: {ir!r}"
    raise TypeError(msg)


def emit_alias(alias: AliasIR) -> str:
    """Emit ``alias <name> = <type>;``."""
    return f"alias {alias.name} = {render_type(alias.type)};"


def emit_model(model: ModelIR) -> str:
    """Emit ``model <name> { ... }``."""
    return f"model {model.name} {render_props(model.props)}"


def emit_operation(operation: OperationIR) -> str:
    """Emit an operation with its decorators, parameters and return type."""
    lines: list[str] = []

    if operation.summary:
        lines.append(f"@summary({_quote(operation.summary)})")
    if operation.description:
        lines.append(_doc(operation.description))
    lines.append(f"@route({_quote(operation.route)})")
    lines.append(f"@{operation.method.value}")

    path_params = set(operation.http.params) if operation.http else set()
    parameters: list[tuple[str | None, str]] = []
    for name, prop in (operation.parameters or {}).items():
        decorator = "@path " if name in path_params else ""
        parameters.append((prop.description, f"{decorator}{_field(name, prop)}"))

    body = operation.request_body
    if body is not None:
        parameters.append((body.description, f"@body body: {render_type(body.type)}"))

    signature = _render_parameters(parameters)
    lines.append(f"op {operation.name}({signature}): {render_return_type(operation)};")

    return "\n".join(lines)


def render_return_type(operation: OperationIR) -> str:
    """Render the return type: per-status union, a single type, or ``void``."""
    return_type = operation.return_type
    if return_type is None:
        return "void"
    if is_http_responses(return_type):
        return " | ".join(_render_http_response(r) for r in return_type)
    return render_type(return_type)


def render_type(type_: PropType) -> str:
    """Render a property type.

    Raises
    ------
        TypeError: For a value that is not a property type.

    """
    if isinstance(type_, PrimitiveType):
        return type_.value

    if isinstance(type_, RefType):
        return type_.name

    if isinstance(type_, UnionType):
        return " | ".join(render_type(t) for t in type_.types)

    if isinstance(type_, ArrayType):
        item = render_type(type_.item)
        if isinstance(type_.item, UnionType) and len(type_.item.types) > 1:
            return f"({item})[]"
        return f"{item}[]"

    if isinstance(type_, FormatType):
        return render_type(type_.type)

    if isinstance(type_, PropsType):
        return render_props(type_.props)

    msg = f"Unknown prop type: {type_!r}"
    raise TypeError(msg)


def render_props(props: dict[str, PropIR]) -> str:
    """Render an object shape, one field per line."""
    if not props:
        return "{}"

    lines = ["{"]
    for name, prop in props.items():
        lines.append(_indent(render_prop(name, prop)))
    lines.append("}")
    return "\n".join(lines)


def render_prop(name: str, prop: PropIR) -> str:
    """Render a field with its @doc/@format decorators."""
    lines: list[str] = []
    if prop.description:
        lines.append(_doc(prop.description))
    if isinstance(prop.type, FormatType):
        lines.append(f"@format({_quote(prop.type.format)})")
    lines.append(f"{_field(name, prop)};")
    return "\n".join(lines)


def _render_http_response(response: HttpResponseIR) -> str:
    lines = [
        "{",
        _indent(f"@statusCode statusCode: {response.status_code};"),
        _indent(f"@body body: {render_type(response.body)};"),
        "}",
    ]
    return "\n".join(lines)


def _render_parameters(parameters: list[tuple[str | None, str]]) -> str:
    """Render parameters inline, or one per line when any is documented or multi-line."""
    if not parameters:
        return ""

    if all(doc is None and "\n" not in text for doc, text in parameters):
        return ", ".join(text for _, text in parameters)

    lines = [""]
    for doc, text in parameters:
        if doc:
            lines.append(_indent(_doc(doc)))
        lines.append(_indent(f"{text},"))
    lines.append("")
    return "\n".join(lines)


def _field(name: str, prop: PropIR) -> str:
    optional = "" if prop.required else "?"
    return f"{_identifier(name)}{optional}: {render_type(prop.type)}"


def _identifier(name: str) -> str:
    if _IDENTIFIER_RE.match(name):
        return name
    return f"`{name}`"


def _doc(text: str) -> str:
    return f"@doc({_quote(text)})"


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _indent(text: str) -> str:
    return "\n".join(f"{INDENT}{line}" if line else line for line in text.split("\n"))


def emit_typespec(ir_list: list[TypeSpecIR], options: GeneratorOptions | None = None) -> str:
    """Emit a complete main.tsp."""
    return TypeSpecEmitter(options).emit(ir_list)
