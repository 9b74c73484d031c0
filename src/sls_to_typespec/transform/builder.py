"""Two-pass builder from canonical declarations to TypeSpec IR."""

from __future__ import annotations

import logging

from sls_to_typespec.errors import SchemaError
from sls_to_typespec.ir.serverless import (
    ModelSource,
    RequestIR,
    ResponseIR,
    ServerlessFunctionIR,
    ServerlessIR,
    ServerlessModelIR,
)
from sls_to_typespec.ir.types import ArrayType, PrimitiveType, PropIR, PropType, RefType, UnionType
from sls_to_typespec.ir.typespec import (
    AliasIR,
    HttpIR,
    HttpResponseIR,
    ModelIR,
    OperationIR,
    TypeSpecIR,
)
from sls_to_typespec.models.json_schema import JSONSchema
from sls_to_typespec.registry import Registry
from sls_to_typespec.transform.type_converter import convert_type, json_schema_to_typespec_ir

logger = logging.getLogger(__name__)

# Status code of a response given only as a model key
DEFAULT_STATUS_CODE = 200


class TypeSpecIRBuilder:
    """Build TypeSpec IR from canonical declarations.

    Pass 1 converts every model declaration and registers it under its
    key; pass 2 builds operations, resolving model keys through the
    registry. The result lists operations first, then models.

    Usage:
        builder = TypeSpecIRBuilder()
        ir_list = builder.build(declarations)
    """

    def build(self, declarations: list[ServerlessIR]) -> list[TypeSpecIR]:
        """Build the TypeSpec IR.

        Raises
        ------
            DuplicateKeyError: If two model declarations share a key.
            SchemaError: If a function-level schema cannot be converted.
            NotImplementedSchemaError: Likewise, for unsupported constructs.

        """
        registry: Registry[AliasIR | ModelIR] = Registry()

        models = self._build_models(
            [d for d in declarations if isinstance(d, ServerlessModelIR)],
            registry,
        )

        operations = [
            build_operation_ir(d, registry)
            for d in declarations
            if isinstance(d, ServerlessFunctionIR)
        ]

        return [*operations, *models]

    def _build_models(
        self,
        declarations: list[ServerlessModelIR],
        registry: Registry[AliasIR | ModelIR],
    ) -> list[AliasIR | ModelIR]:
        """Convert and register model declarations, in declaration order."""
        models: list[AliasIR | ModelIR] = []

        for declaration in declarations:
            if declaration.source is ModelSource.PROVIDER:
                try:
                    model = build_model_ir(declaration)
                except SchemaError as e:
                    logger.warning(
                        'Skipping schema "%s" due to unsupported type: %s', declaration.key, e
                    )
                    continue
            else:
                model = build_model_ir(declaration)

            registry.register(declaration.key, model)
            models.append(model)

        return models


def build_model_ir(declaration: ServerlessModelIR) -> AliasIR | ModelIR:
    """Convert a model declaration to a model, or an alias for array schemas."""
    return json_schema_to_typespec_ir(declaration.schema, declaration.name)


def build_operation_ir(
    function: ServerlessFunctionIR,
    registry: Registry[AliasIR | ModelIR],
) -> OperationIR:
    """Build an operation from a function declaration.

    Model keys resolve to the registered model's name; unregistered keys
    are used verbatim as type names.
    """
    event = function.event
    parameters: dict[str, PropIR] | None = None
    request_body: PropIR | None = None
    http: HttpIR | None = None

    request: RequestIR | None = event.request
    if request is not None:
        if request.body is not None:
            request_body = PropIR(
                type=_resolve_body(request.body.schema, registry),
                required=True,
                description=request.body.description,
            )
        if request.path:
            parameters = {
                name: PropIR(
                    type=PrimitiveType.STRING,
                    required=param.required,
                    description=param.description,
                )
                for name, param in request.path.items()
            }
            http = HttpIR(params=tuple(parameters))

    return OperationIR(
        name=function.name,
        method=event.method,
        route=event.path,
        summary=event.summary,
        description=event.description,
        parameters=parameters,
        request_body=request_body,
        return_type=_build_return_type(event.responses, registry),
        http=http,
    )


def _build_return_type(
    responses: tuple[ResponseIR | str, ...] | None,
    registry: Registry[AliasIR | ModelIR],
) -> PropType | tuple[HttpResponseIR, ...] | None:
    """Build the return type of an operation.

    Responses given only as model keys collapse to a union of references;
    anything else becomes one HttpResponseIR per response.
    """
    if not responses:
        return None

    if all(isinstance(response, str) for response in responses):
        return UnionType(tuple(RefType(_model_name(key, registry)) for key in responses))

    result: list[HttpResponseIR] = []
    for response in responses:
        if isinstance(response, str):
            result.append(
                HttpResponseIR(
                    status_code=DEFAULT_STATUS_CODE,
                    body=RefType(_model_name(response, registry)),
                )
            )
            continue

        body = _resolve_body(response.body, registry)
        if response.is_array:
            body = ArrayType(body)
        result.append(HttpResponseIR(status_code=response.status_code, body=body))

    return tuple(result)


def _resolve_body(body: JSONSchema | str, registry: Registry[AliasIR | ModelIR]) -> PropType:
    """Resolve a model key to a reference, or convert an inline schema."""
    if isinstance(body, str):
        return RefType(_model_name(body, registry))
    return convert_type(body)


def _model_name(key: str, registry: Registry[AliasIR | ModelIR]) -> str:
    model = registry.get(key)
    return model.name if model is not None else key


def build_typespec_ir(declarations: list[ServerlessIR]) -> list[TypeSpecIR]:
    """Build TypeSpec IR from canonical declarations with a fresh registry."""
    return TypeSpecIRBuilder().build(declarations)
