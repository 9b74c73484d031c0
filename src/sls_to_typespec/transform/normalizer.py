"""Normalize a serverless configuration into canonical declarations."""

from __future__ import annotations

import logging
import re

from pydantic import ValidationError

from sls_to_typespec.errors import ConfigError
from sls_to_typespec.ir.serverless import (
    HttpEventIR,
    HttpMethod,
    ModelSource,
    PathParamIR,
    RequestBodyIR,
    RequestIR,
    ResponseIR,
    ServerlessFunctionIR,
    ServerlessIR,
    ServerlessModelIR,
)
from sls_to_typespec.models.json_schema import JSONSchema
from sls_to_typespec.models.options import ArrayResponseMode
from sls_to_typespec.models.serverless import (
    JSON_CONTENT_TYPE,
    FunctionEvent,
    HttpEvent,
    HttpEventDocumentation,
    PathParameterDetail,
    ServerlessConfig,
)

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[-_](\w)")


def to_camel_case(name: str) -> str:
    """Convert ``hello-world`` / ``hello_world`` / ``HelloWorld`` to ``helloWorld``."""
    name = _SEPARATOR_RE.sub(lambda m: m.group(1).upper(), name)
    return name[:1].lower() + name[1:]


def normalize_path(path: str) -> str:
    """Ensure a route starts with ``/``."""
    if not path.startswith("/"):
        return f"/{path}"
    return path


class ConfigNormalizer:
    """Build canonical declarations from a ServerlessConfig.

    The result holds one ServerlessModelIR per provider-level schema
    (first, in table order), then for each http function its titled
    inline schemas followed by its ServerlessFunctionIR.

    Usage:
        normalizer = ConfigNormalizer()
        declarations = normalizer.normalize(config)
    """

    def __init__(self, array_response_mode: ArrayResponseMode = ArrayResponseMode.ALIAS) -> None:
        """Initialize the normalizer.

        Args:
        ----
            array_response_mode: Declaration style for array responses
                whose items carry a title.

        """
        self.array_response_mode = array_response_mode
        self._declarations: list[ServerlessIR] = []
        self._declared: dict[str, JSONSchema] = {}

    def normalize(self, config: ServerlessConfig) -> list[ServerlessIR]:
        """Normalize a configuration.

        Raises
        ------
            ConfigError: If a function documents a request body it does not define.

        """
        self._declarations = []
        self._declared = {}

        for key, entry in config.api_gateway_schemas.items():
            try:
                schema = JSONSchema.model_validate(entry.schema_)
            except ValidationError as e:
                logger.warning(
                    'Skipping schema "%s" due to invalid schema: %d error(s)',
                    key,
                    e.error_count(),
                )
                continue
            name = entry.name or schema.title or key
            self._declare_model(key, name, schema, ModelSource.PROVIDER)

        for function_name in config.get_all_functions():
            events = config.get_all_events_in_function(function_name)
            function = self._normalize_function(function_name, events)
            if function is not None:
                self._declarations.append(function)

        return self._declarations

    def _declare_model(
        self,
        key: str,
        name: str,
        schema: JSONSchema,
        source: ModelSource,
    ) -> None:
        """Add a model declaration unless the identical schema is already declared."""
        if self._declared.get(key) == schema:
            return
        self._declared[key] = schema
        self._declarations.append(
            ServerlessModelIR(key=key, name=name, schema=schema, source=source)
        )

    def _normalize_function(
        self,
        function_name: str,
        events: list[FunctionEvent],
    ) -> ServerlessFunctionIR | None:
        """Normalize the first http event of a function, or return None to skip it."""
        event = next((e for e in events if e.http), None)
        if event is None:
            logger.debug('Skipping function "%s": no http event', function_name)
            return None

        http = event.http
        if not isinstance(http, HttpEvent):
            logger.debug('Skipping function "%s": http shorthand "%s"', function_name, http)
            return None

        try:
            method = HttpMethod(http.method.lower())
        except ValueError:
            logger.debug(
                'Skipping function "%s": unsupported method "%s"', function_name, http.method
            )
            return None

        documentation = http.documentation
        request = self._build_request(function_name, http)
        responses = self._build_responses(documentation)

        return ServerlessFunctionIR(
            name=to_camel_case(function_name),
            event=HttpEventIR(
                method=method,
                path=normalize_path(http.path),
                summary=documentation.summary if documentation else None,
                description=documentation.description if documentation else None,
                request=request,
                responses=responses,
            ),
        )

    def _build_request(self, function_name: str, http: HttpEvent) -> RequestIR | None:
        """Build the request body and path parameters of an http event."""
        documentation = http.documentation
        body_doc = documentation.request_body if documentation else None

        body: RequestBodyIR | None = None
        schemas = http.request.schemas if http.request else None
        schema = schemas.get(JSON_CONTENT_TYPE) if schemas else None
        if schema is not None:
            body = RequestBodyIR(
                schema=self._declare_inline(schema),
                description=body_doc.description if body_doc else None,
            )
        elif body_doc is not None:
            raise ConfigError(function_name, "has requestBody but no request body defined")

        path: dict[str, PathParamIR] = {}
        parameters = http.request.parameters if http.request else None
        if parameters and parameters.paths:
            for name, value in parameters.paths.items():
                if isinstance(value, PathParameterDetail):
                    path[name] = PathParamIR(required=bool(value.required))
                else:
                    path[name] = PathParamIR(required=True)

        if documentation and documentation.path_params:
            for param in documentation.path_params:
                path[param.name] = PathParamIR(required=True, description=param.description)

        if body is None and not path:
            return None
        return RequestIR(body=body, path=path or None)

    def _build_responses(
        self,
        documentation: HttpEventDocumentation | None,
    ) -> tuple[ResponseIR, ...] | None:
        """Build responses from ``documentation.methodResponses``, in source order."""
        if documentation is None or not documentation.method_responses:
            return None

        responses: list[ResponseIR] = []
        for response in documentation.method_responses:
            model = (response.response_models or {}).get(JSON_CONTENT_TYPE)
            if model is None:
                continue
            responses.append(self._build_response(response.status_code, model))

        return tuple(responses) or None

    def _build_response(self, status_code: int, model: JSONSchema | str) -> ResponseIR:
        """Build one response, declaring titled schemas as models."""
        if isinstance(model, JSONSchema) and model.title is None and model.type == "array":
            items = model.items
            if isinstance(items, JSONSchema) and items.title:
                if self.array_response_mode is ArrayResponseMode.ELEMENT:
                    self._declare_model(items.title, items.title, items, ModelSource.FUNCTION)
                    return ResponseIR(status_code=status_code, body=items.title, is_array=True)
                self._declare_model(items.title, items.title, model, ModelSource.FUNCTION)
                return ResponseIR(status_code=status_code, body=items.title)

        return ResponseIR(status_code=status_code, body=self._declare_inline(model))

    def _declare_inline(self, schema: JSONSchema | str) -> JSONSchema | str:
        """Return a model key for references and titled schemas, else the inline schema."""
        if isinstance(schema, str):
            return schema
        if schema.title:
            self._declare_model(schema.title, schema.title, schema, ModelSource.FUNCTION)
            return schema.title
        return schema


def build_serverless_ir(
    config: ServerlessConfig,
    array_response_mode: ArrayResponseMode = ArrayResponseMode.ALIAS,
) -> list[ServerlessIR]:
    """Normalize a configuration into canonical declarations."""
    return ConfigNormalizer(array_response_mode).normalize(config)
