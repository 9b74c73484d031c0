"""Models for the parts of serverless.yml read by the generator.

Only the keys the generator needs are modelled; everything else in a
serverless configuration is accepted and ignored.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field

from sls_to_typespec.models.json_schema import JSONSchema

JSON_CONTENT_TYPE = "application/json"

# Request/response body: inline schema or a key of provider.apiGateway.request.schemas
SchemaOrRef = JSONSchema | str


class _ServerlessModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)


class PathParameterDetail(_ServerlessModel):
    """Detailed form of a path parameter in ``request.parameters.paths``."""

    required: bool | None = None


class HttpRequestParameters(_ServerlessModel):
    """Request parameters of an http event.

    Example:
    -------
        ```yaml
        parameters:
          paths:
            id: true
            slug:
              required: false
        ```

    """

    paths: dict[str, bool | PathParameterDetail] | None = None


class HttpRequest(_ServerlessModel):
    """Request section of an http event."""

    schemas: Annotated[
        dict[str, SchemaOrRef] | None,
        Field(default=None, description="Content type -> schema or schema key"),
    ]
    parameters: HttpRequestParameters | None = None


class PathParamDoc(_ServerlessModel):
    """Documented path parameter."""

    name: str
    description: str | None = None
    schema_: Annotated[dict[str, Any] | None, Field(default=None, alias="schema")]


class RequestBodyDoc(_ServerlessModel):
    """Documentation of the request body."""

    description: str | None = None
    required: bool | None = None


class MethodResponse(_ServerlessModel):
    """Documented response of an http event.

    Example:
    -------
        ```yaml
        - statusCode: 201
          responseModels:
            application/json: CreateUserResponse
        ```

    """

    status_code: Annotated[int, Field(alias="statusCode")]
    response_models: Annotated[
        dict[str, SchemaOrRef] | None,
        Field(default=None, alias="responseModels"),
    ]


class HttpEventDocumentation(_ServerlessModel):
    """The ``documentation`` block attached to an http event."""

    summary: str | None = None
    description: str | None = None
    path_params: Annotated[list[PathParamDoc] | None, Field(default=None, alias="pathParams")]
    request_body: Annotated[RequestBodyDoc | None, Field(default=None, alias="requestBody")]
    method_responses: Annotated[
        list[MethodResponse] | None,
        Field(default=None, alias="methodResponses"),
    ]


class HttpEvent(_ServerlessModel):
    """Detailed form of an http event."""

    method: str
    path: str
    request: HttpRequest | None = None
    documentation: HttpEventDocumentation | None = None


class FunctionEvent(_ServerlessModel):
    """One entry of a function's ``events`` list.

    Only ``http`` is read; other triggers (s3, sqs, schedule, ...) are
    kept as extra keys.
    """

    http: Annotated[
        HttpEvent | str | None,
        Field(default=None, description="Detailed http event or 'METHOD path' shorthand"),
    ]


class FunctionDefinition(_ServerlessModel):
    """A function under the ``functions`` section."""

    handler: str | None = None
    events: list[FunctionEvent] = Field(default_factory=list)


class ApiGatewaySchema(_ServerlessModel):
    """Entry of ``provider.apiGateway.request.schemas``.

    The schema stays raw here and is validated entry by entry during
    normalization, so one malformed schema does not reject the config.
    """

    schema_: Annotated[dict[str, Any], Field(alias="schema")]
    name: str | None = None
    description: str | None = None


class ApiGatewayRequest(_ServerlessModel):
    """``provider.apiGateway.request`` section."""

    schemas: dict[str, ApiGatewaySchema] | None = None


class ApiGateway(_ServerlessModel):
    """``provider.apiGateway`` section."""

    request: ApiGatewayRequest | None = None


class Provider(_ServerlessModel):
    """``provider`` section."""

    name: str | None = None
    api_gateway: Annotated[ApiGateway | None, Field(default=None, alias="apiGateway")]


class Custom(_ServerlessModel):
    """``custom`` section; ``typespecGenerator`` is validated by GeneratorOptions."""

    typespec_generator: Annotated[
        dict[str, Any] | None,
        Field(default=None, alias="typespecGenerator"),
    ]


class ServerlessConfig(_ServerlessModel):
    """Root model of a serverless configuration.

    Example:
    -------
        ```yaml
        service: users
        provider:
          name: aws
        functions:
          createUser:
            handler: handler.create
            events:
              - http:
                  method: post
                  path: users
        ```

    """

    service: str | dict[str, Any] | None = None
    provider: Provider = Field(default_factory=Provider)
    functions: dict[str, FunctionDefinition] = Field(default_factory=dict)
    custom: Custom | None = None

    def get_all_functions(self) -> list[str]:
        """Return function names in declaration order."""
        return list(self.functions)

    def get_all_events_in_function(self, function_name: str) -> list[FunctionEvent]:
        """Return the events of a function (empty if the function is unknown)."""
        function = self.functions.get(function_name)
        if function is None:
            return []
        return function.events

    @property
    def api_gateway_schemas(self) -> dict[str, ApiGatewaySchema]:
        """Provider-level named schemas, or an empty dict."""
        api_gateway = self.provider.api_gateway
        if api_gateway is None or api_gateway.request is None:
            return {}
        return api_gateway.request.schemas or {}
