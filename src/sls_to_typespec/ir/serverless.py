"""Canonical declarations produced from a serverless configuration.

These sit between the raw configuration models and the TypeSpec IR:
every supported http function becomes a ServerlessFunctionIR, every
named schema a ServerlessModelIR. Bodies are either an inline
JSONSchema or a string key of a model declaration.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from sls_to_typespec.models.json_schema import JSONSchema


class HttpMethod(str, Enum):
    """HTTP methods that map to TypeSpec operation decorators."""

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"
    PATCH = "patch"


class ModelSource(Enum):
    """Where a model declaration comes from.

    Provider-level schemas that fail to convert are skipped with a
    warning; schemas declared by a function are load-bearing.
    """

    PROVIDER = "provider"
    FUNCTION = "function"


@dataclass(frozen=True)
class ServerlessModelIR:
    """A named schema.

    Attributes
    ----------
        key: Lookup key used by string references.
        name: Display name of the generated model or alias.
        schema: The JSON schema.
        source: Provider table or function-level titled schema.

    """

    key: str
    name: str
    schema: JSONSchema
    source: ModelSource = ModelSource.PROVIDER


@dataclass(frozen=True)
class RequestBodyIR:
    """Request body: inline schema or key of a model declaration."""

    schema: JSONSchema | str
    description: str | None = None


@dataclass(frozen=True)
class PathParamIR:
    """A path parameter."""

    required: bool = True
    description: str | None = None


@dataclass(frozen=True)
class RequestIR:
    """Request part of an http event."""

    body: RequestBodyIR | None = None
    path: dict[str, PathParamIR] | None = None


@dataclass(frozen=True)
class ResponseIR:
    """A documented response: status code and inline schema or model key.

    Attributes
    ----------
        status_code: HTTP status code.
        body: Inline schema or model key.
        is_array: The body is an array of the referenced model.

    """

    status_code: int
    body: JSONSchema | str
    is_array: bool = False


@dataclass(frozen=True)
class HttpEventIR:
    """The http event of a function.

    Attributes
    ----------
        method: HTTP method.
        path: Route, always starting with ``/``.
        summary: Optional summary (emitted as @summary).
        description: Optional description (emitted as @doc).
        request: Optional body and path parameters.
        responses: Responses in source order; a bare string is a model
            key with status code 200.

    """

    method: HttpMethod
    path: str
    summary: str | None = None
    description: str | None = None
    request: RequestIR | None = None
    responses: tuple[ResponseIR | str, ...] | None = None


@dataclass(frozen=True)
class ServerlessFunctionIR:
    """An http function."""

    name: str
    event: HttpEventIR


ServerlessIR = ServerlessModelIR | ServerlessFunctionIR
