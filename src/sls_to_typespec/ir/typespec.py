"""IR models for TypeSpec declarations: aliases, models and operations."""

from __future__ import annotations

from dataclasses import dataclass

from sls_to_typespec.ir.serverless import HttpMethod
from sls_to_typespec.ir.types import PropIR, PropType


@dataclass(frozen=True)
class AliasIR:
    """``alias <name> = <type>;``"""

    name: str
    type: PropType


@dataclass(frozen=True)
class ModelIR:
    """``model <name> { ... }``

    Attributes
    ----------
        name: Model name.
        props: Field name -> property, in source property order.

    """

    name: str
    props: dict[str, PropIR]


@dataclass(frozen=True)
class HttpResponseIR:
    """A response for a specific status code."""

    status_code: int
    body: PropType


@dataclass(frozen=True)
class HttpIR:
    """HTTP binding details of an operation.

    Attributes
    ----------
        params: Names of parameters bound to the route path (@path).

    """

    params: tuple[str, ...] = ()


@dataclass(frozen=True)
class OperationIR:
    """An HTTP operation.

    Attributes
    ----------
        name: Operation name (lower camel case).
        method: HTTP method decorator.
        route: Route decorator value.
        summary: Optional @summary text.
        description: Optional @doc text.
        parameters: Parameter name -> property.
        request_body: Body parameter (emitted as ``@body body``).
        return_type: A single type, a list of per-status-code responses,
            or None for ``void``.
        http: Path binding of parameters.

    """

    name: str
    method: HttpMethod
    route: str
    summary: str | None = None
    description: str | None = None
    parameters: dict[str, PropIR] | None = None
    request_body: PropIR | None = None
    return_type: PropType | tuple[HttpResponseIR, ...] | None = None
    http: HttpIR | None = None


TypeSpecIR = AliasIR | ModelIR | OperationIR


def is_http_responses(value: object) -> bool:
    """Check whether a return type is a list of per-status-code responses."""
    return isinstance(value, tuple) and all(isinstance(v, HttpResponseIR) for v in value)
