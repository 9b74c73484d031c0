"""Intermediate Representation (IR) models for serverless to TypeSpec conversion.

Two IR layers sit between the configuration models and the emitted text:

1. Canonical declarations (ServerlessModelIR / ServerlessFunctionIR):
   configuration normalized to one http event per function, with bodies
   kept as JSON schemas or model keys
2. TypeSpec IR (AliasIR / ModelIR / OperationIR): structural types ready
   to be printed, built from property types (PropType / PropIR)

All nodes are frozen dataclasses.
"""

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
    HttpIR,
    HttpResponseIR,
    ModelIR,
    OperationIR,
    TypeSpecIR,
    is_http_responses,
)

__all__ = [
    # Property types
    "ArrayType",
    "FormatType",
    "PrimitiveType",
    "PropIR",
    "PropsType",
    "PropType",
    "RefType",
    "UnionType",
    # Canonical declarations
    "HttpEventIR",
    "HttpMethod",
    "ModelSource",
    "PathParamIR",
    "RequestBodyIR",
    "RequestIR",
    "ResponseIR",
    "ServerlessFunctionIR",
    "ServerlessIR",
    "ServerlessModelIR",
    # TypeSpec declarations
    "AliasIR",
    "HttpIR",
    "HttpResponseIR",
    "ModelIR",
    "OperationIR",
    "TypeSpecIR",
    "is_http_responses",
]
