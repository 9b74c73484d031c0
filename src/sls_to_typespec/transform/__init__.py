"""Serverless configuration to TypeSpec IR transformation module.

The transformation process:
    1. Normalize the configuration into canonical declarations
       (provider schemas, titled inline schemas, one http event per function)
    2. Pass 1: convert every model declaration and register it by key
    3. Pass 2: build operations, resolving model keys through the registry

Primary Classes:
    ConfigNormalizer: serverless configuration -> canonical declarations
    TypeSpecIRBuilder: canonical declarations -> TypeSpec IR

Example:
-------
    >>> from sls_to_typespec.models import load_serverless_config
    >>> from sls_to_typespec.transform import build_serverless_ir, build_typespec_ir
    >>>
    >>> config = load_serverless_config("serverless.yml")
    >>> ir_list = build_typespec_ir(build_serverless_ir(config))
    >>> print(f"Declarations: {len(ir_list)}")
"""

from sls_to_typespec.transform.builder import (
    TypeSpecIRBuilder,
    build_model_ir,
    build_operation_ir,
    build_typespec_ir,
)
from sls_to_typespec.transform.normalizer import ConfigNormalizer, build_serverless_ir
from sls_to_typespec.transform.type_converter import (
    convert_type,
    extract_props,
    json_schema_to_typespec_ir,
)

__all__ = [
    "ConfigNormalizer",
    "TypeSpecIRBuilder",
    "build_model_ir",
    "build_operation_ir",
    "build_serverless_ir",
    "build_typespec_ir",
    "convert_type",
    "extract_props",
    "json_schema_to_typespec_ir",
]
