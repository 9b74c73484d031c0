"""Emitters for the final stage of the pipeline: TypeSpec IR to files.

Output:
    main.tsp: the service envelope (import, using, @service, namespace)
        followed by operations, then models and aliases
    tspconfig.yaml: emits OpenAPI 3 through @typespec/openapi3

Primary Classes:
    TypeSpecEmitter: Renders TypeSpec IR as TypeSpec text
    TypeSpecWriter: Writes main.tsp and tspconfig.yaml to a directory

Example:
-------
    >>> from sls_to_typespec.emitters import TypeSpecWriter
    >>> from sls_to_typespec.transform import build_serverless_ir, build_typespec_ir
    >>>
    >>> ir_list = build_typespec_ir(build_serverless_ir(config))
    >>> TypeSpecWriter().write(ir_list, Path("typespec"))
"""

from sls_to_typespec.emitters.tspconfig import render_tspconfig
from sls_to_typespec.emitters.typespec_emitter import (
    TypeSpecEmitter,
    emit_alias,
    emit_ir,
    emit_model,
    emit_operation,
    emit_typespec,
    render_type,
)
from sls_to_typespec.emitters.writer import CONFIG_FILE, MAIN_FILE, TypeSpecWriter

__all__ = [
    "CONFIG_FILE",
    "MAIN_FILE",
    "TypeSpecEmitter",
    "TypeSpecWriter",
    "emit_alias",
    "emit_ir",
    "emit_model",
    "emit_operation",
    "emit_typespec",
    "render_tspconfig",
    "render_type",
]
