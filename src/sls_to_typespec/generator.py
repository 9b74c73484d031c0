"""One-call pipeline from serverless configuration to TypeSpec text."""

from __future__ import annotations

from sls_to_typespec.emitters.typespec_emitter import TypeSpecEmitter
from sls_to_typespec.ir.typespec import TypeSpecIR
from sls_to_typespec.models.options import GeneratorOptions
from sls_to_typespec.models.serverless import ServerlessConfig
from sls_to_typespec.transform.builder import build_typespec_ir
from sls_to_typespec.transform.normalizer import build_serverless_ir


def build_ir(config: ServerlessConfig, options: GeneratorOptions | None = None) -> list[TypeSpecIR]:
    """Normalize the configuration and build the TypeSpec IR."""
    options = options or GeneratorOptions.from_config(config)
    declarations = build_serverless_ir(config, options.array_response_mode)
    return build_typespec_ir(declarations)


def generate_typespec(config: ServerlessConfig, options: GeneratorOptions | None = None) -> str:
    """Generate main.tsp content for a serverless configuration.

    Args:
    ----
        config: The validated serverless configuration.
        options: Generator options; defaults to ``custom.typespecGenerator``.

    Returns:
    -------
        TypeSpec source text.

    """
    options = options or GeneratorOptions.from_config(config)
    return TypeSpecEmitter(options).emit(build_ir(config, options))
