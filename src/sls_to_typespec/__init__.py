"""sls-to-typespec: Generator of TypeSpec definitions from Serverless Framework configuration.

This package provides tools for:
- Loading and validating serverless.yml / JSON configuration
- Normalizing HTTP functions and API Gateway schemas into a canonical IR
- Lowering JSON Schemas into a structural TypeSpec IR
- Emitting TypeSpec (main.tsp) and the matching tspconfig.yaml

Quick Start:
    >>> from sls_to_typespec.models import load_serverless_config
    >>> from sls_to_typespec.generator import generate_typespec
    >>>
    >>> config = load_serverless_config("serverless.yml")
    >>> print(generate_typespec(config))

Modules:
    models: Pydantic models for the serverless configuration
    ir: Intermediate Representation data structures
    transform: Config normalization, schema conversion and IR building
    emitters: TypeSpec text and tspconfig.yaml rendering
    cli: Command-line interface
"""

__version__ = "0.1.0"
