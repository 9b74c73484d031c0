"""Pydantic models for the serverless configuration read by the generator.

Primary Entry Points:
    load_serverless_config(path): Load and validate a YAML/JSON file
    ServerlessConfig: Root model for the configuration
    JSONSchema: Request/response schema node
    GeneratorOptions: Title, namespace and OpenAPI settings

Model Hierarchy:
    ServerlessConfig (root)
    ├── Provider
    │   └── ApiGateway.request.schemas - named JSON schemas
    ├── FunctionDefinition (per function)
    │   └── FunctionEvent
    │       └── HttpEvent
    │           ├── HttpRequest - body schemas, path parameters
    │           └── HttpEventDocumentation - summary, pathParams, methodResponses
    └── Custom.typespecGenerator - GeneratorOptions
"""

from sls_to_typespec.models.json_schema import JSONSchema
from sls_to_typespec.models.loader import (
    LoaderError,
    load_serverless_config,
    load_yaml_file,
    validate_serverless_config,
)
from sls_to_typespec.models.options import ArrayResponseMode, GeneratorOptions
from sls_to_typespec.models.serverless import (
    JSON_CONTENT_TYPE,
    ApiGatewaySchema,
    FunctionDefinition,
    FunctionEvent,
    HttpEvent,
    HttpEventDocumentation,
    HttpRequest,
    MethodResponse,
    ServerlessConfig,
)

__all__ = [
    "JSONSchema",
    # Serverless models
    "JSON_CONTENT_TYPE",
    "ApiGatewaySchema",
    "FunctionDefinition",
    "FunctionEvent",
    "HttpEvent",
    "HttpEventDocumentation",
    "HttpRequest",
    "MethodResponse",
    "ServerlessConfig",
    # Options
    "ArrayResponseMode",
    "GeneratorOptions",
    # Loader utilities
    "LoaderError",
    "load_serverless_config",
    "load_yaml_file",
    "validate_serverless_config",
]
