"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from sls_to_typespec.models import ServerlessConfig


@pytest.fixture
def create_user_data() -> dict[str, Any]:
    """Return a configuration with a single createUser function."""
    return {
        "service": "users",
        "provider": {"name": "aws"},
        "functions": {
            "createUser": {
                "handler": "handler.create",
                "events": [
                    {
                        "http": {
                            "method": "post",
                            "path": "users",
                            "request": {
                                "schemas": {
                                    "application/json": {
                                        "title": "CreateUserRequest",
                                        "type": "object",
                                        "properties": {
                                            "name": {"type": "string"},
                                            "email": {"type": "string"},
                                        },
                                        "required": ["name", "email"],
                                    },
                                },
                            },
                            "documentation": {
                                "methodResponses": [
                                    {
                                        "statusCode": 201,
                                        "responseModels": {
                                            "application/json": {
                                                "title": "CreateUserResponse",
                                                "type": "object",
                                                "properties": {"id": {"type": "string"}},
                                                "required": ["id"],
                                            },
                                        },
                                    },
                                ],
                            },
                        },
                    },
                ],
            },
        },
    }


@pytest.fixture
def users_api_data() -> dict[str, Any]:
    """Return a configuration with provider schemas, path params and skipped functions."""
    return {
        "service": "users",
        "provider": {
            "name": "aws",
            "apiGateway": {
                "request": {
                    "schemas": {
                        "user": {
                            "name": "User",
                            "schema": {
                                "type": "object",
                                "properties": {
                                    "id": {"type": "string", "description": "User id"},
                                    "age": {"type": "integer"},
                                },
                                "required": ["id"],
                            },
                        },
                        "broken": {
                            "schema": {
                                "allOf": [
                                    {"type": "object", "properties": {"a": {"type": "string"}}},
                                    {"type": "string"},
                                ],
                            },
                        },
                    },
                },
            },
        },
        "functions": {
            "get-user": {
                "handler": "handler.get",
                "events": [
                    {
                        "http": {
                            "method": "GET",
                            "path": "/users/{id}",
                            "request": {"parameters": {"paths": {"id": True}}},
                            "documentation": {
                                "summary": "Get a user",
                                "pathParams": [{"name": "id", "description": "The user id"}],
                                "methodResponses": [
                                    {
                                        "statusCode": 200,
                                        "responseModels": {"application/json": "user"},
                                    },
                                    {
                                        "statusCode": 404,
                                        "responseModels": {"application/json": "broken"},
                                    },
                                ],
                            },
                        },
                    },
                ],
            },
            "on_upload": {
                "handler": "handler.upload",
                "events": [{"s3": {"bucket": "uploads", "event": "s3:ObjectCreated:*"}}],
            },
            "hello": {
                "handler": "handler.hello",
                "events": [{"http": "GET hello"}],
            },
        },
    }


@pytest.fixture
def create_user_config(create_user_data: dict[str, Any]) -> ServerlessConfig:
    """Return the createUser configuration as a model."""
    return ServerlessConfig.model_validate(create_user_data)


@pytest.fixture
def users_api_config(users_api_data: dict[str, Any]) -> ServerlessConfig:
    """Return the users API configuration as a model."""
    return ServerlessConfig.model_validate(users_api_data)


@pytest.fixture
def write_yaml(tmp_path: Path) -> Callable[[dict[str, Any], str], Path]:
    """Return a helper writing a dictionary to a YAML file in tmp_path."""

    def _write(data: dict[str, Any], name: str = "serverless.yml") -> Path:
        path = tmp_path / name
        path.write_text(yaml.safe_dump(data, sort_keys=False), encoding="utf-8")
        return path

    return _write
