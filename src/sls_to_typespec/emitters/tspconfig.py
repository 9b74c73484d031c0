"""Render the tspconfig.yaml that accompanies the generated main.tsp."""

from __future__ import annotations

import yaml

from sls_to_typespec.models.options import GeneratorOptions

OPENAPI_EMITTER = "@typespec/openapi3"


def render_tspconfig(options: GeneratorOptions | None = None) -> str:
    """Render a tspconfig.yaml emitting OpenAPI into ``{output-dir}/schema``."""
    options = options or GeneratorOptions()
    config = {
        "emit": [OPENAPI_EMITTER],
        "options": {
            OPENAPI_EMITTER: {
                "emitter-output-dir": "{output-dir}/schema",
                "openapi-versions": [options.openapi_version],
            },
        },
    }
    return yaml.safe_dump(config, sort_keys=False, default_flow_style=False)
