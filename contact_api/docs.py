"""OpenAPI document for the contact API.

FastAPI already derives the document from the route decorators (summary,
request and response models, status codes, documented error responses).
This module pins the output to OpenAPI 3.0 and builds it once, at app
creation, so ``/api-docs/openapi.json`` serves a fixed document.
"""

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

TITLE = "Contact API"
VERSION = "1.0.0"
DESCRIPTION = "API to manage contacts: first name, last name, email and phone."
OPENAPI_VERSION = "3.0.3"

DOCS_URL = "/api-docs"
OPENAPI_URL = "/api-docs/openapi.json"


def _to_nullable(node):
    """Rewrite JSON Schema ``anyOf: [X, {"type": "null"}]`` as 3.0 ``nullable``."""
    if isinstance(node, list):
        return [_to_nullable(item) for item in node]
    if not isinstance(node, dict):
        return node

    node = {key: _to_nullable(value) for key, value in node.items()}
    variants = node.get("anyOf")
    if not isinstance(variants, list) or {"type": "null"} not in variants:
        return node

    rest = [v for v in variants if v != {"type": "null"}]
    node.pop("anyOf")
    if len(rest) == 1 and "$ref" in rest[0]:
        # siblings of $ref are ignored in 3.0
        node["allOf"] = rest
    elif len(rest) == 1:
        node.update(rest[0])
    else:
        node["anyOf"] = rest
    node["nullable"] = True
    return node


def build_openapi(app: FastAPI) -> dict:
    schema = get_openapi(
        title=TITLE,
        version=VERSION,
        openapi_version=OPENAPI_VERSION,
        description=DESCRIPTION,
        routes=app.routes,
    )
    return _to_nullable(schema)


def install_openapi(app: FastAPI) -> dict:
    """Generate the document now and pin it on the app."""
    app.openapi_schema = build_openapi(app)
    return app.openapi_schema
