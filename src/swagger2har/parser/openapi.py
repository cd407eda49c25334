"""OpenAPI 3.x document converter.

Parameters only carry query, path and header values in this version; the
request body comes from the operation's ``requestBody``.
"""

import logging

from swagger2har.generator.instantiate import instantiate

from .base import FormPostData, HarRequest, TextPostData
from .common import (
    FORM_MIME,
    JSON_MIME,
    encode_body,
    iter_operations,
)
from .refs import OPENAPI_3, RefKind, RefResolver
from .swagger import ClassifiedParameters
from .swagger import classify_parameters as _classify_swagger_parameters

logger = logging.getLogger(__name__)

DEFAULT_SERVER = "http://localhost:8000"

# Checked in order, the first one present in ``content`` is used.
SUPPORTED_MEDIA_TYPES = (JSON_MIME, FORM_MIME)


def convert_openapi(document: dict) -> list[HarRequest]:
    """Convert an OpenAPI 3.x document into one HarRequest per operation."""
    resolver = RefResolver(document, OPENAPI_3)
    server = server_url(document)

    requests = []
    for path, path_item in (document.get("paths") or {}).items():
        if not isinstance(path_item, dict):
            continue
        for method, operation in iter_operations(path_item):
            # Path-item level parameters are not merged in for this version.
            params = operation.get("parameters") or []
            classified = classify_parameters(params, resolver, server + path)
            requests.append(
                HarRequest(
                    method=method.upper(),
                    url=classified.url,
                    headers=classified.headers,
                    query_string=classified.query,
                    post_data=resolve_post_data(operation, resolver),
                )
            )
    logger.debug("Converted %d OpenAPI 3.x operations", len(requests))
    return requests


def server_url(document: dict) -> str:
    """URL of the first declared server, or the local default."""
    servers = document.get("servers") or []
    first = servers[0] if servers and isinstance(servers[0], dict) else {}
    return first.get("url") or DEFAULT_SERVER


def classify_parameters(params: list, resolver: RefResolver, url: str) -> ClassifiedParameters:
    """Sort query/path/header parameters; bodies never come from parameters here.

    A stray ``formData`` location is still collected into ``form`` but is not
    turned into a request body.
    """
    return _classify_swagger_parameters(params, resolver, url, with_body=False)


def resolve_post_data(operation: dict, resolver: RefResolver) -> TextPostData | FormPostData | None:
    """Instantiate and encode the operation's request body, if it has a usable one."""
    if "requestBody" not in operation:
        return None
    request_body = resolver.resolve(RefKind.REQUEST_BODY, operation["requestBody"])
    content = request_body.get("content")
    if not isinstance(content, dict):
        return None

    mime_type = next((m for m in SUPPORTED_MEDIA_TYPES if m in content), None)
    if mime_type is None:
        logger.debug("No supported media type among %s", list(content))
        return None

    media = content[mime_type] or {}
    if not media.get("schema"):
        return None
    schema = resolver.resolve(RefKind.SCHEMA, media["schema"])
    if not schema:
        return None

    body = instantiate(schema, resolver.context)
    return encode_body(body, mime_type)
