"""Helpers shared by the Swagger 2.0 and OpenAPI 3.x walkers.

Placeholder tokens, request body encoding and operation enumeration.
"""

import json
import logging
from typing import Any, Iterator

from .base import FormPostData, Param, TextPostData

logger = logging.getLogger(__name__)

JSON_MIME = "application/json"
FORM_MIME = "application/x-www-form-urlencoded"
TEXT_MIME = "text/plain"

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")


def iter_operations(path_item: dict) -> Iterator[tuple[str, dict]]:
    """Yield (method, operation) for each HTTP method key of a path item.

    Keys are kept in their original casing and document order; non-method
    keys such as ``parameters``, ``servers`` or ``x-*`` are skipped.
    """
    for key, operation in path_item.items():
        if not isinstance(key, str) or key.lower() not in HTTP_METHODS:
            continue
        if not isinstance(operation, dict):
            logger.debug("Skipping malformed %s operation", key)
            continue
        yield key, operation


def merged_parameters(operation: dict, shared: Any) -> list:
    """Operation parameters followed by path-level ones, duplicates kept."""
    own = operation.get("parameters") or []
    return list(own) + list(shared or [])


def placeholder(name: Any) -> str:
    """Return the ``{{name}}`` token substituted for a parameter value."""
    return f"{{{{{name}}}}}"


def placeholder_param(name: Any) -> Param:
    return Param(name=str(name), value=placeholder(name))


def form_post_data(names) -> FormPostData:
    """Build a form body with one placeholder entry per field name."""
    return FormPostData(mime_type=FORM_MIME, params=[placeholder_param(n) for n in names])


def is_empty_body(body: Any) -> bool:
    """Only non-empty objects, arrays and strings count as a body."""
    if isinstance(body, (dict, list, str)):
        return not body
    return True


def encode_body(body: Any, mime_type: str = JSON_MIME) -> TextPostData | FormPostData | None:
    """Encode an instantiated example value for the given media type.

    Objects and arrays become JSON text, or a field list for form bodies.
    Any other value falls back to text/plain.
    """
    if body is None:
        return None
    if isinstance(body, (dict, list)):
        if mime_type == FORM_MIME:
            keys = body.keys() if isinstance(body, dict) else range(len(body))
            return form_post_data(keys)
        return TextPostData(mime_type=JSON_MIME, text=json.dumps(body, separators=(",", ":"), ensure_ascii=False))
    if isinstance(body, bool):
        text = json.dumps(body)
    else:
        text = str(body)
    return TextPostData(mime_type=TEXT_MIME, text=text)
