"""Swagger 2.0 document converter.

Turns every operation of a Swagger 2.0 document into a HarRequest. Request
bodies travel as ``body`` or ``formData`` parameters in this version.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from swagger2har.generator.instantiate import instantiate

from .base import FormPostData, HarRequest, Param, TextPostData
from .common import (
    JSON_MIME,
    encode_body,
    form_post_data,
    is_empty_body,
    iter_operations,
    merged_parameters,
    placeholder,
    placeholder_param,
)
from .refs import SWAGGER_2, RefKind, RefResolver

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"


@dataclass
class ClassifiedParameters:
    """Parameters of one operation, split by where they are sent."""

    url: str
    headers: list[Param] = field(default_factory=list)
    query: list[Param] = field(default_factory=list)
    form: dict[str, str] = field(default_factory=dict)
    body: Any = None


def convert_swagger(document: dict) -> list[HarRequest]:
    """Convert a Swagger 2.0 document into one HarRequest per operation."""
    resolver = RefResolver(document, SWAGGER_2)
    base_url = base_url_from_swagger(document)

    requests = []
    for path, path_item in (document.get("paths") or {}).items():
        if not isinstance(path_item, dict):
            continue
        shared = path_item.get("parameters") or []
        for method, operation in iter_operations(path_item):
            requests.append(
                _convert_operation(method, operation, f"{base_url}{path}", shared, resolver)
            )
    logger.debug("Converted %d Swagger 2.0 operations", len(requests))
    return requests


def base_url_from_swagger(document: dict) -> str:
    """Build ``scheme://host + basePath`` with the usual fallbacks."""
    schemes = document.get("schemes") or [DEFAULT_SCHEME]
    host = document.get("host") or DEFAULT_HOST
    base_path = document.get("basePath") or ""
    return f"{schemes[0]}://{host}{base_path}"


def classify_parameters(
    params: list,
    resolver: RefResolver,
    url: str,
    with_body: bool = True,
) -> ClassifiedParameters:
    """Sort parameters by location and substitute path placeholders into ``url``.

    ``body`` parameters are only instantiated when ``with_body`` is set.
    """
    result = ClassifiedParameters(url=url)

    for p in params:
        param = resolver.resolve(RefKind.PARAMETER, p)
        location = param.get("in")
        name = param.get("name")

        if location == "body":
            if with_body:
                result.body = _instantiate_body(param, resolver)
            continue
        if name is None:
            continue

        if location == "query":
            result.query.append(placeholder_param(name))
        elif location == "path":
            result.url = result.url.replace(f"{{{name}}}", placeholder(name), 1)
        elif location == "header":
            result.headers.append(placeholder_param(name))
        elif location == "formData":
            result.form[str(name)] = placeholder(name)

    return result


def build_post_data(classified: ClassifiedParameters) -> TextPostData | FormPostData | None:
    """Form fields take priority over an instantiated body parameter."""
    if classified.form:
        return form_post_data(classified.form.keys())
    if not is_empty_body(classified.body):
        return encode_body(classified.body, JSON_MIME)
    return None


def _instantiate_body(param: dict, resolver: RefResolver) -> Any:
    if "schema" in param:
        schema = resolver.resolve(RefKind.SCHEMA, param["schema"])
    else:
        # Legacy documents sometimes omit the schema; the name stands in for it.
        schema = param.get("name")
    return instantiate(schema, resolver.context)


def _convert_operation(
    method: str,
    operation: dict,
    url: str,
    shared: list,
    resolver: RefResolver,
) -> HarRequest:
    params = merged_parameters(operation, shared)
    classified = classify_parameters(params, resolver, url)

    return HarRequest(
        method=method,
        url=classified.url,
        headers=classified.headers,
        query_string=classified.query,
        post_data=build_post_data(classified),
    )
