"""Entry points: route a document to the converter for its version."""

import logging
from pathlib import Path

from swagger2har.exceptions import UnsupportedDocumentError
from swagger2har.parser.base import HarRequest
from swagger2har.parser.detect import detect_version, load_document
from swagger2har.parser.openapi import convert_openapi
from swagger2har.parser.refs import OPENAPI_3, SWAGGER_2
from swagger2har.parser.swagger import convert_swagger

logger = logging.getLogger(__name__)


def convert(document: dict) -> list[HarRequest]:
    """Convert a parsed Swagger 2.0 / OpenAPI 3.x document to HarRequests.

    Unrecognised documents yield an empty list.
    """
    version = detect_version(document)
    if version == SWAGGER_2:
        return convert_swagger(document)
    if version == OPENAPI_3:
        return convert_openapi(document)
    logger.debug("Unrecognised document version, nothing to convert")
    return []


def convert_file(file_path: Path, strict: bool = False) -> list[HarRequest]:
    """Load a YAML/JSON document from disk and convert it.

    Raises:
        DocumentLoadError: The file cannot be read or parsed.
        UnsupportedDocumentError: ``strict`` is set and the version is unknown.
    """
    document = load_document(file_path)
    if strict and detect_version(document) is None:
        raise UnsupportedDocumentError(
            f"{file_path} is neither Swagger 2.0 nor OpenAPI 3.x "
            f"(swagger={document.get('swagger')!r}, openapi={document.get('openapi')!r})"
        )
    return convert(document)
