"""Load API description documents and detect their version."""

import json
from pathlib import Path

import yaml

from swagger2har.exceptions import DocumentLoadError

from .refs import OPENAPI_3, SWAGGER_2


def detect_version(document) -> str | None:
    """Return SWAGGER_2, OPENAPI_3 or None for an already parsed document."""
    if not isinstance(document, dict):
        return None
    if document.get("swagger") == SWAGGER_2:
        return SWAGGER_2
    openapi = document.get("openapi")
    if isinstance(openapi, str) and openapi.startswith(OPENAPI_3):
        return OPENAPI_3
    return None


def load_document(file_path: Path) -> dict:
    """Read a YAML or JSON document file into a dict.

    YAML is tried first since it also accepts JSON; plain JSON parsing is the
    fallback for files the YAML loader rejects (tabs in strings and the like).
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentLoadError(f"Cannot read {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as yaml_error:
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, ValueError):
            raise DocumentLoadError(f"{file_path} is neither valid YAML nor JSON: {yaml_error}") from yaml_error

    if not isinstance(data, dict):
        raise DocumentLoadError(f"{file_path} does not contain a mapping at the top level")
    return data
