"""Exceptions raised at the file and command line boundary.

The converter itself never raises for odd documents; these cover loading
input from disk and the optional strict version check.
"""


class Swagger2HarError(Exception):
    """Base exception for all swagger2har errors."""


class DocumentLoadError(Swagger2HarError):
    """Raised when a document file cannot be read or is not a YAML/JSON mapping."""


class UnsupportedDocumentError(Swagger2HarError):
    """Raised in strict mode when a document is neither Swagger 2.0 nor OpenAPI 3.x."""
