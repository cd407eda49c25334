"""swagger2har - turn OpenAPI/Swagger documents into HAR request entries."""

__version__ = "0.1.0"

from swagger2har.converter import convert, convert_file
from swagger2har.parser.base import FormPostData, HarRequest, Param, TextPostData

__all__ = [
    "convert",
    "convert_file",
    "HarRequest",
    "Param",
    "TextPostData",
    "FormPostData",
]
