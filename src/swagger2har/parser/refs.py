"""Lookup of ``$ref`` pointers into a document's shared-object tables."""

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class RefKind(Enum):
    """Kind of shared object a reference points to."""

    SCHEMA = "schema"
    PARAMETER = "parameter"
    REQUEST_BODY = "requestBody"


SWAGGER_2 = "2.0"
OPENAPI_3 = "3"

# version -> kind -> (pointer prefix, path to the table in the document)
_TABLES: dict[str, dict[RefKind, tuple[str, tuple[str, ...]]]] = {
    SWAGGER_2: {
        RefKind.SCHEMA: ("#/definitions/", ("definitions",)),
        RefKind.PARAMETER: ("#/parameters/", ("parameters",)),
    },
    OPENAPI_3: {
        RefKind.SCHEMA: ("#/components/schemas/", ("components", "schemas")),
        RefKind.PARAMETER: ("#/components/parameters/", ("components", "parameters")),
        RefKind.REQUEST_BODY: ("#/components/requestBodies/", ("components", "requestBodies")),
    },
}


class RefResolver:
    """Resolves references for one document of a given version."""

    def __init__(self, document: dict, version: str):
        if version not in _TABLES:
            raise ValueError(f"Unknown document version: {version}")
        self.document = document
        self.version = version

    @property
    def context(self) -> dict:
        """Root mapping handed to the schema instantiator."""
        if self.version == SWAGGER_2:
            return {"definitions": self.document.get("definitions") or {}}
        return {"components": self.document.get("components") or {}}

    def lookup(self, kind: RefKind, ref: str) -> dict | None:
        """Return the object ``ref`` names, or None if it cannot be found."""
        entry = _TABLES[self.version].get(kind)
        if entry is None or not isinstance(ref, str):
            return None
        prefix, table_path = entry
        if not ref.startswith(prefix):
            return None

        table = self.document
        for key in table_path:
            table = table.get(key) if isinstance(table, dict) else None
        if not isinstance(table, dict):
            return None

        name = ref[len(prefix):].replace("~1", "/").replace("~0", "~")
        found = table.get(name)
        return found if isinstance(found, dict) else None

    def resolve(self, kind: RefKind, obj: dict | None) -> dict:
        """Follow ``obj``'s ``$ref`` if it has one; missing targets become ``{}``."""
        if not isinstance(obj, dict):
            return {}
        if "$ref" not in obj:
            return obj
        found = self.lookup(kind, obj["$ref"])
        if found is None:
            logger.debug("Unresolved %s reference: %s", kind.value, obj["$ref"])
            return {}
        return found
