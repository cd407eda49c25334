"""Example value generation from JSON Schema fragments.

Produces one value per schema: defaults win, enums give their first entry,
arrays get ``minItems`` elements and objects get every declared property.
``$ref`` pointers are looked up in a separate context mapping (the document's
``definitions`` or ``components``), so the schema itself is never touched.
"""

import copy
import logging
from numbers import Number
from typing import Any

logger = logging.getLogger(__name__)

PRIMITIVE_DEFAULTS: dict[str, Any] = {
    "string": "",
    "number": 0,
    "integer": 0,
    "boolean": False,
    "null": None,
}

# Marks a slot that received no value, as opposed to an explicit null.
_MISSING = object()


def instantiate(schema: Any, context: dict | None = None, required_only: bool = False) -> Any:
    """Return an example value conforming to ``schema``.

    Args:
        schema: JSON Schema fragment.
        context: Mapping that local ``#/...`` references are resolved against.
        required_only: Only instantiate properties listed in ``required``.

    Returns:
        A JSON-compatible value, or None when the schema yields nothing.
    """
    instantiator = SchemaInstantiator(context or {}, required_only=required_only)
    value = instantiator.visit(schema)
    return None if value is _MISSING else value


class SchemaInstantiator:
    """Walks a schema and builds the example value."""

    def __init__(self, context: dict, required_only: bool = False):
        self.context = context
        self.required_only = required_only
        self._expanding: list[str] = []

    def visit(self, schema: Any, current: Any = _MISSING) -> Any:
        """Instantiate ``schema``; ``current`` is the value already in the slot (used by allOf)."""
        if not isinstance(schema, dict) or not schema:
            return current

        schema_type = schema.get("type")
        if isinstance(schema_type, list):
            schema_type = schema_type[0] if schema_type else None

        if schema_type == "object" and isinstance(schema.get("properties"), dict):
            return self._visit_object(schema, current)
        if "allOf" in schema:
            for member in schema["allOf"]:
                current = self.visit(member, current)
            return current
        if "$ref" in schema:
            return self._visit_ref(schema["$ref"], current)
        if schema_type == "array":
            return self._visit_array(schema)
        if isinstance(schema.get("enum"), list) and schema["enum"]:
            return copy.deepcopy(schema["enum"][0])
        if schema_type == "object":
            return copy.deepcopy(schema["default"]) if isinstance(schema.get("default"), dict) else {}
        if schema_type in PRIMITIVE_DEFAULTS:
            return copy.deepcopy(schema.get("default", PRIMITIVE_DEFAULTS[schema_type]))
        return current

    def _visit_object(self, schema: dict, current: Any) -> dict:
        # Work on a copy; current may be a value taken from the document.
        result = dict(current) if isinstance(current, dict) else {}
        required = schema.get("required", [])
        for name, prop_schema in schema["properties"].items():
            if self.required_only and name not in required:
                continue
            value = self.visit(prop_schema, result.get(name, _MISSING))
            if value is not _MISSING:
                result[name] = value
        return result

    def _visit_array(self, schema: dict) -> list:
        min_items = schema.get("minItems")
        count = int(min_items) if isinstance(min_items, Number) and not isinstance(min_items, bool) else 0
        items = []
        for _ in range(count):
            value = self.visit(schema.get("items"))
            if value is not _MISSING:
                items.append(value)
        return items

    def _visit_ref(self, ref: str, current: Any) -> Any:
        if ref in self._expanding:
            logger.debug("Skipping recursive reference %s", ref)
            return current
        target = self._find_definition(ref)
        if target is None:
            logger.debug("Unresolvable schema reference %s", ref)
            return current
        self._expanding.append(ref)
        try:
            return self.visit(target, current)
        finally:
            self._expanding.pop()

    def _find_definition(self, ref: str) -> Any:
        """Follow a local JSON pointer (``#/a/b``) through the context."""
        if not ref.startswith("#/"):
            return None
        node: Any = self.context
        for token in ref[2:].split("/"):
            token = token.replace("~1", "/").replace("~0", "~")
            if not isinstance(node, dict) or token not in node:
                return None
            node = node[token]
        return node
