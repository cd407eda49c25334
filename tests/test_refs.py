import pytest

from swagger2har.parser.refs import OPENAPI_3, SWAGGER_2, RefKind, RefResolver

SWAGGER_DOC = {
    "swagger": "2.0",
    "definitions": {"Pet": {"type": "object"}, "a/b": {"type": "string"}},
    "parameters": {"limit": {"name": "limit", "in": "query"}},
}

OPENAPI_DOC = {
    "openapi": "3.0.0",
    "components": {
        "schemas": {"Pet": {"type": "object"}},
        "parameters": {"limit": {"name": "limit", "in": "query"}},
        "requestBodies": {"PetBody": {"content": {}}},
    },
}


class TestSwaggerLookup:
    def test_lookup_definition(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.lookup(RefKind.SCHEMA, "#/definitions/Pet") == {"type": "object"}

    def test_lookup_parameter(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.lookup(RefKind.PARAMETER, "#/parameters/limit")["name"] == "limit"

    def test_escaped_pointer_token(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.lookup(RefKind.SCHEMA, "#/definitions/a~1b") == {"type": "string"}

    def test_missing_returns_none(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.lookup(RefKind.SCHEMA, "#/definitions/Nope") is None
        assert resolver.lookup(RefKind.SCHEMA, "#/components/schemas/Pet") is None
        assert resolver.lookup(RefKind.REQUEST_BODY, "#/requestBodies/X") is None

    def test_missing_table_returns_none(self):
        resolver = RefResolver({"swagger": "2.0"}, SWAGGER_2)
        assert resolver.lookup(RefKind.PARAMETER, "#/parameters/limit") is None

    def test_context(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.context == {"definitions": SWAGGER_DOC["definitions"]}


class TestOpenApiLookup:
    def test_lookup_each_kind(self):
        resolver = RefResolver(OPENAPI_DOC, OPENAPI_3)
        assert resolver.lookup(RefKind.SCHEMA, "#/components/schemas/Pet") == {"type": "object"}
        assert resolver.lookup(RefKind.PARAMETER, "#/components/parameters/limit")["in"] == "query"
        assert resolver.lookup(RefKind.REQUEST_BODY, "#/components/requestBodies/PetBody") == {"content": {}}

    def test_context(self):
        resolver = RefResolver(OPENAPI_DOC, OPENAPI_3)
        assert resolver.context == {"components": OPENAPI_DOC["components"]}

    def test_context_without_components(self):
        assert RefResolver({"openapi": "3.0.0"}, OPENAPI_3).context == {"components": {}}


class TestResolve:
    def test_inline_object_returned_as_is(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        param = {"name": "q", "in": "query"}
        assert resolver.resolve(RefKind.PARAMETER, param) is param

    def test_reference_followed(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.resolve(RefKind.PARAMETER, {"$ref": "#/parameters/limit"})["name"] == "limit"

    def test_unresolved_becomes_empty(self):
        resolver = RefResolver(SWAGGER_DOC, SWAGGER_2)
        assert resolver.resolve(RefKind.PARAMETER, {"$ref": "#/parameters/nope"}) == {}
        assert resolver.resolve(RefKind.PARAMETER, None) == {}

    def test_unknown_version_rejected(self):
        with pytest.raises(ValueError):
            RefResolver({}, "1.2")
