from swagger2har.parser.base import FormPostData, HarRequest, Param, TextPostData
from swagger2har.parser.common import encode_body, is_empty_body, iter_operations, placeholder


class TestHarRequest:
    def test_defaults(self):
        req = HarRequest(method="GET", url="http://localhost/a")
        assert req.headers == []
        assert req.query_string == []
        assert req.post_data is None

    def test_to_har_uses_aliases(self):
        req = HarRequest(
            method="POST",
            url="http://localhost/a",
            query_string=[Param(name="q", value="{{q}}")],
            post_data=TextPostData(mime_type="application/json", text="{}"),
        )
        assert req.to_har() == {
            "method": "POST",
            "url": "http://localhost/a",
            "headers": [],
            "queryString": [{"name": "q", "value": "{{q}}"}],
            "postData": {"mimeType": "application/json", "text": "{}"},
        }

    def test_built_from_har_field_names(self):
        data = {
            "method": "PUT",
            "url": "u",
            "headers": [],
            "queryString": [],
            "postData": {"mimeType": "application/x-www-form-urlencoded", "params": [{"name": "a", "value": "{{a}}"}]},
        }
        req = HarRequest(**data)
        assert isinstance(req.post_data, FormPostData)
        assert req.to_har() == data


class TestCommon:
    def test_placeholder(self):
        assert placeholder("id") == "{{id}}"

    def test_is_empty_body(self):
        assert is_empty_body(None)
        assert is_empty_body({})
        assert is_empty_body("")
        assert is_empty_body(0)
        assert is_empty_body(True)
        assert not is_empty_body({"a": 1})
        assert not is_empty_body([1])
        assert not is_empty_body("x")

    def test_encode_list_as_json(self):
        assert encode_body([1, 2]).text == "[1,2]"

    def test_encode_list_as_form(self):
        assert [p.name for p in encode_body(["a", "b"], "application/x-www-form-urlencoded").params] == ["0", "1"]

    def test_encode_boolean_text(self):
        assert encode_body(False).text == "false"

    def test_encode_none(self):
        assert encode_body(None) is None

    def test_iter_operations_filters_keys(self):
        item = {"summary": "s", "get": {}, "parameters": [], "$ref": "x", "TRACE": {}, "post": "bad"}
        assert [m for m, _ in iter_operations(item)] == ["get", "TRACE"]
