"""Tests for finch.http.request — Request and event parsing."""

import base64

import pytest

from finch.errors import MalformedEventError
from finch.http.request import Request


def _function_url_event(**overrides: object) -> dict[str, object]:
    event: dict[str, object] = {
        "version": "2.0",
        "rawPath": "/users/42",
        "headers": {"origin": "https://example.com", "content-type": "application/json"},
        "queryStringParameters": {"expand": "posts"},
        "requestContext": {"http": {"method": "GET", "path": "/users/42"}},
        "body": None,
        "isBase64Encoded": False,
    }
    event.update(overrides)
    return event


class TestRequest:
    def test_defaults(self) -> None:
        request = Request(method="GET", path="/")
        assert request.headers == {}
        assert request.body == ""
        assert request.query == {}
        assert request.raw_event is None

    def test_origin(self) -> None:
        request = Request(method="GET", path="/", headers={"origin": "https://a.com"})
        assert request.origin == "https://a.com"

    def test_origin_requires_lowercase_key(self) -> None:
        request = Request(method="GET", path="/", headers={"Origin": "https://a.com"})
        assert request.origin is None

    def test_json_body(self) -> None:
        request = Request(method="POST", path="/", body='{"name": "alice"}')
        assert request.json() == {"name": "alice"}

    def test_json_body_malformed(self) -> None:
        with pytest.raises(ValueError):
            Request(method="POST", path="/", body="{nope").json()


class TestFromEvent:
    def test_function_url_event(self) -> None:
        event = _function_url_event()
        request = Request.from_event(event)

        assert request.method == "GET"
        assert request.path == "/users/42"
        assert request.origin == "https://example.com"
        assert request.query == {"expand": "posts"}
        assert request.body == ""
        assert request.raw_event is event

    def test_header_names_lowercased(self) -> None:
        request = Request.from_event(
            _function_url_event(headers={"Origin": "https://example.com", "X-Trace": "1"})
        )
        assert request.headers == {"origin": "https://example.com", "x-trace": "1"}

    def test_method_uppercased(self) -> None:
        request = Request.from_event(
            _function_url_event(requestContext={"http": {"method": "post"}})
        )
        assert request.method == "POST"

    def test_rest_api_v1_event(self) -> None:
        event = {
            "httpMethod": "DELETE",
            "path": "/items/7",
            "headers": {"Origin": "https://example.com"},
            "queryStringParameters": None,
            "body": "",
        }
        request = Request.from_event(event)

        assert request.method == "DELETE"
        assert request.path == "/items/7"
        assert request.origin == "https://example.com"
        assert request.query == {}

    def test_base64_body(self) -> None:
        encoded = base64.b64encode(b'{"a": 1}').decode("ascii")
        request = Request.from_event(_function_url_event(body=encoded, isBase64Encoded=True))
        assert request.json() == {"a": 1}

    def test_plain_body(self) -> None:
        request = Request.from_event(_function_url_event(body="hello"))
        assert request.body == "hello"

    def test_missing_headers(self) -> None:
        request = Request.from_event(_function_url_event(headers=None))
        assert request.headers == {}

    def test_missing_path_defaults_to_root(self) -> None:
        request = Request.from_event({"httpMethod": "GET"})
        assert request.path == "/"

    def test_none_header_values_dropped(self) -> None:
        request = Request.from_event(
            _function_url_event(headers={"Origin": None, "X-Trace": "1"})
        )
        assert request.headers == {"x-trace": "1"}
        assert request.origin is None


class TestFromEventMalformed:
    def test_invalid_base64_body(self) -> None:
        with pytest.raises(MalformedEventError, match="not valid base64"):
            Request.from_event(_function_url_event(body="abc", isBase64Encoded=True))

    def test_non_object_request_context(self) -> None:
        with pytest.raises(MalformedEventError, match="requestContext must be an object"):
            Request.from_event(_function_url_event(requestContext="nope"))

    def test_non_object_headers(self) -> None:
        with pytest.raises(MalformedEventError, match="headers must be an object"):
            Request.from_event(_function_url_event(headers=["origin"]))

    def test_non_string_method(self) -> None:
        with pytest.raises(MalformedEventError, match="method must be a string"):
            Request.from_event(_function_url_event(requestContext={"http": {"method": 5}}))

    def test_non_object_event(self) -> None:
        with pytest.raises(MalformedEventError, match="event must be an object"):
            Request.from_event("GET /")  # type: ignore[arg-type]

    def test_is_value_error(self) -> None:
        assert issubclass(MalformedEventError, ValueError)
