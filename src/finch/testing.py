"""Test client for finch applications.

Uses the same Request and ResponseEnvelope types as production. Header
names are lowercased the way ``Request.from_event`` does it.
"""

import json as json_module
from typing import Any

from finch.app import App
from finch.http.request import Request
from finch.http.response import ResponseEnvelope


class TestClient:
    """Synchronous test client for finch applications.

    Usage::

        client = TestClient(app)
        response = client.get("/users/42", headers={"Origin": "https://example.com"})
        assert response.status_code == 200
    """

    __test__ = False  # Tell pytest this is not a test class

    __slots__ = ("app", "context")

    def __init__(self, app: App, context: Any = None) -> None:
        self.app = app
        self.context = context

    def get(self, path: str, *, headers: dict[str, str] | None = None) -> ResponseEnvelope:
        """Send a GET request."""
        return self.request("GET", path, headers=headers)

    def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: str = "",
        json: Any = None,
    ) -> ResponseEnvelope:
        """Send a POST request. *json* is serialized into the body."""
        return self.request("POST", path, headers=headers, body=body, json=json)

    def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: str = "",
        json: Any = None,
    ) -> ResponseEnvelope:
        """Send a PUT request."""
        return self.request("PUT", path, headers=headers, body=body, json=json)

    def delete(self, path: str, *, headers: dict[str, str] | None = None) -> ResponseEnvelope:
        """Send a DELETE request."""
        return self.request("DELETE", path, headers=headers)

    def options(self, path: str, *, origin: str | None = None) -> ResponseEnvelope:
        """Send a CORS preflight, optionally from *origin*."""
        headers = {"origin": origin} if origin is not None else None
        return self.request("OPTIONS", path, headers=headers)

    def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: str = "",
        json: Any = None,
    ) -> ResponseEnvelope:
        """Send an arbitrary request through the app."""
        request_headers = {name.lower(): value for name, value in (headers or {}).items()}
        if json is not None:
            body = json_module.dumps(json)
            request_headers.setdefault("content-type", "application/json")

        request = Request(
            method=method.upper(),
            path=path,
            headers=request_headers,
            body=body,
        )
        return self.app.handle(request, self.context)
