"""Immutable invocation request.

Built once per invocation from the runtime's event and never changed.
"""

from __future__ import annotations

import base64
import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from finch.errors import MalformedEventError


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable request for a single invocation.

    ``headers`` is looked up with exact keys. The CORS policy reads the
    origin from the lowercase ``"origin"`` key; ``from_event`` lowercases
    header names so events from any API Gateway flavour satisfy that.
    """

    method: str
    path: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""
    query: Mapping[str, str] = field(default_factory=dict)
    raw_event: Mapping[str, Any] | None = field(default=None, repr=False, compare=False)

    @property
    def origin(self) -> str | None:
        """The ``origin`` header, if present under its lowercase key."""
        return self.headers.get("origin")

    def json(self) -> Any:
        """Decode the body as JSON. Raises ``ValueError`` on malformed input."""
        return json_module.loads(self.body)

    @classmethod
    def from_event(cls, event: Mapping[str, Any]) -> Request:
        """Build a Request from a function URL / HTTP API event.

        Falls back to the REST API (v1) keys ``httpMethod`` and ``path``.
        Header names are lowercased and ``None`` header values dropped.
        Raises ``MalformedEventError`` for events of the wrong shape or
        undecodable base64 bodies.
        """
        event = _mapping(event, "event")
        context = _mapping(event.get("requestContext"), "requestContext")
        http = _mapping(context.get("http"), "requestContext.http")
        method = _string(http.get("method") or event.get("httpMethod") or "", "method")
        path = _string(event.get("rawPath") or http.get("path") or event.get("path") or "/", "path")

        headers = {
            str(name).lower(): str(value)
            for name, value in _mapping(event.get("headers"), "headers").items()
            if value is not None
        }
        query = dict(_mapping(event.get("queryStringParameters"), "queryStringParameters"))

        body = _string(event.get("body") or "", "body")
        if body and event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True).decode("utf-8", errors="replace")
            except ValueError as exc:
                msg = f"event body is not valid base64: {exc}"
                raise MalformedEventError(msg) from exc

        return cls(
            method=method.upper(),
            path=path,
            headers=headers,
            body=body,
            query=query,
            raw_event=event,
        )


def _mapping(value: Any, name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        msg = f"event {name} must be an object, got {type(value).__name__}"
        raise MalformedEventError(msg)
    return value


def _string(value: Any, name: str) -> str:
    if not isinstance(value, str):
        msg = f"event {name} must be a string, got {type(value).__name__}"
        raise MalformedEventError(msg)
    return value
