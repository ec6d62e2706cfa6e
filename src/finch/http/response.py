"""Response envelope with chainable .with_*() transformation API.

Every request, whether success, handler error, CORS rejection, or
not-found, produces exactly one ResponseEnvelope. Each transformation
returns a new envelope.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class ResponseEnvelope:
    """Uniform ``{statusCode, headers, body}`` output of the dispatcher."""

    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str = ""

    # -- Chainable transformations --

    def with_status(self, status_code: int) -> ResponseEnvelope:
        """Return a new envelope with a different status code."""
        return replace(self, status_code=status_code)

    def with_header(self, name: str, value: str) -> ResponseEnvelope:
        """Return a new envelope with *name* set (replacing any existing value)."""
        return replace(self, headers={**self.headers, name: value})

    def with_headers(self, headers: Mapping[str, str]) -> ResponseEnvelope:
        """Return a new envelope with all of *headers* set."""
        return replace(self, headers={**self.headers, **headers})

    # -- Accessors --

    def header(self, name: str, default: str | None = None) -> str | None:
        """Return a header value by exact name."""
        return self.headers.get(name, default)

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json_module.loads(self.body)

    def to_dict(self) -> dict[str, Any]:
        """The dictionary shape the hosting runtime expects back."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body,
        }
