"""Cross-origin access policy.

Decides whether an origin is allowed and computes the access-control
headers from the configured allow-lists. The policy always advertises
the full configured method and header lists; it never echoes what a
preflight asked for.
"""

import logging

from finch.config import WILDCARD, RouterConfig
from finch.http.request import Request
from finch.http.response import ResponseEnvelope

logger = logging.getLogger("finch.cors")

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"

# Header key the hosting layer is expected to deliver in lowercase
ORIGIN_KEY = "origin"

_LIST_SEPARATOR = ", "


class CORSPolicy:
    """CORS evaluator bound to one ``RouterConfig``.

    Usage::

        policy = CORSPolicy(RouterConfig(origins=["https://example.com"]))
        policy.is_origin_allowed("https://example.com")  # True
        response = policy.apply(response, request)
    """

    __slots__ = ("allow_headers", "allow_methods", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config = config or RouterConfig()
        # Joined once; the config cannot change after construction
        self.allow_methods = _LIST_SEPARATOR.join(self.config.methods)
        self.allow_headers = _LIST_SEPARATOR.join(self.config.headers)

    def is_origin_allowed(self, origin: str | None) -> bool:
        """Wildcard allows everything; otherwise exact, case-sensitive match."""
        if self.config.allows_any_origin:
            return True
        return origin is not None and origin in self.config.origins

    def preflight(self, request: Request) -> ResponseEnvelope:
        """Answer an OPTIONS request from the policy alone.

        Rejected origins get a bare 403 with no CORS headers, which the
        browser treats as a blocked request.
        """
        origin = request.headers.get(ORIGIN_KEY)
        if not self.is_origin_allowed(origin):
            logger.debug("Preflight rejected for origin %r on %s", origin, request.path)
            return ResponseEnvelope(status_code=403, body="Origin not allowed")

        return ResponseEnvelope(
            status_code=200,
            headers={
                # Wildcard policy with no origin header: nothing to echo
                ALLOW_ORIGIN: origin or WILDCARD,
                ALLOW_METHODS: self.allow_methods,
                ALLOW_HEADERS: self.allow_headers,
            },
        )

    def apply(self, response: ResponseEnvelope, request: Request) -> ResponseEnvelope:
        """Attach access-control headers to a non-preflight response."""
        origin = request.headers.get(ORIGIN_KEY)
        if not origin or not self.is_origin_allowed(origin):
            origin = WILDCARD

        return response.with_headers(
            {
                ALLOW_ORIGIN: origin,
                ALLOW_METHODS: self.allow_methods,
                ALLOW_HEADERS: self.allow_headers,
            }
        )
