"""Per-invocation dispatcher.

One call resolves one request into one ``ResponseEnvelope``:

    OPTIONS       -> preflight answer from the CORS policy alone
    route match   -> handler -> success or error envelope -> CORS headers
    no match      -> 404 envelope -> CORS headers

Nothing escapes as an exception except cancellation, which is left to
propagate to the caller.
"""

import logging
from typing import Any

from finch._internal.invoke import invoke, invoke_sync
from finch.cors import CORSPolicy
from finch.errors import HandlerError
from finch.http.request import Request
from finch.http.response import ResponseEnvelope
from finch.routing.route import RouteMatch
from finch.routing.router import RouteTable
from finch.server.errors import (
    bad_request_response,
    error_response,
    internal_error_response,
    not_found_response,
)
from finch.server.negotiation import success_response

logger = logging.getLogger("finch.server")

PREFLIGHT_METHOD = "OPTIONS"


class Dispatcher:
    """Routes requests through a sealed table and a CORS policy.

    Holds no per-request state, so one instance may serve concurrent
    invocations as long as the table and policy are not modified.
    """

    __slots__ = ("cors", "routes")

    def __init__(self, routes: RouteTable, cors: CORSPolicy) -> None:
        self.routes = routes
        self.cors = cors

    def dispatch(self, request: Request, context: Any = None) -> ResponseEnvelope:
        """Handle *request* synchronously, driving async handlers to completion."""
        if request.method == PREFLIGHT_METHOD:
            return self.cors.preflight(request)

        match = self.routes.match(request.method, request.path)
        if match is None:
            return self._not_found(request)

        try:
            result = invoke_sync(match.route.handler, context, request, match.path_params)
        except HandlerError as exc:
            result = exc
        except Exception:
            return self._internal_error(request, match)
        return self._finish(request, match, result)

    async def dispatch_async(self, request: Request, context: Any = None) -> ResponseEnvelope:
        """Handle *request* inside a running event loop.

        Cancellation of the calling task reaches the handler unchanged.
        """
        if request.method == PREFLIGHT_METHOD:
            return self.cors.preflight(request)

        match = self.routes.match(request.method, request.path)
        if match is None:
            return self._not_found(request)

        try:
            result = await invoke(match.route.handler, context, request, match.path_params)
        except HandlerError as exc:
            result = exc
        except Exception:
            return self._internal_error(request, match)
        return self._finish(request, match, result)

    def malformed_event(self, exc: Exception) -> ResponseEnvelope:
        """400 for a runtime event that could not be parsed into a Request.

        No origin can be trusted from such an event, so CORS falls back
        to the wildcard.
        """
        logger.warning("400 malformed event: %s", exc)
        return self.cors.apply(bad_request_response(), Request(method="", path=""))

    # -- Envelope assembly --

    def _finish(self, request: Request, match: RouteMatch, result: Any) -> ResponseEnvelope:
        if isinstance(result, HandlerError):
            logger.debug(
                "%d %s %s (%s): %s",
                result.status, request.method, request.path, match.route.path, result.message,
            )
            response = error_response(result)
        else:
            response = success_response(result)
        return self.cors.apply(response, request)

    def _not_found(self, request: Request) -> ResponseEnvelope:
        logger.debug("404 %s %s", request.method, request.path)
        return self.cors.apply(not_found_response(), request)

    def _internal_error(self, request: Request, match: RouteMatch) -> ResponseEnvelope:
        logger.exception("500 %s %s (%s)", request.method, request.path, match.route.path)
        return self.cors.apply(internal_error_response(), request)
