"""Finch — a request router for event-driven HTTP invocations.

Maps each invocation's (method, path) to a handler, extracts ``:name``
path parameters, applies a CORS allow-list, and returns a uniform
``{statusCode, headers, body}`` envelope. One invocation per request;
no server loop.

Basic usage::

    from finch import App, HandlerError

    app = App()

    @app.get("/users/:id")
    def get_user(ctx, request, params):
        if params["id"] != "42":
            raise HandlerError(404, "not found")
        return {"id": params["id"]}

    handler = app  # handler(event, context) -> dict
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "CORSPolicy",
    "ConfigurationError",
    "FinchError",
    "HandlerError",
    "MalformedEventError",
    "Request",
    "ResponseEnvelope",
    "RouteTable",
    "RouterConfig",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import finch`` fast while providing a clean top-level API.
    """
    if name == "App":
        from finch.app import App

        return App

    if name == "RouterConfig":
        from finch.config import RouterConfig

        return RouterConfig

    if name == "CORSPolicy":
        from finch.cors import CORSPolicy

        return CORSPolicy

    if name == "Request":
        from finch.http.request import Request

        return Request

    if name == "ResponseEnvelope":
        from finch.http.response import ResponseEnvelope

        return ResponseEnvelope

    if name == "RouteTable":
        from finch.routing.router import RouteTable

        return RouteTable

    if name in ("ConfigurationError", "FinchError", "HandlerError", "MalformedEventError"):
        from finch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
