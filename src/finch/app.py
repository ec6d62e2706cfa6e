"""The finch application: route registration, CORS setup, and entry points."""

import threading
from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import Any

from finch._internal.types import Handler
from finch.config import RouterConfig
from finch.cors import CORSPolicy
from finch.errors import MalformedEventError
from finch.http.request import Request
from finch.http.response import ResponseEnvelope
from finch.routing.route import Route
from finch.routing.router import RouteTable
from finch.server.dispatcher import Dispatcher


class App:
    """The finch application.

    Mutable during setup (route registration, CORS configuration).
    Frozen when the first request is handled; any later registration or
    configuration change raises ``RuntimeError``.

    Usage::

        app = App(RouterConfig(origins=["https://example.com"]))

        @app.get("/users/:id")
        def get_user(ctx, request, params):
            return {"id": params["id"]}

        handler = app  # runtime entry point: handler(event, context)

    Thread safety:
        Setup is single-threaded (registration at import time). The freeze
        transition uses a Lock + double-check so exactly one thread seals
        the route table, even when the runtime invokes the app
        concurrently on its first requests.
    """

    __slots__ = ("_config", "_dispatcher", "_freeze_lock", "_frozen", "_table")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self._config: RouterConfig = config or RouterConfig()
        self._table = RouteTable()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set during _freeze()
        self._dispatcher: Dispatcher | None = None

    # -- Configuration --

    @property
    def config(self) -> RouterConfig:
        """The CORS configuration. Read-only; change it with ``configure_cors``."""
        return self._config

    def configure_cors(
        self,
        *,
        origins: Iterable[str] | None = None,
        methods: Iterable[str] | None = None,
        headers: Iterable[str] | None = None,
    ) -> None:
        """Replace parts of the CORS policy. Only allowed before serving."""
        self._check_not_frozen()
        changes: dict[str, Any] = {}
        if origins is not None:
            changes["origins"] = origins
        if methods is not None:
            changes["methods"] = methods
        if headers is not None:
            changes["headers"] = headers
        self._config = replace(self._config, **changes)

    # -- Route registration --

    def add_route(
        self, method: str, path: str, handler: Handler | None = None
    ) -> Any:
        """Register *handler* for *method* and *path*.

        Without *handler*, returns a decorator::

            app.add_route("GET", "/health", health)

            @app.add_route("PATCH", "/users/:id")
            def patch_user(ctx, request, params): ...

        Templates are compiled immediately, so a malformed one raises
        ``ConfigurationError`` at registration.
        """
        if handler is None:

            def decorator(func: Handler) -> Handler:
                self.add_route(method, path, func)
                return func

            return decorator

        self._check_not_frozen()
        self._table.add(method, path, handler)
        return handler

    def get(self, path: str, handler: Handler | None = None) -> Any:
        return self.add_route("GET", path, handler)

    def post(self, path: str, handler: Handler | None = None) -> Any:
        return self.add_route("POST", path, handler)

    def put(self, path: str, handler: Handler | None = None) -> Any:
        return self.add_route("PUT", path, handler)

    def delete(self, path: str, handler: Handler | None = None) -> Any:
        return self.add_route("DELETE", path, handler)

    def route(
        self, path: str, *, methods: list[str] | None = None
    ) -> Callable[[Handler], Handler]:
        """Register a handler for several methods via decorator.

        Args:
            path: Route template. Use ``:name`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
        """

        def decorator(func: Handler) -> Handler:
            for method in methods or ["GET"]:
                self.add_route(method, path, func)
            return func

        return decorator

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes in registration (and lookup) order."""
        return self._table.routes

    # -- Entry points --

    def handle(self, request: Request, context: Any = None) -> ResponseEnvelope:
        """Dispatch one request synchronously."""
        return self._ensure_frozen().dispatch(request, context)

    async def handle_async(self, request: Request, context: Any = None) -> ResponseEnvelope:
        """Dispatch one request from inside a running event loop."""
        return await self._ensure_frozen().dispatch_async(request, context)

    def __call__(self, event: Mapping[str, Any], context: Any = None) -> dict[str, Any]:
        """Runtime handler: event dict in, response dict out.

        An event that cannot be parsed gets a 400 envelope instead of
        raising into the runtime.
        """
        dispatcher = self._ensure_frozen()
        try:
            request = Request.from_event(event)
        except MalformedEventError as exc:
            return dispatcher.malformed_event(exc).to_dict()
        return dispatcher.dispatch(request, context).to_dict()

    # -- Internal --

    def _ensure_frozen(self) -> Dispatcher:
        """Thread-safe freeze with double-check locking."""
        if self._dispatcher is not None:
            return self._dispatcher
        with self._freeze_lock:
            if self._dispatcher is None:
                self._freeze()
        assert self._dispatcher is not None
        return self._dispatcher

    def _freeze(self) -> None:
        """Seal the route table and bind the CORS policy.

        MUST only be called while holding _freeze_lock.
        """
        self._table.seal()
        self._dispatcher = Dispatcher(self._table, CORSPolicy(self._config))
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes and configure CORS before the first invocation."
            )
            raise RuntimeError(msg)
