"""Ordered route table with first-match lookup.

Lookup is a linear scan in registration order. The first route whose
method equals the request method and whose pattern matches the whole
path wins, so a later route with the same method and template is never
reachable (shadowed). Route tables are expected to hold tens of routes.
"""

import logging
from collections.abc import Callable
from typing import Any

from finch.routing.pattern import compile_path, extract_params
from finch.routing.route import Route, RouteMatch

logger = logging.getLogger("finch.routing")


class RouteTable:
    """Ordered collection of routes, sealed before serving.

    Usage::

        table = RouteTable()
        table.get("/users/:id", get_user)
        table.seal()
        match = table.match("GET", "/users/42")
    """

    __slots__ = ("_routes", "_sealed")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._sealed = False

    def add(self, method: str, path: str, handler: Callable[..., Any]) -> Route:
        """Compile *path* and append a route. Must be called before seal()."""
        if self._sealed:
            msg = "Cannot add routes after the route table is sealed."
            raise RuntimeError(msg)

        route = Route(
            method=method.upper(),
            path=path,
            pattern=compile_path(path),
            handler=handler,
        )
        self._routes.append(route)
        logger.debug("Registered %s %s", route.method, route.path)
        return route

    def get(self, path: str, handler: Callable[..., Any]) -> Route:
        return self.add("GET", path, handler)

    def post(self, path: str, handler: Callable[..., Any]) -> Route:
        return self.add("POST", path, handler)

    def put(self, path: str, handler: Callable[..., Any]) -> Route:
        return self.add("PUT", path, handler)

    def delete(self, path: str, handler: Callable[..., Any]) -> Route:
        return self.add("DELETE", path, handler)

    @property
    def routes(self) -> tuple[Route, ...]:
        """All registered routes in registration order."""
        return tuple(self._routes)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._sealed = True

    def match(self, method: str, path: str) -> RouteMatch | None:
        """Return the first route matching *method* and *path*, or ``None``."""
        for route in self._routes:
            if route.method == method and route.pattern.match(path) is not None:
                return RouteMatch(route=route, path_params=extract_params(path, route.pattern))
        return None

    def __len__(self) -> int:
        return len(self._routes)
