"""Route and RouteMatch frozen dataclasses."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from finch.routing.pattern import PathPattern


@dataclass(frozen=True, slots=True)
class Route:
    """A registered (method, template, handler) entry.

    Created by ``RouteTable.add`` and never modified afterwards.
    """

    method: str
    path: str
    pattern: PathPattern
    handler: Callable[..., Any]


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    path_params: dict[str, str]
