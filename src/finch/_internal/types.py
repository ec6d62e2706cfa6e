"""Shared type aliases used across finch modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler, called as handler(context, request, params)
Handler: TypeAlias = Callable[..., Any]
