"""Finch exception hierarchy.

Shared across the route table, dispatcher, and handlers so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class FinchError(Exception):
    """Base for all finch-specific errors."""


class ConfigurationError(FinchError):
    """Raised when a route template or router configuration is invalid.

    Always raised during registration, never while serving a request.
    """


class MalformedEventError(FinchError, ValueError):
    """Raised when a runtime event cannot be turned into a Request."""


@dataclass(eq=False)
class HandlerError(FinchError):
    """A handler failure that maps directly to an HTTP status code.

    Handlers either raise it or return it; the dispatcher turns it into
    an error envelope with body ``"Error: <message>"``::

        def get_user(ctx, request, params):
            user = users.get(params["id"])
            if user is None:
                raise HandlerError(404, "not found")
            return user

    Not frozen: the interpreter and ``contextlib`` assign
    ``__traceback__`` while the exception propagates.
    """

    status: int
    message: str = ""

    def __str__(self) -> str:
        if self.message:
            return f"{self.status}: {self.message}"
        return str(self.status)
