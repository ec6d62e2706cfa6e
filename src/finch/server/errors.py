"""Error envelopes for handler failures and unmatched routes.

Error bodies are plain text prefixed with ``"Error: "``; no content
type is forced on them.
"""

from finch.errors import HandlerError
from finch.http.response import ResponseEnvelope

NOT_FOUND_BODY = "Route not found"


def error_response(error: HandlerError) -> ResponseEnvelope:
    """Map a ``HandlerError`` to its envelope."""
    return ResponseEnvelope(status_code=error.status, body=f"Error: {error.message}")


def not_found_response() -> ResponseEnvelope:
    return ResponseEnvelope(status_code=404, body=NOT_FOUND_BODY)


def internal_error_response() -> ResponseEnvelope:
    """500 for exceptions a handler raised without mapping them to a status."""
    return error_response(HandlerError(500, "Internal Server Error"))


def serialization_error_response() -> ResponseEnvelope:
    return error_response(HandlerError(500, "Response serialization failed"))


def bad_request_response() -> ResponseEnvelope:
    """400 for an invocation event the adapter could not parse."""
    return error_response(HandlerError(400, "Malformed event"))
