"""Success envelopes — maps a handler's return value to a response.

Every success value is JSON-serialized at status 200. Handlers have no
way to pick a different success status.
"""

import json as json_module
import logging
from typing import Any

from finch.http.response import ResponseEnvelope
from finch.server.errors import serialization_error_response

logger = logging.getLogger("finch.server")

JSON_CONTENT_TYPE = "application/json"


def success_response(value: Any) -> ResponseEnvelope:
    """Serialize *value* into a 200 JSON envelope.

    Values the encoder rejects (arbitrary objects, bytes, NaN, cycles)
    produce a 500 envelope instead of an empty or malformed body.
    """
    try:
        body = json_module.dumps(value, allow_nan=False)
    except (TypeError, ValueError, RecursionError):
        logger.exception("Failed to serialize handler result of type %s", type(value).__name__)
        return serialization_error_response()

    return ResponseEnvelope(
        status_code=200,
        headers={"Content-Type": JSON_CONTENT_TYPE},
        body=body,
    )
