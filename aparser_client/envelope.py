"""ABOUTME: Request and response envelopes for the A-Parser API.

Every call is wrapped as ``{"action", "password", "data"?}`` and every reply
comes back as ``{"success", "data"?, "msg"?}``. This module converts between
those envelopes and bytes on the wire.
"""

import json
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, StrictBool, ValidationError

from .errors import ServiceError, TransportError

logger = logging.getLogger(__name__)


class ResponseEnvelope(BaseModel):
    """Decoded service reply."""

    success: StrictBool
    data: Any = None
    msg: Any = None


def build_request(
    action: str,
    password: str,
    data: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the request envelope as a plain dict.

    ``data`` is left out entirely when it is empty or None.
    """
    request: Dict[str, Any] = {
        "action": action,
        "password": password,
    }
    if data:
        request["data"] = data
    return request


def encode_request(
    action: str,
    password: str,
    data: Optional[Dict[str, Any]] = None,
) -> bytes:
    """Serialize a request envelope to compact UTF-8 JSON.

    Args:
        action: Wire action name
        password: Shared secret
        data: Action parameters (omitted when empty)

    Returns:
        Encoded request body
    """
    request = build_request(action, password, data)
    return json.dumps(request, ensure_ascii=False, separators=(",", ":")).encode("utf-8")


def decode_request(body: bytes) -> Dict[str, Any]:
    """Parse an encoded request envelope back into a dict."""
    return json.loads(body.decode("utf-8"))


def decode_response(body: bytes) -> Any:
    """
    Validate a reply body and unwrap its payload.

    Args:
        body: Raw response bytes

    Returns:
        The ``data`` field, or True when the reply carries no payload

    Raises:
        TransportError: If the body is not a JSON response envelope
        ServiceError: If the service reported ``success: false``
    """
    try:
        payload = json.loads(body)
    except (ValueError, UnicodeDecodeError) as e:
        logger.error(f"Malformed response body: {e}")
        raise TransportError(f"Malformed response: {e}") from e

    if not isinstance(payload, dict):
        raise TransportError(
            f"Malformed response: expected JSON object, got {type(payload).__name__}"
        )

    try:
        envelope = ResponseEnvelope.model_validate(payload)
    except ValidationError as e:
        logger.error(f"Response envelope rejected: {e}")
        raise TransportError(f"Malformed response: {e}") from e

    if not envelope.success:
        raise ServiceError(None if envelope.msg is None else str(envelope.msg))

    if envelope.data is None:
        return True
    return envelope.data
