"""ABOUTME: HTTP transport for the A-Parser API - one POST per call with standard error handling."""

import logging
from typing import Optional, Protocol

import httpx

from .errors import HTTPStatusCodes, TransportError

logger = logging.getLogger(__name__)

# The service reads the body as text regardless of declared type
CONTENT_TYPE = "text/plain; charset=UTF-8"


class Transport(Protocol):
    """Delivers an encoded request and returns the raw reply body."""

    def send(self, url: str, body: bytes) -> bytes:
        """POST ``body`` to ``url`` unmodified.

        Raises:
            TransportError: On any delivery failure or non-2xx status
        """
        ...


class HttpxTransport:
    """Transport backed by a synchronous httpx client."""

    def __init__(
        self,
        timeout: Optional[float] = None,
        client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds (None waits indefinitely)
            client: Pre-built httpx client; the transport will not close it
        """
        self._owns_client = client is None
        self.client = client or httpx.Client(timeout=timeout, follow_redirects=False)

    def send(self, url: str, body: bytes) -> bytes:
        headers = {
            "Content-Type": CONTENT_TYPE,
            "Content-Length": str(len(body)),
        }

        try:
            response = self.client.post(url, content=body, headers=headers)
        except httpx.TimeoutException as e:
            logger.error(f"A-Parser request to {url} timed out: {e}")
            raise TransportError(f"Request timed out: {e}") from e
        except httpx.HTTPError as e:
            logger.error(f"A-Parser request to {url} failed: {e}")
            raise TransportError(f"Request failed: {e}") from e

        if not HTTPStatusCodes.is_success(response.status_code):
            if HTTPStatusCodes.is_auth_error(response.status_code):
                logger.error(f"A-Parser rejected access with HTTP {response.status_code}")
            else:
                logger.error(f"A-Parser returned HTTP {response.status_code}")
            raise TransportError(
                f"Unexpected HTTP status {response.status_code}",
                status_code=response.status_code,
            )

        return response.content

    def close(self):
        """Close the HTTP client if this transport created it."""
        if self._owns_client:
            self.client.close()
