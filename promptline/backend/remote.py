# backend/remote.py

import httpx
from typing import Optional

from ..errors import RemoteError
from .base import Backend


class RemoteBackend(Backend):
    """Forwards instructions to a promptline server's /api/generate route."""

    def __init__(self, endpoint: str, timeout: float = 30.0, logger=None,
                 client: Optional[httpx.AsyncClient] = None):
        super().__init__(logger=logger)
        self.endpoint = endpoint.rstrip('/')
        self.timeout = timeout
        self.client = client or httpx.AsyncClient(timeout=timeout)
        if self.logger:
            self.logger.debug(f"Initialized remote backend: {self.endpoint}")

    async def generate(self, instruction: str) -> Optional[str]:
        """
        POST the instruction and return the server's text.

        Raises:
            RemoteError: With a readable message for timeouts, connection
                failures and error responses.
        """
        try:
            response = await self.client.post(
                f"{self.endpoint}/api/generate",
                json={'instruction': instruction},
                timeout=self.timeout
            )
            response.raise_for_status()
            return response.json().get('text')

        except httpx.TimeoutException as e:
            self._fail("Timeout", f"Request timeout: {e}")
            raise RemoteError("Request timed out") from e

        except httpx.HTTPStatusError as e:
            message = _error_from_response(e.response) or f"HTTP {e.response.status_code}"
            self._fail(f"HTTP {e.response.status_code}", f"{message}: {e}")
            raise RemoteError(message) from e

        except httpx.RequestError as e:
            self._fail("Connection error", f"Connection error: {e}")
            raise RemoteError("Failed to connect") from e

    def _fail(self, last_error: str, log_msg: str) -> None:
        self._last_error = last_error
        if self.logger:
            self.logger.error(log_msg)

    async def aclose(self) -> None:
        if self.client:
            await self.client.aclose()


def _error_from_response(response: httpx.Response) -> Optional[str]:
    """Pull the server's error message out of a JSON error body."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and isinstance(body.get('error'), str):
        return body['error']
    return None
