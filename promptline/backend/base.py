# backend/base.py

from typing import Optional


class Backend:
    """Base class for the outbound text-generation call."""

    def __init__(self, logger=None):
        self.logger = logger
        self._last_error: Optional[str] = None

    @classmethod
    def create(cls, config, logger=None) -> 'Backend':
        """Return a RemoteBackend when an endpoint is configured, else an EmbeddedBackend."""
        from .embedded import EmbeddedBackend
        from .remote import RemoteBackend

        if config.endpoint:
            return RemoteBackend(config.endpoint, timeout=config.timeout, logger=logger)
        return EmbeddedBackend(config, logger=logger)

    async def generate(self, instruction: str) -> Optional[str]:
        """Turn an instruction into response text, raising on failure."""
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release any open connections."""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.aclose()
