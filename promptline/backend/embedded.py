# backend/embedded.py

from typing import Any, Optional

from .base import Backend
from .generator import CLIENT_FACTORIES, GENERATORS


class EmbeddedBackend(Backend):
    """Calls the provider SDK in-process."""

    def __init__(self, config, logger=None):
        super().__init__(logger=logger)
        self.config = config
        self._client: Optional[Any] = None
        if self.logger:
            self.logger.debug(f"Initialized embedded backend: provider={config.provider}")

    def _lazy_init_client(self) -> Any:
        """Create the provider client when first needed."""
        if self._client is None:
            self._client = CLIENT_FACTORIES[self.config.provider](self.config, self.logger)
        return self._client

    async def generate(self, instruction: str) -> Optional[str]:
        try:
            client = self._lazy_init_client()
            return await GENERATORS[self.config.provider](client, instruction, self.config.model_id)
        except Exception as e:
            self._last_error = str(e)
            if self.logger:
                self.logger.error(f"Generation error: {e}")
            raise
