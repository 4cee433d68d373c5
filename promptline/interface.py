# interface.py

import asyncio
from typing import Optional

from .logger import Logger
from .config import TransformerConfig
from .display import Display, toolbar_text
from .backend import Backend
from .transformer import PromptTransformer, TransformerState

class Interface:
    """
    Main entry point that assembles our Display, Backend, and PromptTransformer.
    """

    def __init__(self, config: Optional[TransformerConfig] = None,
                 endpoint: Optional[str] = None,
                 logging_enabled: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize components with an optional endpoint and logging.

        Args:
            config: Provider settings. Defaults to the environment.
            endpoint: URL of a promptline server. If None, embedded mode is used.
            logging_enabled: Enable detailed logging.
            log_file: Path to log file. Use "-" for stdout.
        """
        self._init_components(config, endpoint, logging_enabled, log_file)

    def _init_components(self, config: Optional[TransformerConfig],
                         endpoint: Optional[str],
                         logging_enabled: bool,
                         log_file: Optional[str]) -> None:
        try:
            self.logger = Logger(__name__, logging_enabled, log_file)

            self.config = config or TransformerConfig.from_env({'endpoint': endpoint})
            if endpoint:
                self.config.endpoint = endpoint

            self.display = Display()
            self.backend = Backend.create(self.config, logger=self.logger)
            self.transformer = PromptTransformer(
                self.backend.generate,
                logger=self.logger,
                copy_reset_delay=self.config.copy_reset_delay
            )
            self.transformer.subscribe(self._on_state_change)
            self.display.terminal.set_copy_handler(self.transformer.copy_output)

            self.is_remote_mode = self.config.endpoint is not None
            if self.is_remote_mode:
                self.logger.debug(f"Initialized in remote mode with endpoint: {self.config.endpoint}")
            else:
                self.logger.debug(f"Initialized in embedded mode with provider: {self.config.provider}")

        except Exception as e:
            if hasattr(self, 'logger'):
                self.logger.error(f"Init error: {e}")
            raise

    def _on_state_change(self, state: TransformerState) -> None:
        # Keeps the toolbar's copy confirmation in step with the timer
        self.display.terminal.invalidate()

    def _toolbar(self) -> str:
        return toolbar_text(self.transformer.state)

    async def run(self) -> None:
        """Show the form until the user quits, running one submission per entry."""
        terminal = self.display.terminal
        try:
            while True:
                await self.display.update(self.transformer.state)
                try:
                    text = await terminal.get_user_input(
                        default_text=self.transformer.state.input_text,
                        toolbar=self._toolbar
                    )
                except EOFError:
                    break
                loader = self.display.create_dot_loader()
                await loader.run_with_loading(self.transformer.submit(text))
        finally:
            await self.backend.aclose()

    def start(self) -> None:
        """Run the terminal form until Ctrl-D or Ctrl-C."""
        try:
            asyncio.run(self.run())
        except KeyboardInterrupt:
            print("\nExiting...")
        finally:
            self.display.terminal.reset()
