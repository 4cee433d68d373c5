# transformer/actions.py

import asyncio
from typing import Awaitable, Callable, List, Optional

from ..config import COPY_RESET_DELAY
from ..errors import ClipboardError, EmptyResponseError
from .clipboard import Clipboard
from .instruction import NO_RESPONSE_MESSAGE, build_instruction, error_message
from .state import Failed, Idle, Pending, RequestState, Succeeded, TransformerState

Generate = Callable[[str], Awaitable[Optional[str]]]
Listener = Callable[[TransformerState], None]


class PromptTransformer:
    """
    Owns the form state and its two actions: submit and copy.

    The outbound call is injected as ``generate``, an async callable taking
    the instruction string and returning the provider's text.
    """

    def __init__(
        self,
        generate: Generate,
        clipboard: Optional[Clipboard] = None,
        logger=None,
        copy_reset_delay: float = COPY_RESET_DELAY,
    ):
        self.generate = generate
        self.clipboard = clipboard or Clipboard()
        self.logger = logger
        self.copy_reset_delay = copy_reset_delay
        self.state = TransformerState()

        self._listeners: List[Listener] = []
        self._submission = 0
        self._copy_reset: Optional[asyncio.TimerHandle] = None

    def subscribe(self, listener: Listener) -> None:
        """Call listener with the state after every change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            listener(self.state)

    def _set_request(self, request: RequestState) -> None:
        self.state.request = request
        self._notify()

    def set_input(self, text: str) -> None:
        """Replace the draft prompt."""
        self.state.input_text = text
        self._notify()

    async def submit(self, text: Optional[str] = None) -> RequestState:
        """
        Send the draft prompt for improvement and record the outcome.

        Args:
            text: New draft to submit. Defaults to the current input.

        Returns:
            The outcome of this submission. Outcomes of submissions that were
            overtaken by a newer one are returned but never stored.
        """
        if text is not None:
            self.set_input(text)
        prompt = self.state.input_text
        if not prompt.strip():
            if self.logger:
                self.logger.debug("Ignoring submission of an empty prompt")
            return self.state.request

        self._submission += 1
        token = self._submission
        self._set_request(Pending())

        try:
            outcome = await self._request(prompt)
        except asyncio.CancelledError:
            if token == self._submission:
                self._set_request(Idle())
            raise

        if token != self._submission:
            if self.logger:
                self.logger.debug(f"Discarding outcome of superseded submission #{token}")
            return outcome
        self._set_request(outcome)
        return outcome

    async def _request(self, prompt: str) -> RequestState:
        instruction = build_instruction(prompt)
        if self.logger:
            self.logger.debug(f"Requesting improvement for prompt of {len(prompt)} chars")
        try:
            text = await self.generate(instruction)
            if not text:
                raise EmptyResponseError(NO_RESPONSE_MESSAGE)
            return Succeeded(text)
        except Exception as e:
            if self.logger:
                self.logger.error(f"Error: {e}")
            return Failed(error_message(e))

    def copy_output(self) -> bool:
        """
        Copy the current output and show the confirmation for a fixed delay.

        Must be called from inside the running event loop. Returns False when
        there is nothing to copy or the clipboard write failed.
        """
        text = self.state.transformed_text
        if not text:
            return False
        try:
            self.clipboard.copy(text)
        except ClipboardError as e:
            if self.logger:
                self.logger.warning(str(e))
            return False

        if self._copy_reset is not None:
            self._copy_reset.cancel()
        loop = asyncio.get_running_loop()
        self._copy_reset = loop.call_later(self.copy_reset_delay, self._clear_copy_confirmation)
        self.state.copy_confirmed = True
        self._notify()
        return True

    def _clear_copy_confirmation(self) -> None:
        self._copy_reset = None
        self.state.copy_confirmed = False
        self._notify()
