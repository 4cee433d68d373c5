# display/dot_loader.py

import asyncio
from typing import Awaitable, TypeVar

T = TypeVar("T")


class AsyncDotLoader:
    """
    Async dot-loading animation shown while a submission is pending.

    Takes the place of the submit label until the awaited work finishes,
    then erases itself.
    """
    def __init__(self, terminal, prompt: str = "Processing...", no_animation: bool = False,
                 interval: float = 0.4):
        """
        Args:
            terminal: DisplayTerminal instance for output
            prompt: Text to display before the dots
            no_animation: Whether to disable animation
            interval: Seconds between animation frames
        """
        self.terminal = terminal
        self.prompt = prompt.rstrip('.?!')
        self.no_anim = no_animation
        self.interval = interval

        self.dot_char = prompt[-1] if prompt.endswith(('?', '!')) else '.'
        self.dots = 0

        self.animation_complete = asyncio.Event()
        self.animation_task = None

    async def _animate(self):
        """Run the dot animation until completion."""
        try:
            while not self.animation_complete.is_set():
                self._write_loading_state()
                try:
                    await asyncio.wait_for(self.animation_complete.wait(), timeout=self.interval)
                except asyncio.TimeoutError:
                    pass
                self.dots = (self.dots + 1) % 4
        finally:
            self.animation_complete.set()

    def _write_loading_state(self):
        """Update the loading state display."""
        self.terminal.write(f"\r{' ' * 80}\r{self.prompt}{self.dot_char * self.dots}")

    async def run_with_loading(self, work: Awaitable[T]) -> T:
        """
        Animate while awaiting work and return its result.

        Exceptions from work propagate after the animation is cleared.
        """
        if not self.no_anim:
            self.animation_task = asyncio.create_task(self._animate())
        try:
            return await work
        finally:
            self.animation_complete.set()
            if self.animation_task:
                await self.animation_task
                self.terminal.write(f"\r{' ' * 80}\r")
