# display/__init__.py

from .terminal import DisplayTerminal
from .style import DisplayStyle, build_view, toolbar_text
from .dot_loader import AsyncDotLoader
from .page import render_page

class Display:
    """
    Coordinates terminal display components.

    DisplayTerminal (base) → DisplayStyle → AsyncDotLoader
    """
    def __init__(self):
        """Initialize components in dependency order."""
        self.terminal = DisplayTerminal()
        self.style = DisplayStyle(terminal=self.terminal)

    def create_dot_loader(self, prompt: str = "Processing...", no_animation: bool = False) -> AsyncDotLoader:
        """Create and return a dot loader animation."""
        return AsyncDotLoader(self.terminal, prompt, no_animation)

    async def update(self, state) -> None:
        """Redraw the preface and the panel for the current state."""
        self.terminal.clear_screen()
        self.terminal.write(self.style.format_preface())
        self.terminal.write(self.style.format_view(state))
        await self.terminal.yield_to_event_loop()

__all__ = ['Display', 'DisplayTerminal', 'DisplayStyle', 'AsyncDotLoader',
           'build_view', 'toolbar_text', 'render_page']
