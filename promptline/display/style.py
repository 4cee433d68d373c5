# display/style.py

from typing import List, Optional

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.align import Align
from rich.text import Text

from ..transformer.state import TransformerState, View

TITLE = "Prompt Engineer"
HEADING = "Craft the Perfect Prompt"
INTRO = (
    "Unleash the power of AI with our Prompt Engineer. Transform your ideas into "
    "finely-tuned prompts that yield exceptional results. Whether you're a writer, "
    "researcher, or creative professional, elevate your AI interactions with "
    "expertly crafted prompts tailored to your needs."
)
RESULT_TITLE = "Improved Version:"
COPY_HINT = "Ctrl-Y: Copy to Clipboard"
COPIED = "Copied!"
FORM_HINT = "Enter: Transform   Alt-Enter: New line   Ctrl-D: Quit"


def build_view(state: TransformerState) -> List[RenderableType]:
    """
    Return the panels shown under the form for a given state.

    Nothing is shown while idle or loading; the loader owns the screen
    while a request is pending.
    """
    view = state.view
    if view is View.ERROR:
        return [Panel(
            Text(state.error or ""),
            title="Error",
            title_align="left",
            border_style="red",
            style="red",
            padding=(0, 1),
        )]
    if view is View.SUCCESS:
        return [Panel(
            Text(state.transformed_text),
            title=RESULT_TITLE,
            title_align="left",
            subtitle=COPIED if state.copy_confirmed else COPY_HINT,
            subtitle_align="right",
            border_style="blue",
            padding=(1, 2),
        )]
    return []


def toolbar_text(state: TransformerState) -> str:
    """Status line under the prompt: copy confirmation, copy hint or form keys."""
    if state.copy_confirmed:
        return COPIED
    if state.view is View.SUCCESS:
        return f"{COPY_HINT}   {FORM_HINT}"
    return FORM_HINT


class DisplayStyle:
    """Renders rich panels to strings the terminal can write."""

    def __init__(self, terminal, color_system: Optional[str] = "truecolor"):
        self.terminal = terminal
        self.console = Console(
            force_terminal=color_system is not None,
            color_system=color_system,
            record=True,
        )

    def render(self, renderables: List[RenderableType]) -> str:
        """Capture renderables as text sized to the terminal."""
        with self.console.capture() as capture:
            for renderable in renderables:
                self.console.print(renderable, width=self.terminal.width)
        return capture.get()

    def format_preface(self) -> str:
        return self.render([Panel(
            Align.center(Text(INTRO)),
            title=HEADING,
            title_align="center",
            subtitle=TITLE,
            subtitle_align="right",
            border_style="dim yellow",
            padding=(1, 2),
            expand=True,
        )])

    def format_view(self, state: TransformerState) -> str:
        return self.render(build_view(state))
