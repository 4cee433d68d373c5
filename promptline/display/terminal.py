# display/terminal.py
import sys
import shutil
import asyncio
from dataclasses import dataclass
from typing import Callable, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.validation import Validator, ValidationError
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.key_binding import KeyBindings


@dataclass
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


class DisplayTerminal:
    """Low-level terminal operations and the prompt form."""

    def __init__(self, on_copy: Optional[Callable[[], object]] = None):
        """Initialize terminal state and key bindings."""
        self._cursor_visible = True
        self._prompt_prefix = "> "
        self._reset_style = "\033[0m"
        self._on_copy = on_copy
        self.key_bindings = self._setup_key_bindings()
        self.prompt_session = PromptSession(
            key_bindings=self.key_bindings, complete_while_typing=False, multiline=True
        )

    class NonEmptyValidator(Validator):
        def validate(self, document):
            if not document.text.strip():
                raise ValidationError(message="Please enter a prompt", cursor_position=0)

    def set_copy_handler(self, on_copy: Callable[[], object]) -> None:
        self._on_copy = on_copy

    def _setup_key_bindings(self) -> KeyBindings:
        """Setup key shortcuts: Enter submits, Alt-Enter adds a line, Ctrl-Y copies."""
        kb = KeyBindings()

        @kb.add("enter")
        def _(event):
            event.current_buffer.validate_and_handle()

        @kb.add("escape", "enter")
        def _(event):
            event.current_buffer.insert_text("\n")

        @kb.add("c-y")
        def _(event):
            if self._on_copy:
                self._on_copy()

        return kb

    @property
    def width(self) -> int:
        """Return terminal width."""
        return self.get_size().columns

    @property
    def height(self) -> int:
        """Return terminal height."""
        return self.get_size().lines

    def get_size(self) -> TerminalSize:
        """Get terminal dimensions."""
        size = shutil.get_terminal_size()
        return TerminalSize(columns=size.columns, lines=size.lines)

    def _is_terminal(self) -> bool:
        """Return True if stdout is a terminal."""
        return sys.stdout.isatty()

    def _manage_cursor(self, show: bool) -> None:
        """Toggle cursor visibility based on 'show' flag."""
        if self._cursor_visible != show and self._is_terminal():
            self._cursor_visible = show
            sys.stdout.write("\033[?25h" if show else "\033[?25l")
            sys.stdout.flush()

    def show_cursor(self) -> None:
        self._manage_cursor(True)

    def hide_cursor(self) -> None:
        self._manage_cursor(False)

    def reset(self) -> None:
        """Reset terminal: show cursor and restore default styling."""
        self.write(self._reset_style)
        self.show_cursor()

    def clear_screen(self) -> None:
        """Clear the terminal screen and reset cursor position."""
        if self._is_terminal():
            sys.stdout.write("\033[2J\033[H")
            sys.stdout.flush()

    def write(self, text: str = "", newline: bool = False) -> None:
        """Write text to stdout; append newline if requested."""
        try:
            sys.stdout.write(text)
            if newline:
                sys.stdout.write("\n")
            sys.stdout.flush()
        except IOError:
            pass  # Ignore pipe errors

    def write_line(self, text: str = "") -> None:
        self.write(text, newline=True)

    def invalidate(self) -> None:
        """Redraw the prompt form if it is on screen."""
        app = self.prompt_session.app
        if app.is_running:
            app.invalidate()

    async def get_user_input(
        self,
        default_text: str = "",
        toolbar: Optional[Callable[[], str]] = None,
    ) -> str:
        """
        Show the prompt form and return the submitted text.

        The previous draft is pre-filled so it survives a submission.
        Empty or whitespace-only input is rejected by the validator.

        Raises:
            EOFError: On Ctrl-D.
            KeyboardInterrupt: On Ctrl-C.
        """
        self.show_cursor()
        try:
            return await self.prompt_session.prompt_async(
                FormattedText([("class:prompt", self._prompt_prefix)]),
                default=default_text,
                validator=self.NonEmptyValidator(),
                validate_while_typing=False,
                bottom_toolbar=toolbar,
            )
        finally:
            self.write(self._reset_style)
            self.hide_cursor()

    async def yield_to_event_loop(self) -> None:
        """Yield control to the event loop briefly."""
        await asyncio.sleep(0)
