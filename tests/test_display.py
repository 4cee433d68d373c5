# test_display.py

import pytest
import asyncio
from unittest.mock import Mock

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from promptline.display.style import DisplayStyle, toolbar_text, COPIED, COPY_HINT, RESULT_TITLE
from promptline.display.dot_loader import AsyncDotLoader
from promptline.display.page import render_page
from promptline.transformer.state import TransformerState, Idle, Pending, Succeeded, Failed


class MockTerminal:
    def __init__(self):
        self.width = 80
        self.height = 24
        self.write = Mock()


class TestDisplayStyle:

    def setup_method(self):
        self.style = DisplayStyle(MockTerminal(), color_system=None)

    def test_idle_and_loading_show_no_panel(self):
        assert self.style.format_view(TransformerState()) == ""
        assert self.style.format_view(TransformerState(request=Pending())) == ""

    def test_success_panel(self):
        text = self.style.format_view(TransformerState(request=Succeeded("X marks the spot")))

        assert "X marks the spot" in text
        assert RESULT_TITLE in text
        assert COPY_HINT in text
        assert "Error" not in text

    def test_success_panel_shows_copy_confirmation(self):
        state = TransformerState(request=Succeeded("X"), copy_confirmed=True)
        text = self.style.format_view(state)

        assert COPIED in text
        assert COPY_HINT not in text

    def test_error_panel(self):
        text = self.style.format_view(TransformerState(request=Failed("quota exceeded")))

        assert "quota exceeded" in text
        assert "Error" in text
        assert RESULT_TITLE not in text

    def test_preface(self):
        assert "Craft the Perfect Prompt" in self.style.format_preface()


@pytest.mark.parametrize("state, expected", [
    (TransformerState(), "Enter: Transform"),
    (TransformerState(request=Succeeded("X")), COPY_HINT),
    (TransformerState(request=Succeeded("X"), copy_confirmed=True), COPIED),
])
def test_toolbar_text(state, expected):
    assert toolbar_text(state).startswith(expected)


class TestDotLoader:

    def setup_method(self):
        self.terminal = MockTerminal()

    @pytest.mark.asyncio
    async def test_returns_result_and_clears_line(self):
        loader = AsyncDotLoader(self.terminal, interval=0.01)

        async def work():
            await asyncio.sleep(0.05)
            return "done"

        assert await loader.run_with_loading(work()) == "done"
        assert loader.animation_task.done()
        writes = [call.args[0] for call in self.terminal.write.call_args_list]
        assert any("Processing" in w for w in writes)
        assert writes[-1] == f"\r{' ' * 80}\r"

    @pytest.mark.asyncio
    async def test_errors_propagate_after_animation_stops(self):
        loader = AsyncDotLoader(self.terminal, interval=0.01)

        async def work():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            await loader.run_with_loading(work())
        assert loader.animation_complete.is_set()
        assert loader.animation_task.done()

    @pytest.mark.asyncio
    async def test_no_animation_writes_nothing(self):
        loader = AsyncDotLoader(self.terminal, no_animation=True)

        async def work():
            return 42

        assert await loader.run_with_loading(work()) == 42
        self.terminal.write.assert_not_called()


class TestPage:

    def test_idle_page(self):
        page = render_page(TransformerState())

        assert "<title>Prompt Engineer</title>" in page
        assert 'placeholder="Enter your prompt here..." required' in page
        assert 'id="submit-button">Transform</button>' in page
        assert "All rights reserved." in page
        assert "const COPY_RESET_MS = 2000;" in page

    def test_loading_page_disables_submit(self):
        page = render_page(TransformerState(input_text="draft", request=Pending()))

        assert 'id="submit-button" disabled>Processing...</button>' in page
        assert 'class="result"' not in page
        assert 'class="error"' not in page

    def test_result_page(self):
        page = render_page(TransformerState(request=Succeeded("X")))

        assert '<p id="transformed-prompt">X</p>' in page
        assert "Improved Version:" in page
        assert 'class="error"' not in page

    def test_error_page(self):
        page = render_page(TransformerState(request=Failed("M")))

        assert '<p>M</p>' in page
        assert 'class="result"' not in page

    def test_idle_state_value(self):
        assert TransformerState().request == Idle()
