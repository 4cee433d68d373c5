# test_state.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from promptline.transformer.state import (
    TransformerState, Idle, Pending, Succeeded, Failed, View, select_view
)


@pytest.mark.parametrize("request_state, view", [
    (Idle(), View.IDLE),
    (Pending(), View.LOADING),
    (Succeeded("text"), View.SUCCESS),
    (Succeeded(""), View.IDLE),
    (Failed("boom"), View.ERROR),
])
def test_select_view(request_state, view):
    assert select_view(request_state) is view


def test_new_state_is_idle_and_empty():
    state = TransformerState()
    assert state.input_text == ""
    assert state.request == Idle()
    assert not state.is_loading
    assert state.transformed_text == ""
    assert state.error is None
    assert not state.copy_confirmed


def test_output_and_error_are_derived_from_the_request():
    state = TransformerState(request=Succeeded("better prompt"))
    assert state.transformed_text == "better prompt"
    assert state.error is None

    state.request = Failed("quota exceeded")
    assert state.transformed_text == ""
    assert state.error == "quota exceeded"

    state.request = Pending()
    assert state.is_loading
    assert state.transformed_text == ""
    assert state.error is None
