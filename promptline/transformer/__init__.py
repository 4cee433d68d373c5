# transformer/__init__.py

from .actions import PromptTransformer
from .clipboard import Clipboard
from .instruction import GENERIC_ERROR_MESSAGE, NO_RESPONSE_MESSAGE, build_instruction
from .state import Failed, Idle, Pending, RequestState, Succeeded, TransformerState, View, select_view

__all__ = [
    'PromptTransformer', 'Clipboard', 'TransformerState', 'RequestState',
    'Idle', 'Pending', 'Succeeded', 'Failed', 'View', 'select_view',
    'build_instruction', 'NO_RESPONSE_MESSAGE', 'GENERIC_ERROR_MESSAGE',
]
