# __init__.py

from .config import TransformerConfig
from .logger import Logger
from .transformer import PromptTransformer
from .interface import Interface

__all__ = ["Interface", "Logger", "PromptTransformer", "TransformerConfig"]
