# backend/__init__.py

from .base import Backend
from .embedded import EmbeddedBackend
from .remote import RemoteBackend

__all__ = ['Backend', 'EmbeddedBackend', 'RemoteBackend']
