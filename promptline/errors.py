# errors.py


class PromptlineError(Exception):
    """Base class for errors raised by promptline."""


class ConfigurationError(PromptlineError):
    """Raised when the configuration cannot be used to reach a provider."""


class EmptyResponseError(PromptlineError):
    """Raised when the provider answers without any text."""


class RemoteError(PromptlineError):
    """Raised when a remote promptline server reports a failure."""


class ClipboardError(PromptlineError):
    """Raised when the system clipboard cannot be written."""
