# transformer/state.py

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Idle:
    """No submission has been made yet."""


@dataclass(frozen=True)
class Pending:
    """A submission is waiting on the provider."""


@dataclass(frozen=True)
class Succeeded:
    """The provider returned text for the latest submission."""
    text: str


@dataclass(frozen=True)
class Failed:
    """The latest submission ended in an error shown to the user."""
    message: str


RequestState = Union[Idle, Pending, Succeeded, Failed]


class View(Enum):
    """The one panel visible below the form."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class TransformerState:
    """
    Everything the form shows.

    The request outcome is a single tagged value, so loading, output and
    error can never be visible together.
    """
    input_text: str = ""
    request: RequestState = field(default_factory=Idle)
    copy_confirmed: bool = False

    @property
    def is_loading(self) -> bool:
        return isinstance(self.request, Pending)

    @property
    def transformed_text(self) -> str:
        return self.request.text if isinstance(self.request, Succeeded) else ""

    @property
    def error(self) -> Optional[str]:
        return self.request.message if isinstance(self.request, Failed) else None

    @property
    def view(self) -> View:
        return select_view(self.request)


def select_view(request: RequestState) -> View:
    """Map a request outcome to the panel that should be rendered."""
    if isinstance(request, Pending):
        return View.LOADING
    if isinstance(request, Failed):
        return View.ERROR
    if isinstance(request, Succeeded) and request.text:
        return View.SUCCESS
    return View.IDLE
