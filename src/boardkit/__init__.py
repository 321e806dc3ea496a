"""boardkit package.

A Tic-Tac-Toe board whose state and presentation live apart: BoardState
holds and mutates the cells, presenters render a given state to a medium.

Convenience imports are exposed for common workflows.
"""

from .errors import (
    BoardError,
    BoardFormatError,
    ConfigError,
    InvalidMarkError,
    InvalidPositionError,
    InvalidSizeError,
    OccupiedCellError,
    PresenterNotAttachedError,
    UnknownPresenterError,
)
from .marks import Mark
from .presenters import (
    BoardPresenter,
    BrowserPresenter,
    ConsolePresenter,
    available_presenters,
    broadcast,
    get_presenter,
)
from .session import BoardSession
from .state import BoardState

__all__ = [
    "BoardState",
    "Mark",
    "BoardPresenter",
    "ConsolePresenter",
    "BrowserPresenter",
    "get_presenter",
    "available_presenters",
    "broadcast",
    "BoardSession",
    "BoardError",
    "BoardFormatError",
    "ConfigError",
    "InvalidMarkError",
    "InvalidPositionError",
    "InvalidSizeError",
    "OccupiedCellError",
    "PresenterNotAttachedError",
    "UnknownPresenterError",
]
