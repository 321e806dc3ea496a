"""
Exceptions raised by board state, presenters, and configuration.

Every error derives from BoardError so callers can catch the whole family,
and also from the closest builtin so plain ``except ValueError`` still works.
"""
from __future__ import annotations

from typing import Any


class BoardError(Exception):
    """Base class for board errors."""


class InvalidPositionError(BoardError, IndexError):
    """Raised when a position does not reference a cell on the board"""

    def __init__(self, position: Any, size: int, *args: object) -> None:
        self.position = position
        self.size = size
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Position {self.position!r} is outside the {self.size}x{self.size} board"


class OccupiedCellError(BoardError):
    """Raised when updating a cell that already holds a mark"""

    def __init__(self, position: Any, current: Any, *args: object) -> None:
        self.position = position
        self.current = current
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Cell {self.position!r} is already occupied by {self.current}"


class InvalidMarkError(BoardError, ValueError):
    """Raised when a value cannot be used as a mark"""

    def __init__(self, mark: Any, *args: object) -> None:
        self.mark = mark
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Invalid mark: {self.mark!r}"


class InvalidSizeError(BoardError, ValueError):
    def __init__(self, size: Any, *args: object) -> None:
        self.size = size
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Board size must be a positive integer, got {self.size!r}"


class BoardFormatError(BoardError, ValueError):
    """Raised when a serialized board string is malformed"""

    def __init__(self, text: str, reason: str, *args: object) -> None:
        self.text = text
        self.reason = reason
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Invalid board string {self.text!r}: {self.reason}"


class UnknownPresenterError(BoardError, KeyError):
    def __init__(self, name: str, *args: object) -> None:
        self.name = name
        super().__init__(*args)

    def __str__(self) -> str:
        return f"No presenter registered as {self.name!r}"


class ConfigError(BoardError, ValueError):
    """Raised when an environment setting holds an unusable value"""

    def __init__(self, variable: str, value: str, *args: object) -> None:
        self.variable = variable
        self.value = value
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Invalid value for {self.variable}: {self.value!r}"


class PresenterNotAttachedError(BoardError, ValueError):
    """Raised when detaching a presenter a session does not hold"""

    def __init__(self, presenter: Any, *args: object) -> None:
        self.presenter = presenter
        super().__init__(*args)

    def __str__(self) -> str:
        return f"Presenter {self.presenter!r} is not attached"
