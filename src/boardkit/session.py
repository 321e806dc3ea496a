"""
A session owns one board and forwards it to presenters after each move.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Union

from .errors import PresenterNotAttachedError
from .marks import Mark
from .presenters import BoardPresenter, broadcast
from .state import BoardState, Position

logger = logging.getLogger(__name__)


class BoardSession:
    def __init__(self, presenters: Iterable[BoardPresenter] = (), size: Optional[int] = None):
        self.state = BoardState.initialize(size)
        self.presenters: List[BoardPresenter] = list(presenters)
        self.moves: List[Tuple[int, int, Mark]] = []

    def attach(self, presenter: BoardPresenter) -> None:
        self.presenters.append(presenter)

    def detach(self, presenter: BoardPresenter) -> None:
        try:
            self.presenters.remove(presenter)
        except ValueError:
            raise PresenterNotAttachedError(presenter) from None

    def play(self, position: Position, mark: Union[Mark, int, str]) -> List[str]:
        """Apply one move, then show the board on every attached presenter.

        Update errors propagate before any presenter is called.
        """
        self.state.update(position, mark)
        row, col = self.state.resolve(position)
        placed = self.state.get((row, col))
        self.moves.append((row, col, placed))
        logger.debug("move %d: %s at (%d, %d)", len(self.moves), placed, row, col)
        return broadcast(self.state, self.presenters)

    def refresh(self) -> List[str]:
        return broadcast(self.state, self.presenters)
