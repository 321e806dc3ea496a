"""
Presenters render a board state to one output medium.
Notes:
- Every presenter has the same display(state) contract, so any one can be
  swapped for another without touching BoardState.
- Presenters only read the state they are given and keep no reference to it.
"""
from __future__ import annotations

import html
import logging
from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, List, Optional, TextIO

from .errors import UnknownPresenterError
from .marks import Mark
from .state import BoardState

logger = logging.getLogger(__name__)


class BoardPresenter(ABC):
    """Render a BoardState and emit it to a medium.

    ``stream`` is where display() writes; None means display() only
    returns the rendering.
    """

    name = "base"

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    @abstractmethod
    def render(self, state: BoardState) -> str:
        """Build the rendering without emitting it."""

    def display(self, state: BoardState) -> str:
        text = self.render(state)
        if self.stream is not None:
            self.stream.write(text)
            if not text.endswith("\n"):
                self.stream.write("\n")
            self.stream.flush()
        logger.debug("%s presenter rendered %s", self.name, state.serialize())
        return text


class ConsolePresenter(BoardPresenter):
    """Plain text, one line per row."""

    name = "console"

    def __init__(self, stream: Optional[TextIO] = None, empty: str = ".", separator: str = " "):
        super().__init__(stream)
        self.empty = empty
        self.separator = separator

    def render(self, state: BoardState) -> str:
        lines = []
        for row in state.rows():
            lines.append(self.separator.join(m.symbol or self.empty for m in row))
        return "\n".join(lines)


class BrowserPresenter(BoardPresenter):
    """HTML table markup for embedding in a page."""

    name = "browser"

    def __init__(self, stream: Optional[TextIO] = None, css_class: str = "board"):
        super().__init__(stream)
        self.css_class = css_class

    @staticmethod
    def _cell(row: int, col: int, mark: Mark) -> str:
        kind = "empty" if mark.is_empty else mark.symbol.lower()
        body = html.escape(mark.symbol) if mark.symbol else "&nbsp;"
        return f'<td class="cell-{kind}" data-row="{row}" data-col="{col}">{body}</td>'

    def render(self, state: BoardState) -> str:
        out = [f'<table class="{html.escape(self.css_class, quote=True)}" data-size="{state.size}">']
        for r, row in enumerate(state.rows()):
            cells = "".join(self._cell(r, c, m) for c, m in enumerate(row))
            out.append(f"  <tr>{cells}</tr>")
        out.append("</table>")
        return "\n".join(out)


_REGISTRY: Dict[str, Callable[..., BoardPresenter]] = {
    "console": ConsolePresenter,
    "browser": BrowserPresenter,
    "html": BrowserPresenter,
}


def available_presenters() -> List[str]:
    return sorted(_REGISTRY)


def get_presenter(name: str, **kwargs) -> BoardPresenter:
    key = (name or "").strip().lower()
    try:
        factory = _REGISTRY[key]
    except KeyError:
        raise UnknownPresenterError(name) from None
    return factory(**kwargs)


def broadcast(state: BoardState, presenters: Iterable[BoardPresenter]) -> List[str]:
    """Display the same state on each presenter in turn; return the renderings."""
    return [p.display(state) for p in presenters]
