"""
Text elements with dynamic position and content.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING

from pygeoboard.core.constants import OBJECT_TYPE_TEXT
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import copy_attributes
from pygeoboard.board.element import GeometryElement

if TYPE_CHECKING:
    from pygeoboard.board.board import Board

Term = Any  # constant or zero-argument callable


def _evaluate(term: Term) -> Any:
    return term() if callable(term) else term


class Text(GeometryElement):
    """
    Text at (x, y).

    ``x``, ``y`` and ``content`` may each be a constant or a callable that is
    evaluated on access, so the text follows the elements it refers to.
    """

    def __init__(
        self,
        board: Board,
        x: Term,
        y: Term,
        content: Term,
        attributes: dict[str, Any],
    ):
        self._x = x
        self._y = y
        self.content = content
        super().__init__(board, attributes, OBJECT_TYPE_TEXT)
        self.parents = [x, y, content]

    def x(self) -> float:
        return float(_evaluate(self._x))

    def y(self) -> float:
        return float(_evaluate(self._y))

    def plaintext(self) -> str:
        return str(_evaluate(self.content))

    def set_text(self, content: Term | Callable[[], str]) -> Text:
        self.content = content
        return self


def create_text(board: Board, parents: list[Any], attributes: dict[str, Any]) -> Text:
    """Create a text. Parents: ``[x, y, content]``."""
    if len(parents) != 3:
        raise ElementError(
            f"text: expected parents [x, y, content], got {len(parents)} parents",
            el_type=OBJECT_TYPE_TEXT,
        )
    attr = copy_attributes(attributes, board.options, OBJECT_TYPE_TEXT)
    return Text(board, parents[0], parents[1], parents[2], attr)
