"""
Base class of everything that lives on a board.
"""

from __future__ import annotations

from typing import Any, TYPE_CHECKING

from pygeoboard.core.exceptions import ElementError

if TYPE_CHECKING:
    from pygeoboard.board.board import Board


class GeometryElement:
    """
    Common state of board elements.

    Attributes
    ----------
    board : Board
        Board the element was created on. The element registers itself on
        construction.
    id : str
        Board-unique identifier.
    name : str
        User-visible name; generated for labelled points.
    el_type : str
        Element type, one of the strings in ``core.constants``.
    visprop : dict
        Effective attributes (lower-case keys).
    parents : list
        Parent description, used by ``Board.dump``.
    subs : dict
        Owned sub-elements of composite elements.
    dump : bool
        Whether ``Board.dump`` includes this element.
    """

    def __init__(self, board: Board, attributes: dict[str, Any], el_type: str):
        self.board = board
        self.el_type = el_type
        self.visprop: dict[str, Any] = {str(k).lower(): v for k, v in attributes.items()}
        self.id = board.generate_id(el_type)
        self.parents: list[Any] = []
        self.subs: dict[str, GeometryElement] = {}
        self.dump = bool(self.visprop.get('dump', True))
        self.removed = False

        name = self.visprop.get('name') or ''
        if name == '' and self.visprop.get('withlabel', False):
            name = board.generate_name(self)
        self.name = name

        board.add_object(self)

    def set_attribute(self, **attributes: Any) -> GeometryElement:
        for key, val in attributes.items():
            key = key.lower()
            self.visprop[key] = val
            if key == 'name':
                self.name = val
            elif key == 'dump':
                self.dump = bool(val)
        return self

    def get_attribute(self, key: str, default: Any = None) -> Any:
        return self.visprop.get(key.lower(), default)

    def update(self) -> GeometryElement:
        """Recompute derived state from parents. No-op for free elements."""
        return self

    def remove(self) -> None:
        """Detach the element from its board. Removing twice is a no-op."""
        if self.removed:
            return
        self.removed = True
        self.board.unregister(self)

    def __repr__(self) -> str:
        name = f", name={self.name!r}" if self.name else ""
        return f"{type(self).__name__}(id={self.id!r}{name})"


def ensure_element(obj: Any, cls: type, board: Board, el_type: str) -> Any:
    """Check that a parent is an element of the expected class on ``board``."""
    if not isinstance(obj, cls):
        raise ElementError(
            f"{el_type}: expected {cls.__name__} parent, got {type(obj).__name__}",
            el_type=el_type,
        )
    if obj.board is not board:
        raise ElementError(
            f"{el_type}: parent {obj.id} belongs to a different board",
            el_type=el_type,
        )
    if obj.removed:
        raise ElementError(
            f"{el_type}: parent {obj.id} has been removed",
            el_type=el_type,
        )
    return obj
