"""
The board: registry of geometry elements.

Elements are created through ``Board.create(el_type, parents, attributes)``,
which dispatches to the creator registered for ``el_type``. The board keeps
its elements in creation order; since every element is created after its
parents, ``Board.update`` refreshes them in that order.

The board does not render and does not handle user events.
"""

from __future__ import annotations

import itertools
import logging
import string
from collections import Counter
from typing import Any, Callable, Iterator, Mapping

from pygeoboard.core.constants import OBJECT_TYPE_POINT, OBJECT_TYPE_GLIDER
from pygeoboard.core.exceptions import ElementError
from pygeoboard.core.options import DEFAULT_OPTIONS, merge_options
from pygeoboard.board.element import GeometryElement

logger = logging.getLogger(__name__)

Creator = Callable[['Board', list[Any], dict[str, Any]], GeometryElement]

_ELEMENT_REGISTRY: dict[str, Creator] = {}
_board_ids = itertools.count(1)


def register_element(el_type: str, creator: Creator) -> None:
    """Make ``creator`` available as ``board.create(el_type, ...)``."""
    _ELEMENT_REGISTRY[el_type.lower()] = creator


def registered_elements() -> tuple[str, ...]:
    return tuple(sorted(_ELEMENT_REGISTRY))


class Board:
    """
    Container of geometry elements.

    Parameters
    ----------
    options : mapping, optional
        Attribute defaults deep-merged over ``DEFAULT_OPTIONS``, e.g.
        ``{'slider': {'precision': 3}}``.
    """

    def __init__(self, options: Mapping[str, Any] | None = None):
        self.id = f"board{next(_board_ids)}"
        self.options = merge_options(DEFAULT_OPTIONS, options)
        self.objects: dict[str, GeometryElement] = {}
        self._type_counts: Counter[str] = Counter()

    # --- creation ---

    def create(
        self,
        el_type: str,
        parents: list[Any],
        attributes: Mapping[str, Any] | None = None,
    ) -> GeometryElement:
        """
        Create an element of type ``el_type``.

        Raises
        ------
        ElementError
            If no creator is registered for ``el_type`` or the parents do not
            fit the element.
        """
        creator = _ELEMENT_REGISTRY.get(el_type.lower())
        if creator is None:
            raise ElementError(
                f"Unknown element type {el_type!r}, known: {registered_elements()}",
                el_type=el_type,
            )
        el = creator(self, list(parents), dict(attributes or {}))
        logger.debug("%s: created %s %s", self.id, el.el_type, el.id)
        return el

    def generate_id(self, el_type: str) -> str:
        self._type_counts[el_type] += 1
        return f"{self.id}{el_type.capitalize()}{self._type_counts[el_type]}"

    def generate_name(self, el: GeometryElement) -> str:
        """
        Next unused name for ``el``.

        Points get capital letters (A, B, ..., Z, A1, B1, ...), lines lower
        case letters, everything else the empty string.
        """
        if el.el_type in (OBJECT_TYPE_POINT, OBJECT_TYPE_GLIDER):
            letters = string.ascii_uppercase
        elif el.el_type in ('line', 'segment'):
            letters = string.ascii_lowercase
        else:
            return ''

        used = {obj.name for obj in self.objects.values()}
        for suffix in itertools.chain([''], (str(i) for i in itertools.count(1))):
            for letter in letters:
                if letter + suffix not in used:
                    return letter + suffix
        return ''  # unreachable

    def add_object(self, el: GeometryElement) -> None:
        self.objects[el.id] = el

    # --- lookup ---

    def select(self, key: str) -> GeometryElement | None:
        """Element by id, or else the first element with that name."""
        if key in self.objects:
            return self.objects[key]
        for el in self.objects.values():
            if el.name == key:
                return el
        return None

    def __contains__(self, el: object) -> bool:
        return isinstance(el, GeometryElement) and self.objects.get(el.id) is el

    def __iter__(self) -> Iterator[GeometryElement]:
        return iter(list(self.objects.values()))

    def __len__(self) -> int:
        return len(self.objects)

    # --- removal / update ---

    def remove_object(self, el: GeometryElement | str) -> None:
        """Remove an element (or element id) from the board. Unknown elements are ignored."""
        if isinstance(el, str):
            found = self.select(el)
            if found is None:
                return
            el = found
        if el not in self:
            return
        el.remove()
        logger.debug("%s: removed %s %s", self.id, el.el_type, el.id)

    def unregister(self, el: GeometryElement) -> None:
        self.objects.pop(el.id, None)

    def update(self) -> Board:
        """Refresh every element in creation order."""
        for el in list(self.objects.values()):
            el.update()
        return self

    def dump(self) -> list[dict[str, Any]]:
        """
        Plain description of the elements whose ``dump`` flag is set.

        Sub-elements of composite elements have ``dump`` switched off, so a
        slider is described by one entry only.
        """
        return [
            {
                'type': el.el_type,
                'id': el.id,
                'name': el.name,
                'parents': [_dump_parent(p) for p in el.parents],
            }
            for el in self.objects.values()
            if el.dump
        ]

    def __repr__(self) -> str:
        return f"Board(id={self.id!r}, elements={len(self.objects)})"


def _dump_parent(parent: Any) -> Any:
    if isinstance(parent, GeometryElement):
        return parent.id
    if isinstance(parent, (list, tuple)):
        return [_dump_parent(p) for p in parent]
    if callable(parent):
        return getattr(parent, '__name__', repr(parent))
    return parent
