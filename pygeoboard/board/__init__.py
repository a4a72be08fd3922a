"""
Scene graph of geometry elements.

A minimal board: elements are registered, looked up, updated in creation
order and removed. Rendering and event handling are not part of it.

Public API:
    Board                    - element container, Board.create(el_type, ...)
    register_element         - make a creator available to Board.create
    Point, Line, Glider, Group, Ticks, Text, Coords
"""

from pygeoboard.core.constants import (
    OBJECT_TYPE_POINT,
    OBJECT_TYPE_GLIDER,
    OBJECT_TYPE_LINE,
    OBJECT_TYPE_SEGMENT,
    OBJECT_TYPE_GROUP,
    OBJECT_TYPE_TICKS,
    OBJECT_TYPE_TEXT,
)
from pygeoboard.board.board import Board, register_element, registered_elements
from pygeoboard.board.coords import Coords
from pygeoboard.board.element import GeometryElement
from pygeoboard.board.point import Point, create_point
from pygeoboard.board.line import Line, create_line, create_segment
from pygeoboard.board.glider import Glider, create_glider
from pygeoboard.board.group import Group, create_group
from pygeoboard.board.ticks import Ticks, create_ticks
from pygeoboard.board.text import Text, create_text

register_element(OBJECT_TYPE_POINT, create_point)
register_element(OBJECT_TYPE_LINE, create_line)
register_element(OBJECT_TYPE_SEGMENT, create_segment)
register_element(OBJECT_TYPE_GLIDER, create_glider)
register_element(OBJECT_TYPE_GROUP, create_group)
register_element(OBJECT_TYPE_TICKS, create_ticks)
register_element(OBJECT_TYPE_TEXT, create_text)

__all__ = [
    "Board",
    "register_element",
    "registered_elements",
    "Coords",
    "GeometryElement",
    "Point",
    "Line",
    "Glider",
    "Group",
    "Ticks",
    "Text",
]
