"""
Composite elements built from board primitives.

Importing this package registers the composite element types with
``Board.create``.

Public API:
    Slider, create_slider   - board.create('slider', [p1, p2, [min, start, max]])
"""

from pygeoboard.core.constants import OBJECT_TYPE_SLIDER
from pygeoboard.board import register_element
from pygeoboard.elements.slider import Slider, create_slider

register_element(OBJECT_TYPE_SLIDER, create_slider)

__all__ = [
    "Slider",
    "create_slider",
]
