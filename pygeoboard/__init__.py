"""
pygeoboard: interactive geometry primitives and statistics helpers.

A board holds points, lines, gliders and composite widgets such as
sliders, whose positions follow from the elements they are built on.

Submodules:
    statistics: Reductions and broadcasting arithmetic on numeric sequences
    board: Board and geometry primitives
    elements: Composite elements (slider)
"""

__version__ = "0.1.0"

from pygeoboard import statistics
from pygeoboard import board
from pygeoboard import elements
from pygeoboard.board import Board
from pygeoboard.elements import Slider

__all__ = [
    "__version__",
    "statistics",
    "board",
    "elements",
    "Board",
    "Slider",
]
