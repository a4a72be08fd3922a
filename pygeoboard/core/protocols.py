"""
Core protocols for pygeoboard.

Structural interfaces shared between subpackages. Protocol (structural
typing) is used rather than ABC so that the statistics functions can
recognise board elements without importing the board.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Valued(Protocol):
    """
    Anything that carries an element type and a current scalar value.

    Sliders implement this protocol. The statistics functions use it to
    replace a slider argument by its current value.
    """

    el_type: str

    def value(self) -> float:
        """Current scalar value."""
        ...
