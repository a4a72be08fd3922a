"""
Core infrastructure for pygeoboard.

Shared abstractions and utilities used by the statistics, board and
elements subpackages.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    constants: Element type strings and numeric sentinels
    options: Default attributes and attribute resolution
    protocols: Structural interfaces (Valued)
"""

from pygeoboard.core.protocols import Valued
from pygeoboard.core.exceptions import (
    PyGeoBoardError,
    ValidationError,
    DimensionError,
    ElementError,
)
from pygeoboard.core.options import DEFAULT_OPTIONS, copy_attributes, merge_options

__all__ = [
    # Protocols
    "Valued",
    # Exceptions
    "PyGeoBoardError",
    "ValidationError",
    "DimensionError",
    "ElementError",
    # Options
    "DEFAULT_OPTIONS",
    "copy_attributes",
    "merge_options",
]
