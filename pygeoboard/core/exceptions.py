"""
Exception hierarchy for pygeoboard.

All exceptions inherit from PyGeoBoardError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyGeoBoardError(Exception):
    """Base exception for all pygeoboard errors."""
    pass


class ValidationError(PyGeoBoardError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Sequence dimensions are incorrect or inconsistent.

    Raised when array shapes don't match expected dimensions or
    when multiple sequences have inconsistent lengths.
    """
    pass


class ElementError(PyGeoBoardError):
    """
    A board element could not be created or used.

    Raised for unknown element types, wrong parent elements, or elements
    that belong to a different board.

    Attributes:
        el_type: Element type involved, if known
    """

    def __init__(self, message: str, el_type: str | None = None):
        super().__init__(message)
        self.el_type = el_type
