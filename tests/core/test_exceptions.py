"""
Tests for the pygeoboard exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyGeoBoardError)
    - Diagnostic attribute on ElementError
    - str works correctly
"""

import pytest

from pygeoboard.core.exceptions import (
    DimensionError,
    ElementError,
    PyGeoBoardError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyGeoBoardError."""

    def test_validation_error_is_pygeoboard_error(self):
        with pytest.raises(PyGeoBoardError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("wrong length")

    def test_dimension_error_is_pygeoboard_error(self):
        with pytest.raises(PyGeoBoardError):
            raise DimensionError("wrong length")

    def test_element_error_is_pygeoboard_error(self):
        with pytest.raises(PyGeoBoardError):
            raise ElementError("unknown element")

    def test_element_error_is_not_validation_error(self):
        """ElementError inherits from PyGeoBoardError, not ValidationError."""
        err = ElementError("unknown element")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Messages and attributes
# ═══════════════════════════════════════════════════════════════════════


class TestMessages:

    def test_base_error_message(self):
        err = PyGeoBoardError("base error")
        assert str(err) == "base error"

    def test_dimension_error_message(self):
        err = DimensionError("Array dimension mismatch: arr=2, w=1")
        assert "mismatch" in str(err)


class TestElementError:
    """ElementError carries the element type."""

    def test_el_type_attribute(self):
        err = ElementError("glider: wrong parents", el_type="glider")
        assert str(err) == "glider: wrong parents"
        assert err.el_type == "glider"

    def test_el_type_defaults_to_none(self):
        assert ElementError("oops").el_type is None

    def test_catchable_with_attributes(self):
        with pytest.raises(ElementError) as exc_info:
            raise ElementError("bad", el_type="ticks")
        assert exc_info.value.el_type == "ticks"
