"""
Elementwise arithmetic with scalar broadcasting.

Each binary operator accepts two numbers, a number and a sequence (in
either order, the number is applied to every element), or two sequences
(elementwise, truncated to the shorter length). Slider operands are
replaced by their current value.

Division and remainder by zero follow IEEE rules and produce inf or nan.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np

from pygeoboard.core.exceptions import ValidationError
from pygeoboard.statistics._common import (
    as_vector,
    broadcast,
    eval_slider,
    is_number,
    is_sequence,
)


Operand = Any  # number, flat sequence, or slider
Result = float | list[float]


def abs(arr: Operand) -> Result:
    """Absolute value of a number, or of every element of a sequence."""
    arr = eval_slider(arr)
    if is_sequence(arr):
        return np.abs(as_vector(arr, "arr")).tolist()
    if not is_number(arr):
        raise ValidationError(
            f"arr: expected number or sequence, got {type(arr).__name__}"
        )
    return float(np.abs(np.float64(arr)))


def add(arr1: Operand, arr2: Operand) -> Result:
    """
    Add two (sequences of) values.

    Examples
    --------
    >>> add(1, [1, 2])
    [2.0, 3.0]
    >>> add([1, 2, 3], [10, 20])
    [11.0, 22.0]
    """
    return broadcast(np.add, arr1, arr2)


def subtract(arr1: Operand, arr2: Operand) -> Result:
    """Subtract ``arr2`` (subtrahend) from ``arr1`` (minuend)."""
    return broadcast(np.subtract, arr1, arr2)


def multiply(arr1: Operand, arr2: Operand) -> Result:
    """Multiply two (sequences of) values."""
    return broadcast(np.multiply, arr1, arr2)


def div(arr1: Operand, arr2: Operand) -> Result:
    """Divide ``arr1`` (dividend) by ``arr2`` (divisor)."""
    return broadcast(np.true_divide, arr1, arr2)


def divide(arr1: Operand, arr2: Operand) -> Result:
    """Deprecated alias of :func:`div`."""
    warnings.warn(
        "divide() is deprecated, use div() instead",
        DeprecationWarning,
        stacklevel=2,
    )
    return div(arr1, arr2)


def mod(arr1: Operand, arr2: Operand, math: bool = False) -> Result:
    """
    Remainder of dividing ``arr1`` by ``arr2``.

    Parameters
    ----------
    arr1 : number, sequence or slider
        Dividend.
    arr2 : number, sequence or slider
        Divisor.
    math : bool
        False (default): symmetric remainder carrying the sign of the
        dividend, so ``mod(-1, 3) == -1``.
        True: mathematical modulo ``a - floor(a / m) * m``, never negative
        for a positive divisor, so ``mod(-1, 3, math=True) == 2``.
    """
    op = np.mod if math else np.fmod
    return broadcast(op, arr1, arr2)
