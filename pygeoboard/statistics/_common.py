"""
Shared helpers for the statistics functions.

Operand classification (number vs. sequence), slider evaluation and the
broadcasting kernel used by add/subtract/multiply/div/mod.
"""

from __future__ import annotations

import numbers
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pygeoboard.core.constants import OBJECT_TYPE_SLIDER
from pygeoboard.core.exceptions import ValidationError
from pygeoboard.core.protocols import Valued
from pygeoboard.core.validation import check_array, check_1d


BinaryOp = Callable[[Any, Any], Any]


def eval_slider(x: Any) -> Any:
    """Replace a slider by its current value, pass everything else through."""
    if isinstance(x, Valued) and x.el_type == OBJECT_TYPE_SLIDER:
        return x.value()
    return x


def is_number(x: Any) -> bool:
    return isinstance(x, numbers.Real) or (
        isinstance(x, np.ndarray) and x.ndim == 0
        and np.issubdtype(x.dtype, np.number)
    )


def is_sequence(x: Any) -> bool:
    if isinstance(x, np.ndarray):
        return x.ndim > 0
    return isinstance(x, (list, tuple))


def as_vector(arr: Any, name: str) -> NDArray[np.floating]:
    """Convert a flat numeric sequence to a 1-D float array."""
    result = check_array(arr, name)
    check_1d(result, name)
    return result


def broadcast(op: BinaryOp, arr1: Any, arr2: Any) -> float | list[float]:
    """
    Apply a binary operator with scalar broadcasting.

    Parameters
    ----------
    op : callable
        Elementwise numpy operator, e.g. ``np.add``.
    arr1, arr2 : number, sequence or slider
        Sliders are evaluated first. A number is broadcast over a
        sequence; two sequences are truncated to the shorter length.

    Returns
    -------
    float or list of float
        A list whenever at least one operand is a sequence.
    """
    arr1 = eval_slider(arr1)
    arr2 = eval_slider(arr2)

    left_seq = is_sequence(arr1)
    right_seq = is_sequence(arr2)

    if not (left_seq or is_number(arr1)):
        raise ValidationError(
            f"arr1: expected number or sequence, got {type(arr1).__name__}"
        )
    if not (right_seq or is_number(arr2)):
        raise ValidationError(
            f"arr2: expected number or sequence, got {type(arr2).__name__}"
        )

    # IEEE semantics for x/0 and x%0: inf or nan, no exception
    with np.errstate(divide='ignore', invalid='ignore'):
        if left_seq and right_seq:
            x = as_vector(arr1, "arr1")
            y = as_vector(arr2, "arr2")
            n = min(x.shape[0], y.shape[0])
            return op(x[:n], y[:n]).tolist()

        if left_seq:
            return op(as_vector(arr1, "arr1"), np.float64(arr2)).tolist()

        if right_seq:
            return op(np.float64(arr1), as_vector(arr2, "arr2")).tolist()

        return float(op(np.float64(arr1), np.float64(arr2)))
