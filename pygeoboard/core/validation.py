"""
Validators for numeric operands and user coordinates.

Each check raises ``ValidationError`` (or ``DimensionError`` for shape
problems) naming the offending parameter. Values are never repaired.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pygeoboard.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.floating[Any]]:
    """
    Convert ``array`` to a float ndarray.

    Integers and booleans are promoted to float64. Strings, ``None`` and
    anything else numpy can only hold as objects are rejected.

    Parameters
    ----------
    array : array_like
    name : str
        Parameter name used in error messages.

    Returns
    -------
    ndarray
        Floating point array.
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: not convertible to a numeric array: {e}") from e

    if result.dtype == object:
        raise ValidationError(f"{name}: holds non-numeric or ragged entries")

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(f"{name}: expected numbers, got dtype {result.dtype}")

    if not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)
    return result


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Flat sequences only; nested lists and scalars are rejected."""
    check_ndim(array, 1, name)


def check_consistent_length(
    *arrays: NDArray[np.floating[Any]],
    names: tuple[str, ...]
) -> None:
    """
    Require equal lengths, e.g. values and weights of a weighted mean.

    Raises
    ------
    DimensionError
        Lengths differ. The message lists ``name=length`` for each array.
    """
    if len(arrays) != len(names):
        raise ValueError(f"got {len(arrays)} arrays but {len(names)} names")

    lengths = [arr.shape[0] for arr in arrays]
    if len(set(lengths)) > 1:
        details = ", ".join(f"{n}={length}" for n, length in zip(names, lengths))
        raise DimensionError(f"Array dimension mismatch: {details}")


def check_coordinates(pos: ArrayLike, name: str) -> NDArray[np.floating[Any]]:
    """
    Validate a pair of finite user coordinates ``(x, y)``.

    Returns
    -------
    ndarray
        Float array of shape (2,).
    """
    arr = check_array(pos, name)
    check_1d(arr, name)
    if arr.shape[0] != 2:
        raise DimensionError(
            f"{name}: expected 2 coordinates (x, y), got {arr.shape[0]}"
        )
    check_finite(arr, name)
    return arr
