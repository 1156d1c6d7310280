"""
Argument and result checks shared by the atmosphere and adiabatic
functions.  Each accepts either a scalar or anything NumPy can convert
to an array.
"""
from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pysoar.exception import DomainError, NumericError


# ======================================================================

def check_finite(name: str, x: ArrayLike) -> NDArray:
    """
    Convert `x` to a float array and check that all elements are finite.
    Raises `DomainError` otherwise.
    """
    try:
        x = np.asarray(x, dtype=float)
    except (TypeError, ValueError) as e:
        raise DomainError(f"'{name}' must be numeric.", value=x) from e

    if not np.all(np.isfinite(x)):
        raise DomainError(f"Require finite '{name}'.", value=x)

    return x


def check_positive(name: str, x: ArrayLike) -> NDArray:
    """
    As per `check_finite` but also require all elements > 0.
    """
    x = check_finite(name, x)
    if np.any(x <= 0):
        raise DomainError(f"Require '{name}' > 0.", value=x)

    return x


def check_broadcast(*args: NDArray) -> tuple[NDArray, ...]:
    """
    Broadcast already checked arguments against each other.  Raises
    `DomainError` if their shapes are incompatible.
    """
    try:
        return tuple(np.broadcast_arrays(*args))
    except ValueError as e:
        raise DomainError("Argument shapes do not broadcast together.",
                          value=[np.shape(a) for a in args]) from e


def check_result(name: str, x: NDArray, positive: bool = False) -> NDArray:
    """
    Raises `NumericError` if the computed `x` is not finite or, when
    `positive` is set, if any element is <= 0 (e.g. due to underflow).
    """
    if not np.all(np.isfinite(x)):
        raise NumericError(f"Non-finite '{name}' computed.", value=x)
    if positive and np.any(x <= 0):
        raise NumericError(f"Non-positive '{name}' computed.", value=x)

    return x


def as_output(x: NDArray) -> NDArray | float:
    """Return 0-d results as plain `float`, otherwise as given."""
    if np.ndim(x) == 0:
        return float(x)
    return x
