"""Floating-point helpers shared by the propagator stages."""

import numpy as np
from numpy.typing import DTypeLike

__all__ = ["complex_dtype", "machine_epsilon", "complex_sqrt"]


def complex_dtype(dtype: DTypeLike) -> np.dtype:
    """Return the complex dtype paired with a real floating dtype.

    Args:
        dtype: Real floating dtype (float32 or float64).

    Returns:
        complex64 for float32, complex128 for float64.

    Raises:
        TypeError: If dtype is not a real floating type.
    """
    dtype = np.dtype(dtype)
    if dtype.kind != "f":
        raise TypeError(f"Expected a real floating dtype, got {dtype}")
    return np.result_type(dtype, np.complex64)


def machine_epsilon(dtype: DTypeLike = np.float64) -> float:
    """Spacing between 1.0 and the next representable value of dtype."""
    return float(np.finfo(dtype).eps)


def complex_sqrt(x: np.ndarray) -> np.ndarray:
    """Principal square root evaluated in the complex plane.

    Real inputs are promoted to the matching complex dtype first, so
    negative values map to the positive imaginary axis instead of NaN.

    Args:
        x: Real or complex array.

    Returns:
        Complex array with Re(result) >= 0.

    Example:
        ```python
        complex_sqrt(np.array([4.0, -4.0]))
        # Returns: [2.+0.j, 0.+2.j]
        ```
    """
    x = np.asarray(x)
    if x.dtype.kind != "c":
        real = x.dtype if x.dtype.kind == "f" else np.float64
        x = x.astype(complex_dtype(real))
    return np.sqrt(x)
