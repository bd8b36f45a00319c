"""Argument checks run before any propagation work starts."""

import numbers
from typing import NamedTuple, Optional, Tuple

import numpy as np
from numpy.typing import DTypeLike

from ..errors import ArgumentTypeError, ArityError, InvalidArgumentError, ShapeError

__all__ = ["ValidatedInputs", "validate_inputs", "check_n_jobs"]


class ValidatedInputs(NamedTuple):
    """Arguments converted to arrays of the working precision."""

    hologram: np.ndarray
    z: np.ndarray
    rc: Tuple[float, float]
    dtype: np.dtype
    n_jobs: Optional[int]


def _as_numeric(name: str, value) -> np.ndarray:
    try:
        arr = np.asarray(value)
    except (TypeError, ValueError) as err:
        raise ArgumentTypeError(name, f"cannot be converted to an array ({err})") from err
    # bool and complex arrays are rejected
    if arr.dtype.kind not in "iuf":
        raise ArgumentTypeError(
            name, f"must be real-valued numeric, got dtype {arr.dtype}"
        )
    return arr


def _check_dtype(dtype: DTypeLike) -> np.dtype:
    try:
        dtype = np.dtype(dtype)
    except TypeError as err:
        raise ArgumentTypeError("dtype", f"not a dtype ({err})") from err
    if dtype.kind != "f":
        raise ArgumentTypeError("dtype", f"must be a real floating type, got {dtype}")
    return dtype


def check_n_jobs(n_jobs) -> Optional[int]:
    """Check a worker count with joblib semantics.

    Args:
        n_jobs: None, or a nonzero integer (negative counts from the number
            of cores, -1 uses all of them).

    Returns:
        n_jobs as a Python int, or None.

    Raises:
        ArgumentTypeError: n_jobs is not an integer.
        InvalidArgumentError: n_jobs is zero.
    """
    if n_jobs is None:
        return None
    if isinstance(n_jobs, (bool, np.bool_)) or not isinstance(n_jobs, numbers.Integral):
        raise ArgumentTypeError("n_jobs", f"must be None or an integer, got {n_jobs!r}")
    if n_jobs == 0:
        raise InvalidArgumentError("n_jobs", "must be nonzero")
    return int(n_jobs)


def validate_inputs(
    hologram=None,
    z=None,
    rc=None,
    dtype: DTypeLike = np.float64,
    n_jobs: Optional[int] = None,
) -> ValidatedInputs:
    """Check and normalize the arguments of an axial reconstruction.

    Args:
        hologram: 2D real array, background-normalized to 1.
        z: Scalar or array of axial displacements (pixels).
        rc: Two-component evaluation point (x, y) in pixels.
        dtype: Real floating dtype for the computation.
        n_jobs: Worker threads for the depth loop, None or a nonzero int.

    Returns:
        ValidatedInputs with hologram as a 2D array and z as a 1D array,
        both of the requested dtype, and rc as a tuple of floats.

    Raises:
        ArityError: A required argument is missing.
        ArgumentTypeError: An argument is not real numeric, dtype is not
            a real floating type, or n_jobs is not an integer.
        ShapeError: hologram is not a non-empty 2D array, z is empty, or rc
            does not have exactly two components.
        InvalidArgumentError: z or rc contain NaN or infinite values, or
            n_jobs is zero.
    """
    for name, value in (("hologram", hologram), ("z", z), ("rc", rc)):
        if value is None:
            raise ArityError(name, "argument is missing")

    dtype = _check_dtype(dtype)
    n_jobs = check_n_jobs(n_jobs)

    hologram = _as_numeric("hologram", hologram)
    if hologram.ndim != 2:
        raise ShapeError(
            "hologram", f"must be two-dimensional, got {hologram.ndim} dimension(s)"
        )
    if hologram.size == 0:
        raise ShapeError("hologram", f"must not be empty, got shape {hologram.shape}")

    z = _as_numeric("z", z)
    if z.size == 0:
        raise ShapeError("z", "must contain at least one displacement")
    z = z.astype(dtype).ravel()
    if not np.all(np.isfinite(z)):
        raise InvalidArgumentError("z", "displacements must be finite")

    rc = _as_numeric("rc", rc)
    if rc.size != 2:
        raise ShapeError("rc", f"must have exactly two components, got {rc.size}")
    rc = rc.astype(np.float64).ravel()
    if not np.all(np.isfinite(rc)):
        raise InvalidArgumentError("rc", "coordinates must be finite")

    return ValidatedInputs(
        hologram=hologram.astype(dtype),
        z=z,
        rc=(float(rc[0]), float(rc[1])),
        dtype=dtype,
        n_jobs=n_jobs,
    )
