"""Back-propagation of a hologram along a single axial line.

The hologram is transformed once, phase-shifted so that the inverse
transform is centered on the evaluation point, and then reduced to one
complex value per depth. Only the requested point is evaluated at each
depth; the reconstructed planes are never formed.

Physics:
    b(q) = FFT{hologram - 1}(q) * exp(i q.rc)
    E(rc, z) = sum_q b(q) * exp(i kappa(q) z - gamma(q) |z|)
"""

import logging
from typing import Optional

import numpy as np
from joblib import Parallel, delayed
from numpy.typing import DTypeLike

from ..core.kernel import PropagatorKernel, make_kernel
from ..core.optics import FrequencyGrid, OpticalParameters, make_frequency_grid
from ..errors import ShapeError
from ..math.fourier import centered_fft2
from ..math.numeric import complex_dtype
from .validation import check_n_jobs, validate_inputs

__all__ = [
    "phase_centered_spectrum",
    "evaluate_depth",
    "evaluate_depths",
    "rs_axial",
]

logger = logging.getLogger(__name__)


def phase_centered_spectrum(hologram: np.ndarray, grid: FrequencyGrid) -> np.ndarray:
    """Centered spectrum of the hologram's deviation from background.

    Args:
        hologram: 2D background-normalized hologram, shape grid.shape.
        grid: Frequency grid built for the same shape and evaluation point.

    Returns:
        Complex array b = FFT{hologram - 1} * exp(i * qrc), normalized so
        that b.sum() is the deviation at grid.rc.

    Raises:
        ShapeError: If the hologram and grid shapes differ.
    """
    hologram = np.asarray(hologram, dtype=grid.dtype)
    if hologram.shape != grid.shape:
        raise ShapeError(
            "hologram",
            f"shape {hologram.shape} does not match frequency grid {grid.shape}",
        )
    deviation = hologram - 1
    return centered_fft2(deviation) * np.exp(1j * grid.qrc)


def evaluate_depth(
    spectrum: np.ndarray,
    kernel: PropagatorKernel,
    z: float,
) -> complex:
    """Propagated field at the evaluation point for one displacement.

    Modes whose decay gamma*|z| reaches the stability limit contribute
    exactly zero; their exponential is never evaluated.

    Args:
        spectrum: Phase-centered spectrum from phase_centered_spectrum().
        kernel: Propagator kernel from make_kernel().
        z: Axial displacement in pixels.

    Returns:
        Complex field value.
    """
    z = kernel.dtype.type(z)
    gz = kernel.gamma * abs(z)
    mask = gz < kernel.limit
    gz[~mask] = 0

    hqz = mask * np.exp(1j * kernel.kappa * z - gz)
    return np.sum(spectrum * hqz)


def evaluate_depths(
    spectrum: np.ndarray,
    kernel: PropagatorKernel,
    z: np.ndarray,
    n_jobs: Optional[int] = None,
) -> np.ndarray:
    """Propagated field at the evaluation point for each displacement.

    Depths are independent of one another. With n_jobs other than None or 1
    they are evaluated concurrently on a thread pool; the result does not
    depend on n_jobs.

    Args:
        spectrum: Phase-centered spectrum from phase_centered_spectrum().
        kernel: Propagator kernel from make_kernel().
        z: 1D array of axial displacements in pixels.
        n_jobs: Number of worker threads, joblib semantics (-1 uses all
            cores). Default None evaluates sequentially.

    Raises:
        ArgumentTypeError: n_jobs is not an integer.
        InvalidArgumentError: n_jobs is zero.

    Returns:
        Complex array of shape (z.size,), in the order of z.
    """
    n_jobs = check_n_jobs(n_jobs)
    z = np.atleast_1d(z).ravel()
    field = np.empty(z.shape, dtype=complex_dtype(kernel.dtype))

    if n_jobs is None or n_jobs == 1:
        for n, zn in enumerate(z):
            field[n] = evaluate_depth(spectrum, kernel, zn)
    else:
        logger.debug("Evaluating %d depths with n_jobs=%s", z.size, n_jobs)
        values = Parallel(n_jobs=n_jobs, prefer="threads")(
            delayed(evaluate_depth)(spectrum, kernel, zn) for zn in z
        )
        field[:] = values

    return field


def rs_axial(
    hologram=None,
    z=None,
    rc=None,
    wavelength=None,
    pixel_pitch=None,
    dtype: DTypeLike = np.float64,
    n_jobs: Optional[int] = None,
) -> np.ndarray:
    """Rayleigh-Sommerfeld back-propagation of a hologram along an axial line.

    Computes the complex field at the transverse point rc for each axial
    displacement in z, without reconstructing any full plane.

    Args:
        hologram: 2D real array, background-normalized so a uniform
            background equals 1. Axis 0 is x, axis 1 is y.
        z: Axial displacement(s) from the focal plane in pixels. Scalar or
            array; multidimensional input is flattened.
        rc: Transverse point (x, y) in pixels.
        wavelength: Wavelength in the medium. Defaults to 0.632 if None or
            not a real scalar.
        pixel_pitch: Length units per pixel, same units as wavelength.
            Defaults to 0.135 if None or not a real scalar.
        dtype: Working precision, np.float64 (default) or np.float32.
        n_jobs: Worker threads for the depth loop (see evaluate_depths).

    Returns:
        1D complex array with one field value per displacement, in the
        order given.

    Raises:
        ArityError: hologram, z or rc is missing.
        ArgumentTypeError: An argument is not real numeric data, or n_jobs
            is not an integer.
        ShapeError: hologram is not 2D, z is empty, or rc does not have two
            components.
        InvalidArgumentError: z or rc contain non-finite values, wavelength
            or pixel_pitch is a number that is not positive and finite, or
            n_jobs is zero.

    Example:
        ```python
        a = np.ones((256, 256))
        a[128, 100] = 1.2
        field = rs_axial(a, np.arange(-50, 51), (128, 100))
        intensity = np.abs(field) ** 2
        ```
    """
    inputs = validate_inputs(hologram, z, rc, dtype=dtype, n_jobs=n_jobs)
    params = OpticalParameters.from_values(wavelength, pixel_pitch)

    logger.debug(
        "rs_axial: hologram %s, %d depth(s), %s",
        inputs.hologram.shape, inputs.z.size, params,
    )

    grid = make_frequency_grid(inputs.hologram.shape, inputs.rc, params, inputs.dtype)
    kernel = make_kernel(grid)
    spectrum = phase_centered_spectrum(inputs.hologram, grid)

    return evaluate_depths(spectrum, kernel, inputs.z, n_jobs=inputs.n_jobs)
