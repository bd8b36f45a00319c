"""Centered Fourier transform utilities."""

import numpy as np
from numpy.fft import fftfreq, fftshift
from numpy.typing import DTypeLike

__all__ = ["centered_frequencies", "centered_fft2", "outer_sum"]


def centered_frequencies(n: int, dtype: DTypeLike = np.float64) -> np.ndarray:
    """Generate angular frequencies in centered (zero-in-the-middle) order.

    The ordering matches ``numpy.fft.fftshift`` applied to a length-n
    transform, so element i of the result is the angular frequency of
    element i of a centered spectrum.

    Args:
        n: Number of samples along the axis.
        dtype: Real floating dtype of the result.

    Returns:
        1D array of angular frequencies in radians/pixel. For even n the
        values run from -pi up to pi - 2*pi/n in steps of 2*pi/n.

    Example:
        ```python
        q = centered_frequencies(4)
        # Returns: [-3.14159265, -1.57079633,  0.        ,  1.57079633]
        ```
    """
    return (2.0 * np.pi * fftshift(fftfreq(n))).astype(dtype)


def centered_fft2(a: np.ndarray) -> np.ndarray:
    """Forward 2D FFT with the zero frequency moved to the array center.

    The transform is normalized by 1/(nx*ny) on the forward pass, so summing
    the spectrum (times any phase ramp) is the inverse transform evaluated
    at a single point.

    Args:
        a: 2D real or complex array.

    Returns:
        Complex spectrum with the same shape as ``a``, ordered like
        ``centered_frequencies`` along each axis. Single precision input
        stays single precision.
    """
    spectrum = np.fft.fft2(a, norm="forward")
    if a.dtype in (np.float32, np.complex64):
        spectrum = spectrum.astype(np.complex64)
    return fftshift(spectrum)


def outer_sum(u: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Broadcast sum of two 1D axes into a 2D grid.

    Element (i, j) of the result is ``u[i] + v[j]``.

    Args:
        u: 1D array of length nx (varies along rows).
        v: 1D array of length ny (varies along columns).

    Returns:
        2D array of shape (nx, ny).
    """
    return u[:, np.newaxis] + v[np.newaxis, :]
