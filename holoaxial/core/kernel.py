"""Rayleigh-Sommerfeld propagator kernel in the angular-spectrum domain."""

import logging
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike

from ..math.numeric import complex_sqrt, machine_epsilon
from .optics import FrequencyGrid

__all__ = ["PropagatorKernel", "make_kernel", "stability_limit"]

logger = logging.getLogger(__name__)


def stability_limit(dtype: DTypeLike = np.float64) -> float:
    """Largest decay exponent whose exponential is still meaningful.

    exp(-x) drops below machine epsilon once x exceeds |ln(eps)|; such
    terms are treated as exact zeros.

    Args:
        dtype: Real floating dtype in use.

    Returns:
        |ln(eps)|, about 36.04 for float64 and 15.94 for float32.
    """
    return abs(float(np.log(machine_epsilon(dtype))))


@dataclass(frozen=True)
class PropagatorKernel:
    """Depth-independent factors of the propagator exp(i*kappa*z - gamma*|z|).

    Attributes:
        kappa: 2D propagation phase rate per mode (radians/pixel).
        gamma: 2D evanescent decay rate per mode (1/pixel), >= 0.
        limit: Stability cutoff on gamma*|z|.
    """

    kappa: np.ndarray
    gamma: np.ndarray
    limit: float

    @property
    def shape(self) -> Tuple[int, int]:
        """Return (nx, ny) shape."""
        return self.kappa.shape

    @property
    def dtype(self) -> np.dtype:
        """Real floating dtype of the kernel."""
        return self.kappa.dtype


def make_kernel(grid: FrequencyGrid) -> PropagatorKernel:
    """Split the propagator phase factor into propagation and decay rates.

    Physics:
        qfac = k * sqrt(1 - (q/k)^2) - k
        kappa = Re(qfac), gamma = Im(qfac)

    Modes with (q/k)^2 > 1 are evanescent: the complex square root is
    purely imaginary there, so kappa = -k and gamma > 0.

    Args:
        grid: Precomputed frequency grid from make_frequency_grid().

    Returns:
        PropagatorKernel sharing the grid's precision.
    """
    dtype = grid.dtype
    k = grid.k

    qfac = k * complex_sqrt(1.0 - grid.qsq) - k

    kappa = np.ascontiguousarray(qfac.real, dtype=dtype)
    gamma = np.ascontiguousarray(qfac.imag, dtype=dtype)
    limit = stability_limit(dtype)

    logger.debug(
        "Propagator kernel: %d of %d modes evanescent, limit=%.4g",
        int(np.count_nonzero(gamma > 0)), gamma.size, limit,
    )

    return PropagatorKernel(kappa=kappa, gamma=gamma, limit=limit)
