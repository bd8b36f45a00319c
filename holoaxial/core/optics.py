"""Optical parameters and frequency-space grid data structures."""

import logging
import numbers
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from numpy.typing import DTypeLike

from ..errors import InvalidArgumentError
from ..math.fourier import centered_frequencies, outer_sum

__all__ = [
    "DEFAULT_WAVELENGTH",
    "DEFAULT_PIXEL_PITCH",
    "OpticalParameters",
    "FrequencyGrid",
    "make_frequency_grid",
]

logger = logging.getLogger(__name__)

# Calibration of the reference instrument; override per setup.
DEFAULT_WAVELENGTH = 0.632
DEFAULT_PIXEL_PITCH = 0.135


def _is_real_scalar(value) -> bool:
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Real):
        return True
    return isinstance(value, np.ndarray) and value.ndim == 0 and value.dtype.kind in "iuf"


@dataclass(frozen=True)
class OpticalParameters:
    """Immutable optical parameters of the recording setup.

    Wavelength and pixel pitch share one length unit (typically microns).

    Attributes:
        wavelength: Wavelength of light in the medium.
        pixel_pitch: Length units per pixel in the hologram plane.

    Example:
        ```python
        params = OpticalParameters(wavelength=0.447, pixel_pitch=0.048)
        print(params.k)  # 2*pi*0.048/0.447 -> ~0.675 radians/pixel
        ```
    """

    wavelength: float = DEFAULT_WAVELENGTH
    pixel_pitch: float = DEFAULT_PIXEL_PITCH

    def __post_init__(self) -> None:
        """Validate parameters."""
        if not np.isfinite(self.wavelength) or self.wavelength <= 0:
            raise ValueError(f"Wavelength must be positive and finite, got {self.wavelength}")
        if not np.isfinite(self.pixel_pitch) or self.pixel_pitch <= 0:
            raise ValueError(f"Pixel pitch must be positive and finite, got {self.pixel_pitch}")

    @property
    def k(self) -> float:
        """Wavenumber in the medium (radians/pixel)."""
        return 2.0 * np.pi * self.pixel_pitch / self.wavelength

    @classmethod
    def from_values(cls, wavelength=None, pixel_pitch=None) -> "OpticalParameters":
        """Build parameters, falling back to defaults for unusable values.

        Anything that is not a real numeric scalar (None, arrays, strings,
        booleans) is replaced by the corresponding default. Numeric scalars
        that are zero, negative, NaN or infinite are errors.

        Args:
            wavelength: Candidate wavelength.
            pixel_pitch: Candidate pixel pitch.

        Returns:
            OpticalParameters with every field a float.

        Raises:
            InvalidArgumentError: A numeric value is not positive and finite.
        """
        values = {}
        for name, value, default in (
            ("wavelength", wavelength, DEFAULT_WAVELENGTH),
            ("pixel_pitch", pixel_pitch, DEFAULT_PIXEL_PITCH),
        ):
            if _is_real_scalar(value):
                value = float(value)
                if not np.isfinite(value) or value <= 0:
                    raise InvalidArgumentError(
                        name, f"must be positive and finite, got {value}"
                    )
                values[name] = value
            else:
                if value is not None:
                    logger.warning(
                        "Ignoring non-scalar %s %r; using default %g",
                        name, value, default,
                    )
                values[name] = default
        return cls(**values)


@dataclass(frozen=True)
class FrequencyGrid:
    """Depth-independent frequency-space quantities for one hologram shape.

    Created once via make_frequency_grid() and shared by all depths.

    Attributes:
        qx: 1D centered angular frequencies along axis 0 (radians/pixel).
        qy: 1D centered angular frequencies along axis 1 (radians/pixel).
        k: Wavenumber (radians/pixel).
        qsq: 2D grid of (qx/k)**2 + (qy/k)**2.
        qrc: 2D phase-ramp grid x*qx + y*qy for the evaluation point.
        rc: Evaluation point (x, y) in pixels.
    """

    qx: np.ndarray
    qy: np.ndarray
    k: float
    qsq: np.ndarray
    qrc: np.ndarray
    rc: Tuple[float, float]

    @property
    def shape(self) -> Tuple[int, int]:
        """Return (nx, ny) shape."""
        return self.qsq.shape

    @property
    def dtype(self) -> np.dtype:
        """Real floating dtype of the grid."""
        return self.qsq.dtype


def make_frequency_grid(
    shape: Tuple[int, int],
    rc: Tuple[float, float],
    params: OpticalParameters = OpticalParameters(),
    dtype: DTypeLike = np.float64,
) -> FrequencyGrid:
    """Compute frequency-space grids. Call once per hologram, reuse per depth.

    Args:
        shape: Hologram shape as (nx, ny).
        rc: Transverse evaluation point (x, y) in pixels; x indexes axis 0.
        params: Optical parameters.
        dtype: Real floating dtype for every grid.

    Returns:
        FrequencyGrid with all depth-independent frequency quantities.

    Example:
        ```python
        grid = make_frequency_grid((256, 256), (128.0, 97.5))
        ```
    """
    nx, ny = shape
    dtype = np.dtype(dtype)
    k = params.k

    qx = centered_frequencies(nx, dtype)
    qy = centered_frequencies(ny, dtype)

    qsq = outer_sum((qx / k) ** 2, (qy / k) ** 2).astype(dtype, copy=False)
    qrc = outer_sum(rc[0] * qx, rc[1] * qy).astype(dtype, copy=False)

    logger.debug(
        "Frequency grid %dx%d (%s), k=%.6g rad/pixel, rc=(%g, %g)",
        nx, ny, dtype, k, rc[0], rc[1],
    )

    return FrequencyGrid(
        qx=qx,
        qy=qy,
        k=k,
        qsq=qsq,
        qrc=qrc,
        rc=(float(rc[0]), float(rc[1])),
    )
