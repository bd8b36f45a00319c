"""holoaxial - Rayleigh-Sommerfeld refocusing of holograms along an axial line.

Back-propagates a single background-normalized hologram to a set of
axial displacements, evaluating the field only at one transverse point.
This gives the axial intensity profile through a scatterer without
reconstructing a 3D volume.

The library is organized into three modules:

- **core**: Optical parameters, frequency grids and the propagator kernel
- **compute**: Input validation and the axial evaluation
- **math**: Centered Fourier transforms and floating-point helpers

Example:
    >>> import numpy as np
    >>> from holoaxial import rs_axial
    >>>
    >>> a = np.ones((256, 256))      # normalized hologram
    >>> a[128, 100] = 1.2
    >>> z = np.arange(-50, 51)       # displacements in pixels
    >>> field = rs_axial(a, z, (128, 100), wavelength=0.447, pixel_pitch=0.048)
    >>>
    >>> # Stages can also be built once and reused
    >>> from holoaxial import OpticalParameters, make_frequency_grid, make_kernel
    >>> from holoaxial import phase_centered_spectrum, evaluate_depths
    >>> params = OpticalParameters(wavelength=0.447, pixel_pitch=0.048)
    >>> grid = make_frequency_grid(a.shape, (128, 100), params)
    >>> kernel = make_kernel(grid)
    >>> spectrum = phase_centered_spectrum(a, grid)
    >>> field = evaluate_depths(spectrum, kernel, z)

Reference:
    Lee, S.-H. and Grier, D.G. "Holographic microscopy of holographically
    trapped three-dimensional structures." Optics Express 15.4 (2007):
    1505-1512.
"""

__version__ = "0.1.0"

# =============================================================================
# Core - Data structures and propagator kernel
# =============================================================================
from .core import (
    DEFAULT_WAVELENGTH,
    DEFAULT_PIXEL_PITCH,
    OpticalParameters,
    FrequencyGrid,
    make_frequency_grid,
    PropagatorKernel,
    make_kernel,
    stability_limit,
)

# =============================================================================
# Compute - Axial evaluation
# =============================================================================
from .compute import (
    phase_centered_spectrum,
    evaluate_depth,
    evaluate_depths,
    rs_axial,
    validate_inputs,
)

# =============================================================================
# Errors
# =============================================================================
from .errors import (
    InvalidArgumentError,
    ArityError,
    ArgumentTypeError,
    ShapeError,
)

__all__ = [
    # Version
    "__version__",
    # Core data structures
    "DEFAULT_WAVELENGTH",
    "DEFAULT_PIXEL_PITCH",
    "OpticalParameters",
    "FrequencyGrid",
    "make_frequency_grid",
    "PropagatorKernel",
    "make_kernel",
    "stability_limit",
    # Axial evaluation
    "phase_centered_spectrum",
    "evaluate_depth",
    "evaluate_depths",
    "rs_axial",
    "validate_inputs",
    # Errors
    "InvalidArgumentError",
    "ArityError",
    "ArgumentTypeError",
    "ShapeError",
]
