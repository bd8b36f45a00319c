"""Core data structures for angular-spectrum propagation."""

from .optics import (
    DEFAULT_WAVELENGTH,
    DEFAULT_PIXEL_PITCH,
    OpticalParameters,
    FrequencyGrid,
    make_frequency_grid,
)
from .kernel import PropagatorKernel, make_kernel, stability_limit

__all__ = [
    "DEFAULT_WAVELENGTH",
    "DEFAULT_PIXEL_PITCH",
    "OpticalParameters",
    "FrequencyGrid",
    "make_frequency_grid",
    "PropagatorKernel",
    "make_kernel",
    "stability_limit",
]
