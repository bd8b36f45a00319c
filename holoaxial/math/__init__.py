"""Mathematical utilities for angular-spectrum propagation."""

from .fourier import centered_frequencies, centered_fft2, outer_sum
from .numeric import complex_dtype, machine_epsilon, complex_sqrt

__all__ = [
    "centered_frequencies",
    "centered_fft2",
    "outer_sum",
    "complex_dtype",
    "machine_epsilon",
    "complex_sqrt",
]
