"""Axial back-propagation of holograms."""

from .axial import (
    phase_centered_spectrum,
    evaluate_depth,
    evaluate_depths,
    rs_axial,
)
from .validation import ValidatedInputs, validate_inputs, check_n_jobs

__all__ = [
    "phase_centered_spectrum",
    "evaluate_depth",
    "evaluate_depths",
    "rs_axial",
    "ValidatedInputs",
    "validate_inputs",
    "check_n_jobs",
]
