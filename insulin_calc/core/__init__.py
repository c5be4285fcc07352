"""
Core domain models and pure functions for the insulin dose calculator.

This module contains the domain models and pure business logic
that are independent of external I/O and infrastructure concerns.
"""

from .models import DoseInputs, DoseResult, DoseForm, RatioSettings
from .dose import compute_dose
from .errors import DoseInputError, MissingFieldError, InvalidMagnitudeError, UnconfiguredRatiosError
from .validation import validate_form, validate_ratios, check_preconditions

__all__ = [
    "DoseInputs", "DoseResult", "DoseForm", "RatioSettings", "compute_dose",
    "DoseInputError", "MissingFieldError", "InvalidMagnitudeError", "UnconfiguredRatiosError",
    "validate_form", "validate_ratios", "check_preconditions",
]
