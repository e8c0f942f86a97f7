"""
Domain models and value objects.

Contains the GaussianInt value type and its text notation.
"""

from gaussiant.core.domain.gaussian_int import (
    GaussianInt,
    format_gaussian_int,
    gaussint,
    parse_gaussian_int,
)
from gaussiant.core.domain.notation import (
    GAUSSIAN_INT_PATTERN,
    format_components,
    parse_components,
)

__all__ = [
    # GaussianInt model
    "GaussianInt",
    "gaussint",
    "parse_gaussian_int",
    "format_gaussian_int",
    # Notation
    "GAUSSIAN_INT_PATTERN",
    "parse_components",
    "format_components",
]
