"""
gaussiant — Gaussian integers for Python

A Gaussian integer is a complex number a + bi whose real and imaginary
parts are both integers. The centerpiece is GaussianInt.is_gaussian_prime.
"""

from gaussiant.core.domain import (
    GaussianInt,
    format_gaussian_int,
    gaussint,
    parse_gaussian_int,
)
from gaussiant.core.errors import DivisionByZeroError, GaussianIntError, ParseError
from gaussiant.core.math import (
    PrimalityConfig,
    PrimeChecker,
    SympyPrimeChecker,
    get_default_prime_checker,
    set_default_prime_checker,
)
from gaussiant.core.math.sequences import (
    GaussianIntSequence,
    gaussian_ints_in_box,
    gaussian_primes_in_box,
    positive_prime_sequence,
    positive_sequence,
)

__version__ = "0.5.0"

__all__ = [
    # Types
    "GaussianInt",
    # Construction and notation
    "gaussint",
    "parse_gaussian_int",
    "format_gaussian_int",
    # Errors
    "GaussianIntError",
    "ParseError",
    "DivisionByZeroError",
    # Primality
    "PrimalityConfig",
    "PrimeChecker",
    "SympyPrimeChecker",
    "get_default_prime_checker",
    "set_default_prime_checker",
    # Sequences
    "GaussianIntSequence",
    "positive_sequence",
    "positive_prime_sequence",
    "gaussian_ints_in_box",
    "gaussian_primes_in_box",
]
