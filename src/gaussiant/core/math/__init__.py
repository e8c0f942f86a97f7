"""
Core math modules для gaussiant

Стратегия проверки простоты рациональных целых.

Ленивые перечисления зависят от доменной модели и импортируются напрямую:
    from gaussiant.core.math.sequences import positive_sequence
"""

from gaussiant.core.math.primality import (
    DEFAULT_PRIME_CACHE_SIZE,
    PrimalityConfig,
    PrimeChecker,
    SympyPrimeChecker,
    get_default_prime_checker,
    is_rational_prime,
    set_default_prime_checker,
)

__all__ = [
    # Primality — Constants
    "DEFAULT_PRIME_CACHE_SIZE",
    # Primality — Types
    "PrimalityConfig",
    "PrimeChecker",
    "SympyPrimeChecker",
    # Primality — Functions
    "get_default_prime_checker",
    "set_default_prime_checker",
    "is_rational_prime",
]
