"""
Primality — Стратегия проверки простоты рациональных целых

Граница зависимости: классификация гауссовых простых сводится к проверке
простоты обычного целого (нормы или модуля компоненты). Для больших норм
именно эта проверка определяет стоимость всего предиката, поэтому:
- Ядро не реализует собственное решето и не использует trial division
- Проверка подключается через протокол PrimeChecker (один метод is_prime)
- Реализация по умолчанию: sympy.isprime (Miller-Rabin + strong Lucas, BPSW)

Стратегию можно заменить глобально (set_default_prime_checker) или передать
явно в конкретный вызов (GaussianInt.is_gaussian_prime(checker=...)).
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Callable, Final, Protocol, runtime_checkable

from sympy import isprime

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Размер LRU-кэша по умолчанию для SympyPrimeChecker
DEFAULT_PRIME_CACHE_SIZE: Final[int] = 4096


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class PrimalityConfig:
    """Конфигурация проверки простоты.

    cache_size = 0 отключает кэширование результатов.
    """

    cache_size: int = DEFAULT_PRIME_CACHE_SIZE

    def __post_init__(self) -> None:
        if self.cache_size < 0:
            raise ValueError(f"cache_size must be non-negative, got {self.cache_size}")


# =============================================================================
# PORT
# =============================================================================


@runtime_checkable
class PrimeChecker(Protocol):
    """Порт проверки простоты неотрицательного целого."""

    def is_prime(self, n: int) -> bool:
        """Return True if n is a rational prime."""
        ...


# =============================================================================
# SYMPY ADAPTER
# =============================================================================


class SympyPrimeChecker:
    """Проверка простоты через sympy.isprime с опциональным LRU-кэшем."""

    def __init__(self, config: PrimalityConfig | None = None):
        self.config = config or PrimalityConfig()

        self._check: Callable[[int], bool]
        if self.config.cache_size > 0:
            self._check = lru_cache(maxsize=self.config.cache_size)(isprime)
        else:
            self._check = isprime

        logger.debug("SympyPrimeChecker created (cache_size=%d)", self.config.cache_size)

    def is_prime(self, n: int) -> bool:
        """
        Проверка простоты.

        Args:
            n: Целое число (отрицательные, 0 и 1 не простые)

        Returns:
            True если n является рациональным простым
        """
        if n < 2:
            return False
        return bool(self._check(n))

    def cache_info(self) -> Any:
        """Статистика кэша (None если кэширование отключено)."""
        if self.config.cache_size == 0:
            return None
        return self._check.cache_info()  # type: ignore[attr-defined]


# =============================================================================
# DEFAULT CHECKER
# =============================================================================

_default_checker: PrimeChecker | None = None


def get_default_prime_checker() -> PrimeChecker:
    """Текущая стратегия по умолчанию (создаётся лениво)."""
    global _default_checker
    if _default_checker is None:
        _default_checker = SympyPrimeChecker()
    return _default_checker


def set_default_prime_checker(checker: PrimeChecker | None) -> None:
    """
    Замена стратегии по умолчанию.

    Args:
        checker: Новая стратегия; None возвращает SympyPrimeChecker

    Raises:
        TypeError: Если объект не реализует PrimeChecker
    """
    global _default_checker
    if checker is not None and not isinstance(checker, PrimeChecker):
        raise TypeError(
            f"checker must implement is_prime(n) -> bool, got {type(checker).__name__}"
        )

    _default_checker = checker
    logger.debug(
        "Default prime checker set to %s",
        type(checker).__name__ if checker is not None else "SympyPrimeChecker (lazy)",
    )


def is_rational_prime(n: int, checker: PrimeChecker | None = None) -> bool:
    """Проверка простоты обычного целого выбранной стратегией."""
    return (checker or get_default_prime_checker()).is_prime(n)
