"""
Тесты для стратегии проверки простоты

Проверяет:
1. SympyPrimeChecker на малых, больших и граничных значениях
2. PrimalityConfig и кэширование
3. Замену стратегии по умолчанию
"""

import dataclasses

import pytest

from gaussiant import GaussianInt
from gaussiant.core.math import (
    DEFAULT_PRIME_CACHE_SIZE,
    PrimalityConfig,
    PrimeChecker,
    SympyPrimeChecker,
    get_default_prime_checker,
    is_rational_prime,
    set_default_prime_checker,
)


@pytest.fixture(autouse=True)
def reset_default_checker():
    """Каждый тест начинает со стратегии по умолчанию."""
    set_default_prime_checker(None)
    yield
    set_default_prime_checker(None)


class NeverPrime:
    """Стратегия, которая считает все числа составными."""

    def is_prime(self, n: int) -> bool:
        return False


# =============================================================================
# CONFIG
# =============================================================================


class TestPrimalityConfig:
    """Тесты для PrimalityConfig"""

    def test_defaults(self) -> None:
        assert PrimalityConfig().cache_size == DEFAULT_PRIME_CACHE_SIZE

    def test_negative_cache_size(self) -> None:
        with pytest.raises(ValueError, match="cache_size must be non-negative"):
            PrimalityConfig(cache_size=-1)

    def test_frozen(self) -> None:
        config = PrimalityConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.cache_size = 10  # type: ignore


# =============================================================================
# SYMPY CHECKER
# =============================================================================


class TestSympyPrimeChecker:
    """Тесты для SympyPrimeChecker"""

    @pytest.mark.parametrize("n", [2, 3, 5, 97, 7919, 2**61 - 1, 2**89 - 1])
    def test_primes(self, n: int) -> None:
        assert SympyPrimeChecker().is_prime(n)

    @pytest.mark.parametrize("n", [-7, -1, 0, 1, 4, 561, 7917, 2**61 + 1, (2**31 - 1) ** 2])
    def test_non_primes(self, n: int) -> None:
        """Отрицательные, 0, 1, составные, числа Кармайкла"""
        assert not SympyPrimeChecker().is_prime(n)

    def test_implements_protocol(self) -> None:
        assert isinstance(SympyPrimeChecker(), PrimeChecker)

    def test_cache_hits(self) -> None:
        checker = SympyPrimeChecker(PrimalityConfig(cache_size=8))
        checker.is_prime(97)
        checker.is_prime(97)
        info = checker.cache_info()
        assert info.hits == 1
        assert info.misses == 1

    def test_cache_disabled(self) -> None:
        checker = SympyPrimeChecker(PrimalityConfig(cache_size=0))
        assert checker.is_prime(13)
        assert checker.cache_info() is None


# =============================================================================
# DEFAULT CHECKER
# =============================================================================


class TestDefaultChecker:
    """Тесты для глобальной стратегии"""

    def test_default_is_sympy(self) -> None:
        checker = get_default_prime_checker()
        assert isinstance(checker, SympyPrimeChecker)
        assert get_default_prime_checker() is checker

    def test_replace_default(self) -> None:
        """Замена влияет на is_gaussian_prime без явного checker"""
        assert GaussianInt(2, 1).is_gaussian_prime()
        set_default_prime_checker(NeverPrime())
        assert not GaussianInt(2, 1).is_gaussian_prime()
        assert not is_rational_prime(7)

    def test_reset_default(self) -> None:
        set_default_prime_checker(NeverPrime())
        set_default_prime_checker(None)
        assert isinstance(get_default_prime_checker(), SympyPrimeChecker)
        assert is_rational_prime(7)

    def test_rejects_non_checker(self) -> None:
        with pytest.raises(TypeError, match="is_prime"):
            set_default_prime_checker(object())  # type: ignore[arg-type]

    def test_explicit_checker_overrides_default(self) -> None:
        set_default_prime_checker(NeverPrime())
        assert is_rational_prime(7, checker=SympyPrimeChecker())
