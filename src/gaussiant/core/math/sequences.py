"""
Sequences — Ленивые перечисления гауссовых целых

Бесконечные и ограниченные перечисления без предварительной материализации.
Каждое перечисление является объектом GaussianIntSequence и хранит только фабрику
генератора, поэтому любой вызов iter() начинает обход заново и не делит
состояние с другими обходами.

ПОРЯДОК positive_sequence / positive_prime_sequence:
    1. по возрастанию нормы re² + im²
    2. при равной норме по возрастанию im
При re > 0 пара (норма, im) однозначно задаёт элемент, поэтому порядок
полный и детерминированный:
    1, 1-i, 1+i, 2, 1-2i, 2-i, 2+i, 1+2i, 2-2i, 2+2i, 3, ...
"""

from itertools import count, islice
from math import isqrt
from typing import Callable, Iterator

from gaussiant.core.domain.gaussian_int import GaussianInt
from gaussiant.core.math.primality import PrimeChecker, get_default_prime_checker


# =============================================================================
# RESTARTABLE SEQUENCE
# =============================================================================


class GaussianIntSequence:
    """
    Перезапускаемая ленивая последовательность GaussianInt.

    Args:
        factory: Функция без аргументов, возвращающая новый итератор
        name: Имя для repr
    """

    def __init__(self, factory: Callable[[], Iterator[GaussianInt]], name: str):
        self._factory = factory
        self.name = name

    def __iter__(self) -> Iterator[GaussianInt]:
        return self._factory()

    def take(self, n: int) -> list[GaussianInt]:
        """
        Первые n элементов.

        Raises:
            ValueError: Если n отрицательное
        """
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return list(islice(iter(self), n))

    def __repr__(self) -> str:
        return f"GaussianIntSequence({self.name})"


# =============================================================================
# GENERATORS
# =============================================================================


def _norm_shell(norm: int) -> list[GaussianInt]:
    """Все a + bi с a > 0 и a² + b² == norm, по возрастанию b."""
    shell = []
    for real in range(1, isqrt(norm) + 1):
        rest = norm - real * real
        imag = isqrt(rest)
        if imag * imag != rest:
            continue
        shell.append(GaussianInt(real, imag))
        if imag:
            shell.append(GaussianInt(real, -imag))

    shell.sort(key=lambda z: z.im)
    return shell


def _iter_positive() -> Iterator[GaussianInt]:
    for norm in count(1):
        yield from _norm_shell(norm)


def _validate_limit(limit: int) -> None:
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")


# =============================================================================
# PUBLIC API
# =============================================================================


def positive_sequence() -> GaussianIntSequence:
    """Все гауссовы целые с re > 0 (бесконечная последовательность)."""
    return GaussianIntSequence(_iter_positive, "positive")


def positive_prime_sequence(checker: PrimeChecker | None = None) -> GaussianIntSequence:
    """
    Все гауссовы простые с re > 0 (бесконечная последовательность).

    Args:
        checker: Стратегия проверки простоты (по умолчанию текущая
            глобальная на момент вызова)
    """
    if checker is None:
        checker = get_default_prime_checker()

    def factory() -> Iterator[GaussianInt]:
        return (z for z in _iter_positive() if z.is_gaussian_prime(checker))

    return GaussianIntSequence(factory, "positive_prime")


def gaussian_ints_in_box(limit: int) -> GaussianIntSequence:
    """
    Гауссовы целые a + bi с 0 <= a <= limit и -limit <= b <= limit.

    Обход по a, затем по b, оба по возрастанию.

    Raises:
        ValueError: Если limit отрицательный
    """
    _validate_limit(limit)

    def factory() -> Iterator[GaussianInt]:
        for real in range(limit + 1):
            for imag in range(-limit, limit + 1):
                yield GaussianInt(real, imag)

    return GaussianIntSequence(factory, f"box({limit})")


def gaussian_primes_in_box(
    limit: int, checker: PrimeChecker | None = None
) -> GaussianIntSequence:
    """
    Гауссовы простые a + bi с 0 <= a <= limit и 0 <= b <= limit.

    Raises:
        ValueError: Если limit отрицательный
    """
    _validate_limit(limit)
    if checker is None:
        checker = get_default_prime_checker()

    def factory() -> Iterator[GaussianInt]:
        for real in range(limit + 1):
            for imag in range(limit + 1):
                z = GaussianInt(real, imag)
                if z.is_gaussian_prime(checker):
                    yield z

    return GaussianIntSequence(factory, f"prime_box({limit})")
