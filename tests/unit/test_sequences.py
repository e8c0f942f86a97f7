"""
Тесты для ленивых перечислений гауссовых целых

Проверяет:
1. Порядок positive_sequence (норма, затем im) и полноту
2. Перезапускаемость: каждый iter() начинает заново
3. positive_prime_sequence: только простые с re > 0
4. Ограниченные перечисления gaussian_ints_in_box / gaussian_primes_in_box
"""

from itertools import islice, takewhile

import pytest

from gaussiant import (
    GaussianInt,
    GaussianIntSequence,
    gaussian_ints_in_box,
    gaussian_primes_in_box,
    positive_prime_sequence,
    positive_sequence,
)


def _gi(text: str) -> GaussianInt:
    return GaussianInt.parse(text)


# =============================================================================
# POSITIVE SEQUENCE
# =============================================================================


class TestPositiveSequence:
    """Тесты для positive_sequence"""

    def test_first_elements(self) -> None:
        expected = [_gi(t) for t in ["1", "1-i", "1+i", "2", "1-2i", "2-i", "2+i", "1+2i", "2-2i", "2+2i", "3"]]
        assert positive_sequence().take(11) == expected

    def test_real_part_positive(self) -> None:
        assert all(z.re > 0 for z in positive_sequence().take(500))

    def test_order_is_norm_then_imaginary(self) -> None:
        prefix = positive_sequence().take(500)
        keys = [(z.norm(), z.im) for z in prefix]
        assert keys == sorted(keys)
        assert len(set(keys)) == len(keys)

    def test_complete_up_to_norm(self) -> None:
        """Каждое a + bi с a > 0 и нормой <= 50 встречается ровно один раз"""
        bound = 50
        prefix = list(takewhile(lambda z: z.norm() <= bound, positive_sequence()))
        expected = {
            GaussianInt(a, b)
            for a in range(1, 8)
            for b in range(-7, 8)
            if a * a + b * b <= bound
        }
        assert len(prefix) == len(expected)
        assert set(prefix) == expected

    def test_restartable(self) -> None:
        """Повторные обходы детерминированы и независимы"""
        seq = positive_sequence()
        assert seq.take(50) == seq.take(50)
        assert positive_sequence().take(50) == seq.take(50)

        first = iter(seq)
        list(islice(first, 5))
        second = iter(seq)
        assert next(second) == GaussianInt(1, 0)
        assert next(first) == _gi("2-i")

    def test_take_zero_and_negative(self) -> None:
        assert positive_sequence().take(0) == []
        with pytest.raises(ValueError, match="non-negative"):
            positive_sequence().take(-1)

    def test_repr(self) -> None:
        assert isinstance(positive_sequence(), GaussianIntSequence)
        assert repr(positive_sequence()) == "GaussianIntSequence(positive)"


# =============================================================================
# POSITIVE PRIME SEQUENCE
# =============================================================================


class TestPositivePrimeSequence:
    """Тесты для positive_prime_sequence"""

    def test_first_primes(self) -> None:
        expected = [
            _gi(t)
            for t in ["1-i", "1+i", "1-2i", "2-i", "2+i", "1+2i", "3", "2-3i", "3-2i", "3+2i", "2+3i"]
        ]
        assert positive_prime_sequence().take(11) == expected

    def test_every_element_is_prime(self) -> None:
        for z in positive_prime_sequence().take(200):
            assert z.re > 0
            assert z.is_gaussian_prime()

    def test_matches_filtered_positive_sequence(self) -> None:
        """take(n) может оборваться внутри слоя нормы: сравниваются полные слои"""
        primes = positive_prime_sequence().take(100)
        last_norm = primes[-1].norm()
        filtered = [
            z
            for z in takewhile(lambda z: z.norm() < last_norm, positive_sequence())
            if z.is_gaussian_prime()
        ]
        assert filtered
        assert filtered == primes[: len(filtered)]
        assert all(z.norm() == last_norm for z in primes[len(filtered):])

    def test_restartable(self) -> None:
        seq = positive_prime_sequence()
        assert seq.take(30) == seq.take(30)

    def test_explicit_checker(self) -> None:
        class OnlyTwo:
            def is_prime(self, n: int) -> bool:
                return n == 2

        assert positive_prime_sequence(OnlyTwo()).take(2) == [_gi("1-i"), _gi("1+i")]


# =============================================================================
# BOUNDED ENUMERATIONS
# =============================================================================


class TestBoxEnumerations:
    """Тесты для gaussian_ints_in_box / gaussian_primes_in_box"""

    def test_ints_in_box(self) -> None:
        assert list(gaussian_ints_in_box(1)) == [
            GaussianInt(0, -1),
            GaussianInt(0, 0),
            GaussianInt(0, 1),
            GaussianInt(1, -1),
            GaussianInt(1, 0),
            GaussianInt(1, 1),
        ]
        assert len(list(gaussian_ints_in_box(3))) == 4 * 7

    def test_primes_in_box(self) -> None:
        assert list(gaussian_primes_in_box(3)) == [
            GaussianInt(0, 3),
            GaussianInt(1, 1),
            GaussianInt(1, 2),
            GaussianInt(2, 1),
            GaussianInt(2, 3),
            GaussianInt(3, 0),
            GaussianInt(3, 2),
        ]

    def test_zero_limit(self) -> None:
        assert list(gaussian_ints_in_box(0)) == [GaussianInt(0, 0)]
        assert list(gaussian_primes_in_box(0)) == []

    def test_negative_limit(self) -> None:
        with pytest.raises(ValueError, match="limit must be non-negative"):
            gaussian_ints_in_box(-1)
        with pytest.raises(ValueError, match="limit must be non-negative"):
            gaussian_primes_in_box(-1)

    def test_box_is_restartable(self) -> None:
        box = gaussian_primes_in_box(10)
        assert list(box) == list(box)

    def test_divisors_of_five(self) -> None:
        """Делители 5 с re > 0 среди gaussian_ints_in_box(5)"""
        divisors = [z for z in gaussian_ints_in_box(5) if z.re > 0 and z.divides(5)]
        assert divisors == [
            GaussianInt(1, -2),
            GaussianInt(1, 0),
            GaussianInt(1, 2),
            GaussianInt(2, -1),
            GaussianInt(2, 1),
            GaussianInt(5, 0),
        ]
