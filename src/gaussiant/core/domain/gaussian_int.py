"""
GaussianInt — Гауссово целое a + bi

Immutable Pydantic модель элемента кольца Z[i] с теоретико-числовыми
операциями: норма, единицы, ассоциированность, делимость, чётность,
сравнения по модулю и классификация гауссовых простых.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. re и im являются точными целыми; никакая операция не вносит округления
2. Значение неизменяемо (frozen=True), += / -= / *= создают новый экземпляр
3. Равенство структурное: совпадают re и im
4. norm(x * y) == norm(x) * norm(y)
5. Деление на ноль всегда даёт явное исключение DivisionByZeroError

ГРАНИЧНЫЕ СЛУЧАИ:
    0 делит только 0 (divides возвращает bool, а не исключение)
    congruent(x, y, 0) ⇔ x == y
    0 ассоциирован только с 0

Компоненты принимают любой целый тип с __index__ (int, numpy.int64,
sympy.Integer, ...) и приводятся к int произвольной точности.
"""

import cmath
import operator
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gaussiant.core.domain.notation import format_components, parse_components
from gaussiant.core.errors import DivisionByZeroError
from gaussiant.core.math.primality import PrimeChecker, get_default_prime_checker


# =============================================================================
# HELPERS
# =============================================================================


def _round_half_up(numerator: int, denominator: int) -> int:
    """Ближайшее целое к numerator / denominator (denominator > 0), .5 вверх."""
    return (2 * numerator + denominator) // (2 * denominator)


def _is_integral(value: object) -> bool:
    # bool формально int, но как компонента почти всегда ошибка вызывающего
    return not isinstance(value, bool) and hasattr(type(value), "__index__")


# =============================================================================
# GAUSSIAN INT MODEL
# =============================================================================


class GaussianInt(BaseModel):
    """
    Гауссово целое re + im·i.

    Immutable модель (frozen=True). Конструктор принимает компоненты
    позиционно или по имени: GaussianInt(1, -1) == GaussianInt(re=1, im=-1).

    Арифметика (+, -, *, //, %, divmod, **) работает с GaussianInt и с
    обычными целыми по обе стороны оператора; float и complex не
    поддерживаются.
    """

    re: int = Field(0, description="Действительная часть")
    im: int = Field(0, description="Мнимая часть")

    model_config = ConfigDict(frozen=True, extra="forbid")

    def __init__(self, *args: Any, **data: Any) -> None:
        if len(args) > 2:
            raise TypeError(
                f"GaussianInt takes at most 2 positional arguments ({len(args)} given)"
            )
        for name, value in zip(("re", "im"), args):
            if name in data:
                raise TypeError(f"GaussianInt got multiple values for argument {name!r}")
            data[name] = value
        super().__init__(**data)

    @field_validator("re", "im", mode="before")
    @classmethod
    def coerce_integral(cls, v: Any) -> int:
        """Приведение любого целого типа к int; float/bool/str отклоняются."""
        if not _is_integral(v):
            raise ValueError(f"component must be an integer, got {type(v).__name__}")
        return operator.index(v)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def _of(cls, re: int, im: int) -> "GaussianInt":
        # Без валидации: только для компонент, уже известных как int
        return cls.model_construct(re=re, im=im)

    @classmethod
    def new(cls, re: Any, im: Any) -> "GaussianInt":
        return cls(re, im)

    @classmethod
    def zero(cls) -> "GaussianInt":
        """Аддитивная единица 0 + 0i."""
        return cls._of(0, 0)

    @classmethod
    def one(cls) -> "GaussianInt":
        """Мультипликативная единица 1 + 0i."""
        return cls._of(1, 0)

    @classmethod
    def units(cls) -> tuple["GaussianInt", ...]:
        """
        Единицы кольца Z[i]: (1, -1, i, -i).

        Единственные обратимые элементы, все нормы 1.
        """
        return _UNITS

    @classmethod
    def from_complex(cls, value: complex) -> "GaussianInt":
        """
        Построение из complex с целыми компонентами.

        Raises:
            ValueError: Если действительная или мнимая часть не целая
        """
        value = complex(value)
        if not (value.real.is_integer() and value.imag.is_integer()):
            raise ValueError(f"{value!r} has non-integral components")
        return cls._of(int(value.real), int(value.imag))

    @classmethod
    def parse(cls, text: str) -> "GaussianInt":
        """
        Разбор текстовой записи (a+bi, a-bi, a, bi, -bi, i, -i).

        Raises:
            ParseError: Если текст не соответствует грамматике
        """
        real, imag = parse_components(text)
        return cls._of(real, imag)

    @classmethod
    def _require(cls, value: object) -> "GaussianInt":
        coerced = _as_gaussian(value)
        if coerced is None:
            raise TypeError(
                f"expected GaussianInt or integer, got {type(value).__name__}"
            )
        return coerced

    # -------------------------------------------------------------------------
    # Ring operations
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "GaussianInt":
        rhs = _as_gaussian(other)
        if rhs is None:
            return NotImplemented
        return self._of(self.re + rhs.re, self.im + rhs.im)

    __radd__ = __add__

    def __sub__(self, other: object) -> "GaussianInt":
        rhs = _as_gaussian(other)
        if rhs is None:
            return NotImplemented
        return self._of(self.re - rhs.re, self.im - rhs.im)

    def __rsub__(self, other: object) -> "GaussianInt":
        lhs = _as_gaussian(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "GaussianInt":
        rhs = _as_gaussian(other)
        if rhs is None:
            return NotImplemented
        return self._of(
            self.re * rhs.re - self.im * rhs.im,
            self.re * rhs.im + self.im * rhs.re,
        )

    __rmul__ = __mul__

    def __neg__(self) -> "GaussianInt":
        return self._of(-self.re, -self.im)

    def __pos__(self) -> "GaussianInt":
        return self

    def __pow__(self, exponent: int) -> "GaussianInt":
        if not _is_integral(exponent):
            return NotImplemented
        exponent = operator.index(exponent)
        if exponent < 0:
            raise ValueError(f"exponent must be non-negative, got {exponent}")

        result = self.one()
        base = self
        while exponent:
            if exponent & 1:
                result = result * base
            base = base * base
            exponent >>= 1
        return result

    # -------------------------------------------------------------------------
    # Euclidean division
    # -------------------------------------------------------------------------

    def __divmod__(self, other: object) -> tuple["GaussianInt", "GaussianInt"]:
        """
        Евклидово деление: self == other * q + r, norm(r) <= norm(other) / 2.

        Частное равно точному частному self / other, округлённому покомпонентно
        до ближайшего целого (половины вверх).

        Raises:
            DivisionByZeroError: Если other равен нулю
        """
        divisor = _as_gaussian(other)
        if divisor is None:
            return NotImplemented
        if divisor.is_zero():
            raise DivisionByZeroError(f"division of {self} by zero")

        n = divisor.norm()
        # self * conj(divisor) / norm(divisor)
        num_re = self.re * divisor.re + self.im * divisor.im
        num_im = self.im * divisor.re - self.re * divisor.im
        quotient = self._of(_round_half_up(num_re, n), _round_half_up(num_im, n))
        return quotient, self - divisor * quotient

    def __rdivmod__(self, other: object) -> tuple["GaussianInt", "GaussianInt"]:
        lhs = _as_gaussian(other)
        if lhs is None:
            return NotImplemented
        return divmod(lhs, self)

    def __floordiv__(self, other: object) -> "GaussianInt":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[0]

    def __rfloordiv__(self, other: object) -> "GaussianInt":
        lhs = _as_gaussian(other)
        if lhs is None:
            return NotImplemented
        return lhs // self

    def __mod__(self, other: object) -> "GaussianInt":
        result = self.__divmod__(other)
        if result is NotImplemented:
            return NotImplemented
        return result[1]

    def __rmod__(self, other: object) -> "GaussianInt":
        lhs = _as_gaussian(other)
        if lhs is None:
            return NotImplemented
        return lhs % self

    def exact_div(self, other: object) -> "GaussianInt":
        """
        Точное частное q, такое что self == other * q.

        Raises:
            DivisionByZeroError: Если other равен нулю
            ValueError: Если other не делит self
        """
        divisor = self._require(other)
        if divisor.is_zero():
            raise DivisionByZeroError(f"division of {self} by zero")

        quotient = _exact_quotient(self, divisor)
        if quotient is None:
            raise ValueError(f"{self} is not divisible by {divisor}")
        return quotient

    # -------------------------------------------------------------------------
    # Comparison and conversion
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = _as_gaussian(other)
        if rhs is None:
            return NotImplemented
        return self.re == rhs.re and self.im == rhs.im

    def __hash__(self) -> int:
        # Совпадает с hash(int) для рациональных значений, т.к. GaussianInt(n) == n
        if self.im == 0:
            return hash(self.re)
        return hash((self.re, self.im))

    def __bool__(self) -> bool:
        return not self.is_zero()

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __int__(self) -> int:
        if self.im != 0:
            raise ValueError(f"cannot convert non-rational {self} to int")
        return self.re

    def __str__(self) -> str:
        return format_components(self.re, self.im)

    def to_polar(self) -> tuple[float, float]:
        """Полярная форма (r, theta): self == r * exp(i * theta)."""
        return cmath.polar(complex(self))

    # -------------------------------------------------------------------------
    # Number theory
    # -------------------------------------------------------------------------

    def norm(self) -> int:
        """
        Норма re² + im².

        Всегда неотрицательна и мультипликативна: norm(xy) = norm(x)·norm(y).
        """
        return self.re * self.re + self.im * self.im

    def conj(self) -> "GaussianInt":
        """Комплексно сопряжённое re - im·i."""
        return self._of(self.re, -self.im)

    def is_zero(self) -> bool:
        return self.re == 0 and self.im == 0

    def is_unit(self) -> bool:
        return self.norm() == 1

    def is_rational(self) -> bool:
        """True если мнимая часть равна нулю."""
        return self.im == 0

    def is_associated(self, other: object) -> bool:
        """
        Ассоциированность: other == self * u для некоторой единицы u.

        Рефлексивна и симметрична; 0 ассоциирован только с 0.
        """
        target = self._require(other)
        return any(self * unit == target for unit in _UNITS)

    def divides(self, other: object) -> bool:
        """
        Делимость: существует q с other == self * q.

        Делимость норм необходима, но не достаточна, поэтому проверяется
        точное частное. 0 делит только 0.
        """
        target = self._require(other)
        if self.is_zero():
            return target.is_zero()
        return _exact_quotient(target, self) is not None

    def is_divisor_of(self, other: object) -> bool:
        return self.divides(other)

    def is_even(self) -> bool:
        """
        Чётность в Z[i]: 1+i делит значение.

        1+i является единственным (с точностью до единиц) простым делителем 2.
        """
        return _ONE_PLUS_I.divides(self)

    def is_odd(self) -> bool:
        return not self.is_even()

    def congruent(self, other: object, modulus: object) -> bool:
        """
        Сравнение self ≡ other (mod modulus): modulus делит self - other.

        По модулю 0 сравнение вырождается в равенство.
        """
        target = self._require(other)
        mod = self._require(modulus)
        if mod.is_zero():
            return self == target
        return mod.divides(self - target)

    def is_gaussian_prime(self, checker: PrimeChecker | None = None) -> bool:
        """
        Проверка гауссовой простоты.

        a + bi является гауссовым простым тогда и только тогда, когда:
        1. одна из компонент равна нулю, а модуль другой есть рациональное
           простое вида 4n + 3 (ассоциаты инертных простых);
        2. обе компоненты ненулевые и a² + b² есть рациональное простое
           (1+i с нормой 2 и делители простых вида 4n + 1).

        Args:
            checker: Стратегия проверки простоты целых (по умолчанию sympy)

        Examples:
            >>> GaussianInt(7, 0).is_gaussian_prime()
            True
            >>> GaussianInt(5, 0).is_gaussian_prime()
            False
            >>> GaussianInt(2, 1).is_gaussian_prime()
            True
        """
        if checker is None:
            checker = get_default_prime_checker()

        if self.re == 0 or self.im == 0:
            p = abs(self.re + self.im)
            return p % 4 == 3 and checker.is_prime(p)

        return checker.is_prime(self.norm())

    def normalized(self) -> "GaussianInt":
        """
        Каноничный ассоциат в первой четверти: re > 0, im >= 0.

        Ровно один из четырёх ассоциатов ненулевого значения лежит там;
        0 остаётся 0.
        """
        for unit in _UNITS:
            candidate = self * unit
            if candidate.re > 0 and candidate.im >= 0:
                return candidate
        return self

    @classmethod
    def gcd(cls, a: object, b: object) -> "GaussianInt":
        """
        НОД по алгоритму Евклида, в каноничной форме normalized().

        НОД определён с точностью до единицы; gcd(0, 0) == 0.
        """
        x = cls._require(a)
        y = cls._require(b)
        while not y.is_zero():
            x, y = y, x % y
        return x.normalized()


# =============================================================================
# MODULE CONSTANTS
# =============================================================================

_UNITS: tuple[GaussianInt, ...] = (
    GaussianInt(1, 0),
    GaussianInt(-1, 0),
    GaussianInt(0, 1),
    GaussianInt(0, -1),
)

_ONE_PLUS_I: GaussianInt = GaussianInt(1, 1)


def _as_gaussian(value: object) -> GaussianInt | None:
    if isinstance(value, GaussianInt):
        return value
    if _is_integral(value):
        return GaussianInt._of(operator.index(value), 0)
    return None


def _exact_quotient(dividend: GaussianInt, divisor: GaussianInt) -> GaussianInt | None:
    n = divisor.norm()
    num_re = dividend.re * divisor.re + dividend.im * divisor.im
    num_im = dividend.im * divisor.re - dividend.re * divisor.im
    if num_re % n or num_im % n:
        return None
    return GaussianInt._of(num_re // n, num_im // n)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def gaussint(re: Any, im: Any = 0) -> GaussianInt:
    """
    Короткая запись конструктора.

    Examples:
        >>> gaussint(3)
        GaussianInt(re=3, im=0)
        >>> gaussint(1, -1) * gaussint(1, 1) == gaussint(2)
        True
    """
    return GaussianInt(re, im)


def parse_gaussian_int(text: str) -> GaussianInt:
    """Разбор строки; см. GaussianInt.parse."""
    return GaussianInt.parse(text)


def format_gaussian_int(value: GaussianInt) -> str:
    """Каноническая текстовая запись; parse_gaussian_int её обращает."""
    return format_components(value.re, value.im)
