"""
Notation — Текстовая запись гауссовых целых

Единственный «wire format» библиотеки: человекочитаемая строка вида a+bi.
Модуль работает только с парой компонент (real, imag) и ничего не знает о
типе GaussianInt, поэтому его можно использовать из любого слоя.

ГРАММАТИКА (пробелы по краям и вокруг инфиксного знака допустимы):
    value     := real [ sign [digits] "i" ]  |  [sign] [digits] "i"
    real      := [sign] digits
    sign      := "+" | "-"
    digits    := [0-9]+

Коэффициент при i необязателен и означает 1: "i", "-i", "1-i", "3+i".

ФОРМАТ ВЫВОДА:
    im == 0            → "a"
    re == 0            → "bi", "i", "-i"
    иначе              → "a+bi", "a-bi", "a+i", "a-i"
Никогда не выводится "+0", "1i" или "a+-bi"; parse(format(x)) == x.

Десятичное преобразование идёт блоками не длиннее _CHUNK_DIGITS цифр,
поэтому лимит интерпретатора на длину int <-> str (sys.set_int_max_str_digits)
не ограничивает размер компонент.
"""

import re
from typing import Final

from gaussiant.core.errors import ParseError

# =============================================================================
# GRAMMAR
# =============================================================================

# ASCII-цифры: \d принял бы и другие юникодные цифры
_DIGITS: Final[str] = r"[0-9]+"

# Не превышает минимально допустимого лимита sys.set_int_max_str_digits (640)
_CHUNK_DIGITS: Final[int] = 512

# log10(2): оценка числа десятичных цифр по bit_length
_LOG10_2: Final[float] = 0.30103

GAUSSIAN_INT_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"""
    \s*
    (?:
        (?P<real>[+-]?{_DIGITS})
        (?:
            \s*(?P<sign>[+-])\s*
            (?P<coef>{_DIGITS})?i
        )?
      |
        (?P<lone_sign>[+-])?
        (?P<lone_coef>{_DIGITS})?i
    )
    \s*
    """,
    re.VERBOSE,
)


# =============================================================================
# DECIMAL CONVERSION
# =============================================================================


def _digits_to_int(digits: str) -> int:
    """Десятичная строка без знака в int, любой длины."""
    if len(digits) <= _CHUNK_DIGITS:
        return int(digits)
    split = len(digits) // 2
    high = _digits_to_int(digits[:-split])
    low = _digits_to_int(digits[-split:])
    return high * 10**split + low


def _int_to_digits(value: int) -> str:
    """Неотрицательный int в десятичную строку, любой длины."""
    if value < 10**_CHUNK_DIGITS:
        return str(value)
    split = int(value.bit_length() * _LOG10_2) // 2
    high, low = divmod(value, 10**split)
    return _int_to_digits(high) + _int_to_digits(low).zfill(split)


def _to_decimal(value: int) -> str:
    if value < 0:
        return "-" + _int_to_digits(-value)
    return _int_to_digits(value)


def _signed_to_int(text: str) -> int:
    if text[0] in "+-":
        magnitude = _digits_to_int(text[1:])
        return -magnitude if text[0] == "-" else magnitude
    return _digits_to_int(text)


# =============================================================================
# PARSING
# =============================================================================


def parse_components(text: str) -> tuple[int, int]:
    """
    Разбор строки в пару (real, imag).

    Args:
        text: Строка в одной из форм a+bi, a-bi, a, bi, -bi, i, -i

    Returns:
        Кортеж (real, imag) точных целых

    Raises:
        ParseError: Если строка не соответствует грамматике
        TypeError: Если передана не строка

    Examples:
        >>> parse_components("1-i")
        (1, -1)
        >>> parse_components("-i")
        (0, -1)
        >>> parse_components(" 12 + 5i ")
        (12, 5)
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    match = GAUSSIAN_INT_PATTERN.fullmatch(text)
    if match is None:
        raise ParseError(text)

    if match.group("real") is not None:
        real = _signed_to_int(match.group("real"))
        if match.group("sign") is None:
            return real, 0
        imag = _digits_to_int(match.group("coef") or "1")
        if match.group("sign") == "-":
            imag = -imag
        return real, imag

    imag = _digits_to_int(match.group("lone_coef") or "1")
    if match.group("lone_sign") == "-":
        imag = -imag
    return 0, imag


# =============================================================================
# FORMATTING
# =============================================================================


def format_components(real: int, imag: int) -> str:
    """
    Каноническая текстовая запись пары (real, imag).

    Examples:
        >>> format_components(3, 0)
        '3'
        >>> format_components(0, -1)
        '-i'
        >>> format_components(2, -5)
        '2-5i'
        >>> format_components(0, 0)
        '0'
    """
    if imag == 0:
        return _to_decimal(real)

    if imag == 1:
        imag_text = "i"
    elif imag == -1:
        imag_text = "-i"
    else:
        imag_text = f"{_to_decimal(imag)}i"

    if real == 0:
        return imag_text

    # Отрицательная мнимая часть уже несёт свой знак
    if imag > 0:
        return f"{_to_decimal(real)}+{imag_text}"
    return f"{_to_decimal(real)}{imag_text}"
