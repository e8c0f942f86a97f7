"""
Errors — Иерархия исключений gaussiant

Все сбои библиотеки наследуют GaussianIntError, поэтому вызывающий код
может перехватить их одним except. Каждое конкретное исключение также
наследует стандартный класс Python с тем же смыслом:
- ParseError → ValueError (текст не соответствует грамматике)
- DivisionByZeroError → ZeroDivisionError (делитель равен нулю)

Восстановления внутри библиотеки нет: ошибка всегда уходит к вызывающему.
"""


class GaussianIntError(Exception):
    """Базовое исключение для всех ошибок gaussiant."""

    pass


class ParseError(GaussianIntError, ValueError):
    """
    Текст не является записью гауссова целого.

    Attributes:
        text: Исходная строка, которую не удалось разобрать
    """

    def __init__(self, text: str, reason: str = "not a Gaussian integer") -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse {text!r}: {reason}")


class DivisionByZeroError(GaussianIntError, ZeroDivisionError):
    """Деление (или взятие остатка) на нулевое гауссово целое."""

    pass
