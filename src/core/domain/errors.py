"""
Ошибки DoubleSet

Все ошибки поднимаются синхронно в точке вызова и нигде не перехватываются
внутри библиотеки. Отклонённая мутация оставляет DoubleSet без изменений.
"""

from typing import Optional


class DoubleSetError(Exception):
    """Базовая ошибка для всех операций DoubleSet"""

    pass


class DoubleSetParseError(DoubleSetError, ValueError):
    """
    Текстовое представление DoubleSet не соответствует грамматике.

    Attributes:
        text: Разобранный текст (без пробельных символов)
        position: Позиция первого невалидного символа в text
    """

    def __init__(self, message: str, text: str = "", position: Optional[int] = None):
        if position is not None:
            message = f"{message} at position {position} in {text!r}"
        super().__init__(message)
        self.text = text
        self.position = position


class DoubleSetValidationError(DoubleSetError, ValueError):
    """Member не целое число или count вне {1, 2}"""

    pass
