"""
DoubleSet Parser — разбор текстового представления DoubleSet

Грамматика (пробельные символы удаляются до разбора):

    Set     ::= "{" [ Entry { "," Entry } ] "}"
    Entry   ::= "{" Integer ":" Count "}"
    Integer ::= "0" | ["-"] NonZeroDigit { Digit }
    Count   ::= "1" | "2"

Рукописный recursive-descent парсер: принимает ровно эту грамматику.
Отклоняются -0, ведущие нули, висячие запятые, пропущенные запятые,
пустые записи и не-ASCII цифры.
"""

from typing import Final, List, Tuple

from src.core.domain.errors import DoubleSetParseError

# =============================================================================
# АЛФАВИТ ГРАММАТИКИ
# =============================================================================

DIGITS: Final[str] = "0123456789"
NON_ZERO_DIGITS: Final[str] = "123456789"
COUNT_DIGITS: Final[str] = "12"

# Максимальное число цифр в member (без знака); совпадает с лимитом
# int <-> str конверсии интерпретатора по умолчанию
MAX_MEMBER_DIGITS: Final[int] = 4300


def strip_whitespace(text: str) -> str:
    """Удаление всех пробельных символов (включая переводы строк и табуляцию)"""
    return "".join(text.split())


class _Parser:
    """Курсор по тексту без пробелов"""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def _peek(self) -> str:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return ""

    def _error(self, message: str) -> DoubleSetParseError:
        return DoubleSetParseError(message, text=self.text, position=self.pos)

    def _expect(self, char: str) -> None:
        found = self._peek()
        if found != char:
            shown = repr(found) if found else "end of input"
            raise self._error(f"Expected {char!r}, found {shown}")
        self.pos += 1

    def parse_set(self) -> List[Tuple[int, int]]:
        entries: List[Tuple[int, int]] = []
        self._expect("{")

        if self._peek() == "}":
            self.pos += 1
        else:
            entries.append(self._parse_entry())
            while self._peek() == ",":
                self.pos += 1
                entries.append(self._parse_entry())
            self._expect("}")

        if self.pos != len(self.text):
            raise self._error("Unexpected trailing input")
        return entries

    def _parse_entry(self) -> Tuple[int, int]:
        self._expect("{")
        member = self._parse_integer()
        self._expect(":")
        count = self._parse_count()
        self._expect("}")
        return member, count

    def _parse_integer(self) -> int:
        start = self.pos

        if self._peek() == "0":
            self.pos += 1
            return 0

        if self._peek() == "-":
            self.pos += 1

        # -0 и ведущие нули запрещены
        if not self._peek() or self._peek() not in NON_ZERO_DIGITS:
            raise self._error("Expected non-zero digit")

        digits_start = self.pos
        while self._peek() and self._peek() in DIGITS:
            self.pos += 1

        if self.pos - digits_start > MAX_MEMBER_DIGITS:
            self.pos = digits_start
            raise self._error(f"Member exceeds {MAX_MEMBER_DIGITS} digits")

        return int(self.text[start : self.pos])

    def _parse_count(self) -> int:
        char = self._peek()
        if not char or char not in COUNT_DIGITS:
            raise self._error("Count must be 1 or 2")
        self.pos += 1
        return int(char)


def parse_entries(text: str) -> List[Tuple[int, int]]:
    """
    Разбор текста DoubleSet в список пар (member, count).

    Args:
        text: Текст вида "{{1: 2}, {-3: 1}}"

    Returns:
        Пары (member, count) в порядке появления в тексте (дубликаты сохраняются)

    Raises:
        TypeError: Если text не str
        DoubleSetParseError: Если текст не соответствует грамматике

    Examples:
        >>> parse_entries("{{1: 2}, {-3: 1}}")
        [(1, 2), (-3, 1)]
        >>> parse_entries("{}")
        []
    """
    if not isinstance(text, str):
        raise TypeError(f"DoubleSet text must be str, got {type(text).__name__}")

    return _Parser(strip_whitespace(text)).parse_set()
