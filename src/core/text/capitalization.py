"""
Capitalization — капитализация каждого N-го алфавитно-цифрового символа

Считаются только ASCII-символы [A-Za-z0-9]. Остальные символы проходят
насквозь (в нижнем регистре) и не влияют на счётчик.

    capitalize_nth("Aspiration.com", 3) == "asPirAtiOn.cOm"

ПОЛИТИКА n <= 0: капитализация не происходит, результат — input в нижнем
регистре. Это не ошибка.
"""

import logging
import string
from typing import Final, FrozenSet

logger = logging.getLogger(__name__)

# =============================================================================
# АЛФАВИТ
# =============================================================================

# Символы, участвующие в счёте
COUNTABLE_CHARS: Final[FrozenSet[str]] = frozenset(string.ascii_letters + string.digits)


def is_countable(char: str) -> bool:
    """Символ входит в [A-Za-z0-9]"""
    return char in COUNTABLE_CHARS


def capitalize_nth(text: str, n: int) -> str:
    """
    Капитализация каждого n-го алфавитно-цифрового символа.

    Args:
        text: Исходная строка
        n: Период капитализации (1-indexed); n <= 0 — никогда

    Returns:
        Новая строка: каждый n-й считаемый символ в верхнем регистре,
        всё остальное в нижнем

    Examples:
        >>> capitalize_nth("hello, Dave", 3)
        'heLlo, DavE'
        >>> capitalize_nth("NOT BIG", 0)
        'not big'
    """
    if n <= 0:
        logger.debug("capitalize_nth called with n=%d, lowercasing only", n)
        return text.lower()

    chars = []
    count = 0
    for char in text:
        if is_countable(char):
            count += 1
            if count % n == 0:
                chars.append(char.upper())
                continue
        chars.append(char.lower())

    return "".join(chars)
