"""
DoubleSet — мультимножество целых чисел с кратностью не более двух

Каждый member хранится с count ∈ {1, 2}. Отсутствие member означает count 0.

Текстовое представление (см. double_set_parser):

    {{1: 2}, {-3: 1}, {0: 1}}

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каждый хранимый count равен 1 или 2 (никогда 0, отрицательный или > 2)
2. Members уникальны
3. Порядок итерации и сериализации — порядок вставки (не сортировка)
4. Отклонённая мутация не меняет состояние
5. Бинарные операции не мутируют операнды и возвращают новый экземпляр
"""

import logging
from typing import Dict, Final, Iterable, Iterator, List, Tuple

from pydantic import BaseModel, Field, StrictInt, field_validator
from pydantic import ValidationError as PydanticValidationError

from src.core.domain.double_set_parser import MAX_MEMBER_DIGITS, parse_entries
from src.core.domain.errors import DoubleSetValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ КРАТНОСТИ
# =============================================================================

# Минимальная хранимая кратность (0 не хранится)
MIN_MEMBER_COUNT: Final[int] = 1

# Максимальная кратность: сложение насыщается на этом значении
MAX_MEMBER_COUNT: Final[int] = 2

# Member по модулю строго меньше этой границы (не более MAX_MEMBER_DIGITS цифр)
MEMBER_ABS_BOUND: Final[int] = 10**MAX_MEMBER_DIGITS


def is_member_type(member: object) -> bool:
    """Member — int, но не bool"""
    return isinstance(member, int) and not isinstance(member, bool)


# =============================================================================
# ENTRY MODEL
# =============================================================================


class DoubleSetEntry(BaseModel):
    """
    Одна запись DoubleSet: member и его кратность.

    Immutable модель. Strict-типы: bool, float и str отклоняются.
    """

    member: StrictInt = Field(..., description="Целочисленный member")
    count: StrictInt = Field(
        ..., ge=MIN_MEMBER_COUNT, le=MAX_MEMBER_COUNT, description="Кратность (1 или 2)"
    )

    model_config = {"frozen": True}

    @field_validator("member")
    @classmethod
    def validate_member_digits(cls, v: int) -> int:
        """Member не длиннее MAX_MEMBER_DIGITS цифр (иначе не сериализуется)"""
        if abs(v) >= MEMBER_ABS_BOUND:
            raise ValueError(f"member exceeds {MAX_MEMBER_DIGITS} digits")
        return v

    def render(self) -> str:
        """Текстовая форма записи: '{member: count}'"""
        return f"{{{self.member}: {self.count}}}"


# =============================================================================
# DOUBLE SET
# =============================================================================


class DoubleSet:
    """
    Мультимножество целых чисел с кратностью 1 или 2.

    Внутреннее хранилище (_members) доступно только через методы запросов
    и мутаторов, поэтому валидацию count нельзя обойти.

    Экземпляр не потокобезопасен: один владелец, один писатель.
    """

    __slots__ = ("_members",)

    def __init__(self) -> None:
        self._members: Dict[int, int] = {}

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def empty(cls) -> "DoubleSet":
        """Пустой DoubleSet"""
        return cls()

    @classmethod
    def parse(cls, text: str) -> "DoubleSet":
        """
        Построение DoubleSet из текстового представления.

        Member, повторённый в тексте, сохраняет первую позицию и получает
        последний count.

        Args:
            text: Текст вида "{{1: 2}, {2: 1}}" (пробелы игнорируются)

        Returns:
            Новый DoubleSet с members в порядке появления

        Raises:
            TypeError: Если text не str
            DoubleSetParseError: Если текст не соответствует грамматике

        Examples:
            >>> DoubleSet.parse("{{5: 2}, {3: 1}}").get_members()
            [5, 3]
            >>> DoubleSet.parse("{}").serialize()
            '{}'
        """
        result = cls.from_entries(parse_entries(text))
        logger.debug("Parsed DoubleSet with %d members", len(result))
        return result

    @classmethod
    def from_entries(cls, entries: Iterable[Tuple[int, int]]) -> "DoubleSet":
        """
        Построение DoubleSet из пар (member, count).

        Raises:
            DoubleSetValidationError: Если любая пара невалидна
        """
        result = cls()
        for member, count in entries:
            result.set_member(member, count)
        return result

    def copy(self) -> "DoubleSet":
        """Независимая копия с тем же порядком members"""
        result = type(self)()
        result._members = dict(self._members)
        return result

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_count(self, member: int) -> int:
        """
        Кратность member или 0, если он отсутствует. Никогда не падает.

        Не-int (включая bool и float) считается отсутствующим.
        """
        if not is_member_type(member):
            return 0
        return self._members.get(member, 0)

    def get_members(self) -> List[int]:
        """Members в порядке вставки"""
        return list(self._members)

    def entries(self) -> List[DoubleSetEntry]:
        """Записи (member, count) в порядке вставки"""
        return [
            DoubleSetEntry(member=member, count=count)
            for member, count in self._members.items()
        ]

    def serialize(self) -> str:
        """
        Текстовое представление в порядке вставки.

        Examples:
            >>> DoubleSet().set_member(4, 2).set_member(-5, 2).serialize()
            '{{4: 2}, {-5: 2}}'
            >>> DoubleSet().serialize()
            '{}'
        """
        rendered = (f"{{{member}: {count}}}" for member, count in self._members.items())
        return "{" + ", ".join(rendered) + "}"

    # -------------------------------------------------------------------------
    # Mutators
    # -------------------------------------------------------------------------

    def set_member(self, member: int, count: int) -> "DoubleSet":
        """
        Установка кратности member.

        Существующий member сохраняет позицию, новый добавляется в конец.

        Args:
            member: Целое число (bool не допускается)
            count: Кратность, 1 или 2

        Returns:
            self (для chaining)

        Raises:
            DoubleSetValidationError: Если member не int или count не 1/2
        """
        try:
            entry = DoubleSetEntry(member=member, count=count)
        except PydanticValidationError as e:
            raise DoubleSetValidationError(
                f"Invalid DoubleSet entry member={_describe(member)} "
                f"count={_describe(count)}: member must be an integer of at most {MAX_MEMBER_DIGITS} digits "
                f"and count must be {MIN_MEMBER_COUNT} or {MAX_MEMBER_COUNT}"
            ) from e

        self._members[entry.member] = entry.count
        return self

    def delete_member(self, member: int) -> None:
        """Удаление member. Отсутствующий member (или не-int) — no-op."""
        if is_member_type(member):
            self._members.pop(member, None)

    # -------------------------------------------------------------------------
    # Binary operations
    # -------------------------------------------------------------------------

    @staticmethod
    def add(set_one: "DoubleSet", set_two: "DoubleSet") -> "DoubleSet":
        """
        Сложение с насыщением: count = min(count_one + count_two, 2).

        Порядок результата: members set_one в его порядке, затем members,
        которые есть только в set_two, в порядке set_two.

        Raises:
            TypeError: Если операнд не DoubleSet

        Examples:
            >>> a = DoubleSet.parse("{{1: 2}, {2: 1}}")
            >>> b = DoubleSet.parse("{{1: 1}, {2: 1}, {-3: 1}}")
            >>> DoubleSet.add(a, b).serialize()
            '{{1: 2}, {2: 2}, {-3: 1}}'
        """
        _require_double_sets(set_one, set_two)

        result = DoubleSet()
        for member, count in set_one._members.items():
            total = count + set_two.get_count(member)
            result._members[member] = min(total, MAX_MEMBER_COUNT)

        for member, count in set_two._members.items():
            if member not in set_one._members:
                result._members[member] = count

        logger.debug(
            "DoubleSet add: %d members + %d members = %d members",
            len(set_one),
            len(set_two),
            len(result),
        )
        return result

    @staticmethod
    def subtract(set_one: "DoubleSet", set_two: "DoubleSet") -> "DoubleSet":
        """
        Вычитание с отсечением: count = count_one - count_two.

        Members с count <= 0 опускаются. Members, которые есть только в
        set_two, в результат не попадают.

        Raises:
            TypeError: Если операнд не DoubleSet

        Examples:
            >>> a = DoubleSet.parse("{{1: 2}, {2: 1}, {4: 1}}")
            >>> b = DoubleSet.parse("{{1: 1}, {2: 2}, {-3: 1}}")
            >>> DoubleSet.subtract(a, b).serialize()
            '{{1: 1}, {4: 1}}'
        """
        _require_double_sets(set_one, set_two)

        result = DoubleSet()
        for member, count in set_one._members.items():
            remaining = count - set_two.get_count(member)
            if remaining >= MIN_MEMBER_COUNT:
                result._members[member] = remaining

        logger.debug(
            "DoubleSet subtract: %d members - %d members = %d members",
            len(set_one),
            len(set_two),
            len(result),
        )
        return result

    # -------------------------------------------------------------------------
    # Python protocol
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "DoubleSet":
        if not isinstance(other, DoubleSet):
            return NotImplemented
        return DoubleSet.add(self, other)

    def __sub__(self, other: object) -> "DoubleSet":
        if not isinstance(other, DoubleSet):
            return NotImplemented
        return DoubleSet.subtract(self, other)

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, member: object) -> bool:
        return self.get_count(member) > 0  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._members))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DoubleSet):
            return NotImplemented
        return self._members == other._members

    # Mutable — не хешируется
    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        return f"DoubleSet({self.serialize()!r})"


def _require_double_sets(*operands: object) -> None:
    """Проверка, что все операнды — DoubleSet"""
    for operand in operands:
        if not isinstance(operand, DoubleSet):
            raise TypeError(
                f"Can only operate on DoubleSet operands, got {type(operand).__name__}"
            )


def _describe(value: object) -> str:
    """repr для сообщений об ошибках; слишком длинные int не рендерятся"""
    if is_member_type(value) and abs(value) >= MEMBER_ABS_BOUND:  # type: ignore[arg-type]
        return f"<int over {MAX_MEMBER_DIGITS} digits>"
    return repr(value)
