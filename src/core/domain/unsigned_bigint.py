"""
UnsignedBigint — беззнаковое целое произвольной точности

Mutable value type поверх ядра limbs (src.core.math.limbs):
- Конструкторы: по умолчанию (0), из неотрицательного int, из десятичной строки
- Рендеринг в десятичную строку (str), точный int(), сужение to_uint32()
- Полный порядок (==, !=, <, >, <=, >=) с UnsignedBigint и int
- In-place +=, -=, increment/decrement (prefix и postfix формы)
- Бинарные +, - (копия левого операнда + in-place операция)
- Интеграция с Pydantic v2 как тип поля модели

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Значение всегда в канонической форме после любой операции
2. Ошибка (ParseError, Underflow) не изменяет значение-приёмник
3. Копии независимы (deep copy списка limbs)
4. Значение mutable, поэтому unhashable
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.contracts.validators import contract_schema
from src.core.math.limbs import (
    ParseError,
    Underflow,
    add_limbs_inplace,
    check_canonical,
    compare_limbs,
    limbs_from_int,
    limbs_to_int,
    limbs_to_uint32,
    parse_limbs,
    render_limbs,
    sub_limbs_inplace,
)

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class BigintConfig:
    """Конфигурация разбора десятичных строк.

    allow_empty_string: пустая строка даёт ноль; False — ParseError
    max_digits: верхняя граница длины строки (None — без ограничения)
    """

    allow_empty_string: bool = True
    max_digits: Optional[int] = None


DEFAULT_CONFIG = BigintConfig()


def _is_native_int(value: Any) -> bool:
    return isinstance(value, int) and type(value) is not bool


def _operand_limbs(other: Any) -> Optional[Sequence[int]]:
    """Limbs операнда арифметики или None для неподдерживаемого типа."""
    if isinstance(other, UnsignedBigint):
        return other._limbs
    if _is_native_int(other):
        return limbs_from_int(other)
    return None


# =============================================================================
# UNSIGNED BIGINT
# =============================================================================


class UnsignedBigint:
    """
    Беззнаковое целое произвольной точности.

    Хранит список limbs по основанию BASE = 10^9 (least-significant first).

    Examples:
        >>> a = UnsignedBigint("999999999")
        >>> a += 1
        >>> str(a)
        '1000000000'
        >>> a.limbs
        (0, 1)
        >>> UnsignedBigint("00123") == 123
        True
    """

    __slots__ = ("_limbs",)

    # Mutable value type
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: "int | str | UnsignedBigint" = 0,
        config: Optional[BigintConfig] = None,
    ):
        """
        Args:
            value: Неотрицательный int, десятичная строка или другой
                UnsignedBigint (копируется)
            config: Конфигурация разбора строк (default: DEFAULT_CONFIG)

        Raises:
            ParseError: Невалидная десятичная строка
            ValueError: Отрицательный int
            TypeError: Неподдерживаемый тип value
        """
        if isinstance(value, UnsignedBigint):
            self._limbs = list(value._limbs)
        elif isinstance(value, str):
            self._limbs = _parse(value, config or DEFAULT_CONFIG)
        elif _is_native_int(value):
            self._limbs = limbs_from_int(value)
        else:
            raise TypeError(
                f"cannot construct UnsignedBigint from {type(value).__name__}"
            )

    # -------------------------------------------------------------------------
    # Альтернативные конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def parse(
        cls, text: str, config: Optional[BigintConfig] = None
    ) -> "UnsignedBigint":
        """
        Разбор десятичной строки.

        Ведущие нули допустимы и отбрасываются. Пустая строка даёт ноль,
        если config.allow_empty_string (по умолчанию).

        Raises:
            ParseError: Символ вне '0'-'9', запрещённая пустая строка или
                превышение config.max_digits
        """
        return cls._wrap(_parse(text, config or DEFAULT_CONFIG))

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "UnsignedBigint":
        """
        Построение из явной последовательности limbs (least-significant first).

        Raises:
            CanonicalFormViolation: Если limbs не в канонической форме
        """
        limbs = list(limbs)
        check_canonical(limbs)
        return cls._wrap(limbs)

    @classmethod
    def _wrap(cls, limbs: list[int]) -> "UnsignedBigint":
        value = cls.__new__(cls)
        value._limbs = limbs
        return value

    # -------------------------------------------------------------------------
    # Представление и конверсии
    # -------------------------------------------------------------------------

    @property
    def limbs(self) -> tuple[int, ...]:
        """Снимок limbs (least-significant first)."""
        return tuple(self._limbs)

    def to_uint32(self) -> int:
        """
        Сужение до unsigned 32-bit по модулю 2^32.

        Для значений >= 2^32 результат — value mod 2^32; проверка диапазона
        перед сужением лежит на вызывающем.
        """
        return limbs_to_uint32(self._limbs)

    def __int__(self) -> int:
        return limbs_to_int(self._limbs)

    def __bool__(self) -> bool:
        return len(self._limbs) > 1 or self._limbs[0] != 0

    def __str__(self) -> str:
        return render_limbs(self._limbs)

    def __repr__(self) -> str:
        return f"UnsignedBigint('{render_limbs(self._limbs)}')"

    def copy(self) -> "UnsignedBigint":
        """Независимая копия значения."""
        return self._wrap(list(self._limbs))

    def __copy__(self) -> "UnsignedBigint":
        return self.copy()

    def __deepcopy__(self, memo: dict) -> "UnsignedBigint":
        return self.copy()

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def _compare(self, other: Any) -> Optional[int]:
        if isinstance(other, UnsignedBigint):
            return compare_limbs(self._limbs, other._limbs)
        if _is_native_int(other):
            # Любое отрицательное int меньше любого беззнакового значения
            if other < 0:
                return 1
            return compare_limbs(self._limbs, limbs_from_int(other))
        return None

    def __eq__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order == 0

    def __ne__(self, other: object) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order != 0

    def __lt__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order < 0

    def __gt__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order > 0

    def __le__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order <= 0

    def __ge__(self, other: Any) -> bool:
        order = self._compare(other)
        if order is None:
            return NotImplemented
        return order >= 0

    # -------------------------------------------------------------------------
    # In-place арифметика
    # -------------------------------------------------------------------------

    def __iadd__(self, other: Any) -> "UnsignedBigint":
        limbs = _operand_limbs(other)
        if limbs is None:
            return NotImplemented
        add_limbs_inplace(self._limbs, limbs)
        return self

    def __isub__(self, other: Any) -> "UnsignedBigint":
        limbs = _operand_limbs(other)
        if limbs is None:
            return NotImplemented
        try:
            sub_limbs_inplace(self._limbs, limbs)
        except Underflow:
            logger.debug("Subtraction underflow rejected: %s", self)
            raise
        return self

    def increment(self) -> "UnsignedBigint":
        """Prefix increment: +1 на месте, возвращает само значение."""
        add_limbs_inplace(self._limbs, (1,))
        return self

    def post_increment(self) -> "UnsignedBigint":
        """Postfix increment: +1 на месте, возвращает копию прежнего значения."""
        previous = self.copy()
        self.increment()
        return previous

    def decrement(self) -> "UnsignedBigint":
        """
        Prefix decrement: -1 на месте, возвращает само значение.

        Raises:
            Underflow: Если значение равно нулю (остаётся нулём)
        """
        try:
            sub_limbs_inplace(self._limbs, (1,))
        except Underflow:
            logger.debug("Decrement of zero rejected")
            raise
        return self

    def post_decrement(self) -> "UnsignedBigint":
        """
        Postfix decrement: -1 на месте, возвращает копию прежнего значения.

        Raises:
            Underflow: Если значение равно нулю (остаётся нулём)
        """
        previous = self.copy()
        self.decrement()
        return previous

    # -------------------------------------------------------------------------
    # Бинарная арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "UnsignedBigint":
        if _operand_limbs(other) is None:
            return NotImplemented
        result = self.copy()
        result += other
        return result

    def __radd__(self, other: Any) -> "UnsignedBigint":
        return self.__add__(other)

    def __sub__(self, other: Any) -> "UnsignedBigint":
        if _operand_limbs(other) is None:
            return NotImplemented
        result = self.copy()
        result -= other
        return result

    def __rsub__(self, other: Any) -> "UnsignedBigint":
        limbs = _operand_limbs(other)
        if limbs is None:
            return NotImplemented
        result = self._wrap(list(limbs))
        result -= self
        return result

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Схема валидации для полей Pydantic моделей.

        Принимает UnsignedBigint, десятичную строку или неотрицательный int;
        в JSON сериализуется десятичной строкой.
        """
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """JSON schema поля — контракт unsigned_bigint.json."""
        return contract_schema("unsigned_bigint")

    @classmethod
    def _validate(cls, value: Any) -> "UnsignedBigint":
        # Поле модели владеет своими limbs: без алиасинга с вызывающим
        if isinstance(value, cls):
            return value.copy()
        if isinstance(value, str) or _is_native_int(value):
            # ParseError/ValueError превращаются Pydantic в ValidationError
            return cls(value)
        raise ValueError(
            f"expected decimal string or non-negative int, got {type(value).__name__}"
        )


def _parse(text: str, config: BigintConfig) -> list[int]:
    try:
        return parse_limbs(
            text,
            allow_empty=config.allow_empty_string,
            max_digits=config.max_digits,
        )
    except ParseError as e:
        logger.debug("Rejected decimal input: %s", e)
        raise
