"""
Limbs — ядро арифметики беззнаковых целых произвольной точности

Число хранится как список limbs (least-significant first), каждый limb —
один десятичный chunk из CHUNK_DIGITS цифр, значение в [0, BASE).

Модуль содержит чистые функции над списками limbs:
- Нормализация (trim) и проверка канонической формы
- Parse/render: десятичная строка ↔ limbs
- Трёхзначное сравнение (compare kernel)
- In-place сложение и вычитание с carry/borrow pass
- Конверсия в native int (точная и с wrap по модулю 2^32)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ (вне выполняющейся операции):
1. Список limbs непустой
2. Каждый limb в [0, BASE)
3. При длине > 1 старший limb ненулевой (ноль — это ровно [0])
4. Вычитание никогда не уходит в минус (Underflow до мутации)

Во время сложения limbs временно могут быть < 2 * BASE, во время вычитания
— отрицательными (> -BASE); один проход carry/borrow возвращает их в [0, BASE).
"""

from typing import Final, Optional, Sequence

# =============================================================================
# ПАРАМЕТРЫ ПРЕДСТАВЛЕНИЯ
# =============================================================================

# Количество десятичных цифр в одном limb
CHUNK_DIGITS: Final[int] = 9

# Основание системы счисления limbs
BASE: Final[int] = 10**CHUNK_DIGITS

# Модуль для сужения до unsigned 32-bit
UINT32_MODULUS: Final[int] = 1 << 32

# Каноническая десятичная запись (без ведущих нулей, кроме "0")
CANONICAL_DECIMAL_PATTERN: Final[str] = r"^(0|[1-9][0-9]*)$"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class BigintError(Exception):
    """Базовое исключение для операций над беззнаковыми bigint."""

    pass


class ParseError(BigintError, ValueError):
    """
    Невалидная десятичная строка.

    Возникает, если строка содержит символ вне '0'-'9', пустая при
    запрещённой пустой строке или длиннее допустимого max_digits.
    Значение-приёмник при этом не изменяется.
    """

    pass


class Underflow(BigintError, ArithmeticError):
    """
    Вычитание или декремент дали бы отрицательный результат.

    Проверяется сравнением ДО мутации, поэтому уменьшаемое остаётся
    в исходном состоянии.
    """

    pass


class CanonicalFormViolation(BigintError, ValueError):
    """Последовательность limbs нарушает каноническую форму."""

    pass


# =============================================================================
# НОРМАЛИЗАЦИЯ
# =============================================================================


def trim_limbs(limbs: list[int]) -> list[int]:
    """
    Приведение limbs к канонической длине (in-place).

    Удаляет нулевые старшие limbs, пока длина > 1. Пустой список
    превращается в [0].

    Args:
        limbs: Список limbs (least-significant first)

    Returns:
        Тот же список, укороченный до канонической длины

    Examples:
        >>> trim_limbs([5, 0, 0])
        [5]
        >>> trim_limbs([0, 0])
        [0]
        >>> trim_limbs([])
        [0]
    """
    if not limbs:
        limbs.append(0)
        return limbs

    size = len(limbs)
    while size > 1 and limbs[size - 1] == 0:
        size -= 1
    del limbs[size:]
    return limbs


def is_canonical(limbs: Sequence[int]) -> bool:
    """
    Проверка канонической формы без exception.

    Returns:
        True если список непустой, все limbs в [0, BASE) и старший limb
        ненулевой (или это единственный limb)
    """
    if len(limbs) == 0:
        return False
    for limb in limbs:
        if type(limb) is not int or not 0 <= limb < BASE:
            return False
    return len(limbs) == 1 or limbs[-1] != 0


def check_canonical(limbs: Sequence[int]) -> None:
    """
    Валидация канонической формы.

    Args:
        limbs: Проверяемая последовательность limbs

    Raises:
        CanonicalFormViolation: Если хотя бы один инвариант нарушен
    """
    if len(limbs) == 0:
        raise CanonicalFormViolation("limb sequence must be non-empty")

    for pos, limb in enumerate(limbs):
        if type(limb) is not int:
            raise CanonicalFormViolation(
                f"limb {pos} must be int, got {type(limb).__name__}"
            )
        if not 0 <= limb < BASE:
            raise CanonicalFormViolation(
                f"limb {pos} out of range [0, {BASE}): {limb}"
            )

    if len(limbs) > 1 and limbs[-1] == 0:
        raise CanonicalFormViolation(
            f"most significant limb is zero (length {len(limbs)})"
        )


# =============================================================================
# PARSE / RENDER
# =============================================================================


def parse_limbs(
    text: str,
    allow_empty: bool = True,
    max_digits: Optional[int] = None,
) -> list[int]:
    """
    Десятичная строка → limbs.

    Строка проходится справа налево окнами по CHUNK_DIGITS символов:
    каждое полное окно становится очередным limb, оставшийся левый префикс
    (1..CHUNK_DIGITS-1 символов) — старшим limb. Ведущие нули допустимы.

    Args:
        text: Строка из ASCII-цифр '0'-'9'
        allow_empty: Пустая строка даёт ноль (иначе ParseError)
        max_digits: Максимальная длина строки (None — без ограничения)

    Returns:
        Новый список limbs в канонической форме

    Raises:
        TypeError: Если text не str
        ParseError: Если строка содержит не-цифры, пустая при
            allow_empty=False или длиннее max_digits

    Examples:
        >>> parse_limbs("1000000000")
        [0, 1]
        >>> parse_limbs("00123")
        [123]
        >>> parse_limbs("")
        [0]
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    if not text:
        if not allow_empty:
            raise ParseError("empty string is not a number")
        return [0]

    # isdigit() сам по себе пропускает не-ASCII цифры ('٣', '²')
    if not (text.isascii() and text.isdigit()):
        raise ParseError(f"invalid decimal digits in {_preview(text)!r}")

    if max_digits is not None and len(text) > max_digits:
        raise ParseError(
            f"number has {len(text)} digits, limit is {max_digits}"
        )

    limbs: list[int] = []
    pos = len(text)
    while pos >= CHUNK_DIGITS:
        pos -= CHUNK_DIGITS
        limbs.append(int(text[pos:pos + CHUNK_DIGITS]))
    if pos != 0:
        limbs.append(int(text[:pos]))

    return trim_limbs(limbs)


def render_limbs(limbs: Sequence[int]) -> str:
    """
    Limbs → десятичная строка.

    Старший limb выводится без padding, все последующие дополняются нулями
    слева ровно до CHUNK_DIGITS символов.

    Examples:
        >>> render_limbs([0, 1])
        '1000000000'
        >>> render_limbs([0])
        '0'
    """
    parts = [str(limbs[-1])]
    for pos in range(len(limbs) - 2, -1, -1):
        parts.append(f"{limbs[pos]:0{CHUNK_DIGITS}d}")
    return "".join(parts)


def _preview(text: str, limit: int = 32) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


# =============================================================================
# NATIVE INT
# =============================================================================


def limbs_from_int(value: int) -> list[int]:
    """
    Неотрицательный int → limbs (разложение по основанию BASE).

    Args:
        value: Неотрицательное целое

    Returns:
        Новый список limbs в канонической форме

    Raises:
        TypeError: Если value не int (bool тоже отвергается)
        ValueError: Если value < 0
    """
    if type(value) is bool or not isinstance(value, int):
        raise TypeError(f"expected int, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"value must be non-negative, got {value}")

    limbs: list[int] = []
    while True:
        value, limb = divmod(value, BASE)
        limbs.append(limb)
        if value == 0:
            return limbs


def limbs_to_int(limbs: Sequence[int]) -> int:
    """Limbs → точный int (схема Горнера по основанию BASE)."""
    number = 0
    for limb in reversed(limbs):
        number = number * BASE + limb
    return number


def limbs_to_uint32(limbs: Sequence[int]) -> int:
    """
    Сужение limbs до unsigned 32-bit.

    Схема Горнера с 32-битным аккумулятором: переполнение
    оборачивается по модулю 2^32, проверка диапазона — на вызывающем.

    Examples:
        >>> limbs_to_uint32([967296, 4])  # 4294967296
        0
        >>> limbs_to_uint32([967295, 4])
        4294967295
    """
    number = 0
    for limb in reversed(limbs):
        number = (number * BASE + limb) % UINT32_MODULUS
    return number


# =============================================================================
# COMPARE KERNEL
# =============================================================================


def compare_limbs(a: Sequence[int], b: Sequence[int]) -> int:
    """
    Трёхзначное сравнение двух канонических чисел.

    Алгоритм:
    1. Разная длина → больше то, что длиннее
    2. Иначе сканирование от старшего limb; первая разница определяет порядок

    Returns:
        Знаковая величина: < 0 если a < b, 0 если a == b, > 0 если a > b

    Examples:
        >>> compare_limbs([0, 1], [999999999]) > 0
        True
        >>> compare_limbs([7], [7])
        0
    """
    if len(a) != len(b):
        return len(a) - len(b)

    for pos in range(len(a) - 1, -1, -1):
        if a[pos] != b[pos]:
            return a[pos] - b[pos]
    return 0


# =============================================================================
# ADDITIVE KERNEL
# =============================================================================


def add_limbs_inplace(a: list[int], b: Sequence[int]) -> list[int]:
    """
    In-place сложение: a += b.

    Алгоритм:
    1. a расширяется нулями до max(|a|, |b|) + 1 (слот под финальный carry)
    2. Покомпонентное сложение a[i] += b[i] (каждый limb < 2 * BASE)
    3. Один carry pass: если a[i] >= BASE → a[i] -= BASE, a[i+1] += 1
    4. trim

    Carry всегда 0 или 1 и не накапливается, поэтому одного прохода
    достаточно. a и b могут быть одним и тем же списком.

    Args:
        a: Приёмник (канонический), изменяется на месте
        b: Слагаемое (каноническое)

    Returns:
        a в канонической форме
    """
    size = max(len(a), len(b)) + 1
    a.extend([0] * (size - len(a)))

    for pos in range(len(b)):
        a[pos] += b[pos]

    for pos in range(size - 1):
        if a[pos] >= BASE:
            a[pos] -= BASE
            a[pos + 1] += 1

    return trim_limbs(a)


def sub_limbs_inplace(a: list[int], b: Sequence[int]) -> list[int]:
    """
    In-place вычитание: a -= b (требуется a >= b).

    Алгоритм:
    1. Предпроверка compare_limbs(a, b) >= 0, иначе Underflow без мутации
    2. Покомпонентное вычитание a[i] -= b[i] (limbs временно отрицательные)
    3. Один borrow pass: если a[i] < 0 → a[i] += BASE, a[i+1] -= 1
    4. trim

    Args:
        a: Уменьшаемое (каноническое), изменяется на месте
        b: Вычитаемое (каноническое)

    Returns:
        a в канонической форме

    Raises:
        Underflow: Если a < b (a не изменяется)
    """
    if compare_limbs(a, b) < 0:
        raise Underflow(
            f"cannot subtract {_preview(render_limbs(b))} from smaller value "
            f"{_preview(render_limbs(a))}"
        )

    for pos in range(len(b)):
        a[pos] -= b[pos]

    for pos in range(len(a) - 1):
        if a[pos] < 0:
            a[pos] += BASE
            a[pos + 1] -= 1

    return trim_limbs(a)
