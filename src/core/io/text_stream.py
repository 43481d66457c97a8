"""
Text Stream Adapter — чтение и запись UnsignedBigint через текстовые потоки

Тонкая обёртка над parse/render:
- read_token: следующий токен, разделённый пробельными символами
- read_bigint / iter_bigints: разбор токенов в UnsignedBigint
- write_bigint: запись канонической десятичной формы

Потоки — любые объекты с методами read(n) / write(s) (TextIO, io.StringIO).
"""

from typing import Iterator, Optional, TextIO

from src.core.domain.unsigned_bigint import BigintConfig, UnsignedBigint


def read_token(stream: TextIO) -> Optional[str]:
    """
    Чтение следующего токена из потока.

    Пропускает ведущие пробельные символы, затем собирает символы до
    следующего пробельного символа или EOF. Завершающий пробельный символ
    потребляется.

    Returns:
        Токен или None, если до EOF токенов нет

    Examples:
        >>> import io
        >>> s = io.StringIO("  12 345\\n")
        >>> read_token(s), read_token(s), read_token(s)
        ('12', '345', None)
    """
    char = stream.read(1)
    while char and char.isspace():
        char = stream.read(1)
    if not char:
        return None

    chars = []
    while char and not char.isspace():
        chars.append(char)
        char = stream.read(1)
    return "".join(chars)


def read_bigint(
    stream: TextIO, config: Optional[BigintConfig] = None
) -> UnsignedBigint:
    """
    Чтение и разбор следующего токена.

    Raises:
        EOFError: Если в потоке не осталось токенов
        ParseError: Если токен не является десятичным числом
    """
    token = read_token(stream)
    if token is None:
        raise EOFError("no number token left in stream")
    return UnsignedBigint.parse(token, config)


def iter_bigints(
    stream: TextIO, config: Optional[BigintConfig] = None
) -> Iterator[UnsignedBigint]:
    """
    Итератор по всем оставшимся токенам потока.

    Yields:
        UnsignedBigint для каждого токена

    Raises:
        ParseError: На первом невалидном токене
    """
    while True:
        token = read_token(stream)
        if token is None:
            return
        yield UnsignedBigint.parse(token, config)


def write_bigint(stream: TextIO, value: UnsignedBigint) -> None:
    """Запись десятичной формы значения в поток (без разделителей)."""
    stream.write(str(value))
