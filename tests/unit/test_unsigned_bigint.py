"""
Тесты для UnsignedBigint — беззнаковое целое произвольной точности

Проверяемые инварианты:
1. Конструкторы (default, int, str) и конфигурация разбора
2. Рендеринг, repr, int(), to_uint32()
3. Полный порядок с UnsignedBigint и int
4. In-place и бинарные +/- (включая reflected операнды)
5. Increment/decrement: prefix и postfix формы
6. Ошибки не изменяют значение-приёмник
7. Независимость копий, unhashable
8. Сквозные сценарии: carry, multi-limb, borrow cascade, trim, порядок, wrap
"""

import copy
import logging

import pytest

from src.core.domain import DEFAULT_CONFIG, BigintConfig, UnsignedBigint
from src.core.math.limbs import CanonicalFormViolation, ParseError, Underflow


# =============================================================================
# ТЕСТЫ: Конструкторы
# =============================================================================


class TestConstruction:
    """Тесты конструкторов UnsignedBigint."""

    def test_default_is_zero(self) -> None:
        """Конструктор по умолчанию даёт канонический ноль."""
        value = UnsignedBigint()
        assert str(value) == "0"
        assert value.limbs == (0,)

    def test_from_int(self) -> None:
        assert str(UnsignedBigint(0)) == "0"
        assert str(UnsignedBigint(4294967295)) == "4294967295"
        assert UnsignedBigint(10**9).limbs == (0, 1)

    def test_from_large_int(self) -> None:
        """Python int без ограничения разрядности."""
        value = 7**200
        assert int(UnsignedBigint(value)) == value

    def test_from_negative_int_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            UnsignedBigint(-1)

    def test_from_unsupported_type_rejected(self) -> None:
        for value in (1.5, None, b"12", [1], True):
            with pytest.raises(TypeError):
                UnsignedBigint(value)

    def test_from_string(self) -> None:
        assert str(UnsignedBigint("12345678901234567890")) == "12345678901234567890"

    def test_from_string_leading_zeros(self) -> None:
        assert UnsignedBigint("00123").limbs == (123,)

    def test_from_empty_string_is_zero(self) -> None:
        assert UnsignedBigint("") == 0

    def test_from_invalid_string(self) -> None:
        with pytest.raises(ParseError):
            UnsignedBigint("12x")

    def test_parse_classmethod(self) -> None:
        assert UnsignedBigint.parse("999") == UnsignedBigint(999)

    def test_from_other_bigint_is_copy(self) -> None:
        original = UnsignedBigint("5")
        clone = UnsignedBigint(original)
        clone += 1
        assert original == 5
        assert clone == 6

    def test_from_limbs(self) -> None:
        assert str(UnsignedBigint.from_limbs([0, 1])) == "1000000000"
        assert UnsignedBigint.from_limbs((7,)) == 7

    def test_from_limbs_non_canonical_rejected(self) -> None:
        with pytest.raises(CanonicalFormViolation):
            UnsignedBigint.from_limbs([1, 0])
        with pytest.raises(CanonicalFormViolation):
            UnsignedBigint.from_limbs([10**9])
        with pytest.raises(CanonicalFormViolation):
            UnsignedBigint.from_limbs([])

    def test_from_limbs_copies_input(self) -> None:
        limbs = [1, 2]
        value = UnsignedBigint.from_limbs(limbs)
        limbs[0] = 99
        assert value.limbs == (1, 2)


class TestBigintConfig:
    """Тесты конфигурации разбора."""

    def test_defaults(self) -> None:
        assert DEFAULT_CONFIG == BigintConfig()
        assert DEFAULT_CONFIG.allow_empty_string is True
        assert DEFAULT_CONFIG.max_digits is None

    def test_config_is_frozen(self) -> None:
        config = BigintConfig()
        with pytest.raises(Exception):
            config.max_digits = 5  # type: ignore[misc]

    def test_strict_empty_string(self) -> None:
        strict = BigintConfig(allow_empty_string=False)
        with pytest.raises(ParseError, match="empty"):
            UnsignedBigint.parse("", strict)
        with pytest.raises(ParseError):
            UnsignedBigint("", config=strict)

    def test_max_digits(self) -> None:
        config = BigintConfig(max_digits=3)
        assert UnsignedBigint.parse("999", config) == 999
        with pytest.raises(ParseError, match="limit is 3"):
            UnsignedBigint.parse("1000", config)

    def test_parse_error_logged(self, caplog) -> None:
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.unsigned_bigint"):
            with pytest.raises(ParseError):
                UnsignedBigint.parse("abc")
        assert "Rejected decimal input" in caplog.text


# =============================================================================
# ТЕСТЫ: Представление и конверсии
# =============================================================================


class TestConversions:
    """Тесты str, repr, int, bool, to_uint32."""

    def test_str_zero(self) -> None:
        assert str(UnsignedBigint("000")) == "0"

    def test_repr(self) -> None:
        assert repr(UnsignedBigint("42")) == "UnsignedBigint('42')"

    def test_int_exact(self) -> None:
        assert int(UnsignedBigint("98765432109876543210")) == 98765432109876543210

    def test_bool(self) -> None:
        assert not UnsignedBigint()
        assert UnsignedBigint(1)
        assert UnsignedBigint("1000000000")

    def test_to_uint32_exact_below_modulus(self) -> None:
        assert UnsignedBigint("4294967295").to_uint32() == 4294967295
        assert UnsignedBigint(0).to_uint32() == 0

    def test_to_uint32_wraps(self) -> None:
        assert UnsignedBigint("4294967296").to_uint32() == 0
        big = 10**50 + 99
        assert UnsignedBigint(big).to_uint32() == big % 2**32

    def test_limbs_snapshot_is_read_only(self) -> None:
        value = UnsignedBigint("1000000000")
        snapshot = value.limbs
        assert isinstance(snapshot, tuple)
        value += 1
        assert snapshot == (0, 1)
        assert value.limbs == (1, 1)


# =============================================================================
# ТЕСТЫ: Сравнение
# =============================================================================


class TestOrdering:
    """Тесты полного порядка."""

    def test_relational_predicates(self) -> None:
        small = UnsignedBigint("9999999999")
        large = UnsignedBigint("10000000000")
        assert large > small
        assert large >= small
        assert small < large
        assert small <= large
        assert small != large
        assert not small == large

    def test_equal_values(self) -> None:
        a = UnsignedBigint("00123")
        b = UnsignedBigint("123")
        assert a == b
        assert a <= b
        assert a >= b
        assert not a != b
        assert not a < b

    def test_compare_with_int(self) -> None:
        value = UnsignedBigint("1000000000")
        assert value == 10**9
        assert value > 999999999
        assert value < 10**9 + 1
        assert 10**9 == value
        assert 5 < value

    def test_negative_int_is_smaller(self) -> None:
        assert UnsignedBigint(0) > -1
        assert UnsignedBigint(0) != -1
        assert not UnsignedBigint(0) == -1

    def test_unsupported_types(self) -> None:
        value = UnsignedBigint(1)
        assert value != "1"
        assert not value == 1.0
        with pytest.raises(TypeError):
            value < "2"  # noqa: B015

    def test_sorting(self) -> None:
        values = [UnsignedBigint(s) for s in ("30", "1000000000000", "7", "0")]
        assert [str(v) for v in sorted(values)] == ["0", "7", "30", "1000000000000"]

    def test_unhashable(self) -> None:
        with pytest.raises(TypeError):
            hash(UnsignedBigint(1))


# =============================================================================
# ТЕСТЫ: Арифметика
# =============================================================================


class TestInPlaceArithmetic:
    """Тесты +=, -=."""

    def test_iadd_mutates_same_object(self) -> None:
        value = UnsignedBigint("999999999")
        alias = value
        value += UnsignedBigint("1")
        assert value is alias
        assert str(value) == "1000000000"
        assert value.limbs == (0, 1)

    def test_iadd_int(self) -> None:
        value = UnsignedBigint(10)
        value += 5
        assert value == 15

    def test_iadd_self(self) -> None:
        value = UnsignedBigint("999999999999")
        value += value
        assert str(value) == "1999999999998"

    def test_isub(self) -> None:
        value = UnsignedBigint("1000000000000000000")
        value -= UnsignedBigint("1")
        assert str(value) == "999999999999999999"

    def test_isub_to_zero(self) -> None:
        value = UnsignedBigint("42")
        value -= UnsignedBigint("42")
        assert str(value) == "0"
        assert value.limbs == (0,)

    def test_isub_self(self) -> None:
        value = UnsignedBigint("123456789012")
        value -= value
        assert value == 0

    def test_isub_underflow_leaves_value(self) -> None:
        value = UnsignedBigint("5")
        with pytest.raises(Underflow):
            value -= UnsignedBigint("6")
        assert value == 5
        assert value.limbs == (5,)

    def test_isub_underflow_logged(self, caplog) -> None:
        value = UnsignedBigint(1)
        with caplog.at_level(logging.DEBUG, logger="src.core.domain.unsigned_bigint"):
            with pytest.raises(Underflow):
                value -= 2
        assert "underflow" in caplog.text

    def test_unsupported_operand(self) -> None:
        value = UnsignedBigint(1)
        with pytest.raises(TypeError):
            value += 1.5
        with pytest.raises(TypeError):
            value -= "1"
        assert value == 1


class TestBinaryArithmetic:
    """Тесты +, - (новые значения)."""

    def test_add_returns_new_value(self) -> None:
        a = UnsignedBigint("12345678901234567890")
        b = UnsignedBigint("98765432109876543210")
        result = a + b
        assert str(result) == "111111111011111111100"
        assert str(a) == "12345678901234567890"
        assert str(b) == "98765432109876543210"

    def test_add_int_both_sides(self) -> None:
        value = UnsignedBigint("999999999")
        assert str(value + 1) == "1000000000"
        assert str(1 + value) == "1000000000"

    def test_sub_returns_new_value(self) -> None:
        a = UnsignedBigint("1000000000000000000")
        result = a - 1
        assert str(result) == "999999999999999999"
        assert str(a) == "1000000000000000000"

    def test_rsub_int(self) -> None:
        assert 10 - UnsignedBigint(3) == 7
        with pytest.raises(Underflow):
            3 - UnsignedBigint(10)

    def test_sub_underflow(self) -> None:
        a = UnsignedBigint(3)
        with pytest.raises(Underflow):
            a - UnsignedBigint(4)
        assert a == 3

    def test_binary_matches_compound(self) -> None:
        """Бинарная форма даёт тот же канонический результат."""
        a = UnsignedBigint("123456789123456789123")
        b = UnsignedBigint("876543210876543211")
        compound = a.copy()
        compound += b
        assert (a + b).limbs == compound.limbs

        compound = a.copy()
        compound -= b
        assert (a - b).limbs == compound.limbs

    def test_unsupported_operand(self) -> None:
        with pytest.raises(TypeError):
            UnsignedBigint(1) + 1.0
        with pytest.raises(TypeError):
            "1" - UnsignedBigint(1)


class TestIncrementDecrement:
    """Тесты prefix/postfix increment и decrement."""

    def test_prefix_increment_returns_self(self) -> None:
        value = UnsignedBigint("999999999")
        result = value.increment()
        assert result is value
        assert str(value) == "1000000000"

    def test_postfix_increment_returns_previous(self) -> None:
        value = UnsignedBigint(41)
        previous = value.post_increment()
        assert previous == 41
        assert value == 42
        assert previous is not value

    def test_prefix_decrement_returns_self(self) -> None:
        value = UnsignedBigint("1000000000")
        result = value.decrement()
        assert result is value
        assert str(value) == "999999999"

    def test_postfix_decrement_returns_previous(self) -> None:
        value = UnsignedBigint(1)
        previous = value.post_decrement()
        assert previous == 1
        assert value == 0
        assert value.limbs == (0,)

    def test_decrement_zero_underflow(self) -> None:
        value = UnsignedBigint()
        with pytest.raises(Underflow):
            value.decrement()
        assert value == 0
        with pytest.raises(Underflow):
            value.post_decrement()
        assert value == 0

    def test_prefix_and_postfix_differ_only_in_result(self) -> None:
        prefix = UnsignedBigint(7)
        postfix = UnsignedBigint(7)
        assert prefix.increment() == 8
        assert postfix.post_increment() == 7
        assert prefix == postfix


# =============================================================================
# ТЕСТЫ: Копирование
# =============================================================================


class TestCopy:
    """Тесты независимости копий."""

    def test_copy_method(self) -> None:
        original = UnsignedBigint("1000000000")
        clone = original.copy()
        clone.decrement()
        assert str(original) == "1000000000"
        assert str(clone) == "999999999"

    def test_copy_module(self) -> None:
        original = UnsignedBigint(5)
        for clone in (copy.copy(original), copy.deepcopy(original)):
            assert clone == original
            assert clone is not original
            clone += 1
            assert original == 5


# =============================================================================
# ТЕСТЫ: Сквозные сценарии
# =============================================================================


class TestScenarios:
    """Сквозные сценарии."""

    def test_small_carry(self) -> None:
        result = UnsignedBigint.parse("999999999") + UnsignedBigint.parse("1")
        assert str(result) == "1000000000"
        assert result.limbs == (0, 1)

    def test_multi_limb_add(self) -> None:
        result = UnsignedBigint.parse("12345678901234567890") + UnsignedBigint.parse(
            "98765432109876543210"
        )
        assert str(result) == "111111111011111111100"

    def test_borrow_cascade(self) -> None:
        result = UnsignedBigint.parse("1000000000000000000") - UnsignedBigint.parse("1")
        assert str(result) == "999999999999999999"

    def test_trim_to_zero(self) -> None:
        result = UnsignedBigint.parse("42") - UnsignedBigint.parse("42")
        assert str(result) == "0"
        assert result.limbs == (0,)

    def test_ordering(self) -> None:
        assert UnsignedBigint.parse("10000000000") > UnsignedBigint.parse("9999999999")
        assert UnsignedBigint.parse("00123") == UnsignedBigint.parse("123")

    def test_narrowing_wrap(self) -> None:
        assert UnsignedBigint.parse("4294967296").to_uint32() == 0
