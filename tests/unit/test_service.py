"""
Тесты для StructCommService (граница ядра)

Покрытие:
- generate: всегда валиден, детерминирован с SequenceRandomSource
- validate_numeric / validate_structured: ok, mismatch, формат, None
- identify_*_in_line: найдено / не найдено / пустой ввод
- Тотальность: ни одна операция не бросает исключений
"""

from datetime import datetime, timezone

import pytest

from structcomm.core.domain import ErrorKind
from structcomm.generator import CodeGenerator, SequenceRandomSource
from structcomm.service import StructCommService


FIXED_NOW = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def service():
    """Сервис с фиксированными часами и детерминированным генератором."""
    return StructCommService(
        generator=CodeGenerator(SequenceRandomSource([1234567890, 0, 9999999999])),
        clock=lambda: FIXED_NOW,
    )


# =============================================================================
# ТЕСТЫ: generate
# =============================================================================


class TestGenerate:
    """Тесты для generate"""

    def test_deterministic_sequence(self, service) -> None:
        assert service.generate().numeric == "123456789095"
        assert service.generate().numeric == "000000000097"
        assert service.generate().numeric == "999999999949"

    def test_generated_is_valid(self, service) -> None:
        result = service.generate()
        assert result.valid is True
        assert result.reason is None
        assert result.structured == "+++123/4567/89095+++"
        assert result.captured_at == FIXED_NOW

    def test_generated_validates_back(self) -> None:
        """Инвариант: generate() → validate_numeric всегда valid (CSPRNG)"""
        service = StructCommService()
        for _ in range(200):
            generated = service.generate()
            assert service.validate_numeric(generated.numeric).valid is True
            assert service.validate_structured(generated.structured).valid is True


# =============================================================================
# ТЕСТЫ: validate
# =============================================================================


class TestValidateNumeric:
    """Тесты для validate_numeric"""

    @pytest.mark.parametrize(
        "numeric, structured",
        [
            ("000000009797", "+++000/0000/09797+++"),
            ("000000019497", "+++000/0000/19497+++"),
            ("000000000097", "+++000/0000/00097+++"),
            ("123456789095", "+++123/4567/89095+++"),
            ("111111111127", "+++111/1111/11127+++"),
            ("999999999949", "+++999/9999/99949+++"),
        ],
    )
    def test_valid_examples(self, service, numeric: str, structured: str) -> None:
        result = service.validate_numeric(numeric)
        assert result.valid is True
        assert result.structured == structured
        assert result.numeric == numeric

    def test_wrong_check_digits(self, service) -> None:
        """Неверная пара: причина с ожидаемым значением, запись сохранена"""
        result = service.validate_numeric("123456789000")
        assert result.valid is False
        assert result.kind == ErrorKind.CHECKSUM_MISMATCH
        assert "expected 95" in result.reason
        assert "base 1234567890" in result.reason
        assert result.structured == "+++123/4567/89000+++"

    @pytest.mark.parametrize("value", ["12345", "1234567890951", "+++123/4567/89095+++", "", None])
    def test_format_error(self, service, value) -> None:
        result = service.validate_numeric(value)
        assert result.valid is False
        assert result.kind == ErrorKind.FORMAT_ERROR
        assert result.structured is None
        assert result.numeric is None
        assert "exactly 12 digits" in result.reason


class TestValidateStructured:
    """Тесты для validate_structured"""

    def test_valid(self, service) -> None:
        result = service.validate_structured("+++123/4567/89095+++")
        assert result.valid is True
        assert result.numeric == "123456789095"

    @pytest.mark.parametrize("value", ["123/4567/89095", "+++12/3456/789095+++", None])
    def test_format_enforced(self, service, value) -> None:
        result = service.validate_structured(value)
        assert result.valid is False
        assert result.kind == ErrorKind.FORMAT_ERROR
        assert result.reason == "Format must be +++XXX/XXXX/XXXXX+++"

    def test_wrong_check_digits(self, service) -> None:
        result = service.validate_structured("+++123/4567/89000+++")
        assert result.valid is False
        assert result.structured == "+++123/4567/89000+++"
        assert "expected 95" in result.reason


# =============================================================================
# ТЕСТЫ: identify in line
# =============================================================================


class TestIdentifyStructuredInLine:
    """Тесты для identify_structured_in_line"""

    def test_finds_and_validates(self, service) -> None:
        result = service.identify_structured_in_line("Please pay +++123/4567/89095+++ today.")
        assert result.valid is True
        assert result.structured == "+++123/4567/89095+++"
        assert result.numeric == "123456789095"

    def test_found_but_wrong_check(self, service) -> None:
        result = service.identify_structured_in_line("Pay +++123/4567/89000+++ now")
        assert result.valid is False
        assert result.kind == ErrorKind.CHECKSUM_MISMATCH
        assert result.numeric == "123456789000"

    def test_no_match(self, service) -> None:
        result = service.identify_structured_in_line("No reference is present here.")
        assert result.valid is False
        assert result.kind == ErrorKind.NOT_FOUND
        assert "No structured VCS" in result.reason

    @pytest.mark.parametrize("line", ["   ", "", None])
    def test_blank(self, service, line) -> None:
        result = service.identify_structured_in_line(line)
        assert result.valid is False
        assert result.kind == ErrorKind.BLANK_INPUT
        assert "must not be blank" in result.reason


class TestIdentifyNumericInLine:
    """Тесты для identify_numeric_in_line"""

    def test_finds_and_validates(self, service) -> None:
        result = service.identify_numeric_in_line("Ref 123456789095 attached")
        assert result.valid is True
        assert result.numeric == "123456789095"
        assert result.structured == "+++123/4567/89095+++"

    def test_boundary_check(self, service) -> None:
        """13 цифр подряд → не найдено"""
        result = service.identify_numeric_in_line("Code 1234567890950 (13 digits)\n")
        assert result.valid is False
        assert result.kind == ErrorKind.NOT_FOUND
        assert "No numeric 12-digit VCS" in result.reason

    def test_blank(self, service) -> None:
        result = service.identify_numeric_in_line("")
        assert result.valid is False
        assert "must not be blank" in result.reason

    def test_result_timestamp(self, service) -> None:
        assert service.identify_numeric_in_line("x").captured_at == FIXED_NOW
