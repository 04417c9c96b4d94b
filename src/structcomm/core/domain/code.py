"""
Code — каноническое значение структурированного сообщения

Immutable Pydantic модель: ровно 12 ASCII-цифр, base10 (10) || check (2).
Разделители никогда не хранятся; структурированная запись
+++XXX/XXXX/XXXXX+++ — только представление.
"""

from enum import Enum

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class NotationKind(str, Enum):
    """Текстовая нотация кода"""

    STRUCTURED = "structured"
    NUMERIC = "numeric"


class ErrorKind(str, Enum):
    """Классификация отказов валидации"""

    FORMAT_ERROR = "FORMAT_ERROR"
    CHECKSUM_MISMATCH = "CHECKSUM_MISMATCH"
    NOT_FOUND = "NOT_FOUND"
    BLANK_INPUT = "BLANK_INPUT"


# =============================================================================
# CODE MODEL
# =============================================================================


class Code(BaseModel):
    """
    12-значный код структурированного сообщения.

    Конструируется только из синтаксически корректных 12 цифр;
    контрольная пара при создании НЕ проверяется (см. notation.codec.validate).
    """

    digits: str = Field(..., pattern=r"^[0-9]{12}$", description="12 ASCII-цифр без разделителей")

    model_config = {"frozen": True}

    @property
    def base10(self) -> str:
        """Первые 10 цифр"""
        return self.digits[:10]

    @property
    def check(self) -> str:
        """Последние 2 цифры (контрольная пара)"""
        return self.digits[10:]

    @property
    def structured(self) -> str:
        """Запись +++XXX/XXXX/XXXXX+++"""
        d = self.digits
        return f"+++{d[:3]}/{d[3:7]}/{d[7:]}+++"

    def __str__(self) -> str:
        return self.digits
