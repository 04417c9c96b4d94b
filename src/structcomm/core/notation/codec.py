"""
NotationCodec — преобразование между нотациями кода

Две текстовые нотации одного Code:
- numeric-12:  '123456789095'
- structured:  '+++123/4567/89095+++'  (группы 3/4/5, длина 20)

Разбор строгий: никаких ведущих/хвостовых символов, только ASCII-цифры.
Рендеринг тотален: любой Code имеет структурированную запись.
"""

import re
from typing import Final

from structcomm.core.domain.code import Code
from structcomm.core.domain.result import CheckMismatch, CheckOk, Outcome
from structcomm.core.exceptions import NotationFormatError
from structcomm.core.math.checksum import compute_check


# =============================================================================
# ГРАММАТИКА
# =============================================================================

# Без якорей: используются и для fullmatch, и для поиска в строке (extractor)
STRUCTURED_PATTERN: Final = re.compile(r"\+\+\+([0-9]{3})/([0-9]{4})/([0-9]{5})\+\+\+")
NUMERIC12_PATTERN: Final = re.compile(r"[0-9]{12}")

STRUCTURED_TEMPLATE: Final[str] = "+++XXX/XXXX/XXXXX+++"

STRUCTURED_FORMAT_REASON: Final[str] = f"Format must be {STRUCTURED_TEMPLATE}"
NUMERIC_FORMAT_REASON: Final[str] = "Numeric value must be exactly 12 digits"


# =============================================================================
# РАЗБОР
# =============================================================================


def parse_numeric(value: str) -> Code:
    """
    Разбор записи numeric-12.

    Raises:
        NotationFormatError: Если value не ровно 12 цифр
    """
    if value is None or not NUMERIC12_PATTERN.fullmatch(value):
        raise NotationFormatError(NUMERIC_FORMAT_REASON)
    return Code(digits=value)


def parse_structured(value: str) -> Code:
    """
    Разбор записи +++XXX/XXXX/XXXXX+++.

    Цифры групп склеиваются по порядку в 12-значный Code.

    Raises:
        NotationFormatError: Если value не соответствует шаблону целиком
    """
    match = STRUCTURED_PATTERN.fullmatch(value) if value is not None else None
    if match is None:
        raise NotationFormatError(STRUCTURED_FORMAT_REASON)
    return Code(digits="".join(match.groups()))


def digits_only(value: str) -> str:
    """Только ASCII-цифры из строки, в исходном порядке."""
    return "".join(ch for ch in value if "0" <= ch <= "9")


# =============================================================================
# РЕНДЕРИНГ И ПРОВЕРКА
# =============================================================================


def render(code: Code) -> str:
    """Структурированная запись кода (всегда 20 символов)."""
    return code.structured


def validate(code: Code) -> Outcome:
    """
    Проверка контрольной пары кода.

    Args:
        code: Синтаксически корректный Code

    Returns:
        CheckOk при совпадении, иначе CheckMismatch с ожидаемой парой и базой в причине
    """
    expected = compute_check(code.base10)
    if expected == code.check:
        return CheckOk(code=code)

    return CheckMismatch(
        code=code,
        expected_check=expected,
        reason=f"Invalid check digits: expected {expected} for base {code.base10}",
    )
