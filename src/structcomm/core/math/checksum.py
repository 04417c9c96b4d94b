"""
ChecksumEngine — контрольная пара mod-97 для структурированного сообщения

Код состоит из 10-значной базы и 2-значной контрольной пары:
    check = 97 - (base mod 97), при результате 0 → 97

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Контрольная пара всегда в диапазоне 01..97, никогда не 00
2. Результат всегда ровно 2 символа (zero-padded)
3. Функции тотальны на своём синтаксическом домене и не имеют состояния
"""

import re
from typing import Final

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

CHECK_MODULUS: Final[int] = 97

BASE_LENGTH: Final[int] = 10
CHECK_LENGTH: Final[int] = 2

_BASE_RE: Final = re.compile(r"[0-9]{10}")
_CHECK_RE: Final = re.compile(r"[0-9]{2}")


# =============================================================================
# ВЫЧИСЛЕНИЕ И ПРОВЕРКА
# =============================================================================


def compute_check(base10: str) -> str:
    """
    Контрольная пара для 10-значной базы.

    Args:
        base10: Ровно 10 ASCII-цифр (например, '1234567890')

    Returns:
        Две цифры, '01'..'97'

    Raises:
        ValueError: Если base10 не состоит ровно из 10 цифр (нарушение контракта вызывающего)

    Examples:
        >>> compute_check("1234567890")
        '95'
        >>> compute_check("0000000097")
        '97'
    """
    if not _BASE_RE.fullmatch(base10):
        raise ValueError(f"base10 must be exactly {BASE_LENGTH} digits, got {base10!r}")

    check = CHECK_MODULUS - int(base10) % CHECK_MODULUS
    # base mod 97 == 0 даёт 97, а не 0
    if check == 0:
        check = CHECK_MODULUS

    return f"{check:02d}"


def verify(base10: str, given_check: str) -> bool:
    """
    Проверка контрольной пары.

    Args:
        base10: Ровно 10 цифр
        given_check: Ровно 2 цифры

    Returns:
        True если given_check совпадает с compute_check(base10)

    Raises:
        ValueError: Если аргументы не соответствуют формату
    """
    if not _CHECK_RE.fullmatch(given_check):
        raise ValueError(f"check must be exactly {CHECK_LENGTH} digits, got {given_check!r}")

    return compute_check(base10) == given_check
