"""Вспомогательные функции для вызывающего (request) слоя.

Ядро их не применяет неявно: нормализация ввода и получение raw чтения остаются
ответственностью вызывающего.
"""

from typing import Optional
from urllib.parse import unquote


_QUOTES = ('"', "'")


def normalize_query(value: Optional[str]) -> Optional[str]:
    """Trim + снятие одной пары обрамляющих кавычек ('...' или "...")."""
    if value is None:
        return None
    s = value.strip()
    for quote in _QUOTES:
        if len(s) >= 2 and s.startswith(quote) and s.endswith(quote):
            return s[1:-1]
    return s


def raw_query_param(query_string: Optional[str], name: str) -> Optional[str]:
    """
    Значение параметра из сырой query string без замены '+' на пробел.

    %XX декодируются (UTF-8), '+' остаётся литеральным '+'.

    Args:
        query_string: например 'value=+++123/4567/89095+++&x=1'
        name: имя параметра

    Returns:
        Первое значение параметра или None, если параметра нет
    """
    if not query_string:
        return None

    for part in query_string.split("&"):
        key, sep, val = part.partition("=")
        if key == name:
            return unquote(val, encoding="utf-8") if sep else ""
    return None
