"""
Extractor — поиск кода в произвольной строке текста

Правила:
- structured: первое (самое левое) вхождение +++XXX/XXXX/XXXXX+++, возвращается как есть
- numeric-12: первый максимальный run цифр длиной РОВНО 12;
  соседняя цифра слева или справа делает вхождение недействительным
  (13-значный run не даёт ложного совпадения по первым/последним 12)
- пустая или пробельная строка: отдельный отказ, проверяется до поиска
"""

import re
from dataclasses import dataclass
from typing import Final, Optional

from structcomm.core.domain.code import NotationKind
from structcomm.core.exceptions import BlankInputError
from structcomm.core.notation.codec import STRUCTURED_PATTERN


BLANK_INPUT_REASON: Final[str] = "Input line must not be blank"

# 12 цифр, не окружённые цифрами
_NUMERIC12_IN_LINE: Final = re.compile(r"(?<![0-9])[0-9]{12}(?![0-9])")


@dataclass(frozen=True)
class ExtractionWindow:
    """Найденное вхождение: подстрока, её нотация и позиция в строке."""

    text: str
    kind: NotationKind
    start: int
    end: int


def _require_not_blank(line: Optional[str]) -> str:
    if line is None or not line.strip():
        raise BlankInputError(BLANK_INPUT_REASON)
    return line


def find_structured(line: Optional[str]) -> Optional[str]:
    """
    Первое вхождение структурированной записи.

    Returns:
        Подстрока без изменений или None, если не найдено

    Raises:
        BlankInputError: Если line пустая или из одних пробелов
    """
    window = extract(line, NotationKind.STRUCTURED)
    return window.text if window is not None else None


def find_numeric12(line: Optional[str]) -> Optional[str]:
    """
    Первый run ровно из 12 цифр с нецифровыми границами.

    Returns:
        Подстрока или None

    Raises:
        BlankInputError: Если line пустая или из одних пробелов
    """
    window = extract(line, NotationKind.NUMERIC)
    return window.text if window is not None else None


def extract(line: Optional[str], kind: NotationKind) -> Optional[ExtractionWindow]:
    """
    Единый проход по строке для заданной нотации.

    Raises:
        BlankInputError: Если line пустая или из одних пробелов
    """
    line = _require_not_blank(line)

    pattern = STRUCTURED_PATTERN if kind == NotationKind.STRUCTURED else _NUMERIC12_IN_LINE
    match = pattern.search(line)
    if match is None:
        return None

    return ExtractionWindow(text=match.group(0), kind=kind, start=match.start(), end=match.end())
