"""Исключения ядра.

Поднимаются внутри codec/extractor и перехватываются на границе сервиса,
где превращаются в CheckErr. Наружу StructCommService не пробрасываются.
"""

from structcomm.core.domain.code import ErrorKind


class StructCommError(ValueError):
    """Базовая ошибка разбора структурированного сообщения."""

    kind: ErrorKind = ErrorKind.FORMAT_ERROR

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class NotationFormatError(StructCommError):
    """Строка не соответствует грамматике нотации."""

    kind = ErrorKind.FORMAT_ERROR


class BlankInputError(StructCommError):
    """Ввод отсутствует или состоит только из пробелов."""

    kind = ErrorKind.BLANK_INPUT


class NotFoundError(StructCommError):
    """В строке не найдено ни одного вхождения нотации."""

    kind = ErrorKind.NOT_FOUND
