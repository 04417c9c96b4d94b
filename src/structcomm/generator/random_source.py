"""
RandomSource — источник случайности для генератора

Capability передаётся генератору явно, а не берётся из глобального состояния:
- SystemRandomSource: CSPRNG (модуль secrets), используется в production
- SequenceRandomSource: детерминированная последовательность для тестов
"""

import secrets
import threading
from typing import Iterable, List, Protocol


class RandomSource(Protocol):
    """Источник равномерно распределённых целых в [0, upper)."""

    def randbelow(self, upper: int) -> int:
        ...


class SystemRandomSource:
    """CSPRNG операционной системы. Безопасен при конкурентных вызовах."""

    def randbelow(self, upper: int) -> int:
        return secrets.randbelow(upper)


class SequenceRandomSource:
    """
    Детерминированный источник: выдаёт заданные значения по кругу.

    Значения должны лежать в [0, upper) для запрошенного upper.
    """

    def __init__(self, values: Iterable[int]):
        self._values: List[int] = list(values)
        if not self._values:
            raise ValueError("SequenceRandomSource requires at least one value")
        self._index = 0
        self._lock = threading.Lock()

    def randbelow(self, upper: int) -> int:
        with self._lock:
            value = self._values[self._index % len(self._values)]
            self._index += 1

        if not 0 <= value < upper:
            raise ValueError(f"Value {value} outside [0, {upper})")
        return value
