"""
InputRecoveryPolicy — восстановление ввода, искажённого транспортом

Транспорт, кодирующий пробел как '+', делает литеральный '+' неотличимым от
пробела после декодирования. Политика: фиксированная лестница
переинтерпретаций одного и того же логического ввода, а не поиск:

    1. primary как есть
    2. primary, все пробелы → '+'
    3. raw как есть            (только если raw передан)
    4. raw, все пробелы → '+'  (только если raw передан)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Порядок шагов фиксирован и детерминирован
2. Остановка на первом валидном результате
3. Если ничего не прошло, возвращается результат ПЕРВОЙ попытки
   (с её исходной причиной); отказы последующих попыток отбрасываются
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple

from structcomm.core.domain.result import CheckResult

logger = logging.getLogger(__name__)

Operation = Callable[[Optional[str]], CheckResult]


# =============================================================================
# ШАГИ
# =============================================================================


class InputSource(str, Enum):
    """Какое чтение ввода использует шаг"""

    PRIMARY = "primary"
    RAW = "raw"


def identity(value: str) -> str:
    return value


def spaces_to_plus(value: str) -> str:
    return value.replace(" ", "+")


@dataclass(frozen=True)
class RecoveryStep:
    """Одна переинтерпретация: источник + чистое преобразование."""

    name: str
    source: InputSource
    transform: Callable[[str], str]
    plus_for_space: bool = False

    def candidate(self, primary: Optional[str], raw: Optional[str]) -> Optional[str]:
        value = primary if self.source == InputSource.PRIMARY else raw
        if value is None:
            return None
        return self.transform(value)


RECOVERY_STEPS: Tuple[RecoveryStep, ...] = (
    RecoveryStep("primary", InputSource.PRIMARY, identity),
    RecoveryStep("primary_plus_for_space", InputSource.PRIMARY, spaces_to_plus, plus_for_space=True),
    RecoveryStep("raw", InputSource.RAW, identity),
    RecoveryStep("raw_plus_for_space", InputSource.RAW, spaces_to_plus, plus_for_space=True),
)


# =============================================================================
# CONFIG / RESULT
# =============================================================================


@dataclass(frozen=True)
class RecoveryConfig:
    """Конфигурация лестницы восстановления.

    - use_raw_alternate: разрешить шаги 3-4 (raw чтение)
    - plus_for_space: разрешить шаги 2 и 4 (пробел → '+')
    """

    use_raw_alternate: bool = True
    plus_for_space: bool = True


@dataclass(frozen=True)
class RecoveryAttempt:
    """Выполненная попытка."""

    step: str
    candidate: Optional[str]
    result: CheckResult


@dataclass(frozen=True)
class RecoveryOutcome:
    """Итог лестницы."""

    result: CheckResult
    attempts: Tuple[RecoveryAttempt, ...]

    # Имя шага, давшего валидный результат (None если ни один)
    recovered_by: Optional[str]

    @property
    def candidates(self) -> Tuple[Optional[str], ...]:
        return tuple(a.candidate for a in self.attempts)


# =============================================================================
# POLICY
# =============================================================================


class RecoveryPolicy:
    """Упорядоченная, short-circuit лестница переинтерпретаций ввода.

    Не зависит от транспорта: принимает уже прочитанные primary/raw строки
    и целевую операцию (validate_structured, identify_structured_in_line и т.п.).
    """

    def __init__(
        self,
        config: Optional[RecoveryConfig] = None,
        steps: Tuple[RecoveryStep, ...] = RECOVERY_STEPS,
    ):
        """
        Raises:
            ValueError: Если после фильтрации по config таблица пуста
                или не начинается с шага на primary
        """
        self.config = config or RecoveryConfig()
        self.steps = tuple(step for step in steps if self._enabled(step))

        if not self.steps or self.steps[0].source != InputSource.PRIMARY:
            raise ValueError("Recovery table must start with a step reading the primary input")

    def _enabled(self, step: RecoveryStep) -> bool:
        if step.source == InputSource.RAW and not self.config.use_raw_alternate:
            return False
        if step.plus_for_space and not self.config.plus_for_space:
            return False
        return True

    def apply(
        self,
        operation: Operation,
        primary: Optional[str],
        raw: Optional[str] = None,
    ) -> RecoveryOutcome:
        """
        Прогон лестницы.

        Args:
            operation: целевая операция ядра (тотальная, не бросает)
            primary: обычно декодированное значение
            raw: менее декодированное чтение того же ввода (опционально)

        Returns:
            RecoveryOutcome: первый валидный результат, иначе результат первой попытки
        """
        attempts = []

        for index, step in enumerate(self.steps):
            candidate = step.candidate(primary, raw)
            # Первый шаг выполняется всегда: его отказ даёт итоговую причину
            if candidate is None and index > 0:
                continue

            result = operation(candidate)
            attempts.append(RecoveryAttempt(step=step.name, candidate=candidate, result=result))

            if result.valid:
                if index > 0:
                    logger.info("Input recovered by step %s", step.name)
                return RecoveryOutcome(result=result, attempts=tuple(attempts), recovered_by=step.name)

        logger.debug("Recovery exhausted after %d attempts", len(attempts))
        return RecoveryOutcome(result=attempts[0].result, attempts=tuple(attempts), recovered_by=None)
