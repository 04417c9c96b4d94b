"""
StructCommService — граница ядра

Композиция codec/extractor/generator в операции, которые потребляет
request-слой:
- generate
- validate_structured / validate_numeric
- identify_structured_in_line / identify_numeric_in_line
- *_with_recovery: те же операции через RecoveryPolicy (primary + raw)

Все операции тотальны: любой отказ возвращается как CheckResult(valid=False),
исключения ядра наружу не выходят. Состояния между вызовами нет.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Final, Optional

from structcomm.core.domain.code import Code, NotationKind
from structcomm.core.domain.result import CheckErr, CheckOk, CheckResult, Outcome
from structcomm.core.exceptions import NotFoundError, StructCommError
from structcomm.core.notation.codec import (
    STRUCTURED_TEMPLATE,
    parse_numeric,
    parse_structured,
    validate,
)
from structcomm.core.notation.extractor import extract
from structcomm.generator.generator import CodeGenerator
from structcomm.recovery.policy import Operation, RecoveryOutcome, RecoveryPolicy

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

NOT_FOUND_REASONS: Final = {
    NotationKind.STRUCTURED: f"No structured VCS ({STRUCTURED_TEMPLATE}) found in input line",
    NotationKind.NUMERIC: "No numeric 12-digit VCS found in input line",
}

_PARSERS: Final = {
    NotationKind.STRUCTURED: parse_structured,
    NotationKind.NUMERIC: parse_numeric,
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class StructCommService:
    """Фасад операций над структурированными сообщениями."""

    def __init__(
        self,
        generator: Optional[CodeGenerator] = None,
        recovery_policy: Optional[RecoveryPolicy] = None,
        clock: Clock = utc_now,
    ):
        """
        Args:
            generator: генератор кодов (default: CSPRNG)
            recovery_policy: лестница восстановления ввода
            clock: источник времени для captured_at
        """
        self.generator = generator or CodeGenerator()
        self.recovery_policy = recovery_policy or RecoveryPolicy()
        self.clock = clock

    # -------------------------------------------------------------------------
    # Операции
    # -------------------------------------------------------------------------

    def generate(self) -> CheckResult:
        """Случайный валидный код."""
        return self._result(CheckOk(code=self.generator.generate()))

    def validate_structured(self, value: Optional[str]) -> CheckResult:
        """Проверка значения в записи +++XXX/XXXX/XXXXX+++."""
        return self._run(NotationKind.STRUCTURED, lambda: validate(parse_structured(value)))

    def validate_numeric(self, value: Optional[str]) -> CheckResult:
        """Проверка значения из ровно 12 цифр."""
        return self._run(NotationKind.NUMERIC, lambda: validate(parse_numeric(value)))

    def identify_structured_in_line(self, line: Optional[str]) -> CheckResult:
        """Поиск и проверка структурированной записи в строке текста."""
        return self._run(NotationKind.STRUCTURED, lambda: self._identify(line, NotationKind.STRUCTURED))

    def identify_numeric_in_line(self, line: Optional[str]) -> CheckResult:
        """Поиск и проверка 12-значного кода в строке текста."""
        return self._run(NotationKind.NUMERIC, lambda: self._identify(line, NotationKind.NUMERIC))

    # -------------------------------------------------------------------------
    # Операции через RecoveryPolicy
    # -------------------------------------------------------------------------

    def validate_structured_with_recovery(self, value: Optional[str], raw: Optional[str] = None) -> CheckResult:
        return self.recover(self.validate_structured, value, raw).result

    def validate_numeric_with_recovery(self, value: Optional[str], raw: Optional[str] = None) -> CheckResult:
        return self.recover(self.validate_numeric, value, raw).result

    def identify_structured_in_line_with_recovery(
        self, line: Optional[str], raw: Optional[str] = None
    ) -> CheckResult:
        return self.recover(self.identify_structured_in_line, line, raw).result

    def identify_numeric_in_line_with_recovery(
        self, line: Optional[str], raw: Optional[str] = None
    ) -> CheckResult:
        return self.recover(self.identify_numeric_in_line, line, raw).result

    def recover(self, operation: Operation, primary: Optional[str], raw: Optional[str] = None) -> RecoveryOutcome:
        """Прогон операции через лестницу восстановления с полной историей попыток."""
        return self.recovery_policy.apply(operation, primary, raw)

    # -------------------------------------------------------------------------
    # Внутреннее
    # -------------------------------------------------------------------------

    def _identify(self, line: Optional[str], kind: NotationKind) -> Outcome:
        window = extract(line, kind)
        if window is None:
            raise NotFoundError(NOT_FOUND_REASONS[kind])
        code: Code = _PARSERS[kind](window.text)
        return validate(code)

    def _run(self, kind: NotationKind, evaluate: Callable[[], Outcome]) -> CheckResult:
        try:
            outcome = evaluate()
        except StructCommError as e:
            outcome = CheckErr(kind=e.kind, reason=e.reason)

        result = self._result(outcome)
        logger.debug("%s check: valid=%s kind=%s", kind.value, result.valid, result.kind)
        return result

    def _result(self, outcome: Outcome) -> CheckResult:
        return CheckResult(outcome=outcome, captured_at=self.clock())
